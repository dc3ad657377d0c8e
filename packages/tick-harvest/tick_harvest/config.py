"""Harvest configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass

from tick_harvest.types import WOOD, ToolTier


@dataclass(frozen=True)
class HarvestConfig:
    """Immutable configuration snapshot handed to every interaction.

    Attributes:
        require_tool: Only a harvesting tool in hand may harvest.
        reward_amount: Reward granted to the actor per harvest.
        tool_damage_per_harvest: Durability taken from the held tool per harvest.
        play_feedback_sound: Play the block's break sound on harvest.
        allow_listed_growable_ids: Extra block ids treated as growables.
        multi_harvest_starting_tier: Lowest tool tier that harvests an area.
        area_starting_size: Side of the area square at the starting tier.
        area_increment_per_tier: Side growth per tier above the starting tier.
        tall_but_separate_ids: Block ids that look stacked but harvest as
            single blocks.
    """

    require_tool: bool = True
    reward_amount: int = 0
    tool_damage_per_harvest: int = 0
    play_feedback_sound: bool = True
    allow_listed_growable_ids: frozenset[str] = frozenset()
    multi_harvest_starting_tier: ToolTier = WOOD
    area_starting_size: int = 1
    area_increment_per_tier: int = 2
    tall_but_separate_ids: frozenset[str] = frozenset({"farmersdelight:tomatoes"})

    def __post_init__(self) -> None:
        if self.reward_amount < 0:
            raise ValueError(f"reward_amount must be >= 0, got {self.reward_amount}")
        if self.tool_damage_per_harvest < 0:
            raise ValueError(
                f"tool_damage_per_harvest must be >= 0, got {self.tool_damage_per_harvest}"
            )
        if self.area_starting_size < 1:
            raise ValueError(
                f"area_starting_size must be >= 1, got {self.area_starting_size}"
            )
        if self.area_increment_per_tier < 0:
            raise ValueError(
                f"area_increment_per_tier must be >= 0, got {self.area_increment_per_tier}"
            )
