"""Harvester component implementing the Actor protocol."""
from __future__ import annotations

from dataclasses import dataclass, field

from tick_harvest.types import BlockState, Hand, Tool


@dataclass
class Harvester:
    """Mutable actor state: held items, stance, accumulated reward.

    Attributes:
        main_hand: Item in the main hand, None when empty.
        off_hand: Item in the off hand, None when empty.
        spectator: Observer mode, never interacts.
        sneaking: Crouching stance, reserved for placement.
        creative: Consequence-free mode, tools take no damage.
        experience: Reward accumulated so far.
        forbidden: Block ids this actor may not break.
    """

    main_hand: Tool | None = None
    off_hand: Tool | None = None
    spectator: bool = False
    sneaking: bool = False
    creative: bool = False
    experience: int = 0
    forbidden: frozenset[str] = field(default_factory=frozenset)

    def held_item(self, hand: Hand) -> Tool | None:
        return self.main_hand if hand is Hand.MAIN_HAND else self.off_hand

    def grant_reward(self, amount: int) -> None:
        if amount < 0:
            raise ValueError(f"amount must be >= 0, got {amount}")
        self.experience += amount

    def damage_held_tool(self, hand: Hand, amount: int) -> None:
        """Damage the tool in *hand*; a tool at max damage breaks and is dropped."""
        tool = self.held_item(hand)
        if tool is None or tool.max_damage <= 0:
            return
        tool.damage += amount
        if tool.broken:
            if hand is Hand.MAIN_HAND:
                self.main_hand = None
            else:
                self.off_hand = None

    def can_harvest(self, state: BlockState) -> bool:
        return state.block.id not in self.forbidden
