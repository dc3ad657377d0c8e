"""Drop results and default drop functions."""
from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Mapping, Sequence

if TYPE_CHECKING:
    from tick_harvest.types import (
        Actor,
        BlockState,
        Hand,
        HarvestWorld,
        ItemStack,
        Position,
    )

DropsFn = Callable[
    ["HarvestWorld", "BlockState", "Position", "Actor", "Hand"], "list[ItemStack]"
]


@dataclass(frozen=True)
class DropsResult:
    """Final drops of one harvest.

    Attributes:
        stacks: Stacks to emit.
        changed: A HarvestDrops listener altered the default set.
    """

    stacks: tuple[ItemStack, ...] = ()
    changed: bool = False


def make_table_drops(table: Mapping[str, Sequence[ItemStack]]) -> DropsFn:
    """Return a drop function that looks drops up by block id."""

    def table_drops(
        world: HarvestWorld,
        state: BlockState,
        position: Position,
        actor: Actor,
        hand: Hand,
    ) -> list[ItemStack]:
        return list(table.get(state.block.id, ()))

    return table_drops


def no_drops(
    world: HarvestWorld,
    state: BlockState,
    position: Position,
    actor: Actor,
    hand: Hand,
) -> list[ItemStack]:
    return []
