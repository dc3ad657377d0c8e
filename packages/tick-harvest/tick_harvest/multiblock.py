"""Base position resolution for stacked growables."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_harvest.types import CROPS_TAG, RegistryLookupFailure

if TYPE_CHECKING:
    from tick_harvest.config import HarvestConfig
    from tick_harvest.types import Block, HarvestWorld, Position, Registry

logger = logging.getLogger(__name__)


def below(pos: Position) -> Position:
    x, y, z = pos
    return (x, y - 1, z)


def above(pos: Position) -> Position:
    x, y, z = pos
    return (x, y + 1, z)


def is_tall_but_separate(block: Block, registry: Registry, config: HarvestConfig) -> bool:
    """Whether *block* looks stacked but harvests as a single block."""
    try:
        return registry.key_of(block) in config.tall_but_separate_ids
    except RegistryLookupFailure as exc:
        logger.debug("Registry lookup failed, not tall-but-separate: %s", exc)
        return False


def base_position(
    world: HarvestWorld,
    block: Block,
    position: Position,
    registry: Registry,
    config: HarvestConfig,
) -> Position:
    """Walk down a stack of *block* to the segment holding the growth state."""
    if is_tall_but_separate(block, registry, config):
        return position
    base = position
    while world.get_state(base).has_tag(CROPS_TAG):
        if not world.get_state(below(base)).is_block(block):
            break
        base = below(base)
    return base
