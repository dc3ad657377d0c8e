"""Tier-gated area expansion around a harvested growable."""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tick_harvest.config import HarvestConfig
    from tick_harvest.types import Position, Tool, ToolRules, ToolTier


def qualifies(item: Tool | None, rules: ToolRules, config: HarvestConfig) -> bool:
    """Whether *item* is a harvesting tool at or above the starting tier."""
    if not rules.is_harvesting_tool(item):
        return False
    tier = rules.tier_of(item)
    return tier is not None and tier >= config.multi_harvest_starting_tier


def half_width(tier: ToolTier, config: HarvestConfig) -> int:
    """Distance from the center to the edge of the area square.

    Truncating on purpose: each tier step adds
    ``area_increment_per_tier`` to the side, then the side is halved.
    """
    steps = tier.level - config.multi_harvest_starting_tier.level
    return (steps * config.area_increment_per_tier + config.area_starting_size - 1) // 2


def area_positions(center: Position, r: int) -> list[Position]:
    """Horizontal square of half-width *r* around *center*, center excluded.

    Raster order: z ascending, then x ascending.
    """
    x, y, z = center
    return [
        (x + dx, y, z + dz)
        for dz in range(-r, r + 1)
        for dx in range(-r, r + 1)
        if (dx, dz) != (0, 0)
    ]


def expand(
    item: Tool | None, base: Position, rules: ToolRules, config: HarvestConfig
) -> list[Position]:
    tier = rules.tier_of(item)
    if tier is None or not qualifies(item, rules, config):
        return []
    return area_positions(base, half_width(tier, config))
