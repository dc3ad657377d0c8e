"""Eligibility checks run before any block is inspected."""
from __future__ import annotations

from typing import TYPE_CHECKING

from tick_harvest.types import Hand

if TYPE_CHECKING:
    from tick_harvest.config import HarvestConfig
    from tick_harvest.types import Actor, InteractionEvent, ToolRules


def interaction_hand(actor: Actor, rules: ToolRules, config: HarvestConfig) -> Hand | None:
    """Return the hand that harvests, or None when no hand qualifies.

    Sneaking reserves the click for normal placement, so it wins over
    every other rule including ``require_tool=False``.
    """
    if actor.sneaking:
        return None
    if rules.is_harvesting_tool(actor.held_item(Hand.MAIN_HAND)):
        return Hand.MAIN_HAND
    if rules.is_harvesting_tool(actor.held_item(Hand.OFF_HAND)):
        return Hand.OFF_HAND
    if not config.require_tool:
        return Hand.MAIN_HAND
    return None


def can_interact(actor: Actor, event: InteractionEvent) -> bool:
    return not actor.spectator and not event.denied
