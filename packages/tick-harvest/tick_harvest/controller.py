"""HarvestController - entry point for right-click interactions."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_harvest.area import expand
from tick_harvest.drops import no_drops
from tick_harvest.events import HarvestCheck, HarvestEvents
from tick_harvest.executor import HarvestExecutor
from tick_harvest.gate import can_interact, interaction_hand
from tick_harvest.growth import classify, is_mature, maturity_property
from tick_harvest.tools import DefaultToolRules
from tick_harvest.types import (
    ClassificationFailure,
    HarvestContext,
    HarvestError,
    InteractionResult,
)

if TYPE_CHECKING:
    from tick_harvest.config import HarvestConfig
    from tick_harvest.drops import DropsFn
    from tick_harvest.types import (
        Actor,
        Face,
        Hand,
        HarvestWorld,
        InteractionEvent,
        Position,
        PropertyDef,
        Registry,
        ToolRules,
    )

logger = logging.getLogger(__name__)


class HarvestController:
    """Turns right-clicks on mature growables into harvests.

    The click is consumed only if the actor is not a spectator, is not
    sneaking, holds a suitable item (see ``require_tool``), every
    HarvestCheck listener allows it and the growable is fully grown.
    A qualifying tool then harvests the surrounding area as well.
    """

    def __init__(
        self,
        registry: Registry,
        drops: DropsFn = no_drops,
        rules: ToolRules | None = None,
        events: HarvestEvents | None = None,
    ) -> None:
        self._registry = registry
        self._rules: ToolRules = rules if rules is not None else DefaultToolRules()
        self._events = events if events is not None else HarvestEvents()
        self._executor = HarvestExecutor(self._events, registry, drops)

    @property
    def events(self) -> HarvestEvents:
        return self._events

    @property
    def rules(self) -> ToolRules:
        return self._rules

    def handle(self, event: InteractionEvent, config: HarvestConfig) -> InteractionResult:
        actor = event.actor
        if not can_interact(actor, event):
            return InteractionResult.PASS
        hand = interaction_hand(actor, self._rules, config)
        if hand is None or hand != event.hand:
            return InteractionResult.PASS

        maturity = self._mature_growable(
            event.world, event.position, actor, hand, config, first=True
        )
        if maturity is None:
            return InteractionResult.PASS
        if not event.authoritative:
            return InteractionResult.SUCCESS

        ctx = HarvestContext(
            world=event.world,
            actor=actor,
            hand=hand,
            position=event.position,
            face=event.face,
            hit=event.hit,
            state=event.world.get_state(event.position),
            maturity=maturity,
        )
        self._executor.harvest(ctx, config)

        center = ctx.base if ctx.base is not None else event.position
        item = actor.held_item(hand)
        for pos in expand(item, center, self._rules, config):
            self._harvest_neighbor(event.world, pos, actor, hand, event.face, config)
        return InteractionResult.CONSUME

    def _harvest_neighbor(
        self,
        world: HarvestWorld,
        pos: Position,
        actor: Actor,
        hand: Hand,
        face: Face,
        config: HarvestConfig,
    ) -> None:
        maturity = self._mature_growable(world, pos, actor, hand, config, first=False)
        if maturity is None:
            return
        ctx = HarvestContext(
            world=world,
            actor=actor,
            hand=hand,
            position=pos,
            face=face,
            hit=None,
            state=world.get_state(pos),
            maturity=maturity,
            first=False,
        )
        self._executor.harvest(ctx, config)

    def _mature_growable(
        self,
        world: HarvestWorld,
        pos: Position,
        actor: Actor,
        hand: Hand,
        config: HarvestConfig,
        first: bool,
    ) -> PropertyDef | None:
        """Maturity property of the growable at *pos* if it can be harvested now."""
        state = world.get_state(pos)
        try:
            classify(state, self._registry, config)
        except ClassificationFailure:
            return None
        if not actor.can_harvest(state):
            return None
        check = self._events.post(HarvestCheck(world, state, pos, actor, hand, first))
        if not check.allowed:
            return None
        try:
            maturity = maturity_property(state)
            if not is_mature(state, maturity):
                return None
        except HarvestError as exc:
            logger.debug(
                "Block at %s has no usable age property, most probably a non-growable "
                "id was allow-listed: %s",
                pos,
                exc,
            )
            return None
        return maturity
