"""HarvestExecutor - applies one harvest to one resolved growable."""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from tick_harvest.events import AfterHarvest, BeforeHarvest, HarvestDrops
from tick_harvest.multiblock import above, base_position, is_tall_but_separate
from tick_harvest.types import CROPS_TAG, HarvestError

if TYPE_CHECKING:
    from tick_harvest.config import HarvestConfig
    from tick_harvest.drops import DropsFn, DropsResult
    from tick_harvest.events import HarvestEvents
    from tick_harvest.types import HarvestContext, Position, Registry

logger = logging.getLogger(__name__)


class HarvestExecutor:
    def __init__(self, events: HarvestEvents, registry: Registry, drops: DropsFn) -> None:
        self._events = events
        self._registry = registry
        self._drops = drops

    def harvest(self, ctx: HarvestContext, config: HarvestConfig) -> bool:
        """Harvest the growable in *ctx*. Returns False if the harvest aborted.

        Steps run in a fixed order: BeforeHarvest, reward, tool damage, base
        resolution, drops, reset, upper segments, sound, AfterHarvest.
        """
        try:
            self._harvest(ctx, config)
        except HarvestError as exc:
            logger.debug(
                "Harvest at %s aborted, non-blocking but the block may be misconfigured: %s",
                ctx.position,
                exc,
            )
            return False
        return True

    def _harvest(self, ctx: HarvestContext, config: HarvestConfig) -> None:
        world, actor, hand = ctx.world, ctx.actor, ctx.hand
        block = ctx.state.block
        self._events.post(
            BeforeHarvest(world, ctx.state, ctx.position, ctx.face, ctx.hit, actor, hand)
        )
        if config.reward_amount > 0:
            actor.grant_reward(config.reward_amount)
        if config.require_tool and config.tool_damage_per_harvest > 0 and not actor.creative:
            actor.damage_held_tool(hand, config.tool_damage_per_harvest)

        ctx.base = base_position(world, block, ctx.position, self._registry, config)
        drops = self._drop_resources(ctx, ctx.base)
        self._reset(ctx, ctx.base, drops, config)

        if config.play_feedback_sound and block.sound is not None:
            world.play_sound(ctx.position, block.sound)
        self._events.post(
            AfterHarvest(world, ctx.state, ctx.position, ctx.face, ctx.hit, actor, hand)
        )

    def _drop_resources(self, ctx: HarvestContext, base: Position) -> DropsResult:
        world = ctx.world
        state = world.get_state(base)
        event = HarvestDrops(
            world,
            state,
            base,
            ctx.face,
            ctx.hit,
            ctx.actor,
            ctx.hand,
            _stacks=self._drops(world, state, base, ctx.actor, ctx.hand),
        )
        result = self._events.post(event).result()
        if result.stacks:
            if state.block.has_collision:
                world.emit_drops_at_face(base, ctx.face, list(result.stacks))
            else:
                world.emit_drops_at_position(base, list(result.stacks))
        return result

    def _reset(
        self,
        ctx: HarvestContext,
        base: Position,
        drops: DropsResult,
        config: HarvestConfig,
    ) -> None:
        world = ctx.world
        block = ctx.state.block
        if block.removed_on_reset:
            world.remove_state(base)
        else:
            state = world.get_state(base)
            world.set_state(base, state.with_value(ctx.maturity, ctx.maturity.minimum))

        if not world.get_state(base).has_tag(CROPS_TAG) or is_tall_but_separate(
            block, self._registry, config
        ):
            return
        top = above(base)
        top_state = world.get_state(top)
        while top_state.is_block(block):
            if not drops.changed:
                natural = self._drops(world, top_state, top, ctx.actor, ctx.hand)
                if natural:
                    world.emit_drops_at_position(top, natural)
            world.remove_state(top)
            top = above(top)
            top_state = world.get_state(top)
