"""Interaction queue and its system factory."""
from __future__ import annotations

from collections import deque
from typing import TYPE_CHECKING, Callable

if TYPE_CHECKING:
    from tick import TickContext, World

    from tick_harvest.config import HarvestConfig
    from tick_harvest.controller import HarvestController
    from tick_harvest.types import InteractionEvent, InteractionResult


class InteractionQueue:
    """FIFO of interactions waiting for the next simulation turn."""

    def __init__(self) -> None:
        self._pending: deque[InteractionEvent] = deque()

    def enqueue(self, event: InteractionEvent) -> None:
        """Add an interaction. Safe to call between ticks."""
        self._pending.append(event)

    def pending(self) -> int:
        return len(self._pending)

    def drain(
        self,
        controller: HarvestController,
        config_source: Callable[[], HarvestConfig],
    ) -> list[tuple[InteractionEvent, InteractionResult]]:
        """Handle every pending interaction in order.

        ``config_source()`` is read once per interaction, so a reloaded
        config applies from the next interaction on.
        """
        results: list[tuple[InteractionEvent, InteractionResult]] = []
        while self._pending:
            event = self._pending.popleft()
            results.append((event, controller.handle(event, config_source())))
        return results


def make_interaction_system(
    queue: InteractionQueue,
    controller: HarvestController,
    config_source: Callable[[], HarvestConfig],
    on_result: Callable[[InteractionEvent, InteractionResult], None] | None = None,
) -> Callable[[World, TickContext], None]:
    """Return a system that drains the interaction queue each tick.

    ``on_result(event, result)`` fires once per handled interaction.
    """

    def interaction_system(world: World, ctx: TickContext) -> None:
        for event, result in queue.drain(controller, config_source):
            if on_result is not None:
                on_result(event, result)

    return interaction_system
