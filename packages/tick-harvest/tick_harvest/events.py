"""Four-stage harvest hook chain with synchronous, ordered dispatch.

Stages, in the order a harvest reaches them:

``HarvestCheck``
    Posted for every growable the actor may break, before the maturity test.
    Any listener may ``deny()``; the final ``allowed`` value is honored. This
    is the only veto point.
``BeforeHarvest``
    Posted right before the first mutation. Observational.
``HarvestDrops``
    Seeded with the default drops. Listeners may replace or extend them;
    any change sets ``changed``.
``AfterHarvest``
    Posted after every effect has been applied. Observational.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Iterable, TypeVar

from tick_harvest.drops import DropsResult

if TYPE_CHECKING:
    from tick_harvest.types import (
        Actor,
        BlockState,
        Face,
        Hand,
        HarvestWorld,
        HitResult,
        ItemStack,
        Position,
    )

E = TypeVar("E")

_Listener = Callable[[Any], None]


@dataclass
class HarvestCheck:
    world: HarvestWorld
    state: BlockState
    position: Position
    actor: Actor
    hand: Hand
    first: bool
    allowed: bool = True

    def deny(self) -> None:
        self.allowed = False


@dataclass(frozen=True)
class _HarvestStage:
    world: HarvestWorld
    state: BlockState
    position: Position
    face: Face
    hit: HitResult | None
    actor: Actor
    hand: Hand


@dataclass(frozen=True)
class BeforeHarvest(_HarvestStage):
    pass


@dataclass(frozen=True)
class AfterHarvest(_HarvestStage):
    pass


@dataclass
class HarvestDrops:
    world: HarvestWorld
    state: BlockState
    position: Position
    face: Face
    hit: HitResult | None
    actor: Actor
    hand: Hand
    _stacks: list[ItemStack] = field(default_factory=list)
    _changed: bool = False

    def __post_init__(self) -> None:
        self._stacks = list(self._stacks)

    @property
    def drops(self) -> tuple[ItemStack, ...]:
        return tuple(self._stacks)

    @property
    def changed(self) -> bool:
        return self._changed

    def set_drops(self, stacks: Iterable[ItemStack]) -> None:
        self._stacks = list(stacks)
        self._changed = True

    def add_drop(self, stack: ItemStack) -> None:
        self._stacks.append(stack)
        self._changed = True

    def clear(self) -> None:
        self._stacks.clear()
        self._changed = True

    def result(self) -> DropsResult:
        return DropsResult(tuple(self._stacks), self._changed)


STAGES = (HarvestCheck, BeforeHarvest, HarvestDrops, AfterHarvest)


class HarvestEvents:
    """Ordered listener lists, one per hook stage.

    Listener exceptions are not caught. One raised while a neighbor of an
    area harvest is processed leaves the rest of that area unharvested.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[_Listener]] = {stage: [] for stage in STAGES}

    def _stage(self, event_type: type) -> list[_Listener]:
        listeners = self._listeners.get(event_type)
        if listeners is None:
            raise TypeError(f"{event_type.__qualname__} is not a harvest hook")
        return listeners

    def subscribe(self, event_type: type[E], listener: Callable[[E], None]) -> None:
        self._stage(event_type).append(listener)

    def unsubscribe(self, event_type: type[E], listener: Callable[[E], None]) -> None:
        try:
            self._stage(event_type).remove(listener)
        except ValueError:
            pass

    def listeners(self, event_type: type) -> list[_Listener]:
        return list(self._stage(event_type))

    def post(self, event: E) -> E:
        """Dispatch *event* to its stage's listeners in registration order."""
        for listener in list(self._stage(type(event))):
            listener(event)
        return event

    def clear(self) -> None:
        for listeners in self._listeners.values():
            listeners.clear()
