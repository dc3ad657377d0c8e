"""BlockGrid - bounded 3D block store implementing HarvestWorld."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from tick_harvest.types import (
    AIR_STATE,
    Block,
    BlockState,
    Face,
    ItemStack,
    Position,
    SoundDescriptor,
)


@dataclass(frozen=True)
class Drop:
    """One emitted stack. ``face`` is None for position-centered drops."""

    position: Position
    face: Face | None
    stack: ItemStack


class BlockGrid:
    """In-memory world with recorded drops and sounds.

    Reads outside the grid return air; writes outside it raise ValueError.
    """

    def __init__(self, width: int, height: int, depth: int) -> None:
        if width <= 0 or height <= 0 or depth <= 0:
            raise ValueError("grid dimensions must be positive")
        self._width = width
        self._height = height
        self._depth = depth
        self._states: dict[Position, BlockState] = {}
        self.drops: list[Drop] = []
        self.sounds: list[tuple[Position, SoundDescriptor]] = []

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def depth(self) -> int:
        return self._depth

    def in_bounds(self, pos: Position) -> bool:
        x, y, z = pos
        return 0 <= x < self._width and 0 <= y < self._height and 0 <= z < self._depth

    def _check_bounds(self, pos: Position) -> None:
        if not self.in_bounds(pos):
            raise ValueError(
                f"{pos} out of bounds for "
                f"{self._width}x{self._height}x{self._depth} grid"
            )

    def place(self, pos: Position, block: Block, **values: Any) -> BlockState:
        """Place *block* at *pos*, overriding default property values."""
        state = block.default_state()
        for name, value in values.items():
            prop = block.get_property(name)
            if prop is None:
                raise KeyError(f"{block.id} has no {name!r} property")
            state = state.with_value(prop, value)
        self.set_state(pos, state)
        return state

    def get_state(self, pos: Position) -> BlockState:
        return self._states.get(pos, AIR_STATE)

    def set_state(self, pos: Position, state: BlockState) -> None:
        self._check_bounds(pos)
        if state.block is AIR_STATE.block:
            self._states.pop(pos, None)
        else:
            self._states[pos] = state

    def remove_state(self, pos: Position) -> None:
        self._states.pop(pos, None)

    def emit_drops_at_face(self, pos: Position, face: Face, stacks: list[ItemStack]) -> None:
        for stack in stacks:
            self.drops.append(Drop(pos, face, stack))

    def emit_drops_at_position(self, pos: Position, stacks: list[ItemStack]) -> None:
        for stack in stacks:
            self.drops.append(Drop(pos, None, stack))

    def play_sound(self, pos: Position, sound: SoundDescriptor) -> None:
        self.sounds.append((pos, sound))

    def occupied(self) -> list[Position]:
        return sorted(self._states)
