"""Shared types, collaborator protocols and errors for tick-harvest."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping, Protocol

Position = tuple[int, int, int]

MATURITY_PROPERTY = "age"
CROPS_TAG = "crops"
HOE_ACTIONS = frozenset({"hoe_dig", "hoe_till"})


class Hand(Enum):
    MAIN_HAND = "main_hand"
    OFF_HAND = "off_hand"


class Face(Enum):
    DOWN = "down"
    UP = "up"
    NORTH = "north"
    SOUTH = "south"
    WEST = "west"
    EAST = "east"


class GrowableKind(Enum):
    """Built-in growable families."""

    GROUND_CROP = "ground_crop"
    VERTICAL_CROP = "vertical_crop"
    POD = "pod"


class InteractionResult(Enum):
    """Outcome of one interaction.

    PASS: not a harvest, the host runs its default use behavior.
    SUCCESS: recognized as a harvest but nothing was mutated here.
    CONSUME: the harvest was applied, the default use must be suppressed.
    """

    PASS = "pass"
    SUCCESS = "success"
    CONSUME = "consume"


@dataclass(frozen=True, order=True)
class ToolTier:
    """Tool tier, ordered by level only."""

    level: int
    name: str = field(default="", compare=False)


NONE = ToolTier(0, "none")
WOOD = ToolTier(1, "wood")
STONE = ToolTier(2, "stone")
IRON = ToolTier(3, "iron")
DIAMOND = ToolTier(4, "diamond")
NETHERITE = ToolTier(5, "netherite")

TIERS = (NONE, WOOD, STONE, IRON, DIAMOND, NETHERITE)


@dataclass(frozen=True)
class PropertyDef:
    """Declared block property and its legal values, in order."""

    name: str
    values: tuple[Any, ...]

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("PropertyDef name must be non-empty")
        if not self.values:
            raise ValueError(f"Property {self.name!r} must declare at least one value")

    @property
    def is_integer(self) -> bool:
        return all(type(v) is int for v in self.values)

    @property
    def minimum(self) -> Any:
        return min(self.values)

    @property
    def maximum(self) -> Any:
        return max(self.values)


def int_property(name: str, maximum: int, minimum: int = 0) -> PropertyDef:
    """Build an integer property covering ``[minimum, maximum]``."""
    if maximum < minimum:
        raise ValueError(f"maximum {maximum} is below minimum {minimum}")
    return PropertyDef(name, tuple(range(minimum, maximum + 1)))


@dataclass(frozen=True)
class SoundDescriptor:
    event: str
    volume: float = 1.0
    pitch: float = 1.0


@dataclass(frozen=True, eq=False)
class Block:
    """Block type. Compared by identity, like the host's block singletons.

    Attributes:
        id: Registry identifier, e.g. ``"minecraft:wheat"``.
        kind: Built-in growable family, None for anything else.
        properties: Declared properties of every state of this block.
        tags: Block tags; ``"crops"`` marks the stacked-growable category.
        has_collision: Whether drops pop from the clicked face.
        sound: Break sound, played on harvest when enabled.
        removed_on_reset: Age 0 is not a placeable state, harvest removes it.
    """

    id: str
    kind: GrowableKind | None = None
    properties: tuple[PropertyDef, ...] = ()
    tags: frozenset[str] = frozenset()
    has_collision: bool = True
    sound: SoundDescriptor | None = None
    removed_on_reset: bool = False

    def get_property(self, name: str) -> PropertyDef | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def default_state(self) -> BlockState:
        return BlockState(self, {p.name: p.minimum for p in self.properties})

    def __repr__(self) -> str:
        return f"Block({self.id!r})"


@dataclass(frozen=True)
class BlockState:
    """Block type plus its current property values."""

    block: Block
    values: Mapping[str, Any] = field(default_factory=dict)

    @property
    def properties(self) -> tuple[PropertyDef, ...]:
        return self.block.properties

    def get(self, name: str, default: Any = None) -> Any:
        return self.values.get(name, default)

    def has_tag(self, tag: str) -> bool:
        return tag in self.block.tags

    def is_block(self, block: Block) -> bool:
        return self.block is block

    def with_value(self, prop: PropertyDef, value: Any) -> BlockState:
        if value not in prop.values:
            raise ValueError(f"{value!r} is not a legal value of {prop.name!r}")
        values = dict(self.values)
        values[prop.name] = value
        return BlockState(self.block, values)


AIR = Block("minecraft:air", has_collision=False)
AIR_STATE = BlockState(AIR)


@dataclass
class Tool:
    """Held item descriptor with durability counters."""

    id: str
    tier: ToolTier | None = None
    actions: frozenset[str] = frozenset()
    damage: int = 0
    max_damage: int = 0

    @property
    def durability(self) -> int:
        return self.max_damage - self.damage

    @property
    def broken(self) -> bool:
        return self.max_damage > 0 and self.damage >= self.max_damage


@dataclass(frozen=True)
class ItemStack:
    item: str
    count: int = 1

    def __post_init__(self) -> None:
        if not self.item:
            raise ValueError("ItemStack item must be non-empty")
        if self.count < 0:
            raise ValueError(f"count must be >= 0, got {self.count}")


@dataclass(frozen=True)
class HitResult:
    """Raw hit payload of an interaction."""

    position: Position
    face: Face
    location: tuple[float, float, float]
    inside: bool = False


@dataclass(frozen=True)
class InteractionEvent:
    """One external right-click on a block.

    ``denied`` carries a veto from an outer permission system.
    ``authoritative`` is False on a replica that must not mutate the world.
    """

    actor: Actor
    world: HarvestWorld
    hand: Hand
    position: Position
    face: Face
    hit: HitResult | None = None
    authoritative: bool = True
    denied: bool = False


@dataclass
class HarvestContext:
    """Per-harvest state. Created for one harvest and discarded after it."""

    world: HarvestWorld
    actor: Actor
    hand: Hand
    position: Position
    face: Face
    hit: HitResult | None
    state: BlockState
    maturity: PropertyDef
    first: bool = True
    base: Position | None = None


class HarvestWorld(Protocol):
    def get_state(self, pos: Position) -> BlockState: ...
    def set_state(self, pos: Position, state: BlockState) -> None: ...
    def remove_state(self, pos: Position) -> None: ...
    def emit_drops_at_face(
        self, pos: Position, face: Face, stacks: list[ItemStack]
    ) -> None: ...
    def emit_drops_at_position(self, pos: Position, stacks: list[ItemStack]) -> None: ...
    def play_sound(self, pos: Position, sound: SoundDescriptor) -> None: ...


class Actor(Protocol):
    @property
    def spectator(self) -> bool: ...
    @property
    def sneaking(self) -> bool: ...
    @property
    def creative(self) -> bool: ...
    def held_item(self, hand: Hand) -> Tool | None: ...
    def grant_reward(self, amount: int) -> None: ...
    def damage_held_tool(self, hand: Hand, amount: int) -> None: ...
    def can_harvest(self, state: BlockState) -> bool: ...


class ToolRules(Protocol):
    def is_harvesting_tool(self, item: Tool | None) -> bool: ...
    def tier_of(self, item: Tool | None) -> ToolTier | None: ...


class Registry(Protocol):
    def key_of(self, block: Block) -> str: ...


class HarvestError(Exception):
    """Base class for recoverable harvest failures."""


class ClassificationFailure(HarvestError):
    """Raised when a state is not a recognized growable."""

    def __init__(self, block: Block) -> None:
        self.block = block
        super().__init__(f"{block.id} is not a growable")


class PropertyMissing(HarvestError, KeyError):
    """Raised when a growable has no usable maturity property."""

    def __init__(self, block: Block, name: str) -> None:
        self.block = block
        self.name = name
        super().__init__(f"{block.id} has no {name!r} property")


class PropertyNotInteger(HarvestError, TypeError):
    """Raised when the maturity property is not integer-valued."""

    def __init__(self, block: Block, name: str) -> None:
        self.block = block
        self.name = name
        super().__init__(f"{block.id} property {name!r} is not integer-valued")


class RegistryLookupFailure(HarvestError, KeyError):
    """Raised when a block has no registry identifier."""

    def __init__(self, block: Block) -> None:
        self.block = block
        super().__init__(f"No registry key for {block!r}")
