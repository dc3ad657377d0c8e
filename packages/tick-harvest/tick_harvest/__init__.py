"""tick-harvest - Right-click harvesting of mature growables."""
from __future__ import annotations

from tick_harvest.actors import Harvester
from tick_harvest.area import area_positions, expand, half_width, qualifies
from tick_harvest.config import HarvestConfig
from tick_harvest.controller import HarvestController
from tick_harvest.drops import DropsFn, DropsResult, make_table_drops, no_drops
from tick_harvest.events import (
    AfterHarvest,
    BeforeHarvest,
    HarvestCheck,
    HarvestDrops,
    HarvestEvents,
)
from tick_harvest.executor import HarvestExecutor
from tick_harvest.gate import can_interact, interaction_hand
from tick_harvest.grid import BlockGrid, Drop
from tick_harvest.growth import (
    Classification,
    GrowableRef,
    classify,
    is_growable,
    is_mature,
    maturity_property,
)
from tick_harvest.multiblock import base_position, is_tall_but_separate
from tick_harvest.registry import BlockRegistry
from tick_harvest.systems import InteractionQueue, make_interaction_system
from tick_harvest.tools import DefaultToolRules
from tick_harvest.types import (
    AIR,
    AIR_STATE,
    CROPS_TAG,
    DIAMOND,
    HOE_ACTIONS,
    IRON,
    MATURITY_PROPERTY,
    NETHERITE,
    NONE,
    STONE,
    TIERS,
    WOOD,
    Actor,
    Block,
    BlockState,
    ClassificationFailure,
    Face,
    GrowableKind,
    Hand,
    HarvestContext,
    HarvestError,
    HarvestWorld,
    HitResult,
    InteractionEvent,
    InteractionResult,
    ItemStack,
    Position,
    PropertyDef,
    PropertyMissing,
    PropertyNotInteger,
    Registry,
    RegistryLookupFailure,
    SoundDescriptor,
    Tool,
    ToolRules,
    ToolTier,
    int_property,
)

__all__ = [
    "AIR",
    "AIR_STATE",
    "CROPS_TAG",
    "DIAMOND",
    "HOE_ACTIONS",
    "IRON",
    "MATURITY_PROPERTY",
    "NETHERITE",
    "NONE",
    "STONE",
    "TIERS",
    "WOOD",
    "Actor",
    "AfterHarvest",
    "BeforeHarvest",
    "Block",
    "BlockGrid",
    "BlockRegistry",
    "BlockState",
    "Classification",
    "ClassificationFailure",
    "DefaultToolRules",
    "Drop",
    "DropsFn",
    "DropsResult",
    "Face",
    "GrowableKind",
    "GrowableRef",
    "Hand",
    "HarvestCheck",
    "HarvestConfig",
    "HarvestContext",
    "HarvestController",
    "HarvestDrops",
    "HarvestError",
    "HarvestEvents",
    "HarvestExecutor",
    "HarvestWorld",
    "Harvester",
    "HitResult",
    "InteractionEvent",
    "InteractionQueue",
    "InteractionResult",
    "ItemStack",
    "Position",
    "PropertyDef",
    "PropertyMissing",
    "PropertyNotInteger",
    "Registry",
    "RegistryLookupFailure",
    "SoundDescriptor",
    "Tool",
    "ToolRules",
    "ToolTier",
    "area_positions",
    "base_position",
    "can_interact",
    "classify",
    "expand",
    "half_width",
    "int_property",
    "interaction_hand",
    "is_growable",
    "is_mature",
    "is_tall_but_separate",
    "make_interaction_system",
    "make_table_drops",
    "maturity_property",
    "no_drops",
    "qualifies",
]
