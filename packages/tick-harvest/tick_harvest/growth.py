"""Growable classification and maturity checks."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from tick_harvest.types import (
    MATURITY_PROPERTY,
    BlockState,
    ClassificationFailure,
    GrowableKind,
    PropertyDef,
    PropertyMissing,
    PropertyNotInteger,
    RegistryLookupFailure,
)

if TYPE_CHECKING:
    from tick_harvest.config import HarvestConfig
    from tick_harvest.types import Registry

logger = logging.getLogger(__name__)


class Classification(Enum):
    BUILTIN = "builtin"
    ALLOW_LISTED = "allow_listed"
    NONE = "none"


@dataclass(frozen=True)
class GrowableRef:
    """A state known to be a growable, and why."""

    state: BlockState
    classification: Classification
    kind: GrowableKind | None = None


def is_growable(
    state: BlockState, registry: Registry, config: HarvestConfig
) -> Classification:
    if state.block.kind is not None:
        return Classification.BUILTIN
    try:
        key = registry.key_of(state.block)
    except RegistryLookupFailure as exc:
        logger.debug("Registry lookup failed, treating as non-growable: %s", exc)
        return Classification.NONE
    if key in config.allow_listed_growable_ids:
        return Classification.ALLOW_LISTED
    return Classification.NONE


def classify(state: BlockState, registry: Registry, config: HarvestConfig) -> GrowableRef:
    """Return a GrowableRef. Raises ClassificationFailure for anything else."""
    classification = is_growable(state, registry, config)
    if classification is Classification.NONE:
        raise ClassificationFailure(state.block)
    return GrowableRef(state, classification, state.block.kind)


def maturity_property(state: BlockState) -> PropertyDef:
    """Locate the integer ``age`` property among the declared properties."""
    prop = state.block.get_property(MATURITY_PROPERTY)
    if prop is None:
        raise PropertyMissing(state.block, MATURITY_PROPERTY)
    if not prop.is_integer:
        raise PropertyNotInteger(state.block, MATURITY_PROPERTY)
    return prop


def is_mature(state: BlockState, prop: PropertyDef) -> bool:
    current = state.get(prop.name)
    if current is None:
        raise PropertyMissing(state.block, prop.name)
    if type(current) is not int:
        raise PropertyNotInteger(state.block, prop.name)
    return current >= prop.maximum
