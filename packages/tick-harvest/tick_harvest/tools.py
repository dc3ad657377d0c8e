"""Default tool classification."""
from __future__ import annotations

from tick_harvest.types import HOE_ACTIONS, Tool, ToolTier


class DefaultToolRules:
    """A harvesting tool can perform every default hoe action."""

    def __init__(self, actions: frozenset[str] = HOE_ACTIONS) -> None:
        self._actions = actions

    def is_harvesting_tool(self, item: Tool | None) -> bool:
        if item is None:
            return False
        return self._actions <= item.actions

    def tier_of(self, item: Tool | None) -> ToolTier | None:
        if item is None:
            return None
        return item.tier
