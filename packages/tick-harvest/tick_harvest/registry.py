"""BlockRegistry class."""
from __future__ import annotations

from tick_harvest.types import Block, RegistryLookupFailure


class BlockRegistry:
    """Maps registry identifiers to block types and back."""

    def __init__(self) -> None:
        self._blocks: dict[str, Block] = {}
        self._keys: dict[int, str] = {}

    def define(self, block: Block) -> Block:
        """Register a block type under its id. Overwrites if the id exists."""
        if not block.id:
            raise ValueError("Block id must be non-empty")
        previous = self._blocks.get(block.id)
        if previous is not None:
            del self._keys[id(previous)]
        self._blocks[block.id] = block
        self._keys[id(block)] = block.id
        return block

    def get(self, key: str) -> Block:
        """Look up a block type. Raises KeyError if not defined."""
        if key not in self._blocks:
            raise KeyError(key)
        return self._blocks[key]

    def has(self, key: str) -> bool:
        return key in self._blocks

    def key_of(self, block: Block) -> str:
        """Registry id of *block*. Raises RegistryLookupFailure if unregistered."""
        key = self._keys.get(id(block))
        if key is None:
            raise RegistryLookupFailure(block)
        return key

    def defined_blocks(self) -> list[str]:
        return list(self._blocks.keys())

    def remove(self, key: str) -> None:
        """Remove a block type. Raises KeyError if not defined."""
        if key not in self._blocks:
            raise KeyError(key)
        block = self._blocks.pop(key)
        del self._keys[id(block)]
