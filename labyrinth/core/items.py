"""
Items and single-item inventories.

An Inventory is the slot a room yields when the crawler enters it, and also
what the explorer carries around. Moving an item between two inventories
empties the source and fills the destination in one step.
"""

import uuid
from dataclasses import dataclass, field
from typing import Optional


@dataclass(eq=False)
class Key:
    """A key that opens exactly one door."""

    key_id: str = field(default_factory=lambda: f"key_{uuid.uuid4().hex[:8]}")

    def __repr__(self) -> str:
        return f"Key({self.key_id})"


# Only keys exist for now; extend the union when other items appear.
Item = Key


class Inventory:
    """Holds zero or one item."""

    def __init__(self, item: Optional[Item] = None):
        self._item = item

    @property
    def has_item(self) -> bool:
        return self._item is not None

    @property
    def item(self) -> Optional[Item]:
        return self._item

    @property
    def item_type(self) -> Optional[type]:
        """Class of the held item, or None when empty."""
        return type(self._item) if self._item is not None else None

    def take(self) -> Optional[Item]:
        """Remove and return the held item."""
        item, self._item = self._item, None
        return item

    def move_item_from(self, source: "Inventory") -> None:
        """
        Transfer the item held by `source` into this inventory.

        Raises:
            ValueError: If this inventory is already full or source is empty.
        """
        if self.has_item:
            raise ValueError("Inventory already holds an item")
        if not source.has_item:
            raise ValueError("Source inventory is empty")
        self._item = source.take()

    def __repr__(self) -> str:
        return f"Inventory({self._item!r})"
