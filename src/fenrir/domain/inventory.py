"""Player inventory structure."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, Tuple


@dataclass(slots=True)
class Inventory:
    """Insertion-ordered item counts keyed by item id.

    Entries whose count drops to zero are removed, so every stored count is
    at least one.
    """

    items: Dict[str, int] = field(default_factory=dict)

    def add_item(self, item_id: str, quantity: int = 1) -> None:
        if quantity <= 0:
            return
        self.items[item_id] = self.items.get(item_id, 0) + quantity

    def remove_item(self, item_id: str, quantity: int = 1) -> bool:
        if quantity <= 0:
            return True
        current = self.items.get(item_id, 0)
        if current < quantity:
            return False
        new_value = current - quantity
        if new_value == 0:
            self.items.pop(item_id, None)
        else:
            self.items[item_id] = new_value
        return True

    def count(self, item_id: str) -> int:
        return self.items.get(item_id, 0)

    def has(self, item_id: str) -> bool:
        return self.count(item_id) > 0

    def is_empty(self) -> bool:
        return not self.items

    def entries(self) -> Iterator[Tuple[str, int]]:
        yield from self.items.items()
