"""Inventory views and out-of-combat item use."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from fenrir.data.repositories import ItemsRepository
from fenrir.domain.defs import ItemDef
from fenrir.domain.entities import Player
from fenrir.domain.item_effects import apply_item_effect
from fenrir.domain.state import GameState
from fenrir.services.events import GameEvent, ItemUsedEvent, failure

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class InventoryEntryView:
    item_id: str
    name: str
    description: str
    quantity: int


@dataclass(slots=True)
class InventoryViewEvent(GameEvent):
    """Snapshot of the pack, in the order items were first picked up."""

    entries: Tuple[InventoryEntryView, ...]
    scan_charges: int

    def describe(self) -> str:
        if not self.entries:
            return "Your inventory is empty."
        lines = ["Inventory:"]
        lines.extend(f" - {entry.name} x{entry.quantity}" for entry in self.entries)
        lines.append(f"Scan charges: {self.scan_charges}")
        return "\n".join(lines)


class InventoryService:
    """Looks items up in the shared registry and applies them."""

    def __init__(self, items_repo: ItemsRepository) -> None:
        self._items_repo = items_repo

    def build_inventory_view(self, state: GameState) -> InventoryViewEvent:
        entries = []
        for item_id, quantity in state.player.inventory.entries():
            item = self._items_repo.get(item_id)
            entries.append(
                InventoryEntryView(item_id=item_id, name=item.name, description=item.description, quantity=quantity)
            )
        return InventoryViewEvent(entries=tuple(entries), scan_charges=state.player.scan_charges)

    def find_owned(self, player: Player, id_or_name: str) -> ItemDef | None:
        """Return the item if the player holds at least one of it."""
        item = self._items_repo.find(id_or_name)
        if item is None or not player.inventory.has(item.id):
            return None
        return item

    def use_item(self, state: GameState, id_or_name: str) -> List[GameEvent]:
        if not id_or_name.strip():
            return [failure("invalid_command", "Name the item you want to use.")]
        item = self.find_owned(state.player, id_or_name)
        if item is None:
            return [failure("invalid_target", "You don't have that item.")]
        return [self.consume(state.player, item)]

    def consume(self, player: Player, item: ItemDef) -> ItemUsedEvent:
        """Remove one unit of ``item`` and apply its effect."""
        if not player.inventory.remove_item(item.id):
            raise ValueError(f"Player holds no '{item.id}'.")
        result = apply_item_effect(player, item)
        logger.debug("Used %s: %s %+d", item.id, item.effect.value, result.amount)
        return ItemUsedEvent(
            item_id=item.id,
            item_name=item.name,
            message=result.message,
            remaining=player.inventory.count(item.id),
        )

    def grant(self, player: Player, item: ItemDef) -> None:
        player.inventory.add_item(item.id)
