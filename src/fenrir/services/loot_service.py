"""Chest and loose loot draws."""
from __future__ import annotations

import logging
from dataclasses import dataclass

from fenrir.core.rng import RNG
from fenrir.data.repositories import ItemsRepository, LootTablesRepository
from fenrir.domain.defs import ItemDef, LootTableDef, LootTierDef

logger = logging.getLogger(__name__)

CHEST_TABLE_ID = "chest"
BASIC_TABLE_ID = "basic"


@dataclass(slots=True)
class ChestDrop:
    """An item pulled from a tiered table, with the tier it came from."""

    item: ItemDef
    tier: str


class LootService:
    """Draws items from the loot tables using the injected RNG."""

    def __init__(self, loot_tables_repo: LootTablesRepository, items_repo: ItemsRepository) -> None:
        self._loot_tables_repo = loot_tables_repo
        self._items_repo = items_repo

    def draw_chest(self, rng: RNG) -> ChestDrop:
        """Roll a tier (60/30/10 with the shipped table), then an item inside it."""
        table = self._loot_tables_repo.get(CHEST_TABLE_ID)
        tier = self._pick_tier(table, rng.random())
        item = self._items_repo.get(rng.choice(tier.item_ids))
        logger.debug("Chest draw: %s (%s)", item.id, tier.tier)
        return ChestDrop(item=item, tier=tier.tier)

    def draw_basic(self, rng: RNG) -> ItemDef:
        """Uniform pick from the basic table used for loose loot and NPC gifts."""
        table = self._loot_tables_repo.get(BASIC_TABLE_ID)
        pool = [item_id for tier in table.tiers for item_id in tier.item_ids]
        item = self._items_repo.get(rng.choice(pool))
        logger.debug("Basic loot draw: %s", item.id)
        return item

    @staticmethod
    def _pick_tier(table: LootTableDef, roll: float) -> LootTierDef:
        for tier in table.tiers:
            if roll < tier.roll_below:
                return tier
        return table.tiers[-1]
