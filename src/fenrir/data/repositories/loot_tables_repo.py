"""Repository for tiered loot tables."""
from __future__ import annotations

from typing import Dict, List

from fenrir.data.errors import DataReferenceError, DataValidationError
from fenrir.data.repositories.base import RepositoryBase
from fenrir.data.repositories.items_repo import ItemsRepository
from fenrir.domain.defs import LootTableDef, LootTierDef


class LootTablesRepository(RepositoryBase[LootTableDef]):
    """Loads loot table definitions."""

    def __init__(self, items_repo: ItemsRepository | None = None, base_path=None) -> None:
        super().__init__("loot_tables.json", base_path)
        self._items_repo = items_repo or ItemsRepository(base_path=base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, LootTableDef]:
        item_ids = set(self._items_repo.ids())
        tables: Dict[str, LootTableDef] = {}
        for table_id, payload in raw.items():
            context = f"loot_tables['{table_id}']"
            table_map = self._require_mapping(payload, context)
            self._assert_exact_fields(table_map, {"tiers"}, context)
            tier_entries = table_map["tiers"]
            if not isinstance(tier_entries, list) or not tier_entries:
                raise DataValidationError(f"{context}.tiers must be a non-empty list.")

            tiers: List[LootTierDef] = []
            previous_bound = 0.0
            for tier_index, tier_entry in enumerate(tier_entries):
                tier_ctx = f"{context}.tiers[{tier_index}]"
                tier_map = self._require_mapping(tier_entry, tier_ctx)
                self._assert_exact_fields(tier_map, {"tier", "roll_below", "items"}, tier_ctx)
                bound = tier_map["roll_below"]
                if not isinstance(bound, (int, float)) or isinstance(bound, bool):
                    raise DataValidationError(f"{tier_ctx}.roll_below must be a number.")
                bound = float(bound)
                if not previous_bound < bound <= 1.0:
                    raise DataValidationError(f"{tier_ctx}.roll_below must increase and stay within (0, 1].")
                previous_bound = bound

                tier_items = self._require_str_list(tier_map["items"], f"{tier_ctx}.items")
                if not tier_items:
                    raise DataValidationError(f"{tier_ctx}.items must not be empty.")
                for item_id in tier_items:
                    if item_id not in item_ids:
                        raise DataReferenceError(f"{tier_ctx} references missing item '{item_id}'.")
                tiers.append(
                    LootTierDef(
                        tier=self._require_str(tier_map["tier"], f"{tier_ctx}.tier"),
                        roll_below=bound,
                        item_ids=tuple(tier_items),
                    )
                )
            if previous_bound != 1.0:
                raise DataValidationError(f"{context} last tier must cover rolls up to 1.0.")
            tables[table_id] = LootTableDef(id=table_id, tiers=tuple(tiers))
        return tables
