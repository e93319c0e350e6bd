"""Items repository."""
from __future__ import annotations

from typing import Dict

from fenrir.core.text import fold_text
from fenrir.data.errors import DataValidationError
from fenrir.data.repositories.base import RepositoryBase
from fenrir.domain.defs import EffectKind, ItemDef


class ItemsRepository(RepositoryBase[ItemDef]):
    """Loads and validates item definitions.

    One instance built at startup serves as the item registry for the whole
    session; services receive it rather than building their own.
    """

    def __init__(self, base_path=None) -> None:
        super().__init__("items.json", base_path)
        self._by_name: Dict[str, ItemDef] = {}

    def _build(self, raw: dict[str, object]) -> Dict[str, ItemDef]:
        items: Dict[str, ItemDef] = {}
        by_name: Dict[str, ItemDef] = {}
        for raw_id, payload in raw.items():
            context = f"item '{raw_id}'"
            item_data = self._require_mapping(payload, context)
            self._assert_exact_fields(item_data, {"name", "description", "effect", "amount"}, context)

            name = self._require_str(item_data["name"], f"{context} name")
            raw_effect = self._require_str(item_data["effect"], f"{context} effect")
            try:
                effect = EffectKind(raw_effect)
            except ValueError as exc:
                raise DataValidationError(f"{context} has unknown effect '{raw_effect}'.") from exc
            amount = self._require_int(item_data["amount"], f"{context} amount")
            if amount <= 0:
                raise DataValidationError(f"{context} amount must be positive.")

            key = fold_text(name)
            if key in by_name:
                raise DataValidationError(f"{context} reuses the name '{name}'.")
            item = ItemDef(
                id=raw_id,
                name=name,
                description=self._require_str(item_data["description"], f"{context} description"),
                effect=effect,
                amount=amount,
            )
            items[raw_id] = item
            by_name[key] = item
        self._by_name = by_name
        return items

    def find(self, id_or_name: str) -> ItemDef | None:
        """Look an item up by id or by display name, ignoring case and diacritics."""
        self._ensure_loaded()
        assert self._definitions is not None
        needle = id_or_name.strip()
        if needle in self._definitions:
            return self._definitions[needle]
        return self._by_name.get(fold_text(needle))
