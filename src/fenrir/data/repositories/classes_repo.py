"""Classes repository with reference validation."""
from __future__ import annotations

from typing import Dict

from fenrir.data.errors import DataReferenceError, DataValidationError
from fenrir.data.repositories.base import RepositoryBase
from fenrir.data.repositories.items_repo import ItemsRepository
from fenrir.domain.defs import ClassDef, SpecialKind


class ClassesRepository(RepositoryBase[ClassDef]):
    """Loads classes and ensures their starting items exist."""

    def __init__(self, items_repo: ItemsRepository | None = None, base_path=None) -> None:
        super().__init__("classes.json", base_path)
        self._items_repo = items_repo or ItemsRepository(base_path=base_path)
        self._aliases: Dict[str, str] = {}

    def _build(self, raw: dict[str, object]) -> Dict[str, ClassDef]:
        item_ids = set(self._items_repo.ids())

        classes: Dict[str, ClassDef] = {}
        aliases: Dict[str, str] = {}
        for raw_id, payload in raw.items():
            context = f"class '{raw_id}'"
            class_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                class_data,
                {"name", "base_hp", "attack_min", "attack_max", "dodge", "special"},
                context,
                optional_fields={"aliases", "starting_items"},
            )

            raw_special = self._require_str(class_data["special"], f"{context} special")
            try:
                special = SpecialKind(raw_special)
            except ValueError as exc:
                raise DataValidationError(f"{context} has unknown special '{raw_special}'.") from exc

            starting_raw = self._require_mapping(class_data.get("starting_items", {}), f"{context} starting_items")
            starting_items = []
            for item_id, count in starting_raw.items():
                if item_id not in item_ids:
                    raise DataReferenceError(f"{context} references missing item '{item_id}'.")
                quantity = self._require_int(count, f"{context} starting_items.{item_id}")
                if quantity <= 0:
                    raise DataValidationError(f"{context} starting_items.{item_id} must be positive.")
                starting_items.append((item_id, quantity))

            name = self._require_str(class_data["name"], f"{context} name")
            class_aliases = tuple(
                alias.casefold()
                for alias in self._require_str_list(class_data.get("aliases", []), f"{context} aliases")
            )
            for alias in (raw_id.casefold(), name.casefold(), *class_aliases):
                owner = aliases.setdefault(alias, raw_id)
                if owner != raw_id:
                    raise DataValidationError(f"{context} alias '{alias}' already used by class '{owner}'.")

            base_hp = self._require_int(class_data["base_hp"], f"{context} base_hp")
            attack_min = self._require_int(class_data["attack_min"], f"{context} attack_min")
            attack_max = self._require_int(class_data["attack_max"], f"{context} attack_max")
            dodge = self._require_int(class_data["dodge"], f"{context} dodge")
            if base_hp <= 0:
                raise DataValidationError(f"{context} base_hp must be positive.")
            if attack_min < 1 or attack_max < attack_min:
                raise DataValidationError(f"{context} attack range invalid.")
            if not 0 <= dodge <= 95:
                raise DataValidationError(f"{context} dodge must be between 0 and 95.")

            classes[raw_id] = ClassDef(
                id=raw_id,
                name=name,
                base_hp=base_hp,
                attack_min=attack_min,
                attack_max=attack_max,
                dodge=dodge,
                special=special,
                aliases=class_aliases,
                starting_items=tuple(starting_items),
            )
        self._aliases = aliases
        return classes

    def resolve_alias(self, raw: str) -> str | None:
        """Map a typed class name or alias onto a class id."""
        self._ensure_loaded()
        return self._aliases.get(raw.strip().casefold())
