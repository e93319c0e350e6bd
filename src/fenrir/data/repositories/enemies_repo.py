"""Enemies repository."""
from __future__ import annotations

from typing import Dict

from fenrir.data.errors import DataValidationError
from fenrir.data.repositories.base import RepositoryBase
from fenrir.domain.defs import EnemyDef


class EnemiesRepository(RepositoryBase[EnemyDef]):
    """Loads and validates enemy definitions."""

    def __init__(self, base_path=None) -> None:
        super().__init__("enemies.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, EnemyDef]:
        enemies: Dict[str, EnemyDef] = {}
        for raw_id, payload in raw.items():
            context = f"enemy '{raw_id}'"
            enemy_data = self._require_mapping(payload, context)
            self._assert_exact_fields(
                enemy_data,
                {"name", "hp", "attack_min", "attack_max", "dodge", "xp"},
                context,
                optional_fields={"flavour"},
            )
            hp = self._require_int(enemy_data["hp"], f"{context} hp")
            attack_min = self._require_int(enemy_data["attack_min"], f"{context} attack_min")
            attack_max = self._require_int(enemy_data["attack_max"], f"{context} attack_max")
            dodge = self._require_int(enemy_data["dodge"], f"{context} dodge")
            if hp <= 0:
                raise DataValidationError(f"{context} hp must be positive.")
            if attack_min < 1 or attack_max < attack_min:
                raise DataValidationError(f"{context} attack range invalid.")
            if not 0 <= dodge <= 95:
                raise DataValidationError(f"{context} dodge must be between 0 and 95.")

            flavour = enemy_data.get("flavour", "")
            if not isinstance(flavour, str):
                raise DataValidationError(f"{context} flavour must be a string.")

            enemies[raw_id] = EnemyDef(
                id=raw_id,
                name=self._require_str(enemy_data["name"], f"{context} name"),
                hp=hp,
                attack_min=attack_min,
                attack_max=attack_max,
                dodge=dodge,
                xp=self._require_int(enemy_data["xp"], f"{context} xp"),
                flavour=flavour,
            )
        return enemies
