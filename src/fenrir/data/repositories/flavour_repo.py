"""Flavour text repository."""
from __future__ import annotations

from typing import Dict

from fenrir.data.errors import DataValidationError
from fenrir.data.repositories.base import RepositoryBase
from fenrir.domain.defs import FlavourDef


class FlavourRepository(RepositoryBase[FlavourDef]):
    """Loads named pools of narration lines."""

    def __init__(self, base_path=None) -> None:
        super().__init__("flavour.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, FlavourDef]:
        pools: Dict[str, FlavourDef] = {}
        for pool_id, payload in raw.items():
            lines = self._require_str_list(payload, f"flavour '{pool_id}'")
            if not lines:
                raise DataValidationError(f"flavour '{pool_id}' must not be empty.")
            pools[pool_id] = FlavourDef(id=pool_id, lines=tuple(lines))
        return pools
