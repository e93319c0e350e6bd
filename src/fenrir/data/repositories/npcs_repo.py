"""NPC repository."""
from __future__ import annotations

from typing import Dict

from fenrir.data.errors import DataValidationError
from fenrir.data.repositories.base import RepositoryBase
from fenrir.domain.defs import NpcDef, NpcKind


class NpcsRepository(RepositoryBase[NpcDef]):
    """Loads NPC archetypes."""

    def __init__(self, base_path=None) -> None:
        super().__init__("npcs.json", base_path)

    def _build(self, raw: dict[str, object]) -> Dict[str, NpcDef]:
        npcs: Dict[str, NpcDef] = {}
        for raw_id, payload in raw.items():
            context = f"npc '{raw_id}'"
            npc_data = self._require_mapping(payload, context)
            self._assert_exact_fields(npc_data, {"name", "kind", "greeting"}, context)
            raw_kind = self._require_str(npc_data["kind"], f"{context} kind")
            try:
                kind = NpcKind(raw_kind)
            except ValueError as exc:
                raise DataValidationError(f"{context} has unknown kind '{raw_kind}'.") from exc
            npcs[raw_id] = NpcDef(
                id=raw_id,
                name=self._require_str(npc_data["name"], f"{context} name"),
                kind=kind,
                greeting=self._require_str(npc_data["greeting"], f"{context} greeting"),
            )
        return npcs
