"""Loot table definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class LootTierDef:
    """One rarity bucket; selected when the roll is below ``roll_below``."""

    tier: str
    roll_below: float
    item_ids: Tuple[str, ...]


@dataclass(frozen=True, slots=True)
class LootTableDef:
    """Loot table made of ordered tiers."""

    id: str
    tiers: Tuple[LootTierDef, ...]

    @property
    def is_tiered(self) -> bool:
        return len(self.tiers) > 1
