"""Item definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class EffectKind(str, Enum):
    """Closed set of effects an item can have."""

    HEAL = "heal"
    ATTACK_BOOST = "attack_boost"
    DODGE_BOOST = "dodge_boost"
    HP_BOOST = "hp_boost"
    SCAN_BOOST = "scan_boost"


@dataclass(frozen=True, slots=True)
class ItemDef:
    """Consumable item definition."""

    id: str
    name: str
    description: str
    effect: EffectKind
    amount: int
