"""Definition dataclasses loaded from JSON."""

from .class_def import ClassDef, SpecialKind
from .enemy_def import EnemyDef
from .flavour_def import FlavourDef
from .item_def import EffectKind, ItemDef
from .loot_def import LootTableDef, LootTierDef
from .npc_def import NpcDef, NpcKind

__all__ = [
    "ClassDef",
    "EffectKind",
    "EnemyDef",
    "FlavourDef",
    "ItemDef",
    "LootTableDef",
    "LootTierDef",
    "NpcDef",
    "NpcKind",
    "SpecialKind",
]
