"""Repository exports."""

from .classes_repo import ClassesRepository
from .enemies_repo import EnemiesRepository
from .flavour_repo import FlavourRepository
from .items_repo import ItemsRepository
from .loot_tables_repo import LootTablesRepository
from .npcs_repo import NpcsRepository

__all__ = [
    "ClassesRepository",
    "EnemiesRepository",
    "FlavourRepository",
    "ItemsRepository",
    "LootTablesRepository",
    "NpcsRepository",
]
