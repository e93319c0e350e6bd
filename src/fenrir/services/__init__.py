"""Service layer exports."""

from .errors import FactoryError
from .battle_service import BattleService
from .game_service import Command, CommandResult, GameService, build_game_service
from .inventory_service import InventoryService
from .loot_service import LootService
from .npc_service import NpcService
from .world_service import BattleRequestedEvent, WorldService

__all__ = [
    "FactoryError",
    "BattleService",
    "BattleRequestedEvent",
    "Command",
    "CommandResult",
    "GameService",
    "InventoryService",
    "LootService",
    "NpcService",
    "WorldService",
    "build_game_service",
]
