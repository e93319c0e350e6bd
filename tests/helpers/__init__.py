"""Shared builders for the test suite."""
from __future__ import annotations

from typing import List, Sequence

from fenrir.core.rng import RNG
from fenrir.data.repositories import (
    ClassesRepository,
    EnemiesRepository,
    FlavourRepository,
    ItemsRepository,
    LootTablesRepository,
    NpcsRepository,
)
from fenrir.domain.state import GameState
from fenrir.domain.world import TileKind, WorldState
from fenrir.services.battle_service import BattleService
from fenrir.services.factories import create_player_from_class_id
from fenrir.services.game_service import GameService
from fenrir.services.inventory_service import InventoryService
from fenrir.services.loot_service import LootService
from fenrir.services.npc_service import NpcService
from fenrir.services.world_service import WorldService

from .scripted_rng import ScriptedRNG

items_repo = ItemsRepository()
classes_repo = ClassesRepository(items_repo=items_repo)
enemies_repo = EnemiesRepository()
loot_tables_repo = LootTablesRepository(items_repo=items_repo)
npcs_repo = NpcsRepository()
flavour_repo = FlavourRepository()


def make_world(rows: Sequence[str] | None = None, position=(1, 1)) -> WorldState:
    """Build a world from rows of tile symbols ('.', 'W', 'L', 'N', 'B', 'O', 'T')."""
    symbols = {
        ".": TileKind.EMPTY,
        "W": TileKind.COMBAT,
        "L": TileKind.LOOT,
        "N": TileKind.NPC,
        "B": TileKind.BOSS,
        "O": TileKind.OASIS,
        "T": TileKind.TRAP,
    }
    rows = rows or ("...", "...", "...")
    tiles: List[List[TileKind]] = [[symbols[symbol] for symbol in row] for row in rows]
    world = WorldState(tiles=tiles, position=position)
    world.discover(*position)
    return world


def make_state(
    rng: RNG,
    class_id: str = "warrior",
    rows: Sequence[str] | None = None,
    position=(1, 1),
) -> GameState:
    player = create_player_from_class_id(class_id, classes_repo, rng)
    return GameState(seed=0, rng=rng, player=player, world=make_world(rows, position))


def make_services():
    """Return (inventory, loot, battle, npc, world) services wired to the packaged data."""
    loot_service = LootService(loot_tables_repo, items_repo)
    inventory_service = InventoryService(items_repo)
    battle_service = BattleService(items_repo, loot_service, inventory_service)
    npc_service = NpcService(npcs_repo, loot_service, inventory_service)
    world_service = WorldService(
        enemies_repo,
        flavour_repo,
        loot_service,
        inventory_service,
        battle_service,
        npc_service,
    )
    return inventory_service, loot_service, battle_service, npc_service, world_service


def make_game_service() -> GameService:
    inventory_service, _, battle_service, npc_service, world_service = make_services()
    return GameService(classes_repo, inventory_service, battle_service, npc_service, world_service)


__all__ = [
    "ScriptedRNG",
    "classes_repo",
    "enemies_repo",
    "flavour_repo",
    "items_repo",
    "loot_tables_repo",
    "make_game_service",
    "make_services",
    "make_state",
    "make_world",
    "npcs_repo",
]
