"""Factory helpers for runtime entities."""

from .enemy_factory import create_enemy_instance, pick_enemy_id, spawn_enemy_for_tile
from .id_factory import make_instance_id
from .map_factory import create_world, generate_tiles
from .player_factory import create_player_from_class_id, resolve_class_id

__all__ = [
    "create_enemy_instance",
    "create_player_from_class_id",
    "create_world",
    "generate_tiles",
    "make_instance_id",
    "pick_enemy_id",
    "resolve_class_id",
    "spawn_enemy_for_tile",
]
