"""Factory for creating enemy instances from definitions."""
from __future__ import annotations

import logging

from fenrir.core.rng import RNG
from fenrir.data.repositories import EnemiesRepository
from fenrir.domain.entities import EnemyInstance, Stats
from fenrir.domain.world import TileKind
from fenrir.services.errors import FactoryError

from .id_factory import make_instance_id

logger = logging.getLogger(__name__)

COMBAT_ROSTER: tuple[str, ...] = (
    "sand_worm",
    "fenrir_scout",
    "nomad_raider",
    "harkonnen_berserker",
    "nanodrone_swarm",
)
BOSS_ENEMY_ID = "fenrir_commander"
BOSS_REPEAT_ENEMY_ID = "fenrir_guard"
DEFAULT_ENEMY_ID = "mutated_jackal"


def create_enemy_instance(enemy_id: str, enemies_repo: EnemiesRepository, rng: RNG) -> EnemyInstance:
    """Instantiate a fresh enemy using the provided repository."""
    try:
        enemy_def = enemies_repo.get(enemy_id)
    except KeyError as exc:
        raise FactoryError(f"Enemy '{enemy_id}' not found.") from exc

    stats = Stats(
        max_hp=enemy_def.hp,
        hp=enemy_def.hp,
        attack_min=enemy_def.attack_min,
        attack_max=enemy_def.attack_max,
        dodge_chance=enemy_def.dodge,
    )
    return EnemyInstance(
        id=make_instance_id("enemy", rng),
        enemy_id=enemy_def.id,
        name=enemy_def.name,
        stats=stats,
        xp_reward=enemy_def.xp,
        flavour=enemy_def.flavour,
    )


def pick_enemy_id(tile: TileKind, boss_fought: bool, rng: RNG) -> str:
    """Choose which enemy a tile spawns. Stats never scale with player level."""
    if tile is TileKind.BOSS:
        return BOSS_REPEAT_ENEMY_ID if boss_fought else BOSS_ENEMY_ID
    if tile is TileKind.COMBAT:
        return rng.choice(COMBAT_ROSTER)
    return DEFAULT_ENEMY_ID


def spawn_enemy_for_tile(
    tile: TileKind,
    boss_fought: bool,
    enemies_repo: EnemiesRepository,
    rng: RNG,
) -> EnemyInstance:
    enemy_id = pick_enemy_id(tile, boss_fought, rng)
    logger.debug("Spawning %s for %s tile (boss_fought=%s)", enemy_id, tile.value, boss_fought)
    return create_enemy_instance(enemy_id, enemies_repo=enemies_repo, rng=rng)
