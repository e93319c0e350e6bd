"""Tile distribution and world construction."""
from __future__ import annotations

from typing import List

from fenrir.core.config import GameConfig
from fenrir.core.rng import RNG
from fenrir.domain.world import TileKind, WorldState

# (kind, share of the map, minimum count); whatever is left stays empty.
TILE_DISTRIBUTION: tuple[tuple[TileKind, float, int], ...] = (
    (TileKind.COMBAT, 0.23, 5),
    (TileKind.LOOT, 0.15, 3),
    (TileKind.NPC, 0.12, 2),
    (TileKind.BOSS, 0.03, 1),
    (TileKind.OASIS, 0.07, 1),
    (TileKind.TRAP, 0.05, 1),
)
UNSAFE_START_TILES = frozenset({TileKind.COMBAT, TileKind.BOSS, TileKind.TRAP})


def generate_tiles(width: int, height: int, rng: RNG) -> List[List[TileKind]]:
    """Shuffle the tile distribution into a grid with a safe centre cell."""
    total = width * height
    cells: List[TileKind] = []
    for kind, share, minimum in TILE_DISTRIBUTION:
        cells.extend([kind] * max(minimum, int(total * share)))
    if len(cells) >= total:
        raise ValueError(f"A {width}x{height} map is too small for the tile distribution.")
    cells.extend([TileKind.EMPTY] * (total - len(cells)))
    rng.shuffle(cells)

    start_index = (height // 2) * width + width // 2
    start_kind = cells[start_index]
    if start_kind in UNSAFE_START_TILES:
        for index, kind in enumerate(cells):
            if index != start_index and kind not in UNSAFE_START_TILES:
                cells[index], cells[start_index] = start_kind, kind
                break

    return [cells[row * width:(row + 1) * width] for row in range(height)]


def create_world(config: GameConfig, rng: RNG) -> WorldState:
    tiles = generate_tiles(config.map_width, config.map_height, rng)
    start = (config.map_width // 2, config.map_height // 2)
    world = WorldState(tiles=tiles, position=start)
    world.discover(*start)
    return world
