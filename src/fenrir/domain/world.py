"""World map and exploration state."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, List, Set

from fenrir.core.types import Coord


class TileKind(str, Enum):
    EMPTY = "empty"
    COMBAT = "combat"
    LOOT = "loot"
    NPC = "npc"
    BOSS = "boss"
    OASIS = "oasis"
    TRAP = "trap"


class Direction(Enum):
    NORTH = (0, -1)
    SOUTH = (0, 1)
    EAST = (1, 0)
    WEST = (-1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


_NEIGHBOUR_OFFSETS = (
    (-1, -1), (0, -1), (1, -1),
    (-1, 0),           (1, 0),
    (-1, 1),  (0, 1),  (1, 1),
)


@dataclass(slots=True)
class WorldState:
    """Tile grid plus the player's position and what they have uncovered."""

    tiles: List[List[TileKind]]
    position: Coord
    discovered: Set[Coord] = field(default_factory=set)
    boss_fought: bool = False

    def __post_init__(self) -> None:
        if not self.tiles or not self.tiles[0]:
            raise ValueError("World needs at least one tile.")
        if any(len(row) != len(self.tiles[0]) for row in self.tiles):
            raise ValueError("World rows must have equal width.")
        if not self.in_bounds(*self.position):
            raise ValueError(f"Start position {self.position} is off the map.")

    @property
    def width(self) -> int:
        return len(self.tiles[0])

    @property
    def height(self) -> int:
        return len(self.tiles)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def tile_at(self, x: int, y: int) -> TileKind:
        return self.tiles[y][x]

    def set_tile(self, x: int, y: int, kind: TileKind) -> None:
        self.tiles[y][x] = kind

    def current_tile(self) -> TileKind:
        return self.tile_at(*self.position)

    def clear_current_tile(self) -> None:
        self.set_tile(*self.position, TileKind.EMPTY)

    def discover(self, x: int, y: int) -> None:
        self.discovered.add((x, y))

    def neighbours(self, x: int, y: int) -> Iterator[Coord]:
        """Yield in-bounds neighbour cells, row by row from the north-west."""
        for dx, dy in _NEIGHBOUR_OFFSETS:
            nx, ny = x + dx, y + dy
            if self.in_bounds(nx, ny):
                yield (nx, ny)
