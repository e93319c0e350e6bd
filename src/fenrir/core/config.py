"""Game configuration with sensible defaults."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GameConfig:
    """Immutable tunables for a single session."""

    # World
    map_width: int = 8
    map_height: int = 8

    # Player
    starting_scan_charges: int = 3
    starting_xp_to_next: int = 100

    # Combat
    flee_chance: float = 0.5

    # Tile events
    oasis_bonus_chance: float = 0.3
    trap_damage_min: int = 10
    trap_damage_max: int = 25
    trap_chest_chance: float = 0.3

    def __post_init__(self) -> None:
        if self.map_width < 4 or self.map_height < 4:
            raise ValueError("Map must be at least 4x4.")
        if self.trap_damage_min > self.trap_damage_max:
            raise ValueError("Trap damage range is inverted.")
