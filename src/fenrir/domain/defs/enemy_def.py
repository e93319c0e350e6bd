"""Enemy definition structures."""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class EnemyDef:
    """Fixed enemy stat block."""

    id: str
    name: str
    hp: int
    attack_min: int
    attack_max: int
    dodge: int
    xp: int
    flavour: str = ""
