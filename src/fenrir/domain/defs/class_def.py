"""Class definition structures."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Tuple


class SpecialKind(str, Enum):
    """Once-per-combat class abilities."""

    DOUBLE_STRIKE = "double_strike"
    SABOTAGE = "sabotage"
    EVASION = "evasion"
    TRIPLE_SHOT = "triple_shot"


@dataclass(frozen=True, slots=True)
class ClassDef:
    """Player class definition."""

    id: str
    name: str
    base_hp: int
    attack_min: int
    attack_max: int
    dodge: int
    special: SpecialKind
    aliases: Tuple[str, ...] = ()
    starting_items: Tuple[Tuple[str, int], ...] = field(default_factory=tuple)
