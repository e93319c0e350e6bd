"""Player model."""
from __future__ import annotations

from dataclasses import dataclass, field

from fenrir.domain.defs import SpecialKind
from fenrir.domain.inventory import Inventory

from .stats import Stats


@dataclass(slots=True)
class Player:
    """Represents the wanderer controlled by the user."""

    id: str
    class_id: str
    class_name: str
    special: SpecialKind
    stats: Stats
    level: int = 1
    xp: int = 0
    xp_to_next: int = 100
    scan_charges: int = 3
    inventory: Inventory = field(default_factory=Inventory)

    @property
    def is_alive(self) -> bool:
        return self.stats.is_alive
