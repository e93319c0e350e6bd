"""Domain-level session state."""
from __future__ import annotations

from dataclasses import dataclass

from fenrir.core.rng import RNG
from fenrir.core.types import SessionStatus
from fenrir.domain.battle_models import BattleState
from fenrir.domain.entities import Player
from fenrir.domain.world import WorldState


@dataclass
class GameState:
    """Everything one play session owns."""

    seed: int
    rng: RNG
    player: Player
    world: WorldState
    status: SessionStatus = "active"
    pending_trade_npc_id: str | None = None
    active_battle: BattleState | None = None

    @property
    def is_over(self) -> bool:
        return self.status != "active"
