"""Battle domain models."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from fenrir.domain.entities import EnemyInstance

DODGE_BONUS = 20
DODGE_BONUS_TURNS = 3


class CombatOutcome(str, Enum):
    ONGOING = "ongoing"
    PLAYER_VICTORY = "player_victory"
    PLAYER_DEFEAT = "player_defeat"
    PLAYER_FLED = "player_fled"


@dataclass(slots=True)
class BattleState:
    """Tracks one player-versus-enemy encounter."""

    battle_id: str
    enemy: EnemyInstance
    outcome: CombatOutcome = CombatOutcome.ONGOING
    special_used: bool = False
    block_pending: bool = False
    dodge_bonus_turns: int = 0
    round: int = 0
    is_boss: bool = False

    @property
    def is_over(self) -> bool:
        return self.outcome is not CombatOutcome.ONGOING

    @property
    def player_survived(self) -> bool:
        return self.outcome in (CombatOutcome.PLAYER_VICTORY, CombatOutcome.PLAYER_FLED)
