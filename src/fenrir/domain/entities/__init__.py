"""Runtime entity exports."""

from .enemy import EnemyInstance
from .player import Player
from .stats import MAX_DODGE_CHANCE, Stats, clamp_dodge

__all__ = [
    "EnemyInstance",
    "MAX_DODGE_CHANCE",
    "Player",
    "Stats",
    "clamp_dodge",
]
