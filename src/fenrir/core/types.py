"""Shared type aliases for the core and domain layers."""
from typing import Literal, Tuple

SessionStatus = Literal["active", "defeated", "quit"]
BattleActionType = Literal["attack", "heal", "flee", "block", "special"]
Coord = Tuple[int, int]

__all__ = ["BattleActionType", "Coord", "SessionStatus"]
