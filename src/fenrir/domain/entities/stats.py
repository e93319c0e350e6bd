"""Stat models for runtime entities."""
from __future__ import annotations

from dataclasses import dataclass

MAX_DODGE_CHANCE = 95


def clamp_dodge(value: int) -> int:
    """Keep a dodge chance inside [0, MAX_DODGE_CHANCE]."""
    return max(0, min(MAX_DODGE_CHANCE, value))


@dataclass(slots=True)
class Stats:
    """Stores basic combat stats."""

    max_hp: int
    hp: int
    attack_min: int
    attack_max: int
    dodge_chance: int

    @property
    def is_alive(self) -> bool:
        return self.hp > 0

    def raise_attack(self, amount: int) -> None:
        self.attack_min += amount
        self.attack_max += amount

    def raise_dodge(self, amount: int) -> None:
        self.dodge_chance = clamp_dodge(self.dodge_chance + amount)
