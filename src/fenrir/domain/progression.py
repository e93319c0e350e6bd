"""Experience and level-up rules."""
from __future__ import annotations

from dataclasses import dataclass
from typing import List

from fenrir.core.rng import RNG
from fenrir.domain.entities import Player

LEVEL_HP_GAIN = (8, 15)
LEVEL_ATTACK_GAIN = (1, 3)
LEVEL_DODGE_GAIN = 2


@dataclass(slots=True)
class LevelUpResult:
    """Stat growth granted by one level."""

    level: int
    hp_gain: int
    attack_gain: int
    dodge_gain: int
    xp_to_next: int


def next_threshold(current: int) -> int:
    """Return the XP needed for the level after one with ``current`` threshold."""
    return int(current * 1.3) + 50


def grant_xp(player: Player, amount: int, rng: RNG) -> List[LevelUpResult]:
    """Add XP and convert every full threshold into a level.

    A single large grant can cross several thresholds; each crossing
    recomputes the next, higher threshold before checking again. On return
    ``player.xp < player.xp_to_next``.
    """
    if amount < 0:
        raise ValueError("XP grants must not be negative.")
    player.xp += amount
    results: List[LevelUpResult] = []
    while player.xp >= player.xp_to_next:
        player.xp -= player.xp_to_next
        player.level += 1
        player.xp_to_next = next_threshold(player.xp_to_next)

        hp_gain = rng.randint(*LEVEL_HP_GAIN)
        player.stats.max_hp += hp_gain
        player.stats.hp = player.stats.max_hp

        attack_gain = rng.randint(*LEVEL_ATTACK_GAIN)
        player.stats.raise_attack(attack_gain)

        dodge_before = player.stats.dodge_chance
        player.stats.raise_dodge(LEVEL_DODGE_GAIN)

        results.append(
            LevelUpResult(
                level=player.level,
                hp_gain=hp_gain,
                attack_gain=attack_gain,
                dodge_gain=player.stats.dodge_chance - dodge_before,
                xp_to_next=player.xp_to_next,
            )
        )
    return results
