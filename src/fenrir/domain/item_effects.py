"""Pure helpers for applying item effects to the player."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from fenrir.domain.defs import EffectKind, ItemDef
from fenrir.domain.entities import Player

NO_EFFECT_MESSAGE = "Nothing happens. It must be scrap."


@dataclass(slots=True)
class ItemEffectResult:
    """Summary of what a consumable changed."""

    item_id: str
    effect: EffectKind | None
    amount: int
    message: str


def _heal(player: Player, amount: int) -> tuple[int, str]:
    stats = player.stats
    healed = max(0, min(amount, stats.max_hp - stats.hp))
    stats.hp += healed
    return healed, f"Your wounds close a little. +{healed} HP."


def _attack_boost(player: Player, amount: int) -> tuple[int, str]:
    player.stats.raise_attack(amount)
    return amount, f"Power surges through you. Attack +{amount}."


def _dodge_boost(player: Player, amount: int) -> tuple[int, str]:
    before = player.stats.dodge_chance
    player.stats.raise_dodge(amount)
    gained = player.stats.dodge_chance - before
    return gained, f"Your senses sharpen. Dodge chance +{gained}%."


def _hp_boost(player: Player, amount: int) -> tuple[int, str]:
    player.stats.max_hp += amount
    player.stats.hp += amount
    return amount, f"Your body hardens. Max HP +{amount}."


def _scan_boost(player: Player, amount: int) -> tuple[int, str]:
    player.scan_charges += amount
    return amount, f"Your scanner flickers. +{amount} scan charge(s)."


_HANDLERS: Dict[EffectKind, Callable[[Player, int], tuple[int, str]]] = {
    EffectKind.HEAL: _heal,
    EffectKind.ATTACK_BOOST: _attack_boost,
    EffectKind.DODGE_BOOST: _dodge_boost,
    EffectKind.HP_BOOST: _hp_boost,
    EffectKind.SCAN_BOOST: _scan_boost,
}

_missing = set(EffectKind) - set(_HANDLERS)
if _missing:
    raise RuntimeError(f"Item effect handlers missing for: {sorted(kind.value for kind in _missing)}")


def apply_item_effect(player: Player, item: ItemDef) -> ItemEffectResult:
    """Apply one unit of ``item`` to ``player``; inventory is handled by the caller."""
    handler = _HANDLERS.get(item.effect)
    if handler is None:
        return ItemEffectResult(item_id=item.id, effect=None, amount=0, message=NO_EFFECT_MESSAGE)
    amount, message = handler(player, item.amount)
    return ItemEffectResult(item_id=item.id, effect=item.effect, amount=amount, message=message)
