"""Event types shared by every service."""
from __future__ import annotations

from dataclasses import dataclass

from fenrir.services.errors import FailureReason


@dataclass(slots=True)
class GameEvent:
    """Base event; ``describe`` returns the line a renderer shows."""

    def describe(self) -> str:
        return str(self)


@dataclass(slots=True)
class ActionFailedEvent(GameEvent):
    """A recoverable failure: nothing (or only part of a turn) happened."""

    reason: FailureReason
    message: str

    def describe(self) -> str:
        return self.message


@dataclass(slots=True)
class NarrationEvent(GameEvent):
    """Plain flavour text."""

    text: str

    def describe(self) -> str:
        return self.text


@dataclass(slots=True)
class ItemGainedEvent(GameEvent):
    item_id: str
    item_name: str
    description: str
    source: str
    tier: str | None = None

    def describe(self) -> str:
        if self.tier:
            return f"You find a {self.tier} item in the {self.source}: {self.item_name} - {self.description}"
        return f"You find {self.item_name} in the {self.source}: {self.description}"


@dataclass(slots=True)
class ItemUsedEvent(GameEvent):
    item_id: str
    item_name: str
    message: str
    remaining: int

    def describe(self) -> str:
        return self.message


@dataclass(slots=True)
class XpGainedEvent(GameEvent):
    amount: int
    xp: int
    xp_to_next: int

    def describe(self) -> str:
        return f"Gained {self.amount} XP ({self.xp}/{self.xp_to_next})."


@dataclass(slots=True)
class LevelUpEvent(GameEvent):
    level: int
    hp_gain: int
    attack_gain: int
    dodge_gain: int

    def describe(self) -> str:
        return (
            f"You reach level {self.level}! +{self.hp_gain} max HP, "
            f"+{self.attack_gain} damage, +{self.dodge_gain}% dodge."
        )


def failure(reason: FailureReason, message: str) -> ActionFailedEvent:
    return ActionFailedEvent(reason=reason, message=message)
