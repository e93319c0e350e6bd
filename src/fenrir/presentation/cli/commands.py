"""Typed-command parsing for the console front-end."""
from __future__ import annotations

from typing import Dict

from fenrir.core.text import fold_text
from fenrir.services.game_service import Command

_COMMAND_ALIASES: Dict[str, str] = {
    "move": "move",
    "go": "move",
    "idz": "move",
    "explore": "explore",
    "eksploruj": "explore",
    "inventory": "inventory",
    "inv": "inventory",
    "ekwipunek": "inventory",
    "use": "use",
    "uzyj": "use",
    "status": "status",
    "scan": "scan",
    "skan": "scan",
    "skanuj": "scan",
    "map": "map",
    "mapa": "map",
    "help": "help",
    "pomoc": "help",
    "quit": "quit",
    "exit": "quit",
    "wyjdz": "quit",
}

_DIRECTION_ALIASES: Dict[str, str] = {}
for _canonical, _aliases in (
    ("north", ("north", "n", "polnoc", "pn", "p")),
    ("south", ("south", "s", "poludnie", "pd", "d")),
    ("east", ("east", "e", "wschod", "wsch", "w")),
    ("west", ("west", "zachod", "zach", "z")),
):
    for _alias in _aliases:
        _DIRECTION_ALIASES[_alias] = _canonical

_BATTLE_ALIASES: Dict[str, str] = {
    "attack": "attack",
    "a": "attack",
    "atak": "attack",
    "atakuj": "attack",
    "heal": "heal",
    "l": "heal",
    "lecz": "heal",
    "flee": "flee",
    "run": "flee",
    "uciek": "flee",
    "uciekaj": "flee",
    "block": "block",
    "b": "block",
    "blokuj": "block",
    "special": "special",
    "skill": "special",
    "specjalna": "special",
    "umiejetnosc": "special",
}


def normalize(text: str) -> str:
    """Lower-case, trim and strip Polish diacritics."""
    return fold_text(text)


def parse_command(raw: str) -> Command | None:
    """Map a typed line onto a ``Command``; None when the verb is unknown."""
    head, _, rest = raw.strip().partition(" ")
    kind = _COMMAND_ALIASES.get(normalize(head))
    if kind is None:
        return None
    argument = rest.strip()
    if kind == "move":
        argument = _DIRECTION_ALIASES.get(normalize(argument), argument)
    return Command(kind=kind, argument=argument)


def parse_battle_action(raw: str) -> str:
    """Return the canonical combat token, or the cleaned input when unknown."""
    token = normalize(raw)
    return _BATTLE_ALIASES.get(token, token)


def is_decline(raw: str) -> bool:
    return normalize(raw) in {"", "nie", "no", "n", "anuluj", "cancel"}
