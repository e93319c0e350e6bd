"""Shared CLI rendering helpers."""
from __future__ import annotations

import os
from typing import List, Sequence

from fenrir.domain.world import TileKind
from fenrir.services.events import GameEvent
from fenrir.services.world_service import MapViewEvent

TILE_SYMBOLS = {
    TileKind.EMPTY: ".",
    TileKind.COMBAT: "W",
    TileKind.LOOT: "L",
    TileKind.NPC: "N",
    TileKind.BOSS: "B",
    TileKind.OASIS: "O",
    TileKind.TRAP: "T",
}
UNKNOWN_SYMBOL = "?"
PLAYER_SYMBOL = "@"


def debug_enabled() -> bool:
    """Return True only when FENRIR_DEBUG is explicitly set to '1'."""
    return os.getenv("FENRIR_DEBUG") == "1"


def render_heading(title: str) -> None:
    """Print a consistent section heading."""
    print(f"\n=== {title} ===")


def format_map(view: MapViewEvent) -> List[str]:
    """One string per map row; unknown cells show as '?'."""
    rows = []
    for y in range(view.height):
        symbols = []
        for x in range(view.width):
            if (x, y) == view.position:
                symbols.append(PLAYER_SYMBOL)
            elif (x, y) in view.cells:
                symbols.append(TILE_SYMBOLS[view.cells[(x, y)]])
            else:
                symbols.append(UNKNOWN_SYMBOL)
        rows.append(" ".join(symbols))
    return rows


def render_map(view: MapViewEvent) -> None:
    render_heading("Map")
    for row in format_map(view):
        print(row)
    print(f"Legend: {PLAYER_SYMBOL}=you, {UNKNOWN_SYMBOL}=unknown, " + ", ".join(
        f"{symbol}={kind.value}" for kind, symbol in TILE_SYMBOLS.items()
    ))


def render_events(events: Sequence[GameEvent]) -> None:
    """Print each event's line; maps get their grid."""
    for event in events:
        if isinstance(event, MapViewEvent):
            render_map(event)
        else:
            print(event.describe())


def render_menu(title: str, options: Sequence[str]) -> None:
    """Display a menu section with numbered options."""
    render_heading(title)
    for idx, label in enumerate(options, start=1):
        print(f"{idx}. {label}")
