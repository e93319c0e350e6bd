"""NPC definition structures."""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class NpcKind(str, Enum):
    TRADER = "trader"
    BLESSING = "blessing"
    STORY = "story"
    HINT = "hint"


@dataclass(frozen=True, slots=True)
class NpcDef:
    """A one-shot wasteland encounter."""

    id: str
    name: str
    kind: NpcKind
    greeting: str
