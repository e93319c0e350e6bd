"""Flavour text pools."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True, slots=True)
class FlavourDef:
    """Named pool of interchangeable narration lines."""

    id: str
    lines: Tuple[str, ...]
