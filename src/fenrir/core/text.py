"""Text folding for player-typed names and commands."""
from __future__ import annotations

_DIACRITICS = str.maketrans("ąćęłńóśżź", "acelnoszz")


def fold_text(text: str) -> str:
    """Trim, casefold and strip Polish diacritics so typed input matches either spelling."""
    return text.strip().casefold().translate(_DIACRITICS)
