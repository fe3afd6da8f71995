# src/vamsa_gedcom/mapping/notes.py

from __future__ import annotations

from typing import List, Optional, Sequence


def join_notes(notes: Sequence[str]) -> Optional[str]:
    """Notes joined with newlines; no notes at all gives None, not ""."""
    return "\n".join(notes) if notes else None


def split_notes(text: Optional[str]) -> List[str]:
    """Inverse of ``join_notes``."""
    return text.split("\n") if text is not None else []
