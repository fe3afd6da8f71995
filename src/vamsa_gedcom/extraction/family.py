# src/vamsa_gedcom/extraction/family.py

from __future__ import annotations

from typing import Mapping, Optional

from vamsa_gedcom.loader.assembler import Record, RecordKind
from vamsa_gedcom.models import ParsedFamily

from .events import FAMILY_EVENT_TAGS, extract_events, first_event, notes_under
from .references import direct_pointers


def _first_pointer(record: Record, tag: str) -> Optional[str]:
    found = direct_pointers(record, tag)
    return found[0] if found else None


def extract_family(
    record: Record,
    note_records: Optional[Mapping[str, str]] = None,
) -> ParsedFamily:
    """Build a ParsedFamily from a FAM record (HUSB, WIFE, CHIL, events, notes)."""
    if record.kind is not RecordKind.FAMILY:
        raise ValueError(f"Expected FAM record, got {record.tag}")

    events = extract_events(record, FAMILY_EVENT_TAGS)

    return ParsedFamily(
        id=record.id,
        husband=_first_pointer(record, "HUSB"),
        wife=_first_pointer(record, "WIFE"),
        children=direct_pointers(record, "CHIL"),
        marriage=first_event(events, "MARR"),
        divorce=first_event(events, "DIV"),
        events=events,
        notes=notes_under(record, 0, note_records),
    )


__all__ = ["extract_family"]
