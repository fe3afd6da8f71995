# src/vamsa_gedcom/extraction/events.py

from __future__ import annotations

from typing import Iterable, List, Mapping, Optional

from vamsa_gedcom.loader.assembler import Record
from vamsa_gedcom.models import ParsedEvent

from .dates import parse_date
from .references import unique_in_order


# ---------------------------------------------------------------------------
# Event Tag Definitions (GEDCOM 5.5.1)
# ---------------------------------------------------------------------------

INDIVIDUAL_EVENT_TAGS = (
    "BIRT", "CHR", "CHRA", "BAPM", "BARM", "BASM", "BLES",
    "ADOP", "CONF", "FCOM", "GRAD", "ORDN", "EMIG", "IMMI",
    "NATU", "CENS", "PROB", "WILL", "RETI", "RESI", "DEAT",
    "BURI", "CREM", "EVEN",
)

FAMILY_EVENT_TAGS = (
    "MARR", "MARB", "MARC", "MARL", "MARS",
    "ENGA", "ANUL", "DIV", "DIVF", "CENS", "EVEN",
)


# ---------------------------------------------------------------------------
# Text helpers shared by the record extractors
# ---------------------------------------------------------------------------

def child_text(record: Record, index: int, tag: str) -> Optional[str]:
    """Resolved text of the first direct child with this tag; None when absent or blank."""
    child = record.first_child(index, tag)
    if child is None:
        return None
    text = record.text(child)
    return text if text.strip() else None


def notes_under(
    record: Record,
    index: int = 0,
    note_records: Optional[Mapping[str, str]] = None,
) -> List[str]:
    """
    Non-empty NOTE texts directly under ``lines[index]``, in document order.

    A pointer NOTE ("1 NOTE @N1@") is resolved through ``note_records``
    (NOTE record id -> text) and skipped when it cannot be resolved.
    """
    notes: List[str] = []
    for i in record.children(index, "NOTE"):
        line = record.lines[i]
        if line.pointer_id:
            text = (note_records or {}).get(line.pointer_id, "")
        else:
            text = record.text(i)
        if text.strip():
            notes.append(text)
    return notes


# ---------------------------------------------------------------------------
# Events
# ---------------------------------------------------------------------------

def extract_event(record: Record, index: int) -> ParsedEvent:
    """Build a ParsedEvent from the event line at ``lines[index]``."""
    line = record.lines[index]
    date = child_text(record, index, "DATE")

    sources: List[str] = []
    objects: List[str] = []
    for sub in record.iter_subtree_lines(index):
        if sub.pointer_id and sub.tag == "SOUR":
            sources.append(sub.pointer_id)
        elif sub.pointer_id and sub.tag == "OBJE":
            objects.append(sub.pointer_id)

    event_type = child_text(record, index, "TYPE")
    value = record.text(index).strip() or event_type

    return ParsedEvent(
        tag=line.tag,
        date=date.strip() if date else None,
        date_iso=parse_date(date),
        place=child_text(record, index, "PLAC"),
        value=value or None,
        sources=unique_in_order(sources),
        objects=unique_in_order(objects),
    )


def extract_events(record: Record, tags: Iterable[str]) -> List[ParsedEvent]:
    """Every level-1 event with one of ``tags``, in document order."""
    wanted = set(tags)
    return [
        extract_event(record, i)
        for i in range(1, len(record.lines))
        if record.parents[i] == 0 and record.lines[i].tag in wanted
    ]


def first_event(events: List[ParsedEvent], tag: str) -> Optional[ParsedEvent]:
    for event in events:
        if event.tag == tag:
            return event
    return None


__all__ = [
    "INDIVIDUAL_EVENT_TAGS",
    "FAMILY_EVENT_TAGS",
    "child_text",
    "notes_under",
    "extract_event",
    "extract_events",
    "first_event",
]
