# src/vamsa_gedcom/extraction/individual.py

from __future__ import annotations

from typing import Dict, Mapping, Optional

from vamsa_gedcom.loader.assembler import Record, RecordKind
from vamsa_gedcom.models import ParsedIndividual, ParsedName

from .events import INDIVIDUAL_EVENT_TAGS, child_text, extract_events, first_event, notes_under
from .names import merge_name_parts, parse_name
from .references import direct_pointers

SEX_VALUES = {"M", "F", "X"}
NAME_PART_TAGS = ("GIVN", "SURN", "NSFX", "TYPE")


def _extract_name(record: Record, index: int) -> ParsedName:
    name = parse_name(record.text(index))
    parts: Dict[str, str] = {}
    for tag in NAME_PART_TAGS:
        value = child_text(record, index, tag)
        if value is not None:
            parts[tag] = value
    return merge_name_parts(name, parts) if parts else name


def _extract_sex(record: Record) -> Optional[str]:
    value = record.first_text("SEX")
    if value is None:
        return None
    value = value.strip().upper()
    return value if value in SEX_VALUES else None


def _extract_occupation(record: Record) -> Optional[str]:
    for i in record.direct("OCCU"):
        text = record.text(i).strip()
        if text:
            return text
    return None


def extract_individual(
    record: Record,
    note_records: Optional[Mapping[str, str]] = None,
) -> ParsedIndividual:
    """
    Build a ParsedIndividual from an INDI record.

    Sex outside M/F/X is dropped to None. ``events`` carries every
    recognised individual event; ``birth`` and ``death`` are the first
    BIRT and DEAT among them.
    """
    if record.kind is not RecordKind.INDIVIDUAL:
        raise ValueError(f"Expected INDI record, got {record.tag}")

    events = extract_events(record, INDIVIDUAL_EVENT_TAGS)

    return ParsedIndividual(
        id=record.id,
        names=[_extract_name(record, i) for i in record.direct("NAME")],
        sex=_extract_sex(record),
        birth=first_event(events, "BIRT"),
        death=first_event(events, "DEAT"),
        events=events,
        occupation=_extract_occupation(record),
        notes=notes_under(record, 0, note_records),
        families_as_child=direct_pointers(record, "FAMC"),
        families_as_spouse=direct_pointers(record, "FAMS"),
    )


def raw_sex(record: Record) -> Optional[str]:
    """The SEX value as written, for validation messages."""
    value = record.first_text("SEX")
    return value.strip() if value and value.strip() else None


__all__ = ["extract_individual", "raw_sex"]
