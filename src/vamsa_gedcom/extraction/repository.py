# src/vamsa_gedcom/extraction/repository.py

from __future__ import annotations

from typing import Mapping, Optional

from vamsa_gedcom.loader.assembler import Record
from vamsa_gedcom.models import ParsedRepository

from .events import notes_under


def contact_text(record: Record, tag: str) -> Optional[str]:
    """
    Stripped text of the first line with this tag at any depth.

    CITY, STAE, CTRY and friends usually sit under ADDR but some exports
    write them at level 1, so both are accepted.
    """
    found = record.positions(tag)
    if not found:
        return None
    text = record.text(found[0]).strip()
    return text or None


def extract_repository(
    record: Record,
    note_records: Optional[Mapping[str, str]] = None,
) -> ParsedRepository:
    """
    Build a ParsedRepository from a REPO record.

    ADDR keeps its CONT lines, so a multi-line address comes back with
    newlines. A missing NAME gives "".
    """
    if record.tag != "REPO":
        raise ValueError(f"Expected REPO record, got {record.tag}")

    return ParsedRepository(
        id=record.id,
        name=contact_text(record, "NAME") or "",
        address=contact_text(record, "ADDR"),
        city=contact_text(record, "CITY"),
        state=contact_text(record, "STAE"),
        country=contact_text(record, "CTRY"),
        phone=contact_text(record, "PHON"),
        email=contact_text(record, "EMAIL"),
        website=contact_text(record, "WWW"),
        notes=notes_under(record, 0, note_records),
    )


__all__ = ["contact_text", "extract_repository"]
