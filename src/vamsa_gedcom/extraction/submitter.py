# src/vamsa_gedcom/extraction/submitter.py

from __future__ import annotations

from typing import Mapping, Optional

from vamsa_gedcom.loader.assembler import GedcomFile, Record
from vamsa_gedcom.models import ParsedSubmitter

from .events import notes_under
from .repository import contact_text


def extract_submitter(
    record: Record,
    note_records: Optional[Mapping[str, str]] = None,
) -> ParsedSubmitter:
    """Build a ParsedSubmitter from a SUBM record."""
    if record.tag != "SUBM":
        raise ValueError(f"Expected SUBM record, got {record.tag}")

    return ParsedSubmitter(
        id=record.id,
        name=contact_text(record, "NAME") or "",
        address=contact_text(record, "ADDR"),
        phone=contact_text(record, "PHON"),
        email=contact_text(record, "EMAIL"),
        notes=notes_under(record, 0, note_records),
    )


def header_submitter(file: GedcomFile) -> Optional[ParsedSubmitter]:
    """
    The submitter named by HEAD.SUBM, or None when the header has no
    SUBM pointer or it points at a record that is not in the file.
    """
    found = file.header.direct("SUBM")
    if not found:
        return None

    pointer = file.header.lines[found[0]].pointer_id
    record = file.submitters.get(pointer) if pointer else None
    if record is None:
        return None
    return extract_submitter(record)


__all__ = ["extract_submitter", "header_submitter"]
