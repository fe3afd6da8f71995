# src/vamsa_gedcom/extraction/media_object.py

from __future__ import annotations

from typing import Mapping, Optional

from vamsa_gedcom.loader.assembler import Record, RecordKind
from vamsa_gedcom.models import ParsedObject

from .events import child_text, notes_under
from .formats import normalize_format


def extract_object(
    record: Record,
    note_records: Optional[Mapping[str, str]] = None,
) -> ParsedObject:
    """
    Build a ParsedObject from an OBJE record.

    Handles both layouts:

        0 @O1@ OBJE              0 @O1@ OBJE
        1 FILE photo.jpg         1 FILE photo.jpg
        2 FORM jpg               1 FORM jpg
        2 TITL Portrait          1 TITL Portrait

    The FILE value is never rewritten. Notes are joined with newlines
    into the description.
    """
    if record.kind is not RecordKind.OBJECT:
        raise ValueError(f"Expected OBJE record, got {record.tag}")

    file_path = ""
    form: Optional[str] = None
    title: Optional[str] = None

    files = record.direct("FILE")
    if files:
        file_index = files[0]
        file_path = record.text(file_index)
        form = child_text(record, file_index, "FORM")
        title = child_text(record, file_index, "TITL")

    if form is None:
        form = record.first_text("FORM")
    if title is None:
        title = record.first_text("TITL")

    notes = notes_under(record, 0, note_records)

    return ParsedObject(
        id=record.id,
        file_path=file_path,
        format=normalize_format(form),
        title=title.strip() if title and title.strip() else None,
        description="\n".join(notes) if notes else None,
    )


__all__ = ["extract_object"]
