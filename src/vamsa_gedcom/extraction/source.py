# src/vamsa_gedcom/extraction/source.py

from __future__ import annotations

from typing import Mapping, Optional

from vamsa_gedcom.loader.assembler import Record, RecordKind
from vamsa_gedcom.models import UNTITLED_SOURCE, ParsedSource

from .events import child_text, notes_under
from .repository import extract_repository


def _clean(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    text = text.strip()
    return text or None


def _publication_date(record: Record) -> Optional[str]:
    # DATA.DATE, then a level-1 DATE, then the PUBL text itself
    for data in record.direct("DATA"):
        date = child_text(record, data, "DATE")
        if date:
            return date.strip()
    return _clean(record.first_text("DATE")) or _clean(record.first_text("PUBL"))


def _repository(record: Record, repositories: Optional[Mapping[str, Record]]) -> Optional[str]:
    found = record.direct("REPO")
    if not found:
        return None

    line = record.lines[found[0]]
    if line.pointer_id is None:
        return _clean(record.text(found[0]))

    repo = (repositories or {}).get(line.pointer_id)
    if repo is not None:
        name = extract_repository(repo).name
        if name:
            return name
    return line.pointer_id


def _description(record: Record) -> Optional[str]:
    text = record.first_text("TEXT")
    if text is None:
        for data in record.direct("DATA"):
            text = child_text(record, data, "TEXT")
            if text:
                break
    return text if text and text.strip() else None


def extract_source(
    record: Record,
    repositories: Optional[Mapping[str, Record]] = None,
    note_records: Optional[Mapping[str, str]] = None,
) -> ParsedSource:
    """
    Build a ParsedSource from a SOUR record.

    A missing or blank TITL gives "Untitled Source". A REPO pointer is
    resolved to the repository's NAME when ``repositories`` knows it, and
    otherwise kept as the bare id.
    """
    if record.kind is not RecordKind.SOURCE:
        raise ValueError(f"Expected SOUR record, got {record.tag}")

    return ParsedSource(
        id=record.id,
        title=_clean(record.first_text("TITL")) or UNTITLED_SOURCE,
        author=_clean(record.first_text("AUTH")),
        publication=_clean(record.first_text("PUBL")),
        publication_date=_publication_date(record),
        description=_description(record),
        repository=_repository(record, repositories),
        notes=notes_under(record, 0, note_records),
    )


__all__ = ["extract_source"]
