# src/vamsa_gedcom/mapping/source_mapper.py

from __future__ import annotations

from typing import Optional

from vamsa_gedcom.models import ParsedSource

from .notes import join_notes
from .entities import EventSourceLink, VamsaSource
from .links import create_event_source_link


def map_source_to_vamsa(parsed: ParsedSource, explicit_id: Optional[str] = None) -> VamsaSource:
    """
    Field-for-field copy of a ParsedSource.

    ``explicit_id`` is used verbatim; without it the id stays None for the
    storage layer to assign.
    """
    return VamsaSource(
        id=explicit_id,
        title=parsed.title,
        author=parsed.author,
        publication_date=parsed.publication_date,
        description=parsed.description,
        repository=parsed.repository,
        notes=join_notes(parsed.notes),
    )


class SourceMapper:
    def map_to_vamsa(self, parsed: ParsedSource, explicit_id: Optional[str] = None) -> VamsaSource:
        return map_source_to_vamsa(parsed, explicit_id)

    def create_event_source_link(self, source_id: str, person_id: str, event_type: str) -> EventSourceLink:
        return create_event_source_link(source_id, person_id, event_type)


__all__ = ["SourceMapper", "map_source_to_vamsa"]
