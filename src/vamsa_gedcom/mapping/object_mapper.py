# src/vamsa_gedcom/mapping/object_mapper.py

from __future__ import annotations

from typing import Optional

from vamsa_gedcom.models import ParsedObject

from .entities import EventMediaLink, VamsaObject
from .links import create_event_media_link


def map_object_to_vamsa(parsed: ParsedObject, explicit_id: Optional[str] = None) -> VamsaObject:
    """Field-for-field copy; the file path and format are carried unchanged."""
    return VamsaObject(
        id=explicit_id,
        file_path=parsed.file_path,
        format=parsed.format,
        title=parsed.title,
        description=parsed.description,
    )


class ObjectMapper:
    def map_to_vamsa(self, parsed: ParsedObject, explicit_id: Optional[str] = None) -> VamsaObject:
        return map_object_to_vamsa(parsed, explicit_id)

    def create_event_media_link(self, media_id: str, person_id: str, event_type: str) -> EventMediaLink:
        return create_event_media_link(media_id, person_id, event_type)


__all__ = ["ObjectMapper", "map_object_to_vamsa"]
