# src/vamsa_gedcom/mapping/links.py

from __future__ import annotations

from .entities import EventLink, EventMediaLink, EventSourceLink


def create_event_link(entity_id: str, person_id: str, event_type: str) -> EventLink:
    return EventLink(entity_id=entity_id, person_id=person_id, event_type=event_type)


def create_event_source_link(source_id: str, person_id: str, event_type: str) -> EventSourceLink:
    """Link a source citation to one person's event ("BIRT", "GRAD", "CUSTOM", ...)."""
    return EventSourceLink(entity_id=source_id, person_id=person_id, event_type=event_type)


def create_event_media_link(media_id: str, person_id: str, event_type: str) -> EventMediaLink:
    return EventMediaLink(entity_id=media_id, person_id=person_id, event_type=event_type)


__all__ = ["create_event_link", "create_event_source_link", "create_event_media_link"]
