# src/vamsa_gedcom/mapping/entities.py

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

# Relationship types
PARENT = "PARENT"
SPOUSE = "SPOUSE"

# Gender values
MALE = "MALE"
FEMALE = "FEMALE"
OTHER = "OTHER"

UNKNOWN_NAME = "Unknown"


# -----------------------------
# Persistence-ready records
# -----------------------------

@dataclass(slots=True)
class VamsaPerson:
    id: Optional[str] = None
    first_name: str = UNKNOWN_NAME
    last_name: str = UNKNOWN_NAME
    gender: Optional[str] = None
    date_of_birth: Optional[str] = None
    birth_place: Optional[str] = None
    date_of_passing: Optional[str] = None
    death_place: Optional[str] = None
    profession: Optional[str] = None
    bio: Optional[str] = None
    is_living: bool = True


@dataclass(slots=True)
class VamsaRelationship:
    """
    Relationship edge.

    PARENT is directed: ``person_id`` is the parent, ``related_person_id``
    the child. SPOUSE is stored once per couple.
    """
    id: Optional[str] = None
    person_id: str = ""
    related_person_id: str = ""
    type: str = PARENT
    marriage_date: Optional[str] = None
    marriage_place: Optional[str] = None
    divorce_date: Optional[str] = None
    is_active: bool = True


@dataclass(slots=True)
class VamsaSource:
    id: Optional[str] = None
    title: str = ""
    author: Optional[str] = None
    publication_date: Optional[str] = None
    description: Optional[str] = None
    repository: Optional[str] = None
    notes: Optional[str] = None


@dataclass(slots=True)
class VamsaObject:
    id: Optional[str] = None
    file_path: str = ""
    format: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


# -----------------------------
# Event links
# -----------------------------

@dataclass(frozen=True)
class EventLink:
    """Flat (entity_id, person_id, event_type) triple; event_type is free text."""
    entity_id: str
    person_id: str
    event_type: str


@dataclass(frozen=True)
class EventSourceLink(EventLink):
    @property
    def source_id(self) -> str:
        return self.entity_id


@dataclass(frozen=True)
class EventMediaLink(EventLink):
    @property
    def media_id(self) -> str:
        return self.entity_id


__all__ = [
    "PARENT",
    "SPOUSE",
    "MALE",
    "FEMALE",
    "OTHER",
    "UNKNOWN_NAME",
    "VamsaPerson",
    "VamsaRelationship",
    "VamsaSource",
    "VamsaObject",
    "EventLink",
    "EventSourceLink",
    "EventMediaLink",
]
