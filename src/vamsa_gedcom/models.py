# src/vamsa_gedcom/models.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Union

UNTITLED_SOURCE = "Untitled Source"


# -----------------------------
# Small atoms
# -----------------------------

@dataclass(slots=True)
class ParsedName:
    """
    GEDCOM NAME substructure.

    ``full`` keeps the raw value ("John /Doe/"); ``given`` and ``surname``
    are None when the corresponding part is absent.
    """
    full: str = ""
    given: Optional[str] = None
    surname: Optional[str] = None
    suffix: Optional[str] = None
    name_type: Optional[str] = None


@dataclass(slots=True)
class ParsedEvent:
    """
    One event sub-tree (BIRT, DEAT, MARR, DIV, ...).

    ``date`` is the raw GEDCOM value, ``date_iso`` its ISO rendering when
    the value could be interpreted. ``sources`` and ``objects`` hold the
    referenced record ids, deduplicated in first-seen order.
    """
    tag: str
    date: Optional[str] = None
    date_iso: Optional[str] = None
    place: Optional[str] = None
    value: Optional[str] = None
    sources: List[str] = field(default_factory=list)
    objects: List[str] = field(default_factory=list)


# -----------------------------
# Records
# -----------------------------

@dataclass(slots=True)
class ParsedIndividual:
    id: Optional[str] = None
    names: List[ParsedName] = field(default_factory=list)
    sex: Optional[str] = None
    birth: Optional[ParsedEvent] = None
    death: Optional[ParsedEvent] = None
    events: List[ParsedEvent] = field(default_factory=list)
    occupation: Optional[str] = None
    notes: List[str] = field(default_factory=list)
    families_as_child: List[str] = field(default_factory=list)
    families_as_spouse: List[str] = field(default_factory=list)

    @property
    def primary_name(self) -> Optional[ParsedName]:
        return self.names[0] if self.names else None

    @property
    def birth_date(self) -> Optional[str]:
        return self.birth.date if self.birth else None

    @property
    def birth_place(self) -> Optional[str]:
        return self.birth.place if self.birth else None

    @property
    def death_date(self) -> Optional[str]:
        return self.death.date if self.death else None

    @property
    def death_place(self) -> Optional[str]:
        return self.death.place if self.death else None


@dataclass(slots=True)
class ParsedFamily:
    id: Optional[str] = None
    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)
    marriage: Optional[ParsedEvent] = None
    divorce: Optional[ParsedEvent] = None
    events: List[ParsedEvent] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)


@dataclass(slots=True)
class ParsedSource:
    """
    SOUR record.

    ``title`` falls back to "Untitled Source"; every other field is None
    when its tag is absent.
    """
    id: Optional[str] = None
    title: str = UNTITLED_SOURCE
    author: Optional[str] = None
    publication: Optional[str] = None
    publication_date: Optional[str] = None
    description: Optional[str] = None
    repository: Optional[str] = None
    notes: List[str] = field(default_factory=list)


@dataclass(slots=True)
class ParsedObject:
    """
    OBJE record.

    ``file_path`` is kept exactly as written, "" when FILE is missing.
    """
    id: Optional[str] = None
    file_path: str = ""
    format: Optional[str] = None
    title: Optional[str] = None
    description: Optional[str] = None


@dataclass(slots=True)
class ParsedRepository:
    """
    REPO record. Address parts may sit under ADDR or at level 1.
    """
    id: Optional[str] = None
    name: str = ""
    address: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    country: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    website: Optional[str] = None
    notes: List[str] = field(default_factory=list)


@dataclass(slots=True)
class ParsedSubmitter:
    id: Optional[str] = None
    name: str = ""
    address: Optional[str] = None
    phone: Optional[str] = None
    email: Optional[str] = None
    notes: List[str] = field(default_factory=list)


ParsedRecord = Union[ParsedIndividual, ParsedFamily, ParsedSource, ParsedObject, ParsedRepository, ParsedSubmitter]


__all__ = [
    "UNTITLED_SOURCE",
    "ParsedName",
    "ParsedEvent",
    "ParsedIndividual",
    "ParsedFamily",
    "ParsedSource",
    "ParsedObject",
    "ParsedRepository",
    "ParsedSubmitter",
    "ParsedRecord",
]
