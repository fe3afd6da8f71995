"""
Diagnostics aggregation for one mapping run.

Errors and warnings are plain values collected next to whatever mapped
successfully; nothing here raises.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from .entities import (
    EventMediaLink,
    EventSourceLink,
    VamsaObject,
    VamsaPerson,
    VamsaRelationship,
    VamsaSource,
)

MISSING_DATA = "missing_data"
INVALID_FORMAT = "invalid_format"
BROKEN_REFERENCE = "broken_reference"

ERROR_TYPES = (MISSING_DATA, INVALID_FORMAT, BROKEN_REFERENCE)


@dataclass(frozen=True)
class MappingError:
    """
    One per-record mapping problem.

    ``source`` is the record tag (INDI, FAM, SOUR, OBJE, HEAD), ``id`` the
    GEDCOM id without delimiters, ``field`` the offending tag path.
    """
    type: str
    source: str
    id: Optional[str]
    field: Optional[str]
    message: str


@dataclass(frozen=True)
class ValidationWarning:
    source: str
    id: Optional[str]
    field: Optional[str]
    message: str


@dataclass
class MappingResult:
    people: List[VamsaPerson] = field(default_factory=list)
    relationships: List[VamsaRelationship] = field(default_factory=list)
    sources: List[VamsaSource] = field(default_factory=list)
    objects: List[VamsaObject] = field(default_factory=list)
    source_links: List[EventSourceLink] = field(default_factory=list)
    media_links: List[EventMediaLink] = field(default_factory=list)
    errors: List[MappingError] = field(default_factory=list)
    warnings: List[ValidationWarning] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    def errors_of(self, error_type: str) -> List[MappingError]:
        return [e for e in self.errors if e.type == error_type]

    def counts(self) -> Dict[str, int]:
        return {
            "people": len(self.people),
            "relationships": len(self.relationships),
            "sources": len(self.sources),
            "objects": len(self.objects),
            "source_links": len(self.source_links),
            "media_links": len(self.media_links),
            "errors": len(self.errors),
            "warnings": len(self.warnings),
        }


class DiagnosticsCollector:
    """
    Accumulates mapped entities and diagnostics for a single run.

    Relationships and links are deduplicated on identity, so a couple
    listed in two FAM records or a source cited twice for the same event
    appears once.
    """

    def __init__(self) -> None:
        self._result = MappingResult()
        self._relationship_ids: set = set()
        self._links: set = set()

    # ---------- entities ----------

    def add_person(self, person: VamsaPerson) -> None:
        self._result.people.append(person)

    def add_source(self, source: VamsaSource) -> None:
        self._result.sources.append(source)

    def add_object(self, obj: VamsaObject) -> None:
        self._result.objects.append(obj)

    def add_relationship(self, rel: VamsaRelationship) -> bool:
        if rel.id in self._relationship_ids:
            return False
        self._relationship_ids.add(rel.id)
        self._result.relationships.append(rel)
        return True

    def add_source_link(self, link: EventSourceLink) -> None:
        if link not in self._links:
            self._links.add(link)
            self._result.source_links.append(link)

    def add_media_link(self, link: EventMediaLink) -> None:
        if link not in self._links:
            self._links.add(link)
            self._result.media_links.append(link)

    # ---------- diagnostics ----------

    def error(
        self,
        error_type: str,
        source: str,
        record_id: Optional[str],
        field_name: Optional[str],
        message: str,
    ) -> MappingError:
        if error_type not in ERROR_TYPES:
            raise ValueError(f"Unknown mapping error type: {error_type!r}")
        err = MappingError(error_type, source, record_id, field_name, message)
        self._result.errors.append(err)
        return err

    def warning(
        self,
        source: str,
        record_id: Optional[str],
        field_name: Optional[str],
        message: str,
    ) -> ValidationWarning:
        warn = ValidationWarning(source, record_id, field_name, message)
        self._result.warnings.append(warn)
        return warn

    def result(self) -> MappingResult:
        return self._result


__all__ = [
    "MISSING_DATA",
    "INVALID_FORMAT",
    "BROKEN_REFERENCE",
    "ERROR_TYPES",
    "MappingError",
    "ValidationWarning",
    "MappingResult",
    "DiagnosticsCollector",
]
