"""
Whole-file structural checks.

Issues are returned as values, never raised. Severity "error" marks
problems an importer should refuse; "warning" marks legal but suspicious
content.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Optional, Set

from vamsa_gedcom.extraction.events import FAMILY_EVENT_TAGS, INDIVIDUAL_EVENT_TAGS
from vamsa_gedcom.extraction.references import event_references
from vamsa_gedcom.loader.assembler import GedcomFile, Record

SUPPORTED_VERSION_PREFIX = "5.5"
KNOWN_CHARSETS = {"UTF-8", "UNICODE", "ASCII", "ANSI", "ANSEL"}

ERROR = "error"
WARNING = "warning"


@dataclass(frozen=True)
class StructureIssue:
    severity: str
    code: str
    message: str
    record_tag: Optional[str] = None
    record_id: Optional[str] = None
    field: Optional[str] = None
    target: Optional[str] = None
    lineno: Optional[int] = None


def _ids(records: Iterable[Record]) -> Set[str]:
    return {r.id for r in records if r.id}


def _check_header(file: GedcomFile) -> List[StructureIssue]:
    issues: List[StructureIssue] = []
    header = file.header

    if not header.direct("GEDC"):
        issues.append(StructureIssue(
            WARNING, "missing_version", "HEAD has no GEDC.VERS; assuming 5.5.1",
            record_tag="HEAD", field="GEDC", lineno=header.lineno,
        ))
    elif not file.version.startswith(SUPPORTED_VERSION_PREFIX):
        issues.append(StructureIssue(
            WARNING, "unsupported_version", f"GEDCOM version {file.version} is not 5.5.x",
            record_tag="HEAD", field="GEDC.VERS", lineno=header.lineno,
        ))

    if file.charset.upper() not in KNOWN_CHARSETS:
        issues.append(StructureIssue(
            WARNING, "unknown_charset", f"Unrecognised character set {file.charset}",
            record_tag="HEAD", field="CHAR", lineno=header.lineno,
        ))
    return issues


def _broken(record: Record, field: str, target: str, kind: str) -> StructureIssue:
    return StructureIssue(
        ERROR,
        "broken_reference",
        f"{record.tag} @{record.id}@ {field} points to missing {kind} @{target}@",
        record_tag=record.tag,
        record_id=record.id,
        field=field,
        target=target,
        lineno=record.lineno,
    )


def _check_pointers(
    record: Record,
    tags: Iterable[str],
    known: Set[str],
    kind: str,
) -> List[StructureIssue]:
    issues: List[StructureIssue] = []
    for tag in tags:
        for i in record.direct(tag):
            target = record.lines[i].pointer_id
            if target and target not in known:
                issues.append(_broken(record, tag, target, kind))
    return issues


def _check_event_citations(
    record: Record,
    event_tags: Iterable[str],
    sources: Set[str],
    objects: Set[str],
) -> List[StructureIssue]:
    issues: List[StructureIssue] = []
    for event_tag in event_tags:
        for target in event_references(record, event_tag, "SOUR"):
            if target not in sources:
                issues.append(_broken(record, f"{event_tag}.SOUR", target, "SOUR"))
        for target in event_references(record, event_tag, "OBJE"):
            if target not in objects:
                issues.append(_broken(record, f"{event_tag}.OBJE", target, "OBJE"))
    return issues


def validate_structure(file: GedcomFile) -> List[StructureIssue]:
    """
    Check header metadata, record ids, names and cross-references.

    Every HUSB/WIFE/CHIL, FAMC/FAMS and event-level SOUR/OBJE pointer must
    resolve to a record of the matching kind.
    """
    issues = _check_header(file)

    individuals = _ids(file.individuals)
    families = _ids(file.families)
    sources = _ids(file.sources)
    objects = _ids(file.objects)

    for record in (*file.individuals, *file.families, *file.sources, *file.objects):
        if not record.id:
            issues.append(StructureIssue(
                ERROR, "missing_id", f"{record.tag} record without cross-reference id",
                record_tag=record.tag, lineno=record.lineno,
            ))

    for record in file.individuals:
        if not record.direct("NAME"):
            issues.append(StructureIssue(
                WARNING, "missing_name", f"INDI @{record.id}@ has no NAME",
                record_tag="INDI", record_id=record.id, field="NAME", lineno=record.lineno,
            ))
        issues.extend(_check_pointers(record, ("FAMC", "FAMS"), families, "FAM"))
        issues.extend(_check_event_citations(record, INDIVIDUAL_EVENT_TAGS, sources, objects))

    for record in file.families:
        issues.extend(_check_pointers(record, ("HUSB", "WIFE", "CHIL"), individuals, "INDI"))
        issues.extend(_check_event_citations(record, FAMILY_EVENT_TAGS, sources, objects))

    return issues


def has_errors(issues: Iterable[StructureIssue]) -> bool:
    return any(i.severity == ERROR for i in issues)


__all__ = ["ERROR", "WARNING", "StructureIssue", "validate_structure", "has_errors"]
