# src/vamsa_gedcom/mapping/gedcom_mapper.py

"""
File-level import mapping.

``map_gedcom_file`` turns a parsed GedcomFile into a MappingResult. Every
record is attempted; a problem with one record is reported as a
MappingError and never removes another record's output. Ids come from
``uuid_for_pointer`` so mapping the same file twice gives identical
results.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set

from vamsa_gedcom.extraction.family import extract_family
from vamsa_gedcom.extraction.individual import extract_individual, raw_sex
from vamsa_gedcom.extraction.media_object import extract_object
from vamsa_gedcom.extraction.source import extract_source
from vamsa_gedcom.identity.uuid_factory import deterministic_uuid, uuid_for_pointer
from vamsa_gedcom.loader.assembler import GedcomFile, Record
from vamsa_gedcom.logging import get_logger
from vamsa_gedcom.models import ParsedEvent
from vamsa_gedcom.validation.objects import validate_object
from vamsa_gedcom.validation.structure import ERROR, validate_structure

from .diagnostics import (
    BROKEN_REFERENCE,
    INVALID_FORMAT,
    MISSING_DATA,
    DiagnosticsCollector,
    MappingResult,
)
from .links import create_event_media_link, create_event_source_link
from .object_mapper import map_object_to_vamsa
from .options import MapOptions
from .person_mapper import map_individual_to_vamsa
from .relationship_mapper import map_family_to_relationships
from .source_mapper import map_source_to_vamsa

log = get_logger("gedcom_mapper")

# structure issue code -> mapping error type
_ISSUE_ERROR_TYPES = {"missing_id": MISSING_DATA}


def record_uuid(record: Record) -> str:
    """Stable id for a record: its pointer when it has one, else its position."""
    if record.id:
        return uuid_for_pointer(record.id, record.tag)
    return deterministic_uuid("ANON", record.tag, record.lineno)


class _FileMapper:
    """One mapping run over one file. Not reused between files."""

    def __init__(self, file: GedcomFile, options: MapOptions):
        self.file = file
        self.options = options
        self.out = DiagnosticsCollector()

        self.note_records: Dict[str, str] = {
            r.id: r.text(0) for r in file.others_with_tag("NOTE") if r.id
        }
        self.family_ids: Set[str] = {r.id for r in file.families if r.id}
        self.source_ids: Dict[str, str] = {}
        self.object_ids: Dict[str, str] = {}
        self.rejected_objects: Set[str] = set()
        self.person_ids: Dict[str, str] = {}

    # ---------------------------------------------------------
    # Helpers
    # ---------------------------------------------------------
    @property
    def validating(self) -> bool:
        return not self.options.skip_validation

    def _broken(self, source: str, record_id: Optional[str], field: str, target: str, kind: str) -> None:
        if self.options.ignore_missing_references:
            return
        self.out.error(
            BROKEN_REFERENCE,
            source,
            record_id,
            field,
            f"{source} @{record_id}@ {field} references missing {kind} @{target}@",
        )

    def _check_date(self, source: str, record_id: Optional[str], event: Optional[ParsedEvent]) -> None:
        if not self.validating or event is None or not event.date:
            return
        if event.date_iso is None:
            self.out.error(
                INVALID_FORMAT,
                source,
                record_id,
                f"{event.tag}.DATE",
                f"Unrecognised date {event.date!r}",
            )

    # ---------------------------------------------------------
    # Passes
    # ---------------------------------------------------------
    def structure(self) -> None:
        for issue in validate_structure(self.file):
            # unresolved pointers are reported by the record passes
            if issue.code == "broken_reference":
                continue
            source = issue.record_tag or "HEAD"
            if issue.severity == ERROR:
                error_type = _ISSUE_ERROR_TYPES.get(issue.code, INVALID_FORMAT)
                self.out.error(error_type, source, issue.record_id, issue.field, issue.message)
            else:
                self.out.warning(source, issue.record_id, issue.field, issue.message)

    def sources(self) -> None:
        repositories = self.file.repositories
        for record in self.file.sources:
            parsed = extract_source(record, repositories, self.note_records)
            uid = record_uuid(record)
            self.out.add_source(map_source_to_vamsa(parsed, uid))
            if record.id:
                self.source_ids[record.id] = uid

    def objects(self) -> None:
        opts = self.options
        for record in self.file.objects:
            parsed = extract_object(record, self.note_records)

            if self.validating:
                check = validate_object(
                    parsed,
                    opts.media_base_dir,
                    exists=opts.file_exists,
                    absolute_path_is_error=opts.absolute_path_is_error,
                )
                for message in check.warnings:
                    self.out.warning("OBJE", record.id, "FILE", message)
                if not check.is_valid:
                    error_type = MISSING_DATA if not parsed.file_path.strip() else INVALID_FORMAT
                    for message in check.errors:
                        self.out.error(error_type, "OBJE", record.id, "FILE", message)
                    if record.id:
                        self.rejected_objects.add(record.id)
                    log.debug("Object %s rejected: %s", record.id, "; ".join(check.errors))
                    continue

            uid = record_uuid(record)
            self.out.add_object(map_object_to_vamsa(parsed, uid))
            if record.id:
                self.object_ids[record.id] = uid

    def individuals(self) -> None:
        pending = []
        for record in self.file.individuals:
            parsed = extract_individual(record, self.note_records)
            uid = record_uuid(record)
            self.out.add_person(map_individual_to_vamsa(parsed, uid))
            if record.id:
                self.person_ids[record.id] = uid
            pending.append((record, parsed, uid))

        for record, parsed, uid in pending:
            if self.validating:
                sex = raw_sex(record)
                if sex is not None and parsed.sex is None:
                    self.out.error(INVALID_FORMAT, "INDI", record.id, "SEX", f"Unrecognised sex value {sex!r}")
                for event in parsed.events:
                    self._check_date("INDI", record.id, event)

            for fam in parsed.families_as_child:
                if fam not in self.family_ids:
                    self._broken("INDI", record.id, "FAMC", fam, "FAM")
            for fam in parsed.families_as_spouse:
                if fam not in self.family_ids:
                    self._broken("INDI", record.id, "FAMS", fam, "FAM")

            self._link_events("INDI", record.id, parsed.events, [uid])

    def families(self) -> None:
        for record in self.file.families:
            parsed = extract_family(record, self.note_records)

            members = [("HUSB", parsed.husband), ("WIFE", parsed.wife)]
            members += [("CHIL", c) for c in parsed.children]
            for field, target in members:
                if target and target not in self.person_ids:
                    self._broken("FAM", record.id, field, target, "INDI")

            if self.validating:
                for event in parsed.events:
                    self._check_date("FAM", record.id, event)

            for rel in map_family_to_relationships(parsed, self.person_ids):
                self.out.add_relationship(rel)

            spouses = [self.person_ids[p] for p in (parsed.husband, parsed.wife) if p in self.person_ids]
            self._link_events("FAM", record.id, parsed.events, spouses)

    def _link_events(
        self,
        source: str,
        record_id: Optional[str],
        events: Iterable[ParsedEvent],
        person_ids: List[str],
    ) -> None:
        for event in events:
            for sid in event.sources:
                if sid not in self.source_ids:
                    self._broken(source, record_id, f"{event.tag}.SOUR", sid, "SOUR")
                    continue
                for pid in person_ids:
                    self.out.add_source_link(create_event_source_link(self.source_ids[sid], pid, event.tag))

            for oid in event.objects:
                if oid in self.rejected_objects:
                    continue
                if oid not in self.object_ids:
                    self._broken(source, record_id, f"{event.tag}.OBJE", oid, "OBJE")
                    continue
                for pid in person_ids:
                    self.out.add_media_link(create_event_media_link(self.object_ids[oid], pid, event.tag))

    # ---------------------------------------------------------
    # Run
    # ---------------------------------------------------------
    def run(self) -> MappingResult:
        if self.validating:
            self.structure()
        self.sources()
        self.objects()
        self.individuals()
        self.families()
        return self.out.result()


def map_gedcom_file(file: GedcomFile, options: Optional[MapOptions] = None) -> MappingResult:
    """
    Map every record of ``file`` to Vamsa entities, links and diagnostics.

    Sources and objects are mapped first so event links can be resolved;
    objects failing validation are left out with an error.
    """
    options = options or MapOptions()
    result = _FileMapper(file, options).run()

    log.info(
        "Mapped GEDCOM: %s",
        ", ".join(f"{k}={v}" for k, v in result.counts().items()),
    )
    return result


class GedcomMapper:
    """Object facade over ``map_gedcom_file`` carrying default options."""

    def __init__(self, options: Optional[MapOptions] = None):
        self.options = options or MapOptions()

    def map_from_gedcom(self, file: GedcomFile, options: Optional[MapOptions] = None) -> MappingResult:
        return map_gedcom_file(file, options or self.options)


__all__ = ["GedcomMapper", "map_gedcom_file", "record_uuid"]
