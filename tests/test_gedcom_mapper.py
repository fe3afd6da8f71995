# tests/test_gedcom_mapper.py

from __future__ import annotations

from vamsa_gedcom.identity.uuid_factory import uuid_for_pointer
from vamsa_gedcom.mapping import (
    BROKEN_REFERENCE,
    INVALID_FORMAT,
    MISSING_DATA,
    PARENT,
    SPOUSE,
    GedcomMapper,
    MapOptions,
    map_gedcom_file,
)
from vamsa_gedcom.parser_core import parse_gedcom


def _map(text: str, **options):
    return map_gedcom_file(parse_gedcom(text), MapOptions(**options))


# ---------------------------------------------------------------------------
# Whole files
# ---------------------------------------------------------------------------

def test_family_file_maps_people_and_relationships(parsed) -> None:
    result = map_gedcom_file(parsed("family.ged"))
    assert not result.has_errors
    assert result.warnings == []
    assert len(result.people) == 5

    pid = {k: uuid_for_pointer(k, "INDI") for k in ("I1", "I2", "I3", "I4", "I5")}
    assert [p.id for p in result.people] == [pid[k] for k in ("I1", "I2", "I3", "I4", "I5")]

    spouses = [(r.person_id, r.related_person_id, r.is_active) for r in result.relationships if r.type == SPOUSE]
    assert spouses == [(pid["I1"], pid["I2"], True), (pid["I3"], pid["I4"], False)]

    parents = {(r.person_id, r.related_person_id) for r in result.relationships if r.type == PARENT}
    assert parents == {
        (pid["I1"], pid["I3"]),
        (pid["I2"], pid["I3"]),
        (pid["I3"], pid["I5"]),
        (pid["I4"], pid["I5"]),
    }

    first = result.people[0]
    assert (first.first_name, first.last_name, first.gender) == ("John", "Smith", "MALE")
    assert first.date_of_birth == "1955-01-15"
    assert first.bio == "This is a note"


def test_sources_and_event_source_links(parsed) -> None:
    result = map_gedcom_file(parsed("with_sources.ged"))
    assert not result.has_errors
    assert [s.title for s in result.sources] == [
        "Smith Family Records",
        "Springfield Death Index",
        "Birth Certificate Archive",
    ]
    assert result.sources[1].repository == "Springfield County Archive"

    sid = {k: uuid_for_pointer(k, "SOUR") for k in ("S1", "S2", "S3")}
    i1 = uuid_for_pointer("I1", "INDI")
    i2 = uuid_for_pointer("I2", "INDI")
    links = {(l.source_id, l.person_id, l.event_type) for l in result.source_links}
    assert links == {
        (sid["S1"], i1, "BIRT"),
        (sid["S2"], i1, "DEAT"),
        (sid["S3"], i2, "BIRT"),
        (sid["S1"], i1, "MARR"),
        (sid["S1"], i2, "MARR"),
    }
    assert len(result.source_links) == 5


def test_invalid_objects_are_rejected_and_others_kept(parsed) -> None:
    result = map_gedcom_file(parsed("with_multimedia.ged"))

    assert [o.file_path for o in result.objects] == [
        "photos/robert_young.jpg",
        "/archive/scans/obituary.pdf",
    ]
    assert [(e.type, e.id) for e in result.errors] == [(MISSING_DATA, "O3")]
    assert len(result.warnings) == 1
    assert "Absolute path" in result.warnings[0].message

    # O1 is cited twice under BIRT; O3 was rejected so MARR has no link
    assert [(l.event_type) for l in result.media_links] == ["BIRT", "DEAT"]
    assert len(result.people) == 2


def test_strict_paths_reject_absolute_objects(parsed) -> None:
    f = parsed("with_multimedia.ged")
    result = map_gedcom_file(f, MapOptions(absolute_path_is_error=True))
    assert [o.file_path for o in result.objects] == ["photos/robert_young.jpg"]
    assert sorted((e.type, e.id) for e in result.errors) == [
        (INVALID_FORMAT, "O2"),
        (MISSING_DATA, "O3"),
    ]
    assert [l.event_type for l in result.media_links] == ["BIRT"]


def test_media_base_dir_uses_injected_exists_check(parsed) -> None:
    checked = []

    def exists(path):
        checked.append(path.name)
        return path.name == "robert_young.jpg"

    result = map_gedcom_file(
        parsed("with_multimedia.ged"),
        MapOptions(media_base_dir="/media", file_exists=exists),
    )
    assert checked == ["robert_young.jpg", "obituary.pdf"]
    messages = [w.message for w in result.warnings]
    assert any("File not found" in m for m in messages)
    assert len(result.objects) == 2


def test_mapping_is_deterministic(parsed) -> None:
    f = parsed("with_sources.ged")
    assert map_gedcom_file(f) == map_gedcom_file(f)
    assert map_gedcom_file(f) == map_gedcom_file(parsed("with_sources.ged"))


def test_gedcom_mapper_facade(parsed) -> None:
    f = parsed("with_multimedia.ged")
    strict = GedcomMapper(MapOptions(absolute_path_is_error=True))
    assert len(strict.map_from_gedcom(f).objects) == 1
    assert len(strict.map_from_gedcom(f, MapOptions()).objects) == 2


# ---------------------------------------------------------------------------
# Per-record diagnostics
# ---------------------------------------------------------------------------

def test_broken_reference_is_reported_and_record_still_mapped(make_gedcom) -> None:
    result = _map(
        make_gedcom(
            """
0 @I1@ INDI
1 NAME Ann /Lee/
1 FAMC @F9@
1 BIRT
2 SOUR @S9@
"""
        )
    )
    assert result.errors[0].type == BROKEN_REFERENCE
    assert result.errors[0].id == "I1"
    assert result.errors[0].field == "FAMC"
    assert [e.field for e in result.errors] == ["FAMC", "BIRT.SOUR"]
    assert len(result.people) == 1
    assert result.source_links == []


def test_family_with_missing_members(make_gedcom) -> None:
    result = _map(
        make_gedcom(
            """
0 @I1@ INDI
1 NAME Ann /Lee/
0 @F1@ FAM
1 WIFE @I1@
1 HUSB @I2@
1 CHIL @I3@
"""
        )
    )
    assert [(e.type, e.source, e.field) for e in result.errors] == [
        (BROKEN_REFERENCE, "FAM", "HUSB"),
        (BROKEN_REFERENCE, "FAM", "CHIL"),
    ]
    assert result.relationships == []


def test_ignore_missing_references(make_gedcom) -> None:
    result = _map(
        make_gedcom("0 @I1@ INDI\n1 NAME Ann /Lee/\n1 FAMS @F9@"),
        ignore_missing_references=True,
    )
    assert result.errors == []
    assert len(result.people) == 1


def test_invalid_values_are_format_errors(make_gedcom) -> None:
    text = make_gedcom(
        """
0 @I1@ INDI
1 NAME Ann /Lee/
1 SEX Q
1 BIRT
2 DATE sometime in spring
"""
    )
    result = _map(text)
    assert [(e.type, e.field) for e in result.errors] == [
        (INVALID_FORMAT, "SEX"),
        (INVALID_FORMAT, "BIRT.DATE"),
    ]
    person = result.people[0]
    assert person.gender is None
    assert person.date_of_birth is None

    assert _map(text, skip_validation=True).errors == []


def test_missing_name_warns_and_uses_unknown(make_gedcom) -> None:
    result = _map(make_gedcom("0 @I1@ INDI\n1 SEX F"))
    assert not result.has_errors
    assert [(w.source, w.field) for w in result.warnings] == [("INDI", "NAME")]
    assert result.people[0].first_name == "Unknown"
    assert result.people[0].last_name == "Unknown"


def test_record_without_id_is_missing_data(make_gedcom) -> None:
    result = _map(make_gedcom("0 INDI\n1 NAME Ann /Lee/"))
    assert [e.type for e in result.errors] == [MISSING_DATA]
    assert len(result.people) == 1
    assert result.people[0].id


def test_header_warnings_surface_as_validation_warnings() -> None:
    result = _map("0 HEAD\n0 @I1@ INDI\n1 NAME A /B/\n0 TRLR\n")
    assert [(w.source, w.field) for w in result.warnings] == [("HEAD", "GEDC")]


def test_duplicate_citations_are_linked_once(make_gedcom) -> None:
    result = _map(
        make_gedcom(
            """
0 @I1@ INDI
1 NAME Ann /Lee/
1 BIRT
2 SOUR @S1@
2 SOUR @S1@
1 RESI
2 SOUR @S1@
1 RESI
2 SOUR @S1@
0 @S1@ SOUR
1 TITL Census
"""
        )
    )
    assert [l.event_type for l in result.source_links] == ["BIRT", "RESI"]


def test_couple_in_two_families_has_one_spouse_edge(make_gedcom) -> None:
    result = _map(
        make_gedcom(
            """
0 @I1@ INDI
1 NAME A /B/
0 @I2@ INDI
1 NAME C /D/
0 @F1@ FAM
1 HUSB @I1@
1 WIFE @I2@
0 @F2@ FAM
1 HUSB @I1@
1 WIFE @I2@
"""
        )
    )
    assert [r.type for r in result.relationships] == [SPOUSE]


def test_same_pointer_in_different_kinds_does_not_collide(make_gedcom) -> None:
    result = _map(
        make_gedcom(
            """
0 @X1@ INDI
1 NAME A /B/
1 BIRT
2 SOUR @X1@
0 @X1@ SOUR
1 TITL Shared
"""
        )
    )
    assert result.people[0].id != result.sources[0].id
    assert result.source_links[0].source_id == result.sources[0].id


def test_pointers_differing_only_in_case_get_distinct_ids(make_gedcom) -> None:
    result = _map(
        make_gedcom(
            """
0 @i1@ INDI
1 NAME Lower /Case/
0 @I1@ INDI
1 NAME Upper /Case/
"""
        )
    )
    ids = [p.id for p in result.people]
    assert len(ids) == 2
    assert len(set(ids)) == 2
    assert ids == [uuid_for_pointer("@i1@", "INDI"), uuid_for_pointer("@I1@", "INDI")]
