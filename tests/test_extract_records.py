# tests/test_extract_records.py

from __future__ import annotations

import pytest

from vamsa_gedcom.extraction import (
    extract_event_objects,
    extract_event_sources,
    extract_family,
    extract_individual,
    extract_object,
    extract_repository,
    extract_source,
    extract_submitter,
    header_submitter,
)
from vamsa_gedcom.models import UNTITLED_SOURCE
from vamsa_gedcom.parser_core import parse_gedcom


# ---------------------------------------------------------------------------
# Individuals
# ---------------------------------------------------------------------------

def test_extract_simple_individual(parsed) -> None:
    indi = extract_individual(parsed("simple_person.ged").individuals[0])
    assert indi.id == "I1"
    assert indi.primary_name.given == "John"
    assert indi.primary_name.surname == "Smith"
    assert indi.sex == "M"
    assert indi.birth_date == "15 JAN 1985"
    assert indi.birth.date_iso == "1985-01-15"
    assert indi.birth_place == "New York, NY"
    assert indi.death is None
    assert indi.death_date is None
    assert indi.occupation == "Engineer"
    assert indi.notes == ["Professional bio"]


def test_extract_individual_family_pointers(parsed) -> None:
    f = parsed("family.ged")
    i3 = extract_individual(f.individuals[2])
    assert i3.families_as_child == ["F1"]
    assert i3.families_as_spouse == ["F2"]


def test_individual_events_and_unknown_sex(make_gedcom) -> None:
    f = parse_gedcom(
        make_gedcom(
            """
0 @I1@ INDI
1 NAME A /B/
1 NAME Alias /B/
2 TYPE aka
1 SEX U
1 RESI
2 PLAC Paris
1 EVEN
2 TYPE Graduation party
1 DEAT Y
"""
        )
    )
    indi = extract_individual(f.individuals[0])
    assert indi.sex is None
    assert [n.name_type for n in indi.names] == [None, "aka"]
    assert [e.tag for e in indi.events] == ["RESI", "EVEN", "DEAT"]
    assert indi.events[1].value == "Graduation party"
    assert indi.death.value == "Y"
    assert indi.death.date is None


def test_pointer_notes_resolve_through_note_records(make_gedcom) -> None:
    f = parse_gedcom(
        make_gedcom(
            """
0 @I1@ INDI
1 NOTE @N1@
1 NOTE @N404@
1 NOTE
0 @N1@ NOTE Shared note
1 CONT second line
"""
        )
    )
    notes = {r.id: r.text(0) for r in f.others_with_tag("NOTE")}
    indi = extract_individual(f.individuals[0], notes)
    assert indi.notes == ["Shared note\nsecond line"]


def test_extractors_reject_wrong_record_kind(parsed) -> None:
    f = parsed("family.ged")
    with pytest.raises(ValueError):
        extract_individual(f.families[0])
    with pytest.raises(ValueError):
        extract_family(f.individuals[0])


# ---------------------------------------------------------------------------
# Families
# ---------------------------------------------------------------------------

def test_extract_family(parsed) -> None:
    f = parsed("family.ged")
    f1 = extract_family(f.families[0])
    assert (f1.husband, f1.wife, f1.children) == ("I1", "I2", ["I3"])
    assert f1.marriage.date_iso == "1983-06-10"
    assert f1.marriage.place == "Boston, MA"
    assert f1.divorce is None

    f2 = extract_family(f.families[1])
    assert f2.divorce.date_iso == "2020-01-01"
    assert [e.tag for e in f2.events] == ["MARR", "DIV"]


# ---------------------------------------------------------------------------
# Sources
# ---------------------------------------------------------------------------

def test_extract_sources(parsed) -> None:
    f = parsed("with_sources.ged")
    s1, s2, s3 = (extract_source(r, f.repositories) for r in f.sources)

    assert s1.id == "S1"
    assert s1.title == "Smith Family Records"
    assert s1.author == "John Doe"
    assert s1.publication_date == "2015"
    assert s1.repository == "Family Archives"
    assert s1.notes == ["Original documents held in the Smith family\ncollection, Springfield."]

    assert s2.publication_date == "1 JAN 2012"
    assert s2.repository == "Springfield County Archive"

    assert s3.author == "New York State"
    assert s3.publication_date == "Official Records"
    assert s3.repository is None
    assert s3.notes == []


def test_source_repository_pointer_without_record_keeps_id(parsed) -> None:
    f = parsed("with_sources.ged")
    s2 = extract_source(f.sources[1])
    assert s2.repository == "R1"


def test_source_defaults(make_gedcom) -> None:
    f = parse_gedcom(
        make_gedcom(
            """
0 @S1@ SOUR
1 TITL
1 TEXT Transcribed
2 CONC  text
"""
        )
    )
    src = extract_source(f.sources[0])
    assert src.title == UNTITLED_SOURCE
    assert src.author is None
    assert src.publication_date is None
    assert src.description == "Transcribed text"


# ---------------------------------------------------------------------------
# Media objects
# ---------------------------------------------------------------------------

def test_extract_object_with_nested_form_and_title(parsed) -> None:
    f = parsed("with_multimedia.ged")
    o1 = extract_object(f.objects[0])
    assert o1.id == "O1"
    assert o1.file_path == "photos/robert_young.jpg"
    assert o1.format == "JPEG"
    assert o1.title == "Young Robert Portrait"
    assert o1.description == "Taken at the county fair\nRestored in 2001"


def test_extract_object_with_sibling_form(parsed) -> None:
    f = parsed("with_multimedia.ged")
    o2 = extract_object(f.objects[1])
    assert o2.file_path == "/archive/scans/obituary.pdf"
    assert o2.format == "PDF"
    assert o2.title == "Obituary"
    assert o2.description is None

    o3 = extract_object(f.objects[2])
    assert o3.file_path == ""
    assert o3.title == "Orphan Object"


def test_extract_object_without_file(make_gedcom) -> None:
    f = parse_gedcom(make_gedcom("0 @O1@ OBJE\n1 TITL Lost"))
    obj = extract_object(f.objects[0])
    assert obj.file_path == ""
    assert obj.format is None


def test_object_file_path_is_kept_verbatim(make_gedcom) -> None:
    f = parse_gedcom(make_gedcom("0 @O1@ OBJE\n1 FILE C:\\Photos\\Family Portrait.JPG"))
    assert extract_object(f.objects[0]).file_path == "C:\\Photos\\Family Portrait.JPG"


# ---------------------------------------------------------------------------
# Event references
# ---------------------------------------------------------------------------

def test_event_sources_are_scoped_to_the_event(parsed) -> None:
    f = parsed("with_sources.ged")
    i1 = f.individuals[0]
    assert extract_event_sources(i1, "BIRT") == ["S1"]
    assert extract_event_sources(i1, "DEAT") == ["S2"]
    assert extract_event_sources(i1, "BURI") == []
    assert extract_event_sources(f.families[0], "MARR") == ["S1"]


def test_event_objects_are_deduplicated(parsed) -> None:
    f = parsed("with_multimedia.ged")
    i1 = f.individuals[0]
    assert extract_event_objects(i1, "BIRT") == ["O1"]
    assert extract_event_objects(i1, "DEAT") == ["O2"]
    assert extract_event_objects(f.individuals[1], "BIRT") == []


def test_event_references_across_repeated_events(make_gedcom) -> None:
    f = parse_gedcom(
        make_gedcom(
            """
0 @I1@ INDI
1 RESI
2 SOUR @S2@
1 RESI
2 SOUR @S1@
3 OBJE @O1@
2 SOUR @S2@
1 SOUR @S9@
"""
        )
    )
    indi = f.individuals[0]
    assert extract_event_sources(indi, "RESI") == ["S2", "S1"]
    assert extract_event_objects(indi, "RESI") == ["O1"]


# ---------------------------------------------------------------------------
# Repositories and submitters
# ---------------------------------------------------------------------------

SUBMITTED_FILE = """0 HEAD
1 SOUR MyApp
1 SUBM @U1@
1 GEDC
2 VERS 5.5.1
1 CHAR UTF-8
0 @R1@ REPO
1 NAME Springfield County Archive
1 ADDR 12 Main Street
2 CONT Suite 4
2 CITY Springfield
2 STAE IL
2 CTRY USA
1 PHON +1 555 0100
1 EMAIL archive@example.org
1 WWW https://archive.example.org
1 NOTE Open weekdays
1 NOTE @N1@
0 @U1@ SUBM
1 NAME Jane Archivist
1 ADDR 7 Elm Road
1 PHON 555-0199
1 EMAIL jane@example.org
0 @N1@ NOTE Appointments only
0 TRLR
"""


def test_extract_repository() -> None:
    f = parse_gedcom(SUBMITTED_FILE)
    notes = {r.id: r.text(0) for r in f.others_with_tag("NOTE")}
    repo = extract_repository(f.repositories["R1"], notes)

    assert repo.id == "R1"
    assert repo.name == "Springfield County Archive"
    assert repo.address == "12 Main Street\nSuite 4"
    assert (repo.city, repo.state, repo.country) == ("Springfield", "IL", "USA")
    assert repo.phone == "+1 555 0100"
    assert repo.email == "archive@example.org"
    assert repo.website == "https://archive.example.org"
    assert repo.notes == ["Open weekdays", "Appointments only"]


def test_repository_with_level_one_address_parts(make_gedcom) -> None:
    f = parse_gedcom(
        make_gedcom(
            """
0 @R2@ REPO
1 CITY Leeds
1 CTRY England
"""
        )
    )
    repo = extract_repository(f.repositories["R2"])
    assert repo.name == ""
    assert repo.address is None
    assert (repo.city, repo.country) == ("Leeds", "England")
    assert repo.notes == []


def test_extract_submitter() -> None:
    f = parse_gedcom(SUBMITTED_FILE)
    subm = extract_submitter(f.submitters["U1"])

    assert subm.id == "U1"
    assert subm.name == "Jane Archivist"
    assert subm.address == "7 Elm Road"
    assert subm.phone == "555-0199"
    assert subm.email == "jane@example.org"
    assert subm.notes == []


def test_header_submitter_follows_head_pointer(make_gedcom) -> None:
    assert header_submitter(parse_gedcom(SUBMITTED_FILE)).name == "Jane Archivist"
    assert header_submitter(parse_gedcom(make_gedcom("0 @U1@ SUBM\n1 NAME Nobody"))) is None


def test_contact_extractors_reject_other_records() -> None:
    f = parse_gedcom(SUBMITTED_FILE)
    with pytest.raises(ValueError):
        extract_repository(f.submitters["U1"])
    with pytest.raises(ValueError):
        extract_submitter(f.repositories["R1"])
