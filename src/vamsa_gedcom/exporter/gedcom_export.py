"""
Reverse mapping: Vamsa people and relationships to GEDCOM record data.

Families are rebuilt from SPOUSE edges; children join the family whose
couple matches their PARENT edges. Children whose parents never appear as
a couple get a family of their own with just those parents.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, List, Optional, Sequence, Tuple

from vamsa_gedcom.extraction.dates import format_gedcom_date
from vamsa_gedcom.extraction.names import format_name
from vamsa_gedcom.mapping.entities import FEMALE, MALE, OTHER, PARENT, SPOUSE, VamsaPerson, VamsaRelationship

SEX_CODES = {MALE: "M", FEMALE: "F", OTHER: "X"}


@dataclass(slots=True)
class GedcomIndividual:
    xref: str
    name: str
    sex: Optional[str] = None
    birth_date: Optional[str] = None
    birth_place: Optional[str] = None
    death_date: Optional[str] = None
    death_place: Optional[str] = None
    occupation: Optional[str] = None
    notes: List[str] = field(default_factory=list)
    families_as_spouse: List[str] = field(default_factory=list)
    families_as_child: List[str] = field(default_factory=list)
    deceased: bool = False


@dataclass(slots=True)
class GedcomFamily:
    xref: str
    husband: Optional[str] = None
    wife: Optional[str] = None
    children: List[str] = field(default_factory=list)
    marriage_date: Optional[str] = None
    marriage_place: Optional[str] = None
    divorce_date: Optional[str] = None
    notes: List[str] = field(default_factory=list)


def _individual(person: VamsaPerson, xref: str) -> GedcomIndividual:
    return GedcomIndividual(
        xref=xref,
        name=format_name(person.first_name, person.last_name),
        sex=SEX_CODES.get(person.gender or ""),
        birth_date=format_gedcom_date(person.date_of_birth),
        birth_place=person.birth_place,
        death_date=format_gedcom_date(person.date_of_passing),
        death_place=person.death_place,
        occupation=person.profession,
        notes=[person.bio] if person.bio else [],
        deceased=not person.is_living,
    )


def _couple_order(
    a: str,
    b: str,
    genders: Dict[str, Optional[str]],
) -> Tuple[str, str]:
    """(husband, wife) slot assignment; edge order decides when gender does not."""
    if genders.get(a) == FEMALE and genders.get(b) != FEMALE:
        return b, a
    if genders.get(b) == MALE and genders.get(a) != MALE:
        return b, a
    return a, b


def map_to_gedcom(
    people: Sequence[VamsaPerson],
    relationships: Sequence[VamsaRelationship],
) -> Tuple[List[GedcomIndividual], List[GedcomFamily]]:
    """
    Build GEDCOM individuals and families.

    Individuals get xrefs @I1@, @I2@, ... in input order; families @F1@,
    @F2@, ... in relationship order. Edges pointing at unknown people
    are ignored.
    """
    xrefs: Dict[str, str] = {}
    individuals: Dict[str, GedcomIndividual] = {}
    genders: Dict[str, Optional[str]] = {}

    for n, person in enumerate(people, start=1):
        key = person.id or f"anon-{n}"
        xrefs[key] = f"@I{n}@"
        individuals[key] = _individual(person, xrefs[key])
        genders[key] = person.gender

    parents_of: Dict[str, List[str]] = {}
    for rel in relationships:
        if rel.type == PARENT and rel.person_id in xrefs and rel.related_person_id in xrefs:
            parents_of.setdefault(rel.related_person_id, [])
            if rel.person_id not in parents_of[rel.related_person_id]:
                parents_of[rel.related_person_id].append(rel.person_id)

    families: List[GedcomFamily] = []
    by_couple: Dict[FrozenSet[str], GedcomFamily] = {}

    def new_family(members: FrozenSet[str]) -> GedcomFamily:
        fam = GedcomFamily(xref=f"@F{len(families) + 1}@")
        families.append(fam)
        by_couple[members] = fam
        return fam

    for rel in relationships:
        if rel.type != SPOUSE or rel.person_id not in xrefs or rel.related_person_id not in xrefs:
            continue
        members = frozenset((rel.person_id, rel.related_person_id))
        if members in by_couple:
            continue
        husband, wife = _couple_order(rel.person_id, rel.related_person_id, genders)
        fam = new_family(members)
        fam.husband = xrefs[husband]
        fam.wife = xrefs[wife]
        fam.marriage_date = format_gedcom_date(rel.marriage_date)
        fam.marriage_place = rel.marriage_place
        fam.divorce_date = format_gedcom_date(rel.divorce_date)

    for child, parents in parents_of.items():
        members = frozenset(parents[:2])
        fam = by_couple.get(members)
        if fam is None:
            fam = new_family(members)
            pair = parents[:2]
            if len(pair) == 2:
                husband, wife = _couple_order(pair[0], pair[1], genders)
                fam.husband, fam.wife = xrefs[husband], xrefs[wife]
            elif genders.get(pair[0]) == FEMALE:
                fam.wife = xrefs[pair[0]]
            else:
                fam.husband = xrefs[pair[0]]
        fam.children.append(xrefs[child])

    by_xref = {ind.xref: ind for ind in individuals.values()}
    for fam in families:
        for spouse in (fam.husband, fam.wife):
            if spouse:
                by_xref[spouse].families_as_spouse.append(fam.xref)
        for child in fam.children:
            by_xref[child].families_as_child.append(fam.xref)

    return list(individuals.values()), families


__all__ = ["GedcomIndividual", "GedcomFamily", "map_to_gedcom"]
