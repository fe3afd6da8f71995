# src/vamsa_gedcom/mapping/person_mapper.py

from __future__ import annotations

from typing import Optional

from vamsa_gedcom.models import ParsedIndividual

from .notes import join_notes
from .entities import FEMALE, MALE, OTHER, UNKNOWN_NAME, VamsaPerson

GENDER_MAP = {"M": MALE, "F": FEMALE, "X": OTHER}


def map_individual_to_vamsa(parsed: ParsedIndividual, explicit_id: Optional[str] = None) -> VamsaPerson:
    """
    Map a ParsedIndividual to a VamsaPerson.

    The first NAME supplies the name parts ("Unknown" where a part is
    missing). Dates are the ISO renderings of BIRT/DEAT; a person with a
    death event is not living.
    """
    name = parsed.primary_name
    birth = parsed.birth
    death = parsed.death

    return VamsaPerson(
        id=explicit_id,
        first_name=(name.given if name and name.given else UNKNOWN_NAME),
        last_name=(name.surname if name and name.surname else UNKNOWN_NAME),
        gender=GENDER_MAP.get(parsed.sex or ""),
        date_of_birth=birth.date_iso if birth else None,
        birth_place=birth.place if birth else None,
        date_of_passing=death.date_iso if death else None,
        death_place=death.place if death else None,
        profession=parsed.occupation,
        bio=join_notes(parsed.notes),
        is_living=death is None,
    )


class PersonMapper:
    def map_to_vamsa(self, parsed: ParsedIndividual, explicit_id: Optional[str] = None) -> VamsaPerson:
        return map_individual_to_vamsa(parsed, explicit_id)


__all__ = ["GENDER_MAP", "PersonMapper", "map_individual_to_vamsa"]
