# src/vamsa_gedcom/mapping/relationship_mapper.py

from __future__ import annotations

from typing import List, Mapping

from vamsa_gedcom.identity.uuid_factory import uuid_for_relationship
from vamsa_gedcom.models import ParsedFamily

from .entities import PARENT, SPOUSE, VamsaRelationship


def map_family_to_relationships(
    parsed: ParsedFamily,
    id_map: Mapping[str, str],
) -> List[VamsaRelationship]:
    """
    Relationship edges for one family.

    ``id_map`` maps GEDCOM individual ids to person ids; members missing
    from it are skipped (the caller reports them). Produces one SPOUSE
    edge (husband -> wife) when both spouses resolve, then one PARENT edge
    per resolved parent and child.
    """
    husband = id_map.get(parsed.husband) if parsed.husband else None
    wife = id_map.get(parsed.wife) if parsed.wife else None
    parents = [p for p in (husband, wife) if p]
    children = [id_map[c] for c in parsed.children if c in id_map]

    edges: List[VamsaRelationship] = []

    if husband and wife:
        marriage = parsed.marriage
        divorce = parsed.divorce
        edges.append(VamsaRelationship(
            id=uuid_for_relationship(SPOUSE, husband, wife),
            person_id=husband,
            related_person_id=wife,
            type=SPOUSE,
            marriage_date=marriage.date_iso if marriage else None,
            marriage_place=marriage.place if marriage else None,
            divorce_date=divorce.date_iso if divorce else None,
            is_active=divorce is None,
        ))

    for child in children:
        for parent in parents:
            edges.append(VamsaRelationship(
                id=uuid_for_relationship(PARENT, parent, child),
                person_id=parent,
                related_person_id=child,
                type=PARENT,
            ))

    return edges


__all__ = ["map_family_to_relationships"]
