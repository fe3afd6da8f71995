"""
Pedigree traversal over PARENT edges.

Breadth-first with an explicit queue, so deep pedigrees never hit the
recursion limit. Each person is visited once, at the smallest
generation distance; cycles in bad data terminate.
"""

from __future__ import annotations

from collections import defaultdict, deque
from typing import Dict, Iterable, List, Optional, Tuple

from .entities import PARENT, VamsaRelationship

Adjacency = Dict[str, List[str]]


def build_adjacency(relationships: Iterable[VamsaRelationship]) -> Tuple[Adjacency, Adjacency]:
    """(parents_of, children_of) adjacency lists keyed by person id."""
    parents_of: Adjacency = defaultdict(list)
    children_of: Adjacency = defaultdict(list)
    for rel in relationships:
        if rel.type != PARENT:
            continue
        if rel.person_id not in parents_of[rel.related_person_id]:
            parents_of[rel.related_person_id].append(rel.person_id)
        if rel.related_person_id not in children_of[rel.person_id]:
            children_of[rel.person_id].append(rel.related_person_id)
    return parents_of, children_of


def _walk(start: str, adjacency: Adjacency, max_generations: Optional[int]) -> List[Tuple[str, int]]:
    seen = {start}
    found: List[Tuple[str, int]] = []
    queue = deque([(start, 0)])

    while queue:
        person, generation = queue.popleft()
        if max_generations is not None and generation >= max_generations:
            continue
        for nxt in adjacency.get(person, ()):
            if nxt in seen:
                continue
            seen.add(nxt)
            found.append((nxt, generation + 1))
            queue.append((nxt, generation + 1))

    return found


def ancestors(
    person_id: str,
    relationships: Iterable[VamsaRelationship],
    max_generations: Optional[int] = None,
) -> List[Tuple[str, int]]:
    """(ancestor_id, generation) pairs; parents are generation 1."""
    parents_of, _ = build_adjacency(relationships)
    return _walk(person_id, parents_of, max_generations)


def descendants(
    person_id: str,
    relationships: Iterable[VamsaRelationship],
    max_generations: Optional[int] = None,
) -> List[Tuple[str, int]]:
    """(descendant_id, generation) pairs; children are generation 1."""
    _, children_of = build_adjacency(relationships)
    return _walk(person_id, children_of, max_generations)


__all__ = ["ancestors", "descendants", "build_adjacency"]
