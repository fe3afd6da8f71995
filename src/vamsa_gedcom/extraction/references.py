"""
Cross-reference extraction scoped to event sub-trees.

Only the sub-trees of level-1 lines carrying the event tag are scanned.
Pointer ids are returned without '@' delimiters, in first-seen order, with
exact repeats removed. A missing event or an event without references
yields an empty list.
"""

from __future__ import annotations

from typing import Iterable, List

from vamsa_gedcom.loader.assembler import Record


def unique_in_order(ids: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for i in ids:
        if i not in seen:
            seen.add(i)
            out.append(i)
    return out


def event_references(record: Record, event_tag: str, ref_tag: str) -> List[str]:
    """Pointer ids of ``ref_tag`` lines anywhere below the ``event_tag`` events."""
    ref_tag = ref_tag.upper()
    found: List[str] = []
    for event_index in record.direct(event_tag):
        for line in record.iter_subtree_lines(event_index):
            if line.tag == ref_tag and line.pointer_id:
                found.append(line.pointer_id)
    return unique_in_order(found)


def extract_event_sources(record: Record, event_tag: str) -> List[str]:
    """Source ids cited under an event, e.g. ``extract_event_sources(indi, "BIRT")``."""
    return event_references(record, event_tag, "SOUR")


def extract_event_objects(record: Record, event_tag: str) -> List[str]:
    """Media object ids attached to an event."""
    return event_references(record, event_tag, "OBJE")


def direct_pointers(record: Record, tag: str) -> List[str]:
    """Pointer ids of level-1 lines with this tag (FAMC, FAMS, CHIL, ...)."""
    return unique_in_order(
        record.lines[i].pointer_id
        for i in record.direct(tag)
        if record.lines[i].pointer_id
    )


__all__ = [
    "unique_in_order",
    "event_references",
    "extract_event_sources",
    "extract_event_objects",
    "direct_pointers",
]
