# src/vamsa_gedcom/loader/assembler.py

"""
Record assembler: groups a flat Line stream into top-level records.

Each level-0 line opens a record; every following line with level >= 1
belongs to it, in source order. A record is built with ``RecordBuilder``
(append, then finalize) and is read-only afterwards. Its tag index maps a
tag to the positions of the record's descendant lines carrying that tag,
so extractors can ask both "any descendant with this tag" and "direct
children of this line".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from vamsa_gedcom.core.exceptions import ParseError

from .tokenizer import Line, strip_xref

DEFAULT_VERSION = "5.5.1"
DEFAULT_CHARSET = "UTF-8"


class RecordKind(str, Enum):
    INDIVIDUAL = "INDI"
    FAMILY = "FAM"
    HEADER = "HEAD"
    TRAILER = "TRLR"
    SOURCE = "SOUR"
    OBJECT = "OBJE"
    OTHER = "OTHER"

    @classmethod
    def for_tag(cls, tag: str) -> "RecordKind":
        """Classify a level-0 tag; anything unrecognised is OTHER."""
        for kind in cls:
            if kind is not cls.OTHER and kind.value == tag:
                return kind
        return cls.OTHER


@dataclass(frozen=True)
class Record:
    """
    One top-level GEDCOM record.

    Attributes:
        kind: Classified record kind.
        lines: All lines of the record; index 0 is the level-0 line.
        parents: For each line, the index of its parent line (None for 0).
        tag_index: tag -> positions in ``lines`` of descendant lines.
        id: The record's xref without '@' delimiters, if any.
    """

    kind: RecordKind
    lines: Tuple[Line, ...]
    parents: Tuple[Optional[int], ...]
    tag_index: Mapping[str, Tuple[int, ...]] = field(repr=False, compare=False)
    id: Optional[str] = None

    # ---------- Identity ----------

    @property
    def tag(self) -> str:
        return self.lines[0].tag

    @property
    def xref(self) -> Optional[str]:
        return self.lines[0].xref

    @property
    def lineno(self) -> int:
        return self.lines[0].lineno

    # ---------- Tag index queries ----------

    def positions(self, tag: str) -> Tuple[int, ...]:
        """Positions of every descendant line with this tag, in source order."""
        return self.tag_index.get(tag.upper(), ())

    def all(self, tag: str) -> List[Line]:
        """Every descendant line with this tag, at any depth."""
        return [self.lines[i] for i in self.positions(tag)]

    def has(self, tag: str) -> bool:
        return bool(self.positions(tag))

    def direct(self, tag: str) -> Tuple[int, ...]:
        """Positions of level-1 lines (direct children of the record) with this tag."""
        return tuple(i for i in self.positions(tag) if self.parents[i] == 0)

    # ---------- Structural queries ----------

    def children(self, index: int, tag: Optional[str] = None) -> List[int]:
        """Positions of direct children of ``lines[index]``, optionally filtered by tag."""
        wanted = tag.upper() if tag else None
        return [
            i
            for i in self.subtree(index)
            if self.parents[i] == index and (wanted is None or self.lines[i].tag == wanted)
        ]

    def first_child(self, index: int, tag: str) -> Optional[int]:
        found = self.children(index, tag)
        return found[0] if found else None

    def subtree(self, index: int) -> range:
        """Positions of all descendants of ``lines[index]`` (contiguous by construction)."""
        level = self.lines[index].level
        end = index + 1
        while end < len(self.lines) and self.lines[end].level > level:
            end += 1
        return range(index + 1, end)

    def iter_subtree_lines(self, index: int) -> Iterator[Line]:
        for i in self.subtree(index):
            yield self.lines[i]

    # ---------- Text ----------

    def text(self, index: int) -> str:
        """
        Value of ``lines[index]`` with its CONT/CONC children folded in.

        CONT appends a newline plus the value; CONC appends the value
        directly. Only direct children count, processed in document order.
        """
        out = self.lines[index].value
        for i in self.children(index):
            child = self.lines[i]
            # an "@...@" looking continuation payload is still text
            piece = child.pointer or child.value
            if child.tag == "CONT":
                out += "\n" + piece
            elif child.tag == "CONC":
                out += piece
        return out

    def first_text(self, tag: str) -> Optional[str]:
        """Resolved text of the first level-1 line with this tag, or None."""
        found = self.direct(tag)
        return self.text(found[0]) if found else None

    def __repr__(self) -> str:  # pragma: no cover - cosmetic
        ident = f" @{self.id}@" if self.id else ""
        return f"<Record {self.kind.value}{ident} lines={len(self.lines)}>"


class RecordBuilder:
    """
    Append-then-finalize builder for a Record.

    Keeps a stack of the open lines (level, position), which identifies the
    parent of every appended line. A line that skips levels (1 then 3)
    attaches to the deepest open line.
    """

    def __init__(self, head: Line):
        if head.level != 0:
            raise ParseError(f"record must start at level 0, got {head.level}", head.lineno)
        self._lines: List[Line] = [head]
        self._parents: List[Optional[int]] = [None]
        self._index: Dict[str, List[int]] = {}
        self._stack: List[Tuple[int, int]] = [(0, 0)]

    @property
    def head(self) -> Line:
        return self._lines[0]

    def append(self, line: Line) -> None:
        if line.level == 0:
            raise ParseError("level-0 line cannot be appended to an open record", line.lineno)

        while self._stack[-1][0] >= line.level:
            self._stack.pop()
        parent = self._stack[-1][1]

        position = len(self._lines)
        self._lines.append(line)
        self._parents.append(parent)
        self._index.setdefault(line.tag, []).append(position)
        self._stack.append((line.level, position))

    def finalize(self) -> Record:
        head = self.head
        return Record(
            kind=RecordKind.for_tag(head.tag),
            lines=tuple(self._lines),
            parents=tuple(self._parents),
            tag_index=MappingProxyType({t: tuple(p) for t, p in self._index.items()}),
            id=strip_xref(head.xref) if head.xref else None,
        )


@dataclass(frozen=True)
class GedcomFile:
    """
    Result of one parse call.

    Attributes:
        header / trailer: The HEAD and TRLR records.
        individuals, families, sources, objects: Records by kind, in file order.
        others: Records with unrecognised level-0 tags (REPO, SUBM, NOTE, ...).
        version: HEAD.GEDC.VERS, default "5.5.1".
        charset: HEAD.CHAR, default "UTF-8".
    """

    header: Record
    trailer: Record
    individuals: Tuple[Record, ...] = ()
    families: Tuple[Record, ...] = ()
    sources: Tuple[Record, ...] = ()
    objects: Tuple[Record, ...] = ()
    others: Tuple[Record, ...] = ()
    version: str = DEFAULT_VERSION
    charset: str = DEFAULT_CHARSET

    def records_of(self, kind: RecordKind) -> Tuple[Record, ...]:
        if kind is RecordKind.HEADER:
            return (self.header,)
        if kind is RecordKind.TRAILER:
            return (self.trailer,)
        return {
            RecordKind.INDIVIDUAL: self.individuals,
            RecordKind.FAMILY: self.families,
            RecordKind.SOURCE: self.sources,
            RecordKind.OBJECT: self.objects,
            RecordKind.OTHER: self.others,
        }[kind]

    def find(self, kind: RecordKind, record_id: str) -> Optional[Record]:
        record_id = strip_xref(record_id)
        for rec in self.records_of(kind):
            if rec.id == record_id:
                return rec
        return None

    def others_with_tag(self, tag: str) -> Tuple[Record, ...]:
        tag = tag.upper()
        return tuple(r for r in self.others if r.tag == tag)

    @property
    def repositories(self) -> Dict[str, Record]:
        return {r.id: r for r in self.others_with_tag("REPO") if r.id}

    @property
    def submitters(self) -> Dict[str, Record]:
        return {r.id: r for r in self.others_with_tag("SUBM") if r.id}

    def counts(self) -> Dict[str, int]:
        return {
            "individuals": len(self.individuals),
            "families": len(self.families),
            "sources": len(self.sources),
            "objects": len(self.objects),
            "others": len(self.others),
        }


# ---------- ASSEMBLY ----------

def assemble_records(lines: Iterable[Line]) -> List[Record]:
    """Group lines into finalized records, in file order."""
    records: List[Record] = []
    current: Optional[RecordBuilder] = None

    for line in lines:
        if line.level == 0:
            if current is not None:
                records.append(current.finalize())
            current = RecordBuilder(line)
        elif current is None:
            raise ParseError(f"level {line.level} line before any level-0 record", line.lineno)
        else:
            current.append(line)

    if current is not None:
        records.append(current.finalize())

    return records


def _header_version(header: Record) -> str:
    gedc = header.direct("GEDC")
    if gedc:
        vers = header.first_child(gedc[0], "VERS")
        if vers is not None and header.lines[vers].value.strip():
            return header.lines[vers].value.strip()
    return DEFAULT_VERSION


def _header_charset(header: Record) -> str:
    charset = header.first_text("CHAR")
    return charset.strip() if charset and charset.strip() else DEFAULT_CHARSET


def assemble(lines: Iterable[Line]) -> GedcomFile:
    """
    Build a GedcomFile from a Line stream.

    Raises:
        ParseError: structural failures (orphan lines, missing HEAD/TRLR,
            duplicate ids within a record kind).
    """
    records = assemble_records(lines)

    header: Optional[Record] = None
    trailer: Optional[Record] = None
    by_kind: Dict[RecordKind, List[Record]] = {k: [] for k in RecordKind}
    seen: Dict[Tuple[RecordKind, str], Record] = {}

    for rec in records:
        if rec.id:
            key = (rec.kind, rec.id)
            if key in seen:
                raise ParseError(
                    f"duplicate {rec.tag} id @{rec.id}@ (first defined on line {seen[key].lineno})",
                    rec.lineno,
                )
            seen[key] = rec

        if rec.kind is RecordKind.HEADER:
            header = header or rec
        elif rec.kind is RecordKind.TRAILER:
            trailer = trailer or rec
        else:
            by_kind[rec.kind].append(rec)

    if header is None:
        raise ParseError("missing required HEAD record")
    if trailer is None:
        raise ParseError("missing required TRLR record")

    return GedcomFile(
        header=header,
        trailer=trailer,
        individuals=tuple(by_kind[RecordKind.INDIVIDUAL]),
        families=tuple(by_kind[RecordKind.FAMILY]),
        sources=tuple(by_kind[RecordKind.SOURCE]),
        objects=tuple(by_kind[RecordKind.OBJECT]),
        others=tuple(by_kind[RecordKind.OTHER]),
        version=_header_version(header),
        charset=_header_charset(header),
    )
