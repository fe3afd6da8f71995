"""
GEDCOM 5.5.1 text generator.

Writes HEAD, one SUBM, the INDI and FAM records and TRLR. Values longer
than ``max_line_length`` are split with CONC; embedded newlines become
CONT lines, so parsing the output gives back the same text.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence

from vamsa_gedcom.extraction.dates import MONTH_CODES

from .gedcom_export import GedcomFamily, GedcomIndividual

SUBMITTER_XREF = "@SUBM1@"
MIN_LINE_LENGTH = 20


@dataclass(frozen=True)
class GeneratorOptions:
    source_program: str = "vamsa"
    submitter_name: str = "Vamsa User"
    max_line_length: int = 80

    @classmethod
    def from_config(cls, cfg) -> "GeneratorOptions":
        export = cfg.export
        return cls(
            source_program=str(export.get("source_program") or cls.source_program),
            submitter_name=str(export.get("submitter_name") or cls.submitter_name),
            max_line_length=int(export.get("max_line_length") or cls.max_line_length),
        )


def format_line(level: int, tag: str, value: Optional[str] = None, xref: Optional[str] = None) -> str:
    """"<level> [<xref>] <tag> [<value>]"."""
    parts = [str(level)]
    if xref:
        parts.append(xref)
    parts.append(tag)
    line = " ".join(parts)
    if value:
        line += f" {value}"
    return line


class GedcomGenerator:
    def __init__(self, options: Optional[GeneratorOptions] = None, today: Optional[date] = None):
        self.options = options or GeneratorOptions()
        if self.options.max_line_length < MIN_LINE_LENGTH:
            raise ValueError(f"max_line_length must be at least {MIN_LINE_LENGTH}")
        self.today = today

    # ---------------------------------------------------------
    # Public API
    # ---------------------------------------------------------
    def generate(
        self,
        individuals: Sequence[GedcomIndividual],
        families: Sequence[GedcomFamily],
    ) -> str:
        lines: List[str] = []
        lines.extend(self._header())
        lines.extend(self._submitter())
        for individual in individuals:
            lines.extend(self._individual(individual))
        for family in families:
            lines.extend(self._family(family))
        lines.append("0 TRLR")
        return "\n".join(lines) + "\n"

    # ---------------------------------------------------------
    # Records
    # ---------------------------------------------------------
    def _header(self) -> List[str]:
        today = self.today or date.today()
        program = self.options.source_program
        return [
            "0 HEAD",
            format_line(1, "SOUR", program),
            format_line(2, "NAME", program),
            "2 VERS 1.0",
            format_line(1, "DATE", f"{today.day:02d} {MONTH_CODES[today.month - 1]} {today.year}"),
            "1 GEDC",
            "2 VERS 5.5.1",
            "2 FORM LINEAGE-LINKED",
            "1 CHAR UTF-8",
            format_line(1, "SUBM", SUBMITTER_XREF),
        ]

    def _submitter(self) -> List[str]:
        return [
            format_line(0, "SUBM", xref=SUBMITTER_XREF),
            *self.long_line(1, "NAME", self.options.submitter_name),
        ]

    def _event(self, tag: str, event_date: Optional[str], place: Optional[str], flag: bool = False) -> List[str]:
        if not (event_date or place):
            # "1 DEAT Y": the event happened, details unknown
            return [format_line(1, tag, "Y")] if flag else []
        lines = [format_line(1, tag)]
        if event_date:
            lines.append(format_line(2, "DATE", event_date))
        if place:
            lines.extend(self.long_line(2, "PLAC", place))
        return lines

    def _individual(self, ind: GedcomIndividual) -> List[str]:
        lines = [format_line(0, "INDI", xref=ind.xref)]
        lines.extend(self.long_line(1, "NAME", ind.name))
        if ind.sex:
            lines.append(format_line(1, "SEX", ind.sex))
        lines.extend(self._event("BIRT", ind.birth_date, ind.birth_place))
        lines.extend(self._event("DEAT", ind.death_date, ind.death_place, flag=ind.deceased))
        if ind.occupation:
            lines.extend(self.long_line(1, "OCCU", ind.occupation))
        lines.extend(self._notes(ind.notes))
        lines.extend(format_line(1, "FAMS", ref) for ref in ind.families_as_spouse)
        lines.extend(format_line(1, "FAMC", ref) for ref in ind.families_as_child)
        return lines

    def _family(self, fam: GedcomFamily) -> List[str]:
        lines = [format_line(0, "FAM", xref=fam.xref)]
        if fam.husband:
            lines.append(format_line(1, "HUSB", fam.husband))
        if fam.wife:
            lines.append(format_line(1, "WIFE", fam.wife))
        lines.extend(self._event("MARR", fam.marriage_date, fam.marriage_place))
        lines.extend(self._event("DIV", fam.divorce_date, None))
        lines.extend(format_line(1, "CHIL", ref) for ref in fam.children)
        lines.extend(self._notes(fam.notes))
        return lines

    def _notes(self, notes: Iterable[str]) -> List[str]:
        lines: List[str] = []
        for note in notes:
            lines.extend(self.long_line(1, "NOTE", note))
        return lines

    # ---------------------------------------------------------
    # Continuation
    # ---------------------------------------------------------
    def long_line(self, level: int, tag: str, value: Optional[str]) -> List[str]:
        """
        Lines for one value, using CONT for embedded newlines and CONC for
        segments that exceed the line length.
        """
        if not value:
            return [format_line(level, tag)]

        lines: List[str] = []
        for n, segment in enumerate(value.split("\n")):
            line_tag, line_level = (tag, level) if n == 0 else ("CONT", level + 1)
            lines.extend(self._wrap(line_level, line_tag, segment, level + 1))
        return lines

    def _wrap(self, level: int, tag: str, text: str, conc_level: int) -> List[str]:
        room = self.options.max_line_length - len(f"{level} {tag} ")
        if len(text) <= room:
            return [format_line(level, tag, text)]

        lines = [format_line(level, tag, text[:room])]
        rest = text[room:]
        conc_room = self.options.max_line_length - len(f"{conc_level} CONC ")
        while rest:
            lines.append(f"{conc_level} CONC {rest[:conc_room]}")
            rest = rest[conc_room:]
        return lines


__all__ = ["GeneratorOptions", "GedcomGenerator", "format_line"]
