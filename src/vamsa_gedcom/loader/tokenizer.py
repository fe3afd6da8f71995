# src/vamsa_gedcom/loader/tokenizer.py

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Union

from vamsa_gedcom.core.exceptions import ParseError


@dataclass(frozen=True)
class Line:
    """
    A single GEDCOM line token.

    Attributes:
        lineno: 1-based line number in the original text.
        level: Parsed GEDCOM level (0, 1, 2, ...).
        tag: GEDCOM tag, e.g. "INDI", "NAME", "CONC", "CONT".
        xref: Optional identifier of this line, e.g. "@I1@" on "0 @I1@ INDI".
        value: The line payload after the tag (may be empty). Whitespace
            inside and at the end of the payload is preserved.
        pointer: Cross-reference carried by the payload, e.g. "@S1@" on
            "3 SOUR @S1@". When set, ``value`` is "".
        raw: The original line content without trailing newline characters.
    """
    lineno: int
    level: int
    tag: str
    xref: Optional[str] = None
    value: str = ""
    pointer: Optional[str] = None
    raw: str = ""

    @property
    def pointer_id(self) -> Optional[str]:
        """The pointer without its '@' delimiters ("@S1@" -> "S1")."""
        return strip_xref(self.pointer) if self.pointer else None


def strip_xref(xref: str) -> str:
    return xref.strip().strip("@")


def is_xref(token: str) -> bool:
    """True for a single '@...@' token such as "@I1@" (no inner '@')."""
    return (
        len(token) > 2
        and token.startswith("@")
        and token.endswith("@")
        and "@" not in token[1:-1]
    )


def _strip_eol(line: str) -> str:
    """Strip trailing CR/LF characters but preserve all other whitespace."""
    return line.rstrip("\r\n")


def tokenize_line(line: str, lineno: int = 0) -> Line:
    """
    Parse a single GEDCOM line into a Line.

    Required order:
        <level> [<xref>] <tag> [<value>]

    Examples:
        "0 HEAD"
        "0 @I1@ INDI"
        "1 NAME John /Doe/"
        "2 SOUR @S1@"

    Raises:
        ParseError: missing/non-numeric level, missing tag, or a malformed
            xref. GEDCOM nesting depends on correct levels, so these are
            never skipped.
    """
    raw = _strip_eol(line)

    if not raw.strip():
        raise ParseError("empty or whitespace-only line", lineno)

    # Handle optional UTF-8 BOM on the very first line.
    if raw.startswith("\ufeff"):
        raw = raw.lstrip("\ufeff")

    # Some producers indent nested lines; leading whitespace carries no meaning.
    text = raw.lstrip(" \t")

    # --- 1. Extract level -------------------------------------------------
    parts = text.split(" ", 1)
    level_str = parts[0]
    if not level_str.isdigit():
        raise ParseError(f"level is not numeric -> {level_str!r} in {raw!r}", lineno)

    if len(parts) == 1:
        raise ParseError(f"missing tag (only level found) -> {raw!r}", lineno)

    level = int(level_str)
    rest = parts[1].lstrip(" ")

    if not rest:
        raise ParseError(f"missing tag after level -> {raw!r}", lineno)

    # --- 2. Extract optional xref ------------------------------------------
    xref: Optional[str] = None

    if rest.startswith("@"):
        space_index = rest.find(" ")
        candidate = rest if space_index == -1 else rest[:space_index]
        if not is_xref(candidate):
            raise ParseError(f"malformed cross-reference {candidate!r} -> {raw!r}", lineno)
        if space_index == -1:
            raise ParseError(f"cross-reference present but no tag -> {raw!r}", lineno)

        xref = candidate
        rest = rest[space_index + 1 :].lstrip(" ")

        if not rest:
            raise ParseError(f"cross-reference present but missing tag -> {raw!r}", lineno)

    # --- 3. Extract tag and optional value --------------------------------
    if " " in rest:
        tag, value = rest.split(" ", 1)
    else:
        tag, value = rest, ""

    if not tag:
        raise ParseError(f"empty tag after level/xref -> {raw!r}", lineno)

    # --- 4. Pointer payload -------------------------------------------------
    pointer: Optional[str] = None
    if is_xref(value.strip()):
        pointer = value.strip()
        value = ""

    return Line(
        lineno=lineno,
        level=level,
        tag=tag.upper(),
        xref=xref,
        value=value,
        pointer=pointer,
        raw=raw,
    )


def tokenize_lines(lines: Iterable[str]) -> Iterator[Line]:
    """
    Yield Line objects for every non-blank line, numbering from 1.

    Blank lines are skipped but still counted, so ``lineno`` always matches
    the position in the source.
    """
    for lineno, raw_line in enumerate(lines, start=1):
        stripped = _strip_eol(raw_line)

        if not stripped.strip() or stripped == "\ufeff":
            continue

        yield tokenize_line(stripped, lineno=lineno)


def tokenize_text(text: str) -> Iterator[Line]:
    """Tokenize a complete, already-decoded GEDCOM buffer."""
    # str.splitlines() would also break on form feeds and U+2028 inside values.
    return tokenize_lines(text.replace("\r\n", "\n").replace("\r", "\n").split("\n"))


def tokenize_file(path: Union[str, Path]) -> Iterator[Line]:
    """
    Yield Line objects for every non-empty GEDCOM line in the given file.

    Args:
        path: Path to a UTF-8 GEDCOM file.

    Raises:
        FileNotFoundError: if `path` does not exist.
        ParseError: if a line is syntactically invalid.
    """
    file_path = Path(path)

    if not file_path.is_file():
        raise FileNotFoundError(f"GEDCOM file not found: {file_path}")

    with file_path.open("r", encoding="utf-8-sig", errors="replace") as f:
        yield from tokenize_lines(f)
