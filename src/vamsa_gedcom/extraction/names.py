"""
NAME value parsing.

    "John Michael /Smith/"   -> given="John Michael", surname="Smith"
    "/Smith/"                -> given=None,           surname="Smith"
    "John"                   -> given="John",         surname=None
    "John /Smith/ Jr."       -> suffix="Jr."

GEDCOM is often messy: a missing closing slash still yields a surname.
"""

from __future__ import annotations

from typing import Dict, Optional

from vamsa_gedcom.models import ParsedName


def _clean(text: Optional[str]) -> Optional[str]:
    if text is None:
        return None
    text = " ".join(text.split())
    return text or None


def parse_name(value: Optional[str]) -> ParsedName:
    raw = value or ""
    given: Optional[str] = raw
    surname: Optional[str] = None
    suffix: Optional[str] = None

    if "/" in raw:
        left, _, rest = raw.partition("/")
        inner, _, right = rest.partition("/")
        given = left
        surname = inner
        suffix = right

    return ParsedName(
        full=raw.strip(),
        given=_clean(given),
        surname=_clean(surname),
        suffix=_clean(suffix),
    )


def merge_name_parts(name: ParsedName, parts: Dict[str, str]) -> ParsedName:
    """
    Apply NAME sub-tags (GIVN, SURN, NSFX, TYPE) over the parsed value.

    Explicit sub-tags win over what was split out of the NAME line.
    """
    given = _clean(parts.get("GIVN")) or name.given
    surname = _clean(parts.get("SURN")) or name.surname
    suffix = _clean(parts.get("NSFX")) or name.suffix
    name_type = _clean(parts.get("TYPE")) or name.name_type

    full = name.full
    if not full and (given or surname):
        full = format_name(given, surname)

    return ParsedName(full=full, given=given, surname=surname, suffix=suffix, name_type=name_type)


def format_name(given: Optional[str], surname: Optional[str]) -> str:
    """GEDCOM NAME value: "Given /Surname/"."""
    given = _clean(given) or ""
    surname = _clean(surname) or ""
    if given:
        return f"{given} /{surname}/"
    return f"/{surname}/"


__all__ = ["parse_name", "merge_name_parts", "format_name"]
