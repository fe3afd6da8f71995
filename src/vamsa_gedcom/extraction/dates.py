# src/vamsa_gedcom/extraction/dates.py

from __future__ import annotations

import calendar
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple


# ---------------------------------------------------------------------------
# Month and calendar helpers
# ---------------------------------------------------------------------------

MONTHS = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "SEPT": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

MONTH_CODES = ["JAN", "FEB", "MAR", "APR", "MAY", "JUN",
               "JUL", "AUG", "SEP", "OCT", "NOV", "DEC"]

# GEDCOM 5.5.1 calendar escapes, e.g. "@#DJULIAN@ 1 JAN 1700"
CALENDAR_ESCAPES = {
    "@#DGREGORIAN@": "GREGORIAN",
    "@#DJULIAN@": "JULIAN",
    "@#DHEBREW@": "HEBREW",
    "@#DFRENCH R@": "FRENCH",
}


# ---------------------------------------------------------------------------
# Qualifiers
# ---------------------------------------------------------------------------

# alias (lowercase) -> (standard_code, kind)
QUALIFIER_ALIASES: Dict[str, Tuple[str, str]] = {}


def _add_qualifier_aliases(aliases: List[str], code: str, kind: str) -> None:
    for a in aliases:
        QUALIFIER_ALIASES[a.lower()] = (code, kind)


_add_qualifier_aliases(["abt", "abt.", "about", "circa", "c.", "ca", "ca."], "ABT", "approximate")
_add_qualifier_aliases(["bef", "bef.", "before"], "BEF", "before")
_add_qualifier_aliases(["aft", "aft.", "after"], "AFT", "after")
_add_qualifier_aliases(["cal", "cal.", "calculated"], "CAL", "calculated")
_add_qualifier_aliases(["est", "est.", "estimated"], "EST", "estimated")
_add_qualifier_aliases(["int"], "INT", "interpreted")

RANGE_STARTS = {"bet": ("AND",), "between": ("AND",), "from": ("TO",)}


@dataclass
class SimpleDate:
    """One date portion with qualifiers already removed."""
    date: Optional[str]          # YYYY, YYYY-MM or YYYY-MM-DD
    precision: Optional[str]     # 'year', 'month', 'day'
    year: Optional[int] = None


# ---------------------------------------------------------------------------
# Core parsing helpers
# ---------------------------------------------------------------------------

def _parse_year(token: str) -> Optional[int]:
    token = token.strip()
    # dual years ("1750/51") keep the first year
    if "/" in token:
        token = token.split("/", 1)[0]
    if token.isdigit() and 3 <= len(token) <= 4:
        return int(token)
    return None


def _parse_simple_date(tokens: List[str]) -> SimpleDate:
    """
    Parse a date with no leading qualifier:
        - '1900'
        - 'JAN 1900'
        - '1 JAN 1900'
    Impossible days ("31 FEB 1900") do not parse.
    """
    if len(tokens) == 1:
        year = _parse_year(tokens[0])
        if year is not None:
            return SimpleDate(date=f"{year:04d}", precision="year", year=year)

    elif len(tokens) == 2:
        mon = MONTHS.get(tokens[0].upper())
        year = _parse_year(tokens[1])
        if mon is not None and year is not None:
            return SimpleDate(date=f"{year:04d}-{mon:02d}", precision="month", year=year)

    elif len(tokens) == 3:
        day_token, mon_token, year_token = tokens
        mon = MONTHS.get(mon_token.upper())
        year = _parse_year(year_token)
        if mon is not None and year is not None and day_token.isdigit():
            day = int(day_token)
            if 1 <= day <= calendar.monthrange(year, mon)[1]:
                return SimpleDate(
                    date=f"{year:04d}-{mon:02d}-{day:02d}",
                    precision="day",
                    year=year,
                )

    return SimpleDate(date=None, precision=None)


def _split_on(tokens: List[str], separators: Tuple[str, ...]) -> Optional[Tuple[List[str], List[str]]]:
    """Split tokens at the first separator (case-insensitive); None if absent."""
    for i, t in enumerate(tokens):
        if t.upper() in separators:
            return tokens[:i], tokens[i + 1 :]
    return None


def _strip_calendar(s: str) -> Tuple[str, Optional[str]]:
    for escape, name in CALENDAR_ESCAPES.items():
        if s.upper().startswith(escape):
            return s[len(escape):].strip(), name
    return s, None


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def normalize_date(raw: Optional[str]) -> Dict[str, Optional[str]]:
    """
    Parse a GEDCOM DATE value into a structured dictionary.

        '1 JAN 1900'   -> date='1900-01-01', precision='day'
        'JAN 1900'     -> date='1900-01',    precision='month'
        'ABT 1900'     -> date='1900',       modifier='ABT'
        'BET 1900 AND 1910' -> start='1900', end='1910', kind='range'

    Keys: raw, kind, modifier, date, precision, start, end, calendar.
    ``date`` is None when the value cannot be interpreted.
    """
    s = "" if raw is None else str(raw).strip()

    result: Dict[str, Optional[str]] = {
        "raw": s,
        "kind": "unknown",
        "modifier": None,
        "date": None,
        "precision": None,
        "start": None,
        "end": None,
        "calendar": None,
    }

    if not s:
        return result

    base, cal = _strip_calendar(s)
    result["calendar"] = cal

    # "INT 1900 (as written)" keeps only the date part
    if "(" in base:
        base = base.split("(", 1)[0].strip()

    tokens = [t for t in base.replace(",", " ").split() if t]
    if not tokens:
        return result

    # ------------------------------------------------------------------
    # Ranges: BET ... AND ..., FROM ... [TO ...]
    # ------------------------------------------------------------------
    head = tokens[0].lower()
    if head in RANGE_STARTS:
        split = _split_on(tokens[1:], RANGE_STARTS[head])
        left_tokens, right_tokens = split if split else (tokens[1:], [])
        left = _parse_simple_date(left_tokens) if left_tokens else SimpleDate(None, None)
        right = _parse_simple_date(right_tokens) if right_tokens else SimpleDate(None, None)
        result["kind"] = "range"
        result["modifier"] = "BET" if head != "from" else "FROM"
        result["start"] = left.date
        result["end"] = right.date
        result["date"] = left.date or right.date
        result["precision"] = left.precision or right.precision
        return result

    if head == "to":
        right = _parse_simple_date(tokens[1:])
        result.update(kind="range", modifier="TO", end=right.date,
                      date=right.date, precision=right.precision)
        return result

    # ------------------------------------------------------------------
    # Single leading qualifier
    # ------------------------------------------------------------------
    modifier_code: Optional[str] = None
    modifier_kind: Optional[str] = None
    if head in QUALIFIER_ALIASES:
        modifier_code, modifier_kind = QUALIFIER_ALIASES[head]
        tokens = tokens[1:]

    if not tokens:
        result["kind"] = modifier_kind or "unknown"
        result["modifier"] = modifier_code
        return result

    sd = _parse_simple_date(tokens)
    result["date"] = sd.date
    result["precision"] = sd.precision
    result["modifier"] = modifier_code
    if sd.date is not None:
        result["kind"] = modifier_kind or "exact"
    return result


def parse_date(raw: Optional[str]) -> Optional[str]:
    """
    ISO rendering (YYYY, YYYY-MM or YYYY-MM-DD) of a GEDCOM date value.

    Qualified dates yield their anchor date and ranges their start; None
    when nothing could be interpreted.
    """
    return normalize_date(raw)["date"]


def format_gedcom_date(iso: Optional[str]) -> Optional[str]:
    """
    Inverse of ``parse_date`` for exact dates:
        '1985-01-15' -> '15 JAN 1985'
        '1985-01'    -> 'JAN 1985'
        '1985'       -> '1985'
    Values that are not ISO-shaped are returned unchanged.
    """
    if not iso:
        return None

    parts = iso.split("-")
    if not all(p.isdigit() for p in parts) or len(parts) > 3:
        return iso

    year = str(int(parts[0]))
    if len(parts) == 1:
        return year

    month = int(parts[1])
    if not 1 <= month <= 12:
        return iso
    if len(parts) == 2:
        return f"{MONTH_CODES[month - 1]} {year}"

    return f"{int(parts[2])} {MONTH_CODES[month - 1]} {year}"


__all__ = ["MONTHS", "normalize_date", "parse_date", "format_gedcom_date"]
