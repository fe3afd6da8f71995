"""
Field extractors: typed Parsed* views over assembled records.
"""

from .dates import format_gedcom_date, normalize_date, parse_date
from .events import FAMILY_EVENT_TAGS, INDIVIDUAL_EVENT_TAGS, extract_event, extract_events
from .family import extract_family
from .formats import FORMAT_ALIASES, normalize_format
from .individual import extract_individual
from .media_object import extract_object
from .names import format_name, parse_name
from .references import extract_event_objects, extract_event_sources
from .repository import extract_repository
from .source import extract_source
from .submitter import extract_submitter, header_submitter

__all__ = [
    "FAMILY_EVENT_TAGS",
    "FORMAT_ALIASES",
    "INDIVIDUAL_EVENT_TAGS",
    "extract_event",
    "extract_event_objects",
    "extract_event_sources",
    "extract_events",
    "extract_family",
    "extract_individual",
    "extract_object",
    "extract_repository",
    "extract_source",
    "extract_submitter",
    "format_gedcom_date",
    "format_name",
    "header_submitter",
    "normalize_date",
    "normalize_format",
    "parse_date",
    "parse_name",
]
