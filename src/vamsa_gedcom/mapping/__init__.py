"""
Mapping from Parsed* values to Vamsa* entities, links and diagnostics.
"""

from .diagnostics import (
    BROKEN_REFERENCE,
    INVALID_FORMAT,
    MISSING_DATA,
    DiagnosticsCollector,
    MappingError,
    MappingResult,
    ValidationWarning,
)
from .entities import (
    PARENT,
    SPOUSE,
    EventLink,
    EventMediaLink,
    EventSourceLink,
    VamsaObject,
    VamsaPerson,
    VamsaRelationship,
    VamsaSource,
)
from .gedcom_mapper import GedcomMapper, map_gedcom_file
from .links import create_event_link, create_event_media_link, create_event_source_link
from .notes import join_notes, split_notes
from .object_mapper import ObjectMapper, map_object_to_vamsa
from .options import MapOptions
from .person_mapper import PersonMapper, map_individual_to_vamsa
from .relationship_mapper import map_family_to_relationships
from .source_mapper import SourceMapper, map_source_to_vamsa
from .traversal import ancestors, descendants

__all__ = [
    "BROKEN_REFERENCE",
    "INVALID_FORMAT",
    "MISSING_DATA",
    "PARENT",
    "SPOUSE",
    "DiagnosticsCollector",
    "EventLink",
    "EventMediaLink",
    "EventSourceLink",
    "GedcomMapper",
    "MapOptions",
    "MappingError",
    "MappingResult",
    "ObjectMapper",
    "PersonMapper",
    "SourceMapper",
    "ValidationWarning",
    "VamsaObject",
    "VamsaPerson",
    "VamsaRelationship",
    "VamsaSource",
    "ancestors",
    "create_event_link",
    "create_event_media_link",
    "create_event_source_link",
    "descendants",
    "join_notes",
    "map_family_to_relationships",
    "map_gedcom_file",
    "map_individual_to_vamsa",
    "map_object_to_vamsa",
    "map_source_to_vamsa",
    "split_notes",
]
