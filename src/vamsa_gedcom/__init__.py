"""
vamsa_gedcom: GEDCOM 5.5.1 import/export core for Vamsa.

    from vamsa_gedcom import parse_gedcom, map_gedcom_file

    file = parse_gedcom(text)
    result = map_gedcom_file(file)
"""

from vamsa_gedcom.core.exceptions import ConfigError, GedcomError, ParseError, PipelineError
from vamsa_gedcom.loader.assembler import GedcomFile, Record, RecordKind
from vamsa_gedcom.mapping.diagnostics import MappingError, MappingResult, ValidationWarning
from vamsa_gedcom.mapping.gedcom_mapper import map_gedcom_file
from vamsa_gedcom.mapping.options import MapOptions
from vamsa_gedcom.parser_core import GedcomParser, parse_gedcom, parse_gedcom_file

__version__ = "0.1.0"

__all__ = [
    "ConfigError",
    "GedcomError",
    "GedcomFile",
    "GedcomParser",
    "MapOptions",
    "MappingError",
    "MappingResult",
    "ParseError",
    "PipelineError",
    "Record",
    "RecordKind",
    "ValidationWarning",
    "map_gedcom_file",
    "parse_gedcom",
    "parse_gedcom_file",
]
