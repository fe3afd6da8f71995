"""
Exporter package.

GEDCOM regeneration from Vamsa entities and JSON export of mapping results.
"""

from __future__ import annotations

from .gedcom_export import GedcomFamily, GedcomIndividual, map_to_gedcom
from .generator import GedcomGenerator, GeneratorOptions
from .json_exporter import export_result_to_json, result_to_dict, serialize_result_to_json_string

__all__ = [
    "GedcomFamily",
    "GedcomIndividual",
    "GedcomGenerator",
    "GeneratorOptions",
    "export_result_to_json",
    "map_to_gedcom",
    "result_to_dict",
    "serialize_result_to_json_string",
]
