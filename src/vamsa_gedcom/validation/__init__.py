from .objects import ObjectValidation, is_absolute_path, validate_object
from .structure import StructureIssue, has_errors, validate_structure

__all__ = [
    "ObjectValidation",
    "StructureIssue",
    "has_errors",
    "is_absolute_path",
    "validate_object",
    "validate_structure",
]
