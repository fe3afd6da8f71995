# src/vamsa_gedcom/loader/__init__.py

"""
Public interface for the GEDCOM loader stack.

Intended usage from other parts of the project and tests:

    from vamsa_gedcom.loader import (
        Line,
        Record,
        RecordKind,
        GedcomFile,
        tokenize_text,
        tokenize_file,
        assemble,
    )
"""

from __future__ import annotations

from .tokenizer import (
    Line,
    is_xref,
    strip_xref,
    tokenize_file,
    tokenize_line,
    tokenize_lines,
    tokenize_text,
)
from .assembler import (
    GedcomFile,
    Record,
    RecordBuilder,
    RecordKind,
    assemble,
    assemble_records,
)


__all__ = [
    "Line",
    "Record",
    "RecordBuilder",
    "RecordKind",
    "GedcomFile",
    "is_xref",
    "strip_xref",
    "tokenize_file",
    "tokenize_line",
    "tokenize_lines",
    "tokenize_text",
    "assemble",
    "assemble_records",
]
