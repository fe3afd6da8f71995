# src/vamsa_gedcom/core/exceptions.py

from __future__ import annotations

from typing import Optional


class GedcomError(Exception):
    """Base exception for vamsa-gedcom failures."""


class ParseError(GedcomError, ValueError):
    """
    Raised when GEDCOM text cannot be tokenized or assembled.

    Fatal: no partial GedcomFile is ever returned. ``lineno`` names the
    offending 1-based line when one can be identified.
    """

    def __init__(self, message: str, lineno: Optional[int] = None):
        self.lineno = lineno
        self.reason = message
        if lineno is not None:
            message = f"Line {lineno}: {message}"
        super().__init__(message)


class PipelineError(GedcomError):
    """Raised when the import pipeline fails for a reason other than parsing."""


class ConfigError(GedcomError):
    """Raised when configuration values are unusable."""
