"""
parser_core.py
Central parsing engine with full logging integration.
"""

from __future__ import annotations

from pathlib import Path
from typing import List, Optional, Union

from vamsa_gedcom.config import get_config
from vamsa_gedcom.core.exceptions import ParseError
from vamsa_gedcom.loader.assembler import GedcomFile, assemble
from vamsa_gedcom.loader.tokenizer import Line, tokenize_file, tokenize_text
from vamsa_gedcom.logging import get_logger


class GedcomParser:
    """
    High-level parser:
      - tokenizes text or a file
      - assembles records
      - returns an immutable GedcomFile

    A failed parse raises ParseError and leaves no partial result behind.
    """

    def __init__(self, config=None):
        self.cfg = config if config is not None else get_config()
        self.log = get_logger("parser_core")

        self.lines: List[Line] = []
        self.result: Optional[GedcomFile] = None

    # ---------------------------------------------------------
    # Parse
    # ---------------------------------------------------------
    def parse(self, text: str) -> GedcomFile:
        """Parse an already-decoded GEDCOM buffer."""
        self.log.debug("Tokenizing GEDCOM text (%d chars)", len(text))
        return self._run(lambda: tokenize_text(text))

    def parse_file(self, path: Union[str, Path]) -> GedcomFile:
        """Parse a UTF-8 GEDCOM file from disk."""
        self.log.info("Tokenizing GEDCOM input: %s", path)
        return self._run(lambda: tokenize_file(path))

    def _run(self, produce) -> GedcomFile:
        self.lines = []
        self.result = None
        try:
            # materialize so a tokenizer failure surfaces before assembly
            lines = list(produce())
            result = assemble(lines)
        except ParseError as exc:
            self.log.error("GEDCOM parse failed: %s", exc)
            raise

        self.lines = lines
        self.result = result

        if self.cfg.debug:
            self.log.debug("Line count = %d", len(lines))
        self.log.info(
            "Parsed GEDCOM %s: %s",
            result.version,
            ", ".join(f"{k}={v}" for k, v in result.counts().items()),
        )
        return result


def parse_gedcom(text: str) -> GedcomFile:
    """Parse decoded GEDCOM 5.5.1 text into a GedcomFile."""
    return GedcomParser().parse(text)


def parse_gedcom_file(path: Union[str, Path]) -> GedcomFile:
    return GedcomParser().parse_file(path)
