# src/vamsa_gedcom/core/pipeline.py

from __future__ import annotations

from pathlib import Path
from typing import Optional

from vamsa_gedcom.core.context import ParseContext
from vamsa_gedcom.core.exceptions import ParseError, PipelineError
from vamsa_gedcom.exporter import (
    GedcomGenerator,
    GeneratorOptions,
    export_result_to_json,
    map_to_gedcom,
)
from vamsa_gedcom.loader.assembler import GedcomFile
from vamsa_gedcom.mapping.diagnostics import MappingResult
from vamsa_gedcom.mapping.gedcom_mapper import map_gedcom_file
from vamsa_gedcom.mapping.options import MapOptions
from vamsa_gedcom.parser_core import GedcomParser


class Pipeline:
    """
    Orchestrates parse -> map -> export.
    No business logic lives here.
    """

    def __init__(self, context: ParseContext, options: Optional[MapOptions] = None):
        self.ctx = context
        self.log = context.logger
        self.options = options or MapOptions.from_config(
            context.config,
            media_base_dir=context.media_base_dir,
        )
        self.file: Optional[GedcomFile] = None
        self.result: Optional[MappingResult] = None

    def parse(self) -> GedcomFile:
        parser = GedcomParser(config=self.ctx.config)
        self.file = parser.parse_file(self.ctx.input_path)
        self.ctx.stats["records"] = self.file.counts()
        return self.file

    def run(self) -> MappingResult:
        """Parse and map the input; write JSON when an output path is set."""
        self.log.info("Pipeline starting: %s", self.ctx.input_path)

        try:
            file = self.parse()
            result = map_gedcom_file(file, self.options)

            self.ctx.stats["mapping"] = result.counts()
            self.ctx.errors.extend(result.errors)
            if self.ctx.debug:
                self.log.debug("Pipeline stats: %s", self.ctx.stats)

            if self.ctx.output_path:
                export_result_to_json(result, self.ctx.output_path)

        except (ParseError, FileNotFoundError):
            self.log.error("Pipeline stopped: input could not be read or parsed")
            raise
        except Exception as exc:
            self.log.exception("Pipeline execution failed")
            raise PipelineError(str(exc)) from exc

        self.result = result
        self.log.info("Pipeline completed (%d errors, %d warnings)", len(result.errors), len(result.warnings))
        return result

    def export_gedcom(self, output_path: Path) -> str:
        """Parse, map and regenerate GEDCOM text; write it to ``output_path``."""
        result = self.result or self.run()
        try:
            individuals, families = map_to_gedcom(result.people, result.relationships)
            text = GedcomGenerator(GeneratorOptions.from_config(self.ctx.config)).generate(individuals, families)
            output_path = Path(output_path)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            output_path.write_text(text, encoding="utf-8")
            self.ctx.stats["export"] = {"individuals": len(individuals), "families": len(families)}
        except Exception as exc:
            self.log.exception("GEDCOM export failed")
            raise PipelineError(str(exc)) from exc

        self.log.info("GEDCOM written to %s (%d individuals, %d families)", output_path, len(individuals), len(families))
        return text
