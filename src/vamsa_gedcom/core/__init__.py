from .exceptions import ConfigError, GedcomError, ParseError, PipelineError

__all__ = ["ConfigError", "GedcomError", "ParseError", "PipelineError"]
