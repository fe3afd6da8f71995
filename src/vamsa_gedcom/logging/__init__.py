"""
Logging package for ``vamsa_gedcom``.

Use ``get_logger(__name__)`` in modules to inherit the shared handlers.
"""

from .logger import get_logger, list_active_loggers

__all__ = ["get_logger", "list_active_loggers"]
