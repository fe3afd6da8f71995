"""
CLI command modules for vamsa_gedcom.

Each command module defines a single Typer-compatible command function.
"""

from vamsa_gedcom.cli.commands.export import export_command
from vamsa_gedcom.cli.commands.import_ import import_command
from vamsa_gedcom.cli.commands.stats import stats_command
from vamsa_gedcom.cli.commands.validate import validate_command

__all__ = [
    "export_command",
    "import_command",
    "stats_command",
    "validate_command",
]
