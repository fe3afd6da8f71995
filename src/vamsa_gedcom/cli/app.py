# src/vamsa_gedcom/cli/app.py

from __future__ import annotations

import typer

from vamsa_gedcom.cli.commands.export import export_command
from vamsa_gedcom.cli.commands.import_ import import_command
from vamsa_gedcom.cli.commands.stats import stats_command
from vamsa_gedcom.cli.commands.validate import validate_command

app = typer.Typer(
    name="vamsa-gedcom",
    help="GEDCOM 5.5.1 import, validation and export for Vamsa",
    add_completion=False,
)

app.command("stats")(stats_command)
app.command("import")(import_command)
app.command("validate")(validate_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
