"""Main CLI application for dental care."""

import logging

import typer

from dentalcare.cli.commands import db, practice, teeth
from dentalcare.config import settings

# Create main app
app = typer.Typer(
    name="dental",
    help="Dental health simulation: teeth, skills and corpse practice",
    add_completion=True,
)

# Add sub-commands
app.add_typer(db.app, name="db")
app.add_typer(teeth.app, name="teeth")
app.add_typer(practice.app, name="practice")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """Dental care tools.

    Use 'dental db init' once, then 'dental teeth init' for each character.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


if __name__ == "__main__":
    app()
