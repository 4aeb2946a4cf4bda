"""Database commands."""

import typer
from sqlalchemy.exc import SQLAlchemyError

from dentalcare.cli.display import display_error, display_info, display_success
from dentalcare.config import settings
from dentalcare.database.connection import drop_db, init_db

app = typer.Typer(help="Manage the dental database")


@app.command()
def init() -> None:
    """Create the dental tables."""
    try:
        init_db()
    except SQLAlchemyError as e:
        display_error(f"Failed to create tables: {e}")
        raise typer.Exit(1)

    display_success(f"Tables ready at {settings.database_url}")


@app.command()
def reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate every table. All teeth and practice records are lost."""
    if not force:
        confirm = typer.confirm(f"Wipe all dental data at {settings.database_url}?")
        if not confirm:
            display_info("Cancelled")
            return

    try:
        drop_db()
        init_db()
    except SQLAlchemyError as e:
        display_error(f"Failed to reset tables: {e}")
        raise typer.Exit(1)

    display_success(f"Tables reset at {settings.database_url}")
