"""Tooth commands."""

import typer
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from dentalcare.cli.display import (
    display_error,
    display_info,
    display_success,
    display_teeth,
)
from dentalcare.database.connection import get_db_session
from dentalcare.database.models.session import GameSession
from dentalcare.managers.teeth import ToothManager

app = typer.Typer(help="Inspect and set up character teeth")


def load_session(db: Session, session_id: int) -> GameSession:
    """Load a game session or exit with an error."""
    game_session = db.query(GameSession).filter(GameSession.id == session_id).first()
    if not game_session:
        display_error(f"Session {session_id} not found")
        raise typer.Exit(1)
    return game_session


@app.command()
def init(
    session_id: int = typer.Argument(..., help="Game session ID"),
    entity_key: str = typer.Argument(..., help="Character entity key"),
) -> None:
    """Give a character a full set of healthy teeth."""
    try:
        with get_db_session() as db:
            game_session = load_session(db, session_id)
            manager = ToothManager(db, game_session)

            entity = manager.get_entity_by_key(entity_key)
            if entity is None:
                display_error(f"Entity '{entity_key}' not found")
                raise typer.Exit(1)

            if manager.is_initialized(entity.id):
                display_info(f"{entity.display_name} already has teeth; nothing changed")
                return

            manager.initialize(entity.id)
            display_success(f"{entity.display_name} now has 32 healthy teeth")

    except SQLAlchemyError as e:
        display_error(f"Failed to initialize teeth: {e}")
        raise typer.Exit(1)


@app.command()
def status(
    session_id: int = typer.Argument(..., help="Game session ID"),
    entity_key: str = typer.Argument(..., help="Character entity key"),
) -> None:
    """Show a character's teeth."""
    try:
        with get_db_session() as db:
            game_session = load_session(db, session_id)
            manager = ToothManager(db, game_session)

            entity = manager.get_entity_by_key(entity_key)
            if entity is None:
                display_error(f"Entity '{entity_key}' not found")
                raise typer.Exit(1)

            teeth = manager.get_all_teeth(entity.id)
            if not teeth:
                display_error(
                    f"{entity.display_name} has no teeth yet. Run 'dental teeth init'."
                )
                raise typer.Exit(1)

            display_teeth(
                entity.display_name,
                teeth,
                manager.get_remaining_count(entity.id),
                manager.get_overall_health(entity.id),
            )

    except SQLAlchemyError as e:
        display_error(f"Failed to load teeth: {e}")
        raise typer.Exit(1)
