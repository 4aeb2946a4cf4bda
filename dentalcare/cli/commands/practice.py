"""Corpse practice commands."""

import typer
from sqlalchemy.exc import SQLAlchemyError

from dentalcare.cli.commands.teeth import load_session
from dentalcare.cli.display import (
    display_error,
    display_info,
    display_practice_attempt,
)
from dentalcare.database.connection import get_db_session
from dentalcare.managers.actor import EntityActor
from dentalcare.managers.practice import PracticeManager

app = typer.Typer(help="Practice extractions on corpses")


@app.command()
def extract(
    session_id: int = typer.Argument(..., help="Game session ID"),
    actor_key: str = typer.Argument(..., help="Practitioner entity key"),
    corpse_key: str = typer.Argument(..., help="Corpse entity key"),
) -> None:
    """Pull one practice tooth from a corpse."""
    try:
        with get_db_session() as db:
            game_session = load_session(db, session_id)
            manager = PracticeManager(db, game_session)

            actor = EntityActor.for_key(db, game_session, actor_key)
            if actor is None:
                display_error(f"Entity '{actor_key}' not found")
                raise typer.Exit(1)

            corpse = manager.get_entity_by_key(corpse_key)
            if corpse is None or not manager.is_eligible(corpse.id):
                display_error(f"'{corpse_key}' is not a corpse you can practice on")
                raise typer.Exit(1)

            attempt = manager.attempt_extraction(actor, corpse.id)
            if attempt is None:
                display_error(f"{corpse.display_name} has no teeth left to practice on")
                raise typer.Exit(1)

            display_practice_attempt(attempt)

    except SQLAlchemyError as e:
        display_error(f"Failed to practice: {e}")
        raise typer.Exit(1)


@app.command()
def status(
    session_id: int = typer.Argument(..., help="Game session ID"),
    corpse_key: str = typer.Argument(..., help="Corpse entity key"),
) -> None:
    """Show how many practice teeth a corpse has left."""
    try:
        with get_db_session() as db:
            game_session = load_session(db, session_id)
            manager = PracticeManager(db, game_session)

            corpse = manager.get_entity_by_key(corpse_key)
            if corpse is None or not manager.is_eligible(corpse.id):
                display_error(f"'{corpse_key}' is not a corpse you can practice on")
                raise typer.Exit(1)

            display_info(
                f"{corpse.display_name}: {manager.teeth_remaining(corpse.id)} practice teeth left"
            )

    except SQLAlchemyError as e:
        display_error(f"Failed to load practice record: {e}")
        raise typer.Exit(1)
