"""Rich display helpers for CLI output."""

from rich import box
from rich.console import Console
from rich.table import Table

from dentalcare.database.models.dental import Tooth
from dentalcare.managers.practice import PracticeAttempt


# Shared console instance
console = Console()


def display_error(message: str) -> None:
    """Display error message.

    Args:
        message: Error message.
    """
    console.print(f"[bold red]Error:[/bold red] {message}")


def display_success(message: str) -> None:
    """Display success message.

    Args:
        message: Success message.
    """
    console.print(f"[bold green]{message}[/bold green]")


def display_info(message: str) -> None:
    """Display info message.

    Args:
        message: Info message.
    """
    console.print(f"[dim]{message}[/dim]")


def display_teeth(
    name: str,
    teeth: list[Tooth],
    remaining: int,
    overall_health: float,
) -> None:
    """Display a character's teeth as a table.

    Args:
        name: Character display name.
        teeth: Teeth ordered by index.
        remaining: Count of teeth not extracted.
        overall_health: Mean health of remaining teeth.
    """
    table = Table(title=f"{name}'s Teeth", box=box.ROUNDED)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Tooth", style="white")
    table.add_column("Health", justify="right", style="cyan")
    table.add_column("State", style="yellow")

    for tooth in teeth:
        health = "-" if tooth.is_extracted else f"{tooth.health}%"
        table.add_row(str(tooth.tooth_index), tooth.name, health, tooth.state.value)

    console.print(table)
    console.print(
        f"[bold]Remaining:[/bold] {remaining}/{len(teeth)}  "
        f"[bold]Overall health:[/bold] {overall_health:.0f}%"
    )


def display_practice_attempt(attempt: PracticeAttempt) -> None:
    """Display the outcome of a practice extraction.

    Args:
        attempt: Accepted practice attempt.
    """
    if attempt.success:
        display_success(f"Pulled a tooth! (rolled {attempt.roll} vs {attempt.chance}%)")
        display_info(f"Received: {attempt.reward_item}")
    else:
        console.print(
            f"[yellow]The tooth crumbled.[/yellow] (rolled {attempt.roll} vs {attempt.chance}%)"
        )
    display_info(f"+{attempt.experience} dental XP, {attempt.teeth_remaining} teeth left")
