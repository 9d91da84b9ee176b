"""Rich-based display helpers for the command line."""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

if TYPE_CHECKING:
    from open_opus.models.composer import Composer
    from open_opus.models.enums import Genre
    from open_opus.models.work import Work

console = Console()


def show_composers_table(composers: list[Composer], title: str = "Composers") -> None:
    """Display a table of composers."""
    table = Table(title=f"{escape(title)} ({len(composers)})")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Name", style="cyan")
    table.add_column("Complete name")
    table.add_column("Lifespan", justify="right")
    table.add_column("Epoch", style="magenta")

    for composer in composers:
        table.add_row(
            str(composer.id),
            escape(composer.name),
            escape(composer.complete_name),
            _lifespan(composer),
            composer.epoch.value,
        )

    console.print(table)


def show_works_table(works: list[Work], title: str = "Works") -> None:
    """Display a table of works; popular/recommended shown as markers."""
    table = Table(title=f"{escape(title)} ({len(works)})")
    table.add_column("ID", style="dim", justify="right")
    table.add_column("Title", style="green")
    table.add_column("Subtitle")
    table.add_column("Genre", style="magenta")
    table.add_column("Pop", justify="center")
    table.add_column("Rec", justify="center")

    for work in works:
        table.add_row(
            str(work.id),
            escape(work.title),
            escape(work.subtitle),
            work.genre.value,
            "*" if work.popular else "",
            "*" if work.recommended else "",
        )

    console.print(table)


def show_genres(genres: list[Genre], composer_id: int) -> None:
    panel = Panel(
        ", ".join(genre.value for genre in genres) or "[dim]none[/dim]",
        title=f"[bold]Genres for composer {composer_id}[/bold]",
        border_style="cyan",
        expand=False,
    )
    console.print(panel)


def show_error(title: str, message: str) -> None:
    """Display an error panel with red border. *message* is printed literally."""
    panel = Panel(
        f"[red]{escape(message)}[/red]",
        title=f"[bold red]{escape(title)}[/bold red]",
        border_style="red",
    )
    console.print(panel)


def _lifespan(composer: Composer) -> str:
    birth = str(composer.birth.year) if composer.birth else "?"
    death = str(composer.death.year) if composer.death else ""
    return f"{birth}-{death}"
