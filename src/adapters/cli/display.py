"""
Rendu Rich de la liste de suivi et des details d'un element.
"""

from typing import Sequence

from rich.markup import escape
from rich.table import Table

from src.core.entities.watch_item import WatchItem, WatchStatus

# Couleur du statut dans les tableaux
STATUS_STYLES = {
    WatchStatus.NOT_STARTED: "dim",
    WatchStatus.IN_PROGRESS: "yellow",
    WatchStatus.COMPLETED: "green",
}


def format_heading(item: WatchItem) -> str:
    """Titre et type, ex: "The Matrix [Movie]" (markup echappe)."""
    return escape(f"{item.title} [{item.type.value}]")


def render_watchlist(items: Sequence[WatchItem]) -> Table:
    """
    Construit le tableau numerote de la liste de suivi.

    Args:
        items: Elements dans l'ordre d'affichage

    Returns:
        Table Rich avec une ligne par element, numerotee a partir de 1.
    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("#", justify="right", style="cyan")
    table.add_column("Title")
    table.add_column("Type")
    table.add_column("Status")
    table.add_column("Progress", justify="right")

    for index, item in enumerate(items, start=1):
        style = STATUS_STYLES[item.status]
        table.add_row(
            str(index),
            escape(item.title),
            item.type.value,
            f"[{style}]{item.status.value}[/{style}]",
            item.progress_label,
        )
    return table
