"""
Commandes CLI du suivi de visionnage (menu interactif, configuration).
"""

from pathlib import Path
from typing import Optional

import typer
from dependency_injector import providers
from loguru import logger

from src.adapters.cli.controller import WatchlistController
from src.adapters.cli.helpers import console, with_container


@with_container
def run_tracker(container, data_file: Optional[Path] = None) -> None:
    """
    Lance le menu interactif sur la liste de suivi configuree.

    Args:
        container: Container DI (injecte par with_container)
        data_file: Fichier de liste a utiliser a la place de celui configure

    Raises:
        typer.Exit: Code 1 si la liste ne peut pas etre sauvegardee.
    """
    settings = container.config()
    if data_file is not None:
        settings = settings.model_copy(update={"data_file": data_file.expanduser()})
        container.config.override(providers.Object(settings))

    service = container.watchlist_service()
    controller = WatchlistController(
        service,
        console,
        clear_screen=settings.clear_screen,
        pause=settings.pause_after_action,
    )

    try:
        controller.run()
    except OSError as e:
        logger.exception("Echec de la sauvegarde", path=str(settings.data_file))
        console.print(f"[red]Could not save watch list to {settings.data_file}: {e}[/red]")
        raise typer.Exit(1)


@with_container
def show_info(container) -> None:
    """Affiche la configuration effective."""
    config = container.config()
    typer.echo(f"Watch list file: {config.data_file}")
    typer.echo(f"Log level: {config.log_level}")
    typer.echo(f"Log file: {config.log_file}")
    typer.echo(f"Clear screen: {'yes' if config.clear_screen else 'no'}")
    typer.echo(f"Pause after action: {'yes' if config.pause_after_action else 'no'}")
