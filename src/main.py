"""
Point d'entrée CLI du suivi de visionnage.

Configure le logging et lance le menu interactif quand aucune
sous-commande n'est donnée.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from loguru import logger

from .adapters.cli.commands import run_tracker, show_info
from .config import Settings
from .logging_config import configure_logging

__version__ = "0.1.0"

app = typer.Typer(
    name="watchlist",
    help="Suivi de visionnage de films et séries",
)


@app.callback(invoke_without_command=True)
def main_callback(
    ctx: typer.Context,
    verbose: Annotated[
        int,
        typer.Option(
            "--verbose", "-v", count=True, help="Augmenter la verbosite (-v, -vv, -vvv)"
        ),
    ] = 0,
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (erreurs uniquement)"),
    ] = False,
    data_file: Annotated[
        Optional[Path],
        typer.Option("--data-file", help="Fichier de la liste de suivi"),
    ] = None,
) -> None:
    """Watchlist - suivi de visionnage personnel. Sans sous-commande, ouvre le menu."""
    if verbose or quiet:
        configure_logging(Settings(), verbose=verbose, quiet=quiet)

    if ctx.invoked_subcommand is None:
        run_tracker(data_file=data_file)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    show_info()


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"Watchlist v{__version__}")


def main() -> None:
    """Point d'entrée de l'application."""
    configure_logging(Settings())
    logger.info("Démarrage de Watchlist", version=__version__)

    app()


if __name__ == "__main__":
    main()
