"""
Configuration du logging de Watchlist via loguru.

Deux sorties :
- stderr : niveau WARNING par défaut pour ne pas se mêler au menu interactif,
  ajustable avec -v/-q
- fichier JSON avec rotation : toujours au niveau DEBUG
"""

import sys

from loguru import logger

from src.config import Settings

# Du plus bavard au plus silencieux
_LEVELS = ("TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


def _console_level(base_level: str, verbose: int, quiet: bool) -> str:
    if quiet:
        return "ERROR"
    base = base_level if base_level in _LEVELS else "WARNING"
    return _LEVELS[max(0, _LEVELS.index(base) - verbose)]


def configure_logging(settings: Settings, verbose: int = 0, quiet: bool = False) -> str:
    """
    Installe les handlers loguru à partir des Settings et des options -v/-q.

    Chaque -v descend d'un cran depuis settings.log_level
    (WARNING -> INFO -> DEBUG -> TRACE) ; -q ne garde que les erreurs.
    Peut être rappelée : les handlers existants sont remplacés.

    Retourne :
        Le niveau retenu pour la console
    """
    level = _console_level(settings.log_level, verbose, quiet)
    logger.remove()

    # Pas d'horodatage : la console sert surtout au menu
    logger.add(
        sys.stderr,
        level=level,
        format="<level>{level: <8}</level> | <cyan>{name}</cyan> | <level>{message}</level>",
        colorize=True,
    )

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        format="{message}",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,
    )

    logger.debug(
        "Logging configuré",
        console_level=level,
        log_file=str(settings.log_file),
    )
    return level
