"""Sous-package CLI commands - re-exporte les commandes publiques."""

from src.adapters.cli.commands.tracker_commands import (
    run_tracker,
    show_info,
)

__all__ = [
    "run_tracker",
    "show_info",
]
