"""
Adaptateur CLI (Typer + Rich).

- controller.py : boucle interactive du menu
- prompts.py : saisies validees
- display.py : rendu Rich de la liste
- commands/ : commandes Typer montees dans src.main
"""

from rich.console import Console

# Console globale pour tous les affichages
console = Console()
