"""
Saisies utilisateur validees pour le CLI interactif.

Chaque methode de Prompter repose la question tant que la saisie est invalide,
sans limite de tentatives. La fin de l'entree (EOF) remonte en EOFError.
"""

import re
from enum import Enum
from typing import Optional, TextIO, TypeVar

from rich.console import Console
from rich.markup import escape

from src.core.entities.watch_item import symbolic_names

E = TypeVar("E", bound=Enum)

_INTEGER = re.compile(r"[+-]?\d+", re.ASCII)


class Prompter:
    """
    Lecture de saisies sur une console Rich.

    Args:
        console: Console Rich pour l'affichage des questions et erreurs
        stream: Flux d'entree optionnel (stdin si None), utile pour les tests
    """

    def __init__(self, console: Console, stream: Optional[TextIO] = None) -> None:
        self.console = console
        self.stream = stream

    def _read(self, prompt: str) -> str:
        answer = self.console.input(prompt, stream=self.stream)
        # Console.input renvoie "" en fin de flux quand un stream est fourni
        if self.stream is not None and answer == "":
            raise EOFError
        return answer.rstrip("\r\n")

    def ask(self, label: str) -> str:
        """
        Pose une question et retourne la ligne saisie, sans retour a la ligne.

        Raises:
            EOFError: Si l'entree est epuisee.
        """
        return self._read(f"{escape(label)}: ")

    def ask_non_empty(self, label: str) -> str:
        """Repose la question tant que la saisie est vide."""
        while True:
            answer = self.ask(label)
            if answer.strip():
                return answer
            self.console.print("[yellow]Please enter a value.[/yellow]")

    def ask_int(self, label: str, minimum: int, maximum: int) -> int:
        """Repose la question tant que la saisie n'est pas un entier dans [minimum, maximum]."""
        while True:
            answer = self.ask(f"{label} ({minimum}-{maximum})").strip()
            # int() accepterait aussi "1_000" et les chiffres non ASCII
            if _INTEGER.fullmatch(answer):
                value = int(answer)
                if minimum <= value <= maximum:
                    return value
            self.console.print("[red]Invalid number. Try again.[/red]")

    def ask_enum(self, label: str, enum_cls: type[E]) -> E:
        """
        Repose la question tant que la saisie n'est pas un nom symbolique de l'enum.

        La comparaison est insensible a la casse ; les noms symboliques sont
        les valeurs des membres.
        """
        options = symbolic_names(enum_cls)
        while True:
            answer = self.ask(label).strip().casefold()
            for member in enum_cls:
                if member.value.casefold() == answer:
                    return member
            self.console.print(f"[red]Invalid value. Options: {', '.join(options)}[/red]")

    def confirm(self, label: str) -> bool:
        """Question oui/non : seule la reponse "y" confirme."""
        return self.ask(f"{label} (y/n)").strip().lower() == "y"

    def pause(self) -> None:
        """Attend que l'utilisateur appuie sur Entree."""
        self._read("\nPress Enter to return...")
