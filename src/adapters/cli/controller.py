"""
Boucle interactive du suivi de visionnage.

Le WatchlistController affiche le menu principal, lit le choix de
l'utilisateur et delegue a l'une des cinq actions :

    1) Ajouter      2) Afficher     3) Mettre a jour la progression
    4) Reprendre    5) Supprimer    0) Quitter

Les actions qui modifient la liste passent par le WatchlistService,
qui sauvegarde apres chaque modification. Quitter sauvegarde une derniere fois.
"""

from typing import Callable, Optional

from loguru import logger
from rich.console import Console
from rich.markup import escape

from src.core.entities.watch_item import MAX_EPISODE, MIN_EPISODE, WatchItemType
from src.services.watchlist import WatchlistService

from .display import format_heading, render_watchlist
from .prompts import Prompter

MENU = (
    "1) Add watch item",
    "2) View watch list",
    "3) Update watching progress",
    "4) Resume watching (show last progress)",
    "5) Remove watch item",
    "0) Exit",
)

# Sous-menu de mise a jour
UPDATE_EPISODE = 1
MARK_COMPLETED = 2
CANCEL = 0


class WatchlistController:
    """
    Controleur du menu interactif.

    Args:
        service: Service possedant la liste de suivi
        console: Console Rich pour l'affichage
        prompter: Lecteur de saisies (construit sur la console si None)
        clear_screen: Efface l'ecran avant chaque ecran (terminal uniquement)
        pause: Attend Entree apres chaque action
    """

    def __init__(
        self,
        service: WatchlistService,
        console: Console,
        prompter: Optional[Prompter] = None,
        clear_screen: bool = True,
        pause: bool = True,
    ) -> None:
        self.service = service
        self.console = console
        self.prompter = prompter or Prompter(console)
        self.clear_screen = clear_screen
        self.pause_enabled = pause
        self._actions: dict[int, Callable[[], None]] = {
            1: self.add_item,
            2: self.view_list,
            3: self.update_progress,
            4: self.resume_watching,
            5: self.remove_item,
        }

    def run(self) -> None:
        """Boucle principale jusqu'au choix 0, a la fin de l'entree ou a Ctrl-C."""
        logger.debug("Demarrage de la boucle interactive", count=self.service.count)
        try:
            while True:
                choice = self.show_menu()
                if choice == 0:
                    break
                self._actions[choice]()
        except (EOFError, KeyboardInterrupt):
            logger.info("Entree interrompue, sortie")
            self.console.print()

        self.service.save()
        self.console.print("\n[green]Saved. Goodbye![/green]")

    def show_menu(self) -> int:
        """Affiche le menu principal et retourne le choix (0-5)."""
        self._screen("Watchlist Tracker")
        for line in MENU:
            self.console.print(line)
        self.console.print()
        return self.prompter.ask_int("Select an option", 0, len(MENU) - 1)

    # ------------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------------

    def add_item(self) -> None:
        """Ajoute un element, avec confirmation si titre et type existent deja."""
        self._screen("Add Watch Item")

        title = self.prompter.ask_non_empty("Title")
        item_type = self.prompter.ask_enum("Type (Movie/TVShow)", WatchItemType)

        if self.service.find_duplicate(title, item_type) is not None:
            self.console.print(
                "\n[yellow]Note: An item with the same title/type already exists.[/yellow]"
            )
            if not self.prompter.confirm("Add anyway?"):
                logger.debug("Ajout annule (doublon)", title=title.strip())
                self._done("Cancelled.")
                return

        self.service.add(title, item_type)
        self._done("Added and saved.")

    def view_list(self) -> None:
        """Affiche la liste numerotee."""
        self._screen("Watch List")

        if self.service.is_empty:
            self._done("No items yet.")
            return

        self.console.print(render_watchlist(self.service.items))
        self._pause()

    def update_progress(self) -> None:
        """Met a jour l'episode ou marque un element comme termine."""
        self._screen("Update Watching Progress")

        position = self._choose_item("No items to update.", "Choose an item number to update")
        if position is None:
            return
        item = self.service.get(position)

        self._screen("Update Item")
        episode = item.last_watched_episode
        self.console.print(format_heading(item))
        self.console.print(f"Current Status: {item.status.value}")
        self.console.print(f"Last Watched Episode: {episode if episode is not None else 'N/A'}")
        self.console.print()
        self.console.print("1) Update last watched episode")
        self.console.print("2) Mark as completed")
        self.console.print("0) Cancel")
        self.console.print()

        action = self.prompter.ask_int("Select an action", CANCEL, MARK_COMPLETED)

        if action == UPDATE_EPISODE:
            if item.is_movie:
                self.console.print(
                    "\n[dim]This is a Movie. Episode tracking may not apply, "
                    "but you can still store a number (e.g., part/segment).[/dim]"
                )
            new_episode = self.prompter.ask_int(
                "Enter last watched episode number (>= 1)", MIN_EPISODE, MAX_EPISODE
            )
            self.service.record_episode(position, new_episode)
            self._done("Updated and saved.")
        elif action == MARK_COMPLETED:
            self.service.mark_completed(position)
            self._done("Marked completed and saved.")

    def resume_watching(self) -> None:
        """Affiche le point de reprise d'un element (lecture seule)."""
        self._screen("Resume Watching")

        position = self._choose_item("No items yet.", "Choose an item number to view progress")
        if position is None:
            return
        item = self.service.get(position)

        self._screen("Progress Details")
        self.console.print(format_heading(item))
        self.console.print(f"Status: {item.status.value}")
        if item.last_watched_episode is not None:
            self.console.print(
                f"[bold]Resume at episode: {item.last_watched_episode}[/bold]"
            )
        else:
            self.console.print("No episode progress recorded yet.")
        self._pause()

    def remove_item(self) -> None:
        """Supprime un element apres confirmation."""
        self._screen("Remove Watch Item")

        position = self._choose_item("No items to remove.", "Choose an item number to remove")
        if position is None:
            return
        item = self.service.get(position)

        self.console.print()
        if not self.prompter.confirm(f"Remove '{item.title}'?"):
            self._done("Cancelled.")
            return

        self.service.remove(position)
        self._done("Removed and saved.")

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _choose_item(self, empty_message: str, label: str) -> Optional[int]:
        """
        Affiche la liste et demande une position valide.

        Returns:
            La position 1-based, ou None si la liste est vide.
        """
        if self.service.is_empty:
            self._done(empty_message)
            return None

        self.console.print(render_watchlist(self.service.items))
        self.console.print()
        return self.prompter.ask_int(label, 1, self.service.count)

    def _screen(self, title: str) -> None:
        if self.clear_screen:
            self.console.clear()
        self.console.print(f"[bold cyan]=== {escape(title)} ===[/bold cyan]")

    def _done(self, message: str) -> None:
        self.console.print(f"\n{message}")
        self._pause()

    def _pause(self) -> None:
        if self.pause_enabled:
            self.prompter.pause()
