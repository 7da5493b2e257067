"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour le CLI :
configuration, repository JSON et service de la liste de suivi.
"""

from dependency_injector import containers, providers

from .config import Settings
from .infrastructure.persistence.json_storage import JsonWatchlistStorage
from .services.watchlist import WatchlistService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        service = container.watchlist_service()
        service.add("The Matrix", WatchItemType.MOVIE)
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Repository - un seul fichier par processus
    watchlist_storage = providers.Singleton(
        JsonWatchlistStorage,
        file_path=config.provided.data_file,
    )

    # Service - charge la liste a la creation
    watchlist_service = providers.Factory(
        WatchlistService.open,
        storage=watchlist_storage,
    )
