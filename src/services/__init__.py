"""
Application services layer (use cases).

Services orchestrate the domain logic to fulfill application use cases.
They coordinate between entities and ports.

Services depend on ports (interfaces) from core/, never on concrete
implementations from adapters/.
"""

from src.services.watchlist import WatchlistService

__all__ = [
    "WatchlistService",
]
