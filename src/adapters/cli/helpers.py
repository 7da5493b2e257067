"""
Utilitaires partages pour les commandes CLI.

Ce module fournit :
- with_container : decorateur injectant un container initialise
- console : instance Rich Console partagee
"""

from functools import wraps

from src.adapters.cli import console
from src.container import Container

__all__ = ["console", "with_container"]


def with_container(func):
    """
    Decorateur qui injecte un container neuf en premier argument.

    Usage:
        @with_container
        def my_command(container, ...):
            config = container.config()
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        container = Container()
        return func(container, *args, **kwargs)
    return wrapper
