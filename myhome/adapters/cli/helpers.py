"""
Utilitaires partages pour les commandes CLI de MyHome.

Ce module fournit :
- console : instance Rich Console partagee
- suppress_loguru : context manager pour desactiver/reactiver les logs loguru
- with_container : decorateur injectant un container initialise
- load_uploads : lecture des fichiers photo passes en option
"""

from contextlib import contextmanager
from functools import wraps
from pathlib import Path
from typing import Iterable

from loguru import logger as loguru_logger
from rich.console import Console

from myhome.container import Container
from myhome.core.value_objects import UploadedFile

console = Console()


@contextmanager
def suppress_loguru():
    """
    Context manager pour desactiver les logs loguru pendant l'affichage Rich.

    Usage:
        with suppress_loguru():
            console.print(...)
    """
    loguru_logger.disable("myhome")
    try:
        yield
    finally:
        loguru_logger.enable("myhome")


def with_container(requires_db: bool = True):
    """
    Decorateur qui injecte un container initialise en premier argument.

    Args:
        requires_db: Si True (defaut), initialise la base de donnees.

    Usage:
        @with_container()
        def _my_command(container, ...):
            service = container.incidence_service()
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            container = Container()
            if requires_db:
                container.database.init()
            return func(container, *args, **kwargs)
        return wrapper
    return decorator


def load_uploads(paths: Iterable[Path]) -> list[UploadedFile]:
    """Lit les fichiers locaux et les convertit en fichiers televerses."""
    return [UploadedFile(file_name=path.name, content=path.read_bytes()) for path in paths]
