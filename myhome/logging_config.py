"""
Configuration du logging via loguru.

Deux sorties :
- console (stderr) coloree, desactivable pour les commandes silencieuses
- fichier JSON avec rotation, filtre sur les logs du package myhome
"""

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

from myhome.config import Settings

_CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan> | "
    "<level>{message}</level>"
)


def configure_logging(settings: Optional[Settings] = None, console: bool = True) -> None:
    """Installe les handlers loguru de l'application.

    Args :
        settings : Parametres (niveau, fichier, rotation, retention). Defaut : Settings()
        console : Si False, seuls les logs fichier sont produits (mode --quiet)
    """
    settings = settings or Settings()
    logger.remove()

    if console:
        logger.add(
            sys.stderr,
            level=settings.log_level,
            format=_CONSOLE_FORMAT,
            colorize=True,
        )

    log_file: Path = settings.log_file
    log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        log_file,
        level="DEBUG",
        format="{message}",
        filter="myhome",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,  # Thread-safe
    )

    logger.debug("Logging configure", log_file=str(log_file), console=console)
