"""
Point d'entrée CLI de MyHome.

Configure le logging, initialise la base de données et monte les commandes.
"""

from typing import Annotated

import typer
from loguru import logger

from . import __version__
from .adapters.cli import incidences_app
from .container import Container
from .logging_config import configure_logging

app = typer.Typer(
    name="myhome",
    help="Portail MyHome - gestion des incidences",
)
container = Container()

# Monter les commandes incidences comme sous-commande
app.add_typer(incidences_app, name="incidences")


@app.callback()
def main_callback(
    quiet: Annotated[
        bool,
        typer.Option("--quiet", "-q", help="Mode silencieux (logs fichier uniquement)"),
    ] = False,
) -> None:
    """MyHome - Gestion des incidences."""
    configure_logging(container.config(), console=not quiet)


@app.command()
def info() -> None:
    """Affiche la configuration actuelle."""
    config = container.config()
    logger.info("Configuration MyHome")
    typer.echo(f"Base de données : {config.database_url}")
    typer.echo(f"Photos : {config.photos_dir}")
    typer.echo(f"Taille max photo : {config.max_photo_size_mb} MB")
    typer.echo(f"Extensions : {', '.join(config.allowed_photo_extensions)}")
    typer.echo(f"Liens stricts : {'oui' if config.strict_links else 'non'}")
    typer.echo(f"Niveau de log : {config.log_level}")


@app.command()
def version() -> None:
    """Affiche les informations de version."""
    typer.echo(f"MyHome v{__version__}")


@app.command(name="init-db")
def init_db() -> None:
    """Crée les tables de la base de données si nécessaire."""
    container.database.init()
    typer.echo(f"Base initialisée : {container.config().database_url}")


def main() -> None:
    """Point d'entrée de l'application."""
    logger.info("Démarrage de MyHome", version=__version__)
    app()


if __name__ == "__main__":
    main()
