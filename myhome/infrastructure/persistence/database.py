"""
Configuration de la base de donnees pour MyHome.

Ce module fournit :
- Engine SQLAlchemy construit depuis la configuration
- Engine global partage par l'application
- Fonction d'initialisation des tables

La base de donnees est configuree via MYHOME_DATABASE_URL (defaut: sqlite:///data/myhome.db).
"""

from pathlib import Path
from typing import Optional

from sqlalchemy import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, create_engine

# Engine global - initialise lors du premier appel a get_engine()
_engine: Optional[Engine] = None


def build_engine(database_url: str) -> Engine:
    """
    Cree un engine pour l'URL donnee.

    Pour SQLite, le repertoire parent du fichier est cree si besoin et
    une base en memoire partage une connexion unique (StaticPool) afin
    que toutes les sessions voient les memes tables.
    """
    if not database_url.startswith("sqlite"):
        return create_engine(database_url, echo=False)

    if database_url in ("sqlite://", "sqlite:///:memory:"):
        return create_engine(
            database_url,
            echo=False,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    db_path = Path(database_url.replace("sqlite:///", ""))
    db_path.parent.mkdir(exist_ok=True, parents=True)
    return create_engine(
        database_url,
        echo=False,
        connect_args={"check_same_thread": False},
    )


def get_engine(database_url: Optional[str] = None) -> Engine:
    """
    Retourne l'engine global, en le creant si necessaire.

    Args:
        database_url: URL explicite, sinon celle de la configuration
    """
    global _engine
    if _engine is None:
        if database_url is None:
            from myhome.config import Settings

            database_url = Settings().database_url
        _engine = build_engine(database_url)
    return _engine


def init_db(engine: Optional[Engine] = None) -> Engine:
    """
    Cree toutes les tables si elles n'existent pas deja.

    Doit etre appelee une fois au demarrage de l'application.

    Retourne :
        L'engine initialise
    """
    # Import des modeles pour enregistrer leurs metadonnees
    from myhome.infrastructure.persistence import models  # noqa: F401

    engine = engine or get_engine()
    SQLModel.metadata.create_all(engine)
    return engine
