"""
Module de persistance pour MyHome.

Ce module fournit l'infrastructure de stockage utilisant SQLModel (SQLAlchemy).
Il contient :

- database.py : Construction de l'engine, initialisation des tables
- models.py : Modeles SQLModel representant les tables de la base de donnees
- repositories/ : Implementations des ports repository
- unit_of_work.py : Frontiere transactionnelle regroupant les repositories

Les modeles ici sont des adapters de persistance, distincts des entites de domaine
(dataclass dans core/entities/). La conversion entre les deux se fait dans les
repositories.

Usage:
    from myhome.infrastructure.persistence import build_engine, init_db
    from myhome.infrastructure.persistence import SQLModelUnitOfWork

    engine = init_db(build_engine("sqlite://"))
    with SQLModelUnitOfWork(engine) as uow:
        uow.incidences.save(incidence)
        uow.commit()
"""

from myhome.infrastructure.persistence.database import build_engine, get_engine, init_db
from myhome.infrastructure.persistence.models import (
    EmployeeModel,
    IncidenceModel,
    OrganizationModel,
    PhotoModel,
)
from myhome.infrastructure.persistence.unit_of_work import SQLModelUnitOfWork

__all__ = [
    "build_engine",
    "get_engine",
    "init_db",
    "OrganizationModel",
    "EmployeeModel",
    "IncidenceModel",
    "PhotoModel",
    "SQLModelUnitOfWork",
]
