"""
Implementations SQLModel des repositories.

Ce module contient les implementations concretes des interfaces repository
definies dans myhome/core/ports/repositories.py.

Chaque repository :
- Herite de l'interface ABC correspondante du domaine
- Recoit une session SQLModel de l'unite de travail
- Convertit entre entites de domaine (dataclass) et modeles DB (SQLModel)
"""

from myhome.infrastructure.persistence.repositories.incidence_repository import (
    SQLModelIncidenceRepository,
)
from myhome.infrastructure.persistence.repositories.organization_repository import (
    SQLModelEmployeeRepository,
    SQLModelOrganizationRepository,
)

__all__ = [
    "SQLModelIncidenceRepository",
    "SQLModelOrganizationRepository",
    "SQLModelEmployeeRepository",
]
