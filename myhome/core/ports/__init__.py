"""
Ports (interfaces abstraites) définissant les contrats pour les adaptateurs.

Les ports sont les frontières de l'architecture hexagonale. Ils définissent
ce dont le domaine a besoin du monde extérieur sans spécifier
comment ces besoins sont satisfaits.

Ports repository : Contrats de persistance des données
- IIncidenceRepository : Stockage des incidences et de leurs photos
- IOrganizationRepository : Lecture des organisations
- IEmployeeRepository : Lecture des employés
- IUnitOfWork : Frontière transactionnelle regroupant les repositories

Ports photos :
- IPhotoStorage : Stockage binaire des fichiers
- IPhotoManager : Rattachement d'un fichier à une incidence

Ports utilisateurs :
- ICurrentUserResolver : Identité et autorités de l'appelant
"""

from myhome.core.ports.repositories import (
    IEmployeeRepository,
    IIncidenceRepository,
    IOrganizationRepository,
)
from myhome.core.ports.unit_of_work import IUnitOfWork, UnitOfWorkFactory
from myhome.core.ports.photo_storage import IPhotoManager, IPhotoStorage
from myhome.core.ports.users import ICurrentUserResolver

__all__ = [
    # Repositories
    "IIncidenceRepository",
    "IOrganizationRepository",
    "IEmployeeRepository",
    "IUnitOfWork",
    "UnitOfWorkFactory",
    # Photos
    "IPhotoStorage",
    "IPhotoManager",
    # Utilisateurs
    "ICurrentUserResolver",
]
