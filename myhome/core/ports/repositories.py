"""
Interfaces ports pour les repositories.

Interfaces abstraites (ports) définissant les contrats pour la persistance des données.
Les implémentations (adaptateurs) fournissent les mécanismes de stockage concrets
(SQLite via SQLModel, mocks pour les tests, etc.).

Les repositories n'effectuent jamais de commit : la validation de la
transaction appartient à l'unité de travail (voir unit_of_work.py).
"""

from abc import ABC, abstractmethod
from typing import Optional

from myhome.core.entities import Employee, Incidence, Organization
from myhome.core.value_objects import Page, PageRequest


class IIncidenceRepository(ABC):
    """
    Interface de stockage des incidences.

    Définit les opérations pour persister et récupérer l'agrégat Incidence
    avec sa collection de photos.
    """

    @abstractmethod
    def get_by_id(self, incidence_id: str) -> Optional[Incidence]:
        """Récupère une incidence (avec ses photos) par son ID."""
        ...

    @abstractmethod
    def save(self, incidence: Incidence) -> Incidence:
        """
        Sauvegarde une incidence (insertion ou fusion).

        Un ID fourni et inconnu est inséré tel quel, un ID connu est fusionné.
        Les photos sans ID sont insérées, les photos existantes ne sont pas modifiées.

        Retourne :
            L'incidence telle que persistée (identifiants attribués)
        """
        ...

    @abstractmethod
    def delete(self, incidence_id: str) -> bool:
        """Supprime une incidence et ses photos. Retourne True si supprimée."""
        ...

    @abstractmethod
    def list_page(self, page_request: PageRequest) -> Page[Incidence]:
        """Liste une page d'incidences."""
        ...


class IOrganizationRepository(ABC):
    """Interface de lecture des organisations."""

    @abstractmethod
    def get_by_id(self, organization_id: str) -> Optional[Organization]:
        """Récupère une organisation par son ID."""
        ...


class IEmployeeRepository(ABC):
    """Interface de lecture des employés."""

    @abstractmethod
    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        """Récupère un employé par son ID."""
        ...
