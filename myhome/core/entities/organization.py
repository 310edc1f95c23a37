"""
Entités externes referencees par les incidences.

Les organisations et employes sont geres ailleurs dans le portail : le module
des incidences ne fait que les resoudre par identifiant pour creer les liens.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass
class Organization:
    """Organisation (syndic, gestionnaire) a laquelle une incidence est rattachee."""

    id: Optional[str] = None
    name: str = ""


@dataclass
class Employee:
    """Employe charge d'une incidence."""

    id: Optional[str] = None
    first_name: str = ""
    last_name: str = ""
    email: Optional[str] = None
    organization_id: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
