"""
Entités métier du domaine des incidences.

Exports:
- Incidence: Ticket de maintenance avec ses photos
- Photo: Photo possedee par une incidence
- IncidenceStatus, IncidencePriority: Valeurs usuelles de statut et priorite
- Organization, Employee: Entites externes referencees par identifiant
- UserIdentity: Appelant courant et ses autorites
"""

from myhome.core.entities.organization import Employee, Organization
from myhome.core.entities.incidence import (
    Incidence,
    IncidencePriority,
    IncidenceStatus,
    Photo,
)
from myhome.core.entities.user import UserIdentity

__all__ = [
    "Incidence",
    "IncidencePriority",
    "IncidenceStatus",
    "Photo",
    "Organization",
    "Employee",
    "UserIdentity",
]
