"""
Entités incidence et photo.

Une Incidence est un ticket de maintenance signale sur un bien. Elle possede
exclusivement sa collection de Photos : une photo est creee uniquement en
rattachant un fichier televerse a une incidence deja persistee.
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional

from myhome.core.entities.organization import Employee, Organization
from myhome.core.value_objects import Geolocation


class IncidenceStatus(Enum):
    """Statuts usuels d'une incidence (toute autre valeur est acceptee telle quelle)."""

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    RESOLVED = "RESOLVED"
    CLOSED = "CLOSED"


class IncidencePriority(Enum):
    """Priorites usuelles d'une incidence (toute autre valeur est acceptee telle quelle)."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    URGENT = "URGENT"


@dataclass
class Photo:
    """
    Photo justificative d'une incidence.

    Attributs :
        id : Identifiant base de donnees (None avant persistance)
        incidence_id : Incidence proprietaire, fixee a la creation
        file_name : Nom du fichier televerse
        content_type : Type MIME declare
        storage_path : Reference du fichier dans le stockage des photos
        size_bytes : Taille du contenu en octets
        created_at : Date de creation de l'enregistrement
    """

    id: Optional[str] = None
    incidence_id: Optional[str] = None
    file_name: str = ""
    content_type: Optional[str] = None
    storage_path: str = ""
    size_bytes: int = 0
    created_at: Optional[datetime] = None


@dataclass
class Incidence:
    """
    Ticket de maintenance, agregat central du domaine.

    Attributs :
        id : Identifiant (attribue par le stockage, ou pre-attribue par l'appelant)
        title : Titre court
        description : Description libre
        start_date : Date de debut
        end_date : Date de fin (optionnelle)
        status : Statut, valeur opaque stockee telle quelle
        priority : Priorite, valeur opaque stockee telle quelle
        location : Geolocalisation, presente seulement si les deux coordonnees le sont
        organization : Organisation rattachee (optionnelle)
        employee : Employe rattache (optionnel)
        photos : Photos possedees par l'incidence, dans l'ordre de rattachement
    """

    id: Optional[str] = None
    title: str = ""
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    location: Optional[Geolocation] = None
    organization: Optional[Organization] = None
    employee: Optional[Employee] = None
    photos: list[Photo] = field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
