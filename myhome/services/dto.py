"""
Objets de transfert du service des incidences.

- IncidenceRequest : donnees de creation / mise a jour
- IncidenceSummary : vue aplatie d'une incidence (photos detaillees en option)
- PhotoSummary : vue d'une photo
"""

from dataclasses import dataclass, field
from datetime import date, datetime
from enum import Enum
from typing import Optional, Union

from myhome.core.entities import Incidence, Photo
from myhome.core.value_objects import UploadedFile


@dataclass
class IncidenceRequest:
    """
    Requete de creation ou de mise a jour d'une incidence.

    L'id est optionnel a la creation (identite pre-attribuee par l'appelant)
    et obligatoire pour la mise a jour. Statut et priorite acceptent une
    chaine quelconque ou un membre d'Enum (stocke par sa valeur).
    """

    id: Optional[str] = None
    title: str = ""
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Union[str, Enum, None] = None
    priority: Union[str, Enum, None] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    organization_id: Optional[str] = None
    employee_id: Optional[str] = None
    photo_files: list[UploadedFile] = field(default_factory=list)


@dataclass
class PhotoSummary:
    """Vue d'une photo d'incidence."""

    id: Optional[str]
    incidence_id: Optional[str]
    file_name: str
    content_type: Optional[str]
    storage_path: str
    size_bytes: int = 0
    created_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, photo: Photo) -> "PhotoSummary":
        return cls(
            id=photo.id,
            incidence_id=photo.incidence_id,
            file_name=photo.file_name,
            content_type=photo.content_type,
            storage_path=photo.storage_path,
            size_bytes=photo.size_bytes,
            created_at=photo.created_at,
        )


@dataclass
class IncidenceSummary:
    """
    Vue aplatie d'une incidence.

    photos n'est rempli que par la lecture avec controle de visibilite ;
    photo_count donne toujours le nombre de photos possedees.
    """

    id: Optional[str]
    title: str
    description: Optional[str] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    status: Optional[str] = None
    priority: Optional[str] = None
    longitude: Optional[float] = None
    latitude: Optional[float] = None
    organization_id: Optional[str] = None
    organization_name: Optional[str] = None
    employee_id: Optional[str] = None
    employee_name: Optional[str] = None
    photo_count: int = 0
    photos: list[PhotoSummary] = field(default_factory=list)

    @classmethod
    def from_entity(cls, incidence: Incidence) -> "IncidenceSummary":
        """Construit la vue sans developper les photos."""
        location = incidence.location
        organization = incidence.organization
        employee = incidence.employee
        return cls(
            id=incidence.id,
            title=incidence.title,
            description=incidence.description,
            start_date=incidence.start_date,
            end_date=incidence.end_date,
            status=incidence.status,
            priority=incidence.priority,
            longitude=location.longitude if location else None,
            latitude=location.latitude if location else None,
            organization_id=organization.id if organization else None,
            organization_name=organization.name if organization else None,
            employee_id=employee.id if employee else None,
            employee_name=employee.full_name if employee else None,
            photo_count=len(incidence.photos),
        )
