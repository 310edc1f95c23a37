"""
Modeles SQLModel pour la base de donnees MyHome.

Ces modeles representent les tables de la base de donnees.
Ils sont distincts des entites de domaine (dataclass dans core/entities/)
selon l'architecture hexagonale.

Tables:
- organizations: Organisations referencees par les incidences
- employees: Employes referencees par les incidences
- incidences: Tickets de maintenance (geolocalisation embarquee)
- photos: Photos possedees par une incidence
"""

from __future__ import annotations

from datetime import date, datetime, timezone

from sqlalchemy import DateTime
from sqlmodel import Field, Index, SQLModel


def utc_now() -> datetime:
    """Horodatage courant en UTC (avec fuseau)."""
    return datetime.now(timezone.utc)


class OrganizationModel(SQLModel, table=True):
    """Organisation gestionnaire."""

    __tablename__ = "organizations"

    id: int | None = Field(default=None, primary_key=True)
    name: str = Field(index=True)
    created_at: datetime | None = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True)
    )


class EmployeeModel(SQLModel, table=True):
    """Employe, eventuellement rattache a une organisation."""

    __tablename__ = "employees"

    id: int | None = Field(default=None, primary_key=True)
    first_name: str
    last_name: str = Field(index=True)
    email: str | None = Field(default=None, index=True)
    organization_id: int | None = Field(default=None, foreign_key="organizations.id")
    created_at: datetime | None = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True)
    )


class IncidenceModel(SQLModel, table=True):
    """
    Modele representant une incidence.

    La geolocalisation est embarquee dans deux colonnes : soit les deux sont
    renseignees, soit aucune.
    """

    __tablename__ = "incidences"
    __table_args__ = (
        Index("ix_incidences_status_priority", "status", "priority"),
    )

    id: int | None = Field(default=None, primary_key=True)
    title: str = Field(index=True)
    description: str | None = None
    start_date: date | None = Field(default=None, index=True)
    end_date: date | None = None
    status: str | None = None
    priority: str | None = None
    longitude: float | None = None
    latitude: float | None = None
    organization_id: int | None = Field(
        default=None, foreign_key="organizations.id", index=True
    )
    employee_id: int | None = Field(default=None, foreign_key="employees.id", index=True)
    created_at: datetime | None = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True)
    )
    updated_at: datetime | None = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True)
    )


class PhotoModel(SQLModel, table=True):
    """
    Photo d'une incidence.

    Liee a son incidence via incidence_id (foreign key), jamais reassignee.
    """

    __tablename__ = "photos"

    id: int | None = Field(default=None, primary_key=True)
    incidence_id: int = Field(foreign_key="incidences.id", index=True)
    file_name: str
    content_type: str | None = None
    storage_path: str
    size_bytes: int = 0
    created_at: datetime | None = Field(
        default_factory=utc_now, sa_type=DateTime(timezone=True)
    )
