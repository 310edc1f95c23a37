"""
Implementation SQLModel du repository Incidence.

Implemente l'interface IIncidenceRepository pour la persistance des incidences
et de leurs photos via SQLModel. Les ecritures sont seulement flushees :
le commit appartient a l'unite de travail.
"""

from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from myhome.core.entities import Incidence, Photo
from myhome.core.exceptions import ValidationError
from myhome.core.ports.repositories import IIncidenceRepository
from myhome.core.value_objects import Geolocation, Page, PageRequest
from myhome.infrastructure.persistence.models import (
    EmployeeModel,
    IncidenceModel,
    OrganizationModel,
    PhotoModel,
    utc_now,
)
from myhome.infrastructure.persistence.repositories.helpers import (
    as_utc,
    parse_id,
    require_id,
    to_domain_id,
)
from myhome.infrastructure.persistence.repositories.organization_repository import (
    SQLModelEmployeeRepository,
    SQLModelOrganizationRepository,
)

# Colonnes autorisees pour le tri des pages
SORTABLE_COLUMNS: frozenset[str] = frozenset({
    "id", "title", "start_date", "end_date", "status", "priority", "created_at"
})


class SQLModelIncidenceRepository(IIncidenceRepository):
    """
    Repository SQLModel pour les incidences.

    Implemente IIncidenceRepository avec conversion bidirectionnelle
    entre l'agregat Incidence (domaine) et IncidenceModel + PhotoModel (persistance).
    """

    def __init__(self, session: Session) -> None:
        """
        Initialise le repository avec une session SQLModel.

        Args :
            session : Session SQLModel active pour les operations DB
        """
        self._session = session

    def _photo_to_entity(self, model: PhotoModel) -> Photo:
        return Photo(
            id=to_domain_id(model.id),
            incidence_id=to_domain_id(model.incidence_id),
            file_name=model.file_name,
            content_type=model.content_type,
            storage_path=model.storage_path,
            size_bytes=model.size_bytes,
            created_at=as_utc(model.created_at),
        )

    def _photo_models(self, incidence_pk: int) -> list[PhotoModel]:
        statement = (
            select(PhotoModel)
            .where(PhotoModel.incidence_id == incidence_pk)
            .order_by(PhotoModel.id)
        )
        return list(self._session.exec(statement).all())

    def _to_entity(self, model: IncidenceModel) -> Incidence:
        """
        Convertit un modele DB en agregat domaine.

        Charge les photos (ordre d'insertion) et resout organisation et employe.
        """
        organization = None
        if model.organization_id is not None:
            org_model = self._session.get(OrganizationModel, model.organization_id)
            if org_model:
                organization = SQLModelOrganizationRepository.to_entity(org_model)

        employee = None
        if model.employee_id is not None:
            emp_model = self._session.get(EmployeeModel, model.employee_id)
            if emp_model:
                employee = SQLModelEmployeeRepository.to_entity(emp_model)

        return Incidence(
            id=to_domain_id(model.id),
            title=model.title,
            description=model.description,
            start_date=model.start_date,
            end_date=model.end_date,
            status=model.status,
            priority=model.priority,
            location=Geolocation.from_coordinates(model.longitude, model.latitude),
            organization=organization,
            employee=employee,
            photos=[self._photo_to_entity(p) for p in self._photo_models(model.id)],
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )

    def _apply(self, model: IncidenceModel, entity: Incidence) -> None:
        """Copie les champs de l'entite sur le modele."""
        model.title = entity.title
        model.description = entity.description
        model.start_date = entity.start_date
        model.end_date = entity.end_date
        model.status = entity.status
        model.priority = entity.priority
        model.longitude = entity.location.longitude if entity.location else None
        model.latitude = entity.location.latitude if entity.location else None
        model.organization_id = (
            require_id(entity.organization.id, "organization_id")
            if entity.organization and entity.organization.id is not None
            else None
        )
        model.employee_id = (
            require_id(entity.employee.id, "employee_id")
            if entity.employee and entity.employee.id is not None
            else None
        )

    def get_by_id(self, incidence_id: str) -> Optional[Incidence]:
        """Recupere une incidence par son ID."""
        pk = parse_id(incidence_id)
        if pk is None:
            return None
        model = self._session.get(IncidenceModel, pk)
        if model:
            return self._to_entity(model)
        return None

    def save(self, incidence: Incidence) -> Incidence:
        """Sauvegarde une incidence (insertion ou fusion) et ses nouvelles photos."""
        existing = None
        pk = None
        if incidence.id is not None:
            pk = require_id(incidence.id)
            existing = self._session.get(IncidenceModel, pk)

        if existing:
            # Fusion
            model = existing
            self._apply(model, incidence)
            model.updated_at = utc_now()
        else:
            # Insertion, avec l'ID pre-attribue s'il y en a un
            model = IncidenceModel(title=incidence.title)
            self._apply(model, incidence)
            if pk is not None:
                model.id = pk
        self._session.add(model)
        self._session.flush()

        for photo in incidence.photos:
            if photo.id is not None:
                continue
            self._session.add(
                PhotoModel(
                    incidence_id=model.id,
                    file_name=photo.file_name,
                    content_type=photo.content_type,
                    storage_path=photo.storage_path,
                    size_bytes=photo.size_bytes,
                )
            )
        self._session.flush()
        self._session.refresh(model)
        return self._to_entity(model)

    def delete(self, incidence_id: str) -> bool:
        """Supprime une incidence et ses photos. Retourne True si supprimee."""
        pk = parse_id(incidence_id)
        if pk is None:
            return False
        model = self._session.get(IncidenceModel, pk)
        if not model:
            return False
        for photo_model in self._photo_models(pk):
            self._session.delete(photo_model)
        self._session.flush()
        self._session.delete(model)
        self._session.flush()
        return True

    def list_page(self, page_request: PageRequest) -> Page[Incidence]:
        """Liste une page d'incidences, triee par ID par defaut."""
        sort_by = page_request.sort_by or "id"
        if sort_by not in SORTABLE_COLUMNS:
            raise ValidationError(f"Tri non supporte: {sort_by}", field="sort_by")
        column = getattr(IncidenceModel, sort_by)
        order = column.desc() if page_request.descending else column.asc()

        total = self._session.exec(
            select(func.count()).select_from(IncidenceModel)
        ).one()
        statement = (
            select(IncidenceModel)
            .order_by(order, IncidenceModel.id)
            .offset(page_request.offset)
            .limit(page_request.size)
        )
        models = self._session.exec(statement).all()
        return Page(
            items=[self._to_entity(model) for model in models],
            total=total,
            page=page_request.page,
            size=page_request.size,
        )
