"""
Service des incidences orchestrant le cycle de vie de l'agregat Incidence.

Responsabilites:
- Creation d'une incidence avec resolution des liens (organisation, employe)
  et rattachement des photos televersees, dans une seule transaction
- Mise a jour des champs descriptifs (les liens et photos ne changent pas)
- Suppression, lecture et pagination
- Lecture avec controle de visibilite des photos selon les autorites de l'appelant

Les lectures s'executent dans une unite de travail en lecture seule.
Pour les lectures, une incidence absente donne None, jamais une erreur.
"""

from enum import Enum
from typing import Optional, Union

from loguru import logger

from myhome.core.entities import Incidence, Photo, UserIdentity
from myhome.core.exceptions import NotFoundError, ValidationError
from myhome.core.ports.photo_storage import IPhotoManager
from myhome.core.ports.unit_of_work import UnitOfWorkFactory
from myhome.core.ports.users import ICurrentUserResolver
from myhome.core.value_objects import Geolocation, Page, PageRequest
from myhome.services.dto import IncidenceRequest, IncidenceSummary, PhotoSummary


# Fragment d'autorite masquant le detail des photos (recherche par sous-chaine)
EMPLOYEE_AUTHORITY_FRAGMENT = "ROLE_EMPLOYEE"


def _opaque(value: Union[str, Enum, None]) -> Optional[str]:
    """Statut/priorite stockes tels quels ; un membre d'Enum l'est par sa valeur."""
    if isinstance(value, Enum):
        return str(value.value)
    return value


class IncidenceService:
    """
    Service d'orchestration des incidences.

    Example:
        service = IncidenceService(
            uow_factory=lambda read_only=False: SQLModelUnitOfWork(engine, read_only),
            photo_manager=photo_service,
            user_resolver=ContextUserResolver(),
        )
        incidence = service.create(IncidenceRequest(title="Fuite", ...))
        summary = service.get_by_id_with_visibility(incidence.id)
    """

    def __init__(
        self,
        uow_factory: UnitOfWorkFactory,
        photo_manager: IPhotoManager,
        user_resolver: ICurrentUserResolver,
        strict_links: bool = False,
        max_page_size: int = 100,
    ) -> None:
        """
        Initialise le service des incidences.

        Args:
            uow_factory: Fabrique d'unites de travail (read_only=True pour les lectures)
            photo_manager: Gestionnaire des photos televersees
            user_resolver: Resolution de l'appelant courant
            strict_links: Si True, un lien organisation/employe introuvable
                leve NotFoundError au lieu d'etre laisse vide
            max_page_size: Taille maximale d'une page (les demandes plus grandes sont ramenees)
        """
        self._uow_factory = uow_factory
        self._photo_manager = photo_manager
        self._user_resolver = user_resolver
        self._strict_links = strict_links
        self._max_page_size = max_page_size

    # ------------------------------------------------------------------
    # Ecritures
    # ------------------------------------------------------------------

    def create(self, request: IncidenceRequest) -> Incidence:
        """
        Cree une incidence et rattache ses photos.

        L'incidence est sauvegardee une premiere fois pour obtenir son identite,
        chaque fichier est confie au gestionnaire de photos, puis l'incidence est
        sauvegardee a nouveau avec ses photos. Les deux ecritures sont validees
        ensemble : en cas d'echec, la transaction est annulee et les fichiers
        deja stockes sont supprimes.

        Raises:
            ValidationError: Requete ou fichier invalide
            NotFoundError: Lien introuvable (mode strict uniquement)
            StorageError: Echec de la persistance
        """
        self._validate(request)
        stored_photos: list[Photo] = []

        with self._uow_factory() as uow:
            try:
                incidence = Incidence(
                    id=request.id,
                    title=request.title,
                    description=request.description,
                    start_date=request.start_date,
                    # Renseignee des la creation, comme a la mise a jour
                    end_date=request.end_date,
                    status=_opaque(request.status),
                    priority=_opaque(request.priority),
                    location=Geolocation.from_coordinates(
                        request.longitude, request.latitude
                    ),
                )
                if request.organization_id is not None:
                    incidence.organization = self._resolve_link(
                        uow.organizations, "organization", request.organization_id
                    )
                if request.employee_id is not None:
                    incidence.employee = self._resolve_link(
                        uow.employees, "employee", request.employee_id
                    )

                incidence = uow.incidences.save(incidence)
                logger.info(f"Incidence creee: {incidence.id} ({incidence.title})")

                for upload in request.photo_files:
                    photo = self._photo_manager.attach(incidence, upload)
                    stored_photos.append(photo)
                    incidence.photos.append(photo)

                incidence = uow.incidences.save(incidence)
                uow.commit()
            except Exception:
                logger.error(
                    f"Creation d'incidence annulee, {len(stored_photos)} photo(s) a supprimer"
                )
                for photo in stored_photos:
                    self._photo_manager.discard(photo)
                raise

        logger.debug(
            f"Incidence {incidence.id} persistee avec {len(incidence.photos)} photo(s)"
        )
        return incidence

    def update(self, request: IncidenceRequest) -> Optional[IncidenceSummary]:
        """
        Met a jour les champs descriptifs d'une incidence existante.

        Titre, description, dates, statut, priorite et geolocalisation sont
        remplaces ; organisation, employe et photos sont conserves.

        Returns:
            La vue de l'incidence modifiee, ou None si l'ID est inconnu

        Raises:
            ValidationError: Requete sans ID ou invalide
            StorageError: Echec de la persistance
        """
        if request.id is None:
            raise ValidationError("L'ID est obligatoire pour une mise a jour", field="id")

        with self._uow_factory() as uow:
            incidence = uow.incidences.get_by_id(request.id)
            if incidence is None:
                logger.debug(f"Mise a jour ignoree, incidence inconnue: {request.id}")
                return None
            self._validate(request)

            incidence.title = request.title
            incidence.description = request.description
            incidence.start_date = request.start_date
            incidence.end_date = request.end_date
            incidence.status = _opaque(request.status)
            incidence.priority = _opaque(request.priority)
            incidence.location = Geolocation.from_coordinates(
                request.longitude, request.latitude
            )

            incidence = uow.incidences.save(incidence)
            uow.commit()

        logger.debug(f"Incidence modifiee: {incidence.id}")
        return IncidenceSummary.from_entity(incidence)

    def delete(self, incidence_id: str) -> None:
        """
        Supprime une incidence et ses photos.

        Aucun controle d'existence : un ID inconnu est sans effet.
        """
        with self._uow_factory() as uow:
            deleted = uow.incidences.delete(incidence_id)
            uow.commit()
        logger.debug(f"Incidence supprimee: {incidence_id} (existait: {deleted})")

    # ------------------------------------------------------------------
    # Lectures
    # ------------------------------------------------------------------

    def get_by_id(self, incidence_id: str) -> Optional[Incidence]:
        """Recupere une incidence avec ses photos, ou None."""
        with self._uow_factory(read_only=True) as uow:
            return uow.incidences.get_by_id(incidence_id)

    def list_page(self, page_request: Optional[PageRequest] = None) -> Page[IncidenceSummary]:
        """Liste une page d'incidences (vues sans detail des photos)."""
        page_request = page_request or PageRequest()
        if page_request.size > self._max_page_size:
            page_request = PageRequest(
                page=page_request.page,
                size=self._max_page_size,
                sort_by=page_request.sort_by,
                descending=page_request.descending,
            )
        with self._uow_factory(read_only=True) as uow:
            page = uow.incidences.list_page(page_request)
        return page.map(IncidenceSummary.from_entity)

    def get_by_id_with_visibility(self, incidence_id: str) -> Optional[IncidenceSummary]:
        """
        Recupere la vue d'une incidence en tenant compte de l'appelant.

        Si l'appelant porte une autorite contenant "ROLE_EMPLOYEE" et que
        l'incidence a des photos, la vue est retournee sans detail des photos.
        Sinon chaque photo est ajoutee a la vue, dans l'ordre de rattachement.

        Returns:
            La vue, ou None si l'incidence n'existe pas
        """
        with self._uow_factory(read_only=True) as uow:
            incidence = uow.incidences.get_by_id(incidence_id)
        if incidence is None:
            logger.warning(f"Incidence introuvable: {incidence_id}")
            return None

        user = self._user_resolver.current_user()
        summary = IncidenceSummary.from_entity(incidence)

        if self._employee_only_view(incidence, user):
            return summary

        summary.photos.extend(PhotoSummary.from_entity(photo) for photo in incidence.photos)
        return summary

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _employee_only_view(
        self, incidence: Incidence, user: Optional[UserIdentity]
    ) -> bool:
        if user is None or not incidence.photos:
            return False
        return user.has_authority_containing(EMPLOYEE_AUTHORITY_FRAGMENT)

    def _resolve_link(self, repository, resource: str, link_id: str):
        """Resout un lien ; un ID inconnu laisse le lien vide (ou leve en mode strict)."""
        entity = repository.get_by_id(link_id)
        if entity is None:
            if self._strict_links:
                raise NotFoundError(resource, link_id)
            logger.warning(f"Lien {resource} introuvable ({link_id}), laisse vide")
        return entity

    @staticmethod
    def _validate(request: IncidenceRequest) -> None:
        if not request.title or not request.title.strip():
            raise ValidationError("Le titre est obligatoire", field="title")
        if (
            request.start_date is not None
            and request.end_date is not None
            and request.end_date < request.start_date
        ):
            raise ValidationError(
                "La date de fin precede la date de debut", field="end_date"
            )
