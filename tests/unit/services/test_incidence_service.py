"""
Tests pour IncidenceService - orchestration du cycle de vie des incidences.

Couvre:
- Creation (geolocalisation, liens, photos, ID pre-attribue, atomicite)
- Mise a jour (champs remplaces, liens et photos conserves, ID inconnu)
- Suppression et pagination
- Lecture avec controle de visibilite des photos
"""

from datetime import date, timedelta
from unittest.mock import MagicMock

import pytest

from myhome.core.entities import IncidencePriority, IncidenceStatus, Photo, UserIdentity
from myhome.core.exceptions import NotFoundError, StorageError, ValidationError
from myhome.core.ports.photo_storage import IPhotoManager
from myhome.core.value_objects import Geolocation, PageRequest, UploadedFile
from myhome.services.dto import IncidenceRequest, IncidenceSummary
from myhome.services.incidence import IncidenceService


# ============================================================================
# Fixtures
# ============================================================================


@pytest.fixture
def leak_request() -> IncidenceRequest:
    """Requete de creation type, sans photo."""
    return IncidenceRequest(
        title="Leak",
        description="Fuite au plafond du garage",
        start_date=date(2024, 3, 1),
        end_date=date(2024, 3, 5),
        status="OPEN",
        priority="HIGH",
    )


def _uploads(count: int) -> list[UploadedFile]:
    return [
        UploadedFile(file_name=f"photo_{i}.jpg", content=f"jpeg-{i}".encode())
        for i in range(count)
    ]


# ============================================================================
# Tests: create
# ============================================================================


class TestCreate:
    def test_create_then_get_by_id(self, incidence_service, leak_request):
        created = incidence_service.create(leak_request)
        fetched = incidence_service.get_by_id(created.id)

        assert fetched is not None
        assert fetched.title == "Leak"
        assert fetched.description == "Fuite au plafond du garage"
        assert fetched.start_date == date(2024, 3, 1)
        assert fetched.end_date == date(2024, 3, 5)
        assert fetched.status == "OPEN"
        assert fetched.priority == "HIGH"
        assert fetched.photos == []

    @pytest.mark.parametrize(
        "longitude,latitude",
        [(None, None), (-3.70, None), (None, 40.41)],
    )
    def test_partial_coordinates_give_no_location(
        self, incidence_service, leak_request, longitude, latitude
    ):
        leak_request.longitude = longitude
        leak_request.latitude = latitude
        created = incidence_service.create(leak_request)
        assert created.location is None
        assert incidence_service.get_by_id(created.id).location is None

    def test_both_coordinates_give_location(self, incidence_service, leak_request):
        leak_request.longitude = -3.70
        leak_request.latitude = 40.41
        created = incidence_service.create(leak_request)
        assert incidence_service.get_by_id(created.id).location == Geolocation(-3.70, 40.41)

    def test_photos_attached_and_owned(self, incidence_service, leak_request):
        leak_request.photo_files = _uploads(3)
        created = incidence_service.create(leak_request)

        assert len(created.photos) == 3
        assert all(photo.incidence_id == created.id for photo in created.photos)
        assert [p.file_name for p in created.photos] == [
            "photo_0.jpg", "photo_1.jpg", "photo_2.jpg"
        ]
        assert len(incidence_service.get_by_id(created.id).photos) == 3

    def test_photo_files_written_to_storage(
        self, incidence_service, leak_request, photo_storage
    ):
        leak_request.photo_files = _uploads(1)
        created = incidence_service.create(leak_request)
        stored = photo_storage.resolve(created.photos[0].storage_path)
        assert stored.read_bytes() == b"jpeg-0"

    def test_links_resolved(self, incidence_service, leak_request, seeded_links):
        leak_request.organization_id = seeded_links["organization_id"]
        leak_request.employee_id = seeded_links["employee_id"]
        created = incidence_service.create(leak_request)

        assert created.organization.name == "Fincas del Sol"
        assert created.employee.full_name == "Lucia Garcia"

    def test_unknown_links_left_unset(self, incidence_service, leak_request):
        """Un lien introuvable est laisse vide, sans erreur."""
        leak_request.organization_id = "999"
        leak_request.employee_id = "998"
        created = incidence_service.create(leak_request)

        assert created.id is not None
        assert created.organization is None
        assert created.employee is None

    def test_strict_links_raise_not_found(
        self, uow_factory, photo_service, user_resolver, leak_request
    ):
        service = IncidenceService(
            uow_factory=uow_factory,
            photo_manager=photo_service,
            user_resolver=user_resolver,
            strict_links=True,
        )
        leak_request.organization_id = "999"

        with pytest.raises(NotFoundError) as exc_info:
            service.create(leak_request)
        assert exc_info.value.resource == "organization"
        assert service.list_page().total == 0

    def test_preassigned_id(self, incidence_service, leak_request):
        leak_request.id = "77"
        created = incidence_service.create(leak_request)
        assert created.id == "77"
        assert incidence_service.get_by_id("77").title == "Leak"

    def test_preassigned_zero_id(self, incidence_service, leak_request):
        """La cle 0 est un identifiant valide : une seule ligne, photos rattachees."""
        leak_request.id = "0"
        leak_request.photo_files = _uploads(1)
        created = incidence_service.create(leak_request)

        assert created.id == "0"
        assert [p.incidence_id for p in created.photos] == ["0"]
        assert incidence_service.get_by_id("0").title == "Leak"
        assert incidence_service.list_page().total == 1

    def test_timestamps_are_utc(self, incidence_service, leak_request):
        created = incidence_service.create(leak_request)
        fetched = incidence_service.get_by_id(created.id)

        assert fetched.created_at is not None
        assert fetched.created_at.utcoffset() == timedelta(0)
        assert fetched.created_at == created.created_at

    def test_enum_status_and_priority_stored_by_value(self, incidence_service, leak_request):
        leak_request.status = IncidenceStatus.IN_PROGRESS
        leak_request.priority = IncidencePriority.URGENT
        created = incidence_service.create(leak_request)
        assert created.status == "IN_PROGRESS"
        assert created.priority == "URGENT"

    def test_any_status_value_accepted(self, incidence_service, leak_request):
        leak_request.status = "EN_ATTENTE_SYNDIC"
        created = incidence_service.create(leak_request)
        assert incidence_service.get_by_id(created.id).status == "EN_ATTENTE_SYNDIC"

    def test_blank_title_rejected(self, incidence_service, leak_request):
        leak_request.title = "   "
        with pytest.raises(ValidationError) as exc_info:
            incidence_service.create(leak_request)
        assert exc_info.value.field == "title"

    def test_end_before_start_rejected(self, incidence_service, leak_request):
        leak_request.end_date = date(2024, 2, 1)
        with pytest.raises(ValidationError):
            incidence_service.create(leak_request)

    def test_out_of_range_coordinates_rejected(self, incidence_service, leak_request):
        leak_request.longitude = 200.0
        leak_request.latitude = 10.0
        with pytest.raises(ValidationError):
            incidence_service.create(leak_request)
        assert incidence_service.list_page().total == 0


class TestCreateAtomicity:
    """Un echec de rattachement annule toute la creation."""

    def test_attach_failure_rolls_back_and_discards(
        self, uow_factory, user_resolver, leak_request
    ):
        photo_manager = MagicMock(spec=IPhotoManager)
        first_photo = Photo(file_name="photo_0.jpg", storage_path="1/a.jpg")
        photo_manager.attach.side_effect = [first_photo, StorageError("disque plein")]
        service = IncidenceService(
            uow_factory=uow_factory,
            photo_manager=photo_manager,
            user_resolver=user_resolver,
        )
        leak_request.photo_files = _uploads(2)

        with pytest.raises(StorageError):
            service.create(leak_request)

        assert service.list_page().total == 0
        photo_manager.discard.assert_called_once_with(first_photo)

    def test_invalid_photo_rolls_back(self, incidence_service, leak_request, photo_storage):
        leak_request.photo_files = [
            UploadedFile(file_name="ok.jpg", content=b"jpeg"),
            UploadedFile(file_name="virus.exe", content=b"MZ"),
        ]
        with pytest.raises(ValidationError):
            incidence_service.create(leak_request)

        assert incidence_service.list_page().total == 0
        root = photo_storage.root_dir
        assert not root.exists() or not any(root.rglob("*.jpg"))


# ============================================================================
# Tests: update
# ============================================================================


class TestUpdate:
    def test_unknown_id_returns_none(self, incidence_service):
        result = incidence_service.update(IncidenceRequest(id="999", title="Nouveau"))
        assert result is None

    def test_unknown_id_with_invalid_content_returns_none(self, incidence_service):
        """L'ID inconnu est detecte avant le controle du contenu."""
        result = incidence_service.update(IncidenceRequest(id="999", title=""))
        assert result is None

    def test_blank_title_rejected_on_existing(self, incidence_service, leak_request):
        created = incidence_service.create(leak_request)
        with pytest.raises(ValidationError):
            incidence_service.update(IncidenceRequest(id=created.id, title=" "))
        assert incidence_service.get_by_id(created.id).title == "Leak"

    def test_missing_id_rejected(self, incidence_service):
        with pytest.raises(ValidationError):
            incidence_service.update(IncidenceRequest(title="Nouveau"))

    def test_fields_replaced_links_and_photos_kept(
        self, incidence_service, leak_request, seeded_links
    ):
        leak_request.organization_id = seeded_links["organization_id"]
        leak_request.employee_id = seeded_links["employee_id"]
        leak_request.photo_files = _uploads(2)
        leak_request.longitude = 2.0
        leak_request.latitude = 41.0
        created = incidence_service.create(leak_request)

        summary = incidence_service.update(
            IncidenceRequest(
                id=created.id,
                title="Leak fixed",
                description="Plafond repare",
                start_date=date(2024, 3, 1),
                end_date=date(2024, 3, 10),
                status="RESOLVED",
                priority="LOW",
                # Organisation/employe/photos ignores par la mise a jour
                organization_id="999",
                photo_files=_uploads(1),
            )
        )

        assert isinstance(summary, IncidenceSummary)
        assert summary.title == "Leak fixed"
        assert summary.photos == []
        fetched = incidence_service.get_by_id(created.id)
        assert fetched.title == "Leak fixed"
        assert fetched.status == "RESOLVED"
        assert fetched.end_date == date(2024, 3, 10)
        assert fetched.location is None
        assert fetched.organization == created.organization
        assert fetched.employee == created.employee
        assert [p.id for p in fetched.photos] == [p.id for p in created.photos]

    def test_summary_reflects_new_location(self, incidence_service, leak_request):
        created = incidence_service.create(leak_request)
        summary = incidence_service.update(
            IncidenceRequest(id=created.id, title="Leak", longitude=1.5, latitude=2.5)
        )
        assert (summary.longitude, summary.latitude) == (1.5, 2.5)


# ============================================================================
# Tests: delete / list_page
# ============================================================================


class TestDeleteAndList:
    def test_delete_then_get_returns_none(self, incidence_service, leak_request):
        created = incidence_service.create(leak_request)
        incidence_service.delete(created.id)
        assert incidence_service.get_by_id(created.id) is None

    def test_delete_unknown_does_not_raise(self, incidence_service):
        incidence_service.delete("999")

    def test_list_page_returns_summaries(self, incidence_service, leak_request):
        leak_request.photo_files = _uploads(2)
        incidence_service.create(leak_request)
        incidence_service.create(IncidenceRequest(title="Ascenseur"))

        page = incidence_service.list_page(PageRequest(page=0, size=10))
        assert page.total == 2
        assert [s.title for s in page.items] == ["Leak", "Ascenseur"]
        assert page.items[0].photo_count == 2
        assert page.items[0].photos == []

    def test_page_size_capped(self, uow_factory, photo_service, user_resolver):
        service = IncidenceService(
            uow_factory=uow_factory,
            photo_manager=photo_service,
            user_resolver=user_resolver,
            max_page_size=2,
        )
        for title in ["A", "B", "C"]:
            service.create(IncidenceRequest(title=title))

        page = service.list_page(PageRequest(size=50))
        assert page.size == 2
        assert len(page.items) == 2
        assert page.total == 3


# ============================================================================
# Tests: get_by_id_with_visibility
# ============================================================================


class TestVisibility:
    @pytest.fixture
    def with_photos(self, incidence_service, leak_request):
        leak_request.photo_files = _uploads(2)
        return incidence_service.create(leak_request)

    def test_employee_authority_hides_photo_details(
        self, incidence_service, user_resolver, with_photos
    ):
        employee = UserIdentity("lucia", frozenset({"ROLE_USER", "ROLE_EMPLOYEE_X"}))
        with user_resolver.as_user(employee):
            summary = incidence_service.get_by_id_with_visibility(with_photos.id)

        assert summary is not None
        assert summary.photo_count == 2
        assert summary.photos == []

    def test_other_caller_sees_photos_in_order(
        self, incidence_service, user_resolver, with_photos
    ):
        admin = UserIdentity("admin", frozenset({"ROLE_ADMIN"}))
        with user_resolver.as_user(admin):
            summary = incidence_service.get_by_id_with_visibility(with_photos.id)

        assert [p.id for p in summary.photos] == [p.id for p in with_photos.photos]
        assert [p.file_name for p in summary.photos] == ["photo_0.jpg", "photo_1.jpg"]

    def test_anonymous_caller_sees_photos(self, incidence_service, with_photos):
        summary = incidence_service.get_by_id_with_visibility(with_photos.id)
        assert len(summary.photos) == 2

    def test_employee_on_incidence_without_photos(
        self, incidence_service, user_resolver, leak_request
    ):
        created = incidence_service.create(leak_request)
        employee = UserIdentity("lucia", frozenset({"ROLE_EMPLOYEE"}))
        with user_resolver.as_user(employee):
            summary = incidence_service.get_by_id_with_visibility(created.id)
        assert summary.title == "Leak"
        assert summary.photos == []

    def test_unknown_id_returns_none(self, incidence_service):
        assert incidence_service.get_by_id_with_visibility("999") is None
