"""
Fixtures pytest partagees pour les tests MyHome.

Ce module contient les fixtures communes utilisees dans les tests:
- Engine SQLite en memoire avec tables creees
- Fabrique d'unites de travail
- Stockage des photos dans un repertoire temporaire
- Service des incidences cable sur ces dependances
- Organisation et employe pre-enregistres
"""

from pathlib import Path

import pytest
from sqlmodel import Session

from myhome.adapters.file_system import LocalPhotoStorage
from myhome.adapters.users import ContextUserResolver
from myhome.config import Settings
from myhome.core.value_objects import UploadedFile
from myhome.infrastructure.persistence.database import build_engine, init_db
from myhome.infrastructure.persistence.models import EmployeeModel, OrganizationModel
from myhome.infrastructure.persistence.unit_of_work import SQLModelUnitOfWork
from myhome.services.incidence import IncidenceService
from myhome.services.photo import PhotoService


@pytest.fixture
def engine():
    """Engine SQLite en memoire, propre a chaque test."""
    engine = init_db(build_engine("sqlite://"))
    yield engine
    engine.dispose()


@pytest.fixture
def uow_factory(engine):
    """Fabrique d'unites de travail liee a l'engine de test."""

    def factory(read_only: bool = False) -> SQLModelUnitOfWork:
        return SQLModelUnitOfWork(engine, read_only=read_only)

    return factory


@pytest.fixture
def photo_storage(tmp_path: Path) -> LocalPhotoStorage:
    """Stockage des photos dans tmp_path/photos."""
    return LocalPhotoStorage(tmp_path / "photos")


@pytest.fixture
def photo_service(photo_storage) -> PhotoService:
    return PhotoService(storage=photo_storage)


@pytest.fixture
def user_resolver() -> ContextUserResolver:
    return ContextUserResolver()


@pytest.fixture
def incidence_service(uow_factory, photo_service, user_resolver) -> IncidenceService:
    """Service des incidences sur base en memoire et stockage temporaire."""
    return IncidenceService(
        uow_factory=uow_factory,
        photo_manager=photo_service,
        user_resolver=user_resolver,
    )


@pytest.fixture
def seeded_links(engine) -> dict[str, str]:
    """
    Enregistre une organisation et un employe.

    Retourne les IDs sous forme de chaines : {"organization_id", "employee_id"}.
    """
    with Session(engine) as session:
        organization = OrganizationModel(name="Fincas del Sol")
        session.add(organization)
        session.commit()
        session.refresh(organization)
        employee = EmployeeModel(
            first_name="Lucia",
            last_name="Garcia",
            email="lucia@fincas.example",
            organization_id=organization.id,
        )
        session.add(employee)
        session.commit()
        session.refresh(employee)
        return {
            "organization_id": str(organization.id),
            "employee_id": str(employee.id),
        }


@pytest.fixture
def jpeg_upload() -> UploadedFile:
    """Fichier JPEG televerse minimal."""
    return UploadedFile(
        file_name="fuite.jpg",
        content=b"\xff\xd8\xff\xe0fake-jpeg-content",
        content_type="image/jpeg",
    )


@pytest.fixture
def test_settings(tmp_path: Path) -> Settings:
    """Settings de test avec base en memoire et chemins temporaires."""
    return Settings(
        _env_file=None,  # Ignorer le fichier .env pour les tests
        database_url="sqlite://",
        photos_dir=tmp_path / "photos",
        log_file=tmp_path / "logs" / "test.log",
    )
