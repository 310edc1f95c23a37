"""
Container d'injection de dependances via dependency-injector.

Fournit une gestion centralisee des dependances pour la CLI et pour toute
couche de transport qui consommerait le service des incidences.
"""

from dependency_injector import containers, providers

from .adapters.file_system import LocalPhotoStorage
from .adapters.users import ContextUserResolver
from .config import Settings
from .infrastructure.persistence.database import build_engine, init_db
from .infrastructure.persistence.unit_of_work import SQLModelUnitOfWork
from .services.incidence import IncidenceService
from .services.photo import PhotoService


class Container(containers.DeclarativeContainer):
    """Container DI de l'application.

    Utilisation :
        container = Container()
        container.database.init()  # Cree les tables une fois
        service = container.incidence_service()
    """

    # Configuration - singleton charge une seule fois
    config = providers.Singleton(Settings)

    # Engine partage par toutes les unites de travail
    engine = providers.Singleton(build_engine, database_url=config.provided.database_url)

    # Database - Resource pour initialisation unique
    database = providers.Resource(init_db, engine=engine)

    # Unite de travail - nouvelle session a chaque appel (read_only en option)
    unit_of_work = providers.Factory(SQLModelUnitOfWork, engine=engine)

    # Photos
    photo_storage = providers.Singleton(
        LocalPhotoStorage,
        root_dir=config.provided.photos_dir,
    )
    photo_service = providers.Singleton(
        PhotoService,
        storage=photo_storage,
        allowed_extensions=config.provided.allowed_photo_extensions,
        max_size_bytes=config.provided.max_photo_size_bytes,
    )

    # Appelant courant, lie au contexte d'execution
    user_resolver = providers.Singleton(ContextUserResolver)

    # Service des incidences (sans etat - Singleton) ; recoit la fabrique
    # d'unites de travail et non une instance
    incidence_service = providers.Singleton(
        IncidenceService,
        uow_factory=unit_of_work.provider,
        photo_manager=photo_service,
        user_resolver=user_resolver,
        strict_links=config.provided.strict_links,
        max_page_size=config.provided.max_page_size,
    )
