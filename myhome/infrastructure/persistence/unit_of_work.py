"""
Unite de travail SQLModel.

Ouvre une session par operation, expose les repositories lies a cette session
et valide une seule fois. Les erreurs SQLAlchemy sont converties en StorageError
apres annulation de la transaction.

En lecture seule, la transaction n'est jamais validee et tout flush est refuse.
Sur PostgreSQL, la transaction est en plus declaree READ ONLY.
"""

from types import TracebackType
from typing import Optional

from loguru import logger
from sqlalchemy import Engine, event, text
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session

from myhome.core.exceptions import StorageError
from myhome.core.ports.unit_of_work import IUnitOfWork
from myhome.infrastructure.persistence.repositories import (
    SQLModelEmployeeRepository,
    SQLModelIncidenceRepository,
    SQLModelOrganizationRepository,
)


def _refuse_flush(session, flush_context, instances) -> None:
    raise StorageError("Ecriture refusee dans une transaction en lecture seule")


class SQLModelUnitOfWork(IUnitOfWork):
    """
    Unite de travail liee a un engine SQLAlchemy.

    Example:
        with SQLModelUnitOfWork(engine) as uow:
            uow.incidences.save(incidence)
            uow.commit()
    """

    def __init__(self, engine: Engine, read_only: bool = False) -> None:
        """
        Args:
            engine: Engine SQLAlchemy partage par l'application
            read_only: True pour une transaction de lecture
        """
        self._engine = engine
        self.read_only = read_only
        self._session: Optional[Session] = None

    def __enter__(self) -> "SQLModelUnitOfWork":
        self._session = Session(self._engine)
        if self.read_only:
            event.listen(self._session, "before_flush", _refuse_flush)
            if self._engine.dialect.name == "postgresql":
                self._session.execute(text("SET TRANSACTION READ ONLY"))
        self.incidences = SQLModelIncidenceRepository(self._session)
        self.organizations = SQLModelOrganizationRepository(self._session)
        self.employees = SQLModelEmployeeRepository(self._session)
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        try:
            self.rollback()
        finally:
            self._session.close()
            self._session = None
        if isinstance(exc, SQLAlchemyError):
            raise StorageError(str(exc)) from exc

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unite de travail non ouverte (utiliser 'with')")
        return self._session

    def commit(self) -> None:
        """Valide la transaction."""
        if self.read_only:
            raise StorageError("Commit interdit dans une transaction en lecture seule")
        try:
            self.session.commit()
        except SQLAlchemyError as e:
            logger.error(f"Echec du commit: {e}")
            self.session.rollback()
            raise StorageError(str(e)) from e

    def rollback(self) -> None:
        """Annule les ecritures non validees (sans effet apres un commit)."""
        self.session.rollback()
