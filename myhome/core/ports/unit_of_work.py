"""
Interface port pour l'unité de travail (transaction).

Chaque opération du service ouvre une unité de travail, effectue ses lectures
et écritures via les repositories qu'elle expose, puis valide une seule fois.
Toute exception levée dans le bloc annule l'ensemble.
"""

from abc import ABC, abstractmethod
from types import TracebackType
from typing import Callable, Optional

from myhome.core.ports.repositories import (
    IEmployeeRepository,
    IIncidenceRepository,
    IOrganizationRepository,
)


class IUnitOfWork(ABC):
    """
    Frontière transactionnelle.

    Utilisation :
        with uow_factory() as uow:
            incidence = uow.incidences.get_by_id("1")
            uow.incidences.save(incidence)
            uow.commit()

    Sans appel à commit(), la transaction est annulée à la sortie du bloc.
    """

    incidences: IIncidenceRepository
    organizations: IOrganizationRepository
    employees: IEmployeeRepository

    @abstractmethod
    def __enter__(self) -> "IUnitOfWork":
        ...

    @abstractmethod
    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        ...

    @abstractmethod
    def commit(self) -> None:
        """Valide la transaction."""
        ...

    @abstractmethod
    def rollback(self) -> None:
        """Annule les écritures non validées."""
        ...


# Fabrique d'unités de travail, appelée avec read_only=True pour les lectures
UnitOfWorkFactory = Callable[..., IUnitOfWork]
