"""
Implementations SQLModel des repositories Organization et Employee.

Le module des incidences ne fait que lire ces entites pour resoudre les liens.
"""

from typing import Optional

from sqlmodel import Session

from myhome.core.entities import Employee, Organization
from myhome.core.ports.repositories import IEmployeeRepository, IOrganizationRepository
from myhome.infrastructure.persistence.models import EmployeeModel, OrganizationModel
from myhome.infrastructure.persistence.repositories.helpers import parse_id, to_domain_id


class SQLModelOrganizationRepository(IOrganizationRepository):
    """Repository SQLModel (lecture seule) pour les organisations."""

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def to_entity(model: OrganizationModel) -> Organization:
        return Organization(id=to_domain_id(model.id), name=model.name)

    def get_by_id(self, organization_id: str) -> Optional[Organization]:
        """Recupere une organisation par son ID."""
        pk = parse_id(organization_id)
        if pk is None:
            return None
        model = self._session.get(OrganizationModel, pk)
        if model:
            return self.to_entity(model)
        return None


class SQLModelEmployeeRepository(IEmployeeRepository):
    """Repository SQLModel (lecture seule) pour les employes."""

    def __init__(self, session: Session) -> None:
        self._session = session

    @staticmethod
    def to_entity(model: EmployeeModel) -> Employee:
        return Employee(
            id=to_domain_id(model.id),
            first_name=model.first_name,
            last_name=model.last_name,
            email=model.email,
            organization_id=to_domain_id(model.organization_id),
        )

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        """Recupere un employe par son ID."""
        pk = parse_id(employee_id)
        if pk is None:
            return None
        model = self._session.get(EmployeeModel, pk)
        if model:
            return self.to_entity(model)
        return None
