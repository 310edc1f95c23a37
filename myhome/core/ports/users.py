"""
Interface port pour la resolution de l'utilisateur courant.
"""

from abc import ABC, abstractmethod
from typing import Optional

from myhome.core.entities import UserIdentity


class ICurrentUserResolver(ABC):
    """Fournit l'identite et les autorites de l'appelant."""

    @abstractmethod
    def current_user(self) -> Optional[UserIdentity]:
        """Retourne l'appelant courant, ou None (anonyme / systeme)."""
        ...
