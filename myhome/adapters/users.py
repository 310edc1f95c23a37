"""
Adaptateurs de resolution de l'utilisateur courant.

- ContextUserResolver : appelant lie au contexte d'execution (contextvars),
  positionne par la couche de transport pour la duree d'une requete
- StaticUserResolver : identite fixe (CLI, traitements systeme)
"""

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator, Optional

from myhome.core.entities import UserIdentity
from myhome.core.ports.users import ICurrentUserResolver

_current_user: ContextVar[Optional[UserIdentity]] = ContextVar(
    "myhome_current_user", default=None
)


class ContextUserResolver(ICurrentUserResolver):
    """
    Resolution de l'appelant depuis le contexte d'execution.

    Usage:
        resolver = ContextUserResolver()
        with resolver.as_user(UserIdentity("alice", frozenset({"ROLE_ADMIN"}))):
            service.get_by_id_with_visibility("1")
    """

    def current_user(self) -> Optional[UserIdentity]:
        return _current_user.get()

    @contextmanager
    def as_user(self, identity: Optional[UserIdentity]) -> Iterator[Optional[UserIdentity]]:
        """Lie une identite au contexte courant pour la duree du bloc."""
        token = _current_user.set(identity)
        try:
            yield identity
        finally:
            _current_user.reset(token)


class StaticUserResolver(ICurrentUserResolver):
    """Retourne toujours la meme identite (None = appelant systeme)."""

    def __init__(self, identity: Optional[UserIdentity] = None) -> None:
        self._identity = identity

    def current_user(self) -> Optional[UserIdentity]:
        return self._identity
