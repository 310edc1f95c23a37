"""
Identite de l'appelant.

Resolue a chaque requete, jamais persistee par ce module.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class UserIdentity:
    """
    Utilisateur courant et ses autorites.

    Attributs :
        login : Identifiant de connexion
        authorities : Noms des autorites (ex: "ROLE_ADMIN", "ROLE_EMPLOYEE")
    """

    login: str
    authorities: frozenset[str] = field(default_factory=frozenset)

    def has_authority_containing(self, fragment: str) -> bool:
        """Vrai si au moins une autorite contient le fragment (sous-chaine)."""
        return any(fragment in authority for authority in self.authorities)
