"""
Taxonomie des erreurs du domaine des incidences.

- ValidationError : requete mal formee (titre vide, dates incoherentes...)
- NotFoundError : ressource introuvable, uniquement quand le contrat exige une erreur
- StorageError : echec de la persistance (BDD ou stockage des photos)

Pour les lectures, l'absence est un resultat valide (None) et non une erreur.
"""

from typing import Optional


class IncidenceError(Exception):
    """Erreur de base du domaine des incidences."""


class ValidationError(IncidenceError):
    """
    Requete invalide.

    Attributes:
        field: Nom du champ en cause (optionnel)
    """

    def __init__(self, message: str, field: Optional[str] = None) -> None:
        self.field = field
        super().__init__(message)


class NotFoundError(IncidenceError):
    """
    Ressource introuvable.

    Attributes:
        resource: Type de ressource (ex: "organization")
        resource_id: Identifiant recherche
    """

    def __init__(self, resource: str, resource_id: object) -> None:
        self.resource = resource
        self.resource_id = resource_id
        super().__init__(f"{resource} introuvable: {resource_id}")


class StorageError(IncidenceError):
    """Echec du mecanisme de persistance sous-jacent."""
