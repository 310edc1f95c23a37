"""
Objet valeur Geolocation.

Une geolocalisation n'existe que si les deux coordonnees sont fournies :
une longitude sans latitude (ou l'inverse) donne une localisation absente.
"""

from dataclasses import dataclass
from typing import Optional

from myhome.core.exceptions import ValidationError


@dataclass(frozen=True)
class Geolocation:
    """
    Position geographique d'une incidence (WGS84, degres decimaux).

    Attributs :
        longitude : Longitude entre -180 et 180
        latitude : Latitude entre -90 et 90
    """

    longitude: float
    latitude: float

    def __post_init__(self) -> None:
        if not -180.0 <= self.longitude <= 180.0:
            raise ValidationError(
                f"Longitude hors limites: {self.longitude}", field="longitude"
            )
        if not -90.0 <= self.latitude <= 90.0:
            raise ValidationError(
                f"Latitude hors limites: {self.latitude}", field="latitude"
            )

    @classmethod
    def from_coordinates(
        cls, longitude: Optional[float], latitude: Optional[float]
    ) -> Optional["Geolocation"]:
        """
        Construit une geolocalisation si les deux coordonnees sont presentes.

        Retourne :
            La Geolocation, ou None si l'une des coordonnees manque
        """
        if longitude is None or latitude is None:
            return None
        return cls(longitude=float(longitude), latitude=float(latitude))
