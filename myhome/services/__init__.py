"""
Couche application : services orchestrant le domaine.

- IncidenceService : cycle de vie des incidences
- PhotoService : rattachement des photos televersees
"""

from myhome.services.dto import IncidenceRequest, IncidenceSummary, PhotoSummary
from myhome.services.incidence import IncidenceService
from myhome.services.photo import PhotoService

__all__ = [
    "IncidenceRequest",
    "IncidenceSummary",
    "PhotoSummary",
    "IncidenceService",
    "PhotoService",
]
