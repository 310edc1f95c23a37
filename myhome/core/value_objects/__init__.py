"""
Objets valeur immutables representant des concepts du domaine sans identite.

Exports :
- Geolocation : Couple longitude/latitude d'une incidence
- PageRequest : Demande de page (index, taille, tri)
- Page : Page de resultats
- UploadedFile : Fichier televerse brut
"""

from myhome.core.value_objects.geolocation import Geolocation
from myhome.core.value_objects.pagination import Page, PageRequest
from myhome.core.value_objects.upload import UploadedFile

__all__ = [
    "Geolocation",
    "Page",
    "PageRequest",
    "UploadedFile",
]
