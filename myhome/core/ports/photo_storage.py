"""
Interfaces ports pour les photos.

- IPhotoStorage : stockage binaire des fichiers (disque local, objet, ...)
- IPhotoManager : rattachement d'un fichier televerse a une incidence persistee
"""

from abc import ABC, abstractmethod

from myhome.core.entities import Incidence, Photo
from myhome.core.value_objects import UploadedFile


class IPhotoStorage(ABC):
    """Interface de stockage binaire des photos."""

    @abstractmethod
    def store(self, incidence_id: str, file_name: str, content: bytes) -> str:
        """
        Enregistre le contenu d'une photo.

        Args :
            incidence_id : Incidence proprietaire (sert au classement)
            file_name : Nom d'origine (l'extension est conservee)
            content : Contenu binaire

        Retourne :
            La reference du fichier stocke
        """
        ...

    @abstractmethod
    def remove(self, storage_path: str) -> bool:
        """Supprime un fichier stocke. Retourne True si supprime."""
        ...


class IPhotoManager(ABC):
    """Interface de gestion des photos d'incidence."""

    @abstractmethod
    def attach(self, incidence: Incidence, upload: UploadedFile) -> Photo:
        """
        Stocke un fichier televerse pour une incidence deja persistee.

        Retourne :
            La Photo possedee par l'incidence (non encore ajoutee a sa collection)
        """
        ...

    @abstractmethod
    def discard(self, photo: Photo) -> None:
        """Supprime le fichier d'une photo dont la creation a ete annulee."""
        ...
