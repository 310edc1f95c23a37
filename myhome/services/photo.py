"""
Service de gestion des photos d'incidence.

Implemente IPhotoManager : controle le fichier televerse, le confie au
stockage binaire et construit la Photo possedee par l'incidence. La ligne
en base est ecrite par le repository lors de la sauvegarde de l'incidence.
"""

import mimetypes
from collections.abc import Iterable

from loguru import logger

from myhome.core.entities import Incidence, Photo
from myhome.core.exceptions import StorageError, ValidationError
from myhome.core.ports.photo_storage import IPhotoManager, IPhotoStorage
from myhome.core.value_objects import UploadedFile

# Extensions acceptees par defaut
DEFAULT_EXTENSIONS: frozenset[str] = frozenset({
    ".jpg", ".jpeg", ".png", ".gif", ".webp", ".heic"
})

# Taille maximale par defaut (10 MB)
DEFAULT_MAX_SIZE_BYTES: int = 10 * 1024 * 1024


class PhotoService(IPhotoManager):
    """
    Gestionnaire des photos d'incidence.

    Example:
        service = PhotoService(storage=LocalPhotoStorage(Path("data/photos")))
        photo = service.attach(incidence, UploadedFile("fuite.jpg", data))
    """

    def __init__(
        self,
        storage: IPhotoStorage,
        allowed_extensions: Iterable[str] = DEFAULT_EXTENSIONS,
        max_size_bytes: int = DEFAULT_MAX_SIZE_BYTES,
    ) -> None:
        """
        Args:
            storage: Stockage binaire des fichiers
            allowed_extensions: Extensions acceptees (point inclus, minuscules)
            max_size_bytes: Taille maximale d'un fichier
        """
        self._storage = storage
        self._allowed_extensions = frozenset(ext.lower() for ext in allowed_extensions)
        self._max_size_bytes = max_size_bytes

    def validate(self, upload: UploadedFile) -> None:
        """Leve ValidationError si le fichier est vide, trop gros ou d'un type refuse."""
        if not upload.file_name:
            raise ValidationError("Nom de fichier manquant", field="photo_files")
        if upload.size_bytes == 0:
            raise ValidationError(
                f"Fichier vide: {upload.file_name}", field="photo_files"
            )
        if upload.size_bytes > self._max_size_bytes:
            raise ValidationError(
                f"Fichier trop volumineux: {upload.file_name} "
                f"({upload.size_bytes} > {self._max_size_bytes} octets)",
                field="photo_files",
            )
        if upload.extension not in self._allowed_extensions:
            raise ValidationError(
                f"Type de fichier refuse: {upload.file_name}", field="photo_files"
            )

    def attach(self, incidence: Incidence, upload: UploadedFile) -> Photo:
        """Stocke le fichier et retourne la Photo possedee par l'incidence."""
        if incidence.id is None:
            raise ValidationError(
                "L'incidence doit etre persistee avant d'y rattacher une photo",
                field="id",
            )
        self.validate(upload)

        try:
            storage_path = self._storage.store(
                incidence.id, upload.file_name, upload.content
            )
        except OSError as e:
            raise StorageError(
                f"Echec du stockage de la photo {upload.file_name}: {e}"
            ) from e

        content_type = upload.content_type or mimetypes.guess_type(upload.file_name)[0]
        logger.debug(f"Photo stockee pour l'incidence {incidence.id}: {storage_path}")
        return Photo(
            incidence_id=incidence.id,
            file_name=upload.file_name,
            content_type=content_type,
            storage_path=storage_path,
            size_bytes=upload.size_bytes,
        )

    def discard(self, photo: Photo) -> None:
        """Supprime le fichier d'une photo non persistee."""
        if not photo.storage_path:
            return
        if self._storage.remove(photo.storage_path):
            logger.debug(f"Photo supprimee du stockage: {photo.storage_path}")
        else:
            logger.warning(f"Photo introuvable dans le stockage: {photo.storage_path}")
