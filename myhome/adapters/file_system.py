"""
Adaptateur de stockage des photos sur le systeme de fichiers local.

Implementation concrete de IPhotoStorage : chaque photo est ecrite sous
<photos_dir>/<incidence_id>/<uuid><extension>. La reference retournee est
le chemin relatif a photos_dir.
"""

import uuid
from pathlib import Path

from myhome.core.ports.photo_storage import IPhotoStorage


class LocalPhotoStorage(IPhotoStorage):
    """
    Stockage des photos dans un repertoire local.

    Les noms de fichiers sont generes (uuid) : le nom d'origine n'est
    conserve qu'en base, seule son extension est reprise.
    """

    def __init__(self, root_dir: Path) -> None:
        """
        Args:
            root_dir: Repertoire racine des photos (cree a la premiere ecriture)
        """
        self._root_dir = Path(root_dir).expanduser()

    @property
    def root_dir(self) -> Path:
        return self._root_dir

    def resolve(self, storage_path: str) -> Path:
        """
        Retourne le chemin absolu d'une reference de stockage.

        Raises:
            ValueError: Si la reference sort du repertoire racine
        """
        root = self._root_dir.resolve()
        target = (root / storage_path).resolve()
        if root != target and root not in target.parents:
            raise ValueError(f"Reference hors du stockage: {storage_path}")
        return target

    def store(self, incidence_id: str, file_name: str, content: bytes) -> str:
        """
        Ecrit le contenu d'une photo.

        Cree le repertoire de l'incidence si necessaire. Les erreurs d'ecriture
        (OSError) sont propagees a l'appelant.
        """
        directory = self._root_dir / str(incidence_id)
        directory.mkdir(parents=True, exist_ok=True)
        target = directory / f"{uuid.uuid4().hex}{Path(file_name).suffix.lower()}"
        target.write_bytes(content)
        return target.relative_to(self._root_dir).as_posix()

    def remove(self, storage_path: str) -> bool:
        """
        Supprime une photo stockee.

        Le repertoire de l'incidence est supprime s'il devient vide.
        """
        try:
            target = self.resolve(storage_path)
            if not target.is_file():
                return False
            target.unlink()
            parent = target.parent
            if parent != self._root_dir.resolve() and not any(parent.iterdir()):
                parent.rmdir()
            return True
        except (OSError, ValueError):
            return False
