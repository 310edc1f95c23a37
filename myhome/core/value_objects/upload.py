"""
Objet valeur representant un fichier televerse.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(frozen=True)
class UploadedFile:
    """
    Fichier brut recu de la couche de transport.

    Attributs :
        file_name : Nom d'origine du fichier
        content : Contenu binaire
        content_type : Type MIME declare (optionnel)
    """

    file_name: str
    content: bytes
    content_type: Optional[str] = None

    @property
    def size_bytes(self) -> int:
        return len(self.content)

    @property
    def extension(self) -> str:
        """Extension en minuscules, point inclus (ex: ".jpg")."""
        return Path(self.file_name).suffix.lower()
