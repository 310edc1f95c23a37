"""Conversions entre le domaine et les colonnes SQL (identifiants, horodatages)."""

from datetime import datetime, timezone
from typing import Optional

from myhome.core.exceptions import ValidationError


def parse_id(value: Optional[str]) -> Optional[int]:
    """
    Convertit un identifiant de domaine en cle primaire.

    Retourne None si l'identifiant est absent ou non numerique : pour une
    lecture, un tel identifiant ne designe simplement aucune ligne.
    """
    if value is None:
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def require_id(value: str, field: str = "id") -> int:
    """Convertit un identifiant qui doit etre numerique (ecritures)."""
    parsed = parse_id(value)
    if parsed is None:
        raise ValidationError(f"Identifiant invalide: {value!r}", field=field)
    return parsed


def to_domain_id(pk: Optional[int]) -> Optional[str]:
    """Convertit une cle primaire en identifiant de domaine (0 est une cle valide)."""
    return str(pk) if pk is not None else None


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Horodatage en UTC ; une valeur relue sans fuseau (SQLite) est supposee UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)
