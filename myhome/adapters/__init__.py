"""
Couche adaptateurs (infrastructure).

Les adaptateurs implémentent les ports définis dans core/ports/ et fournissent
des implémentations concrètes pour les systèmes externes.

Sous-modules :
- file_system : Stockage des photos sur disque local
- users : Résolution de l'utilisateur courant
- cli/ : Interface ligne de commande (Typer + Rich)

Chaque adaptateur dépend de core/ mais core/ ne dépend jamais des adaptateurs.
"""

from myhome.adapters.file_system import LocalPhotoStorage
from myhome.adapters.users import ContextUserResolver, StaticUserResolver

__all__ = [
    "LocalPhotoStorage",
    "ContextUserResolver",
    "StaticUserResolver",
]
