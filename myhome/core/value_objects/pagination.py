"""
Objets valeur de pagination.

PageRequest decrit la page demandee (index base 0, taille, tri),
Page transporte le resultat avec le nombre total d'elements.
"""

import math
from dataclasses import dataclass, field
from typing import Callable, Generic, Optional, TypeVar

from myhome.core.exceptions import ValidationError

T = TypeVar("T")
R = TypeVar("R")


@dataclass(frozen=True)
class PageRequest:
    """
    Demande de page.

    Attributs :
        page : Index de la page (base 0)
        size : Nombre d'elements par page
        sort_by : Champ de tri optionnel (None = ordre d'identifiant)
        descending : Tri decroissant si True
    """

    page: int = 0
    size: int = 20
    sort_by: Optional[str] = None
    descending: bool = False

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValidationError("L'index de page doit etre positif", field="page")
        if self.size < 1:
            raise ValidationError("La taille de page doit etre >= 1", field="size")

    @property
    def offset(self) -> int:
        """Nombre d'elements a sauter avant cette page."""
        return self.page * self.size


@dataclass(frozen=True)
class Page(Generic[T]):
    """Page de resultats avec metadonnees de pagination."""

    items: list[T] = field(default_factory=list)
    total: int = 0
    page: int = 0
    size: int = 20

    @property
    def total_pages(self) -> int:
        """Nombre total de pages."""
        return math.ceil(self.total / self.size) if self.size else 0

    @property
    def has_next(self) -> bool:
        return self.page + 1 < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    def map(self, func: Callable[[T], R]) -> "Page[R]":
        """Transforme chaque element en conservant les metadonnees."""
        return Page(
            items=[func(item) for item in self.items],
            total=self.total,
            page=self.page,
            size=self.size,
        )
