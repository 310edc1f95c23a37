"""Sous-package CLI - re-exporte les commandes publiques."""

from myhome.adapters.cli.incidence_commands import (
    create_incidence,
    delete_incidence,
    incidences_app,
    list_incidences,
    show_incidence,
    update_incidence,
)

__all__ = [
    "incidences_app",
    "list_incidences",
    "show_incidence",
    "create_incidence",
    "update_incidence",
    "delete_incidence",
]
