"""
MyHome - Portail de gestion immobiliere, module des incidences.

Ce package gere le cycle de vie des incidences (tickets de maintenance)
rattachees a une organisation, un employe, une geolocalisation et un
ensemble de photos.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entites, ports, objets valeur, exceptions)
- services/ : Couche application (orchestration des incidences et photos)
- infrastructure/ : Persistance SQLModel
- adapters/ : Stockage des photos, resolution de l'utilisateur, CLI
"""

__version__ = "0.1.0"
