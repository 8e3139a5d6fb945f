"""
Catalog Layer
=============

Bounded Context: The shape collection of one session.

Responsibilities:
- Own the ordered shape list (insertion, removal by identity/origin/type)
- Sorted views and point/overlap queries
- Session configuration (YAML) and catalog seeding

Design Philosophy:
- Explicit instance passed to callers (no process-wide singleton)
- "Not found" is a return value, never an exception
- One lock per operation
"""

from easel_catalog.catalog import Catalog, SortCriterion
from easel_catalog.config import CatalogConfig, ShapeConfig

__all__ = [
    "Catalog",
    "SortCriterion",
    "CatalogConfig",
    "ShapeConfig",
]
