"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <area>.<category>.<action>

    area: session, catalog, config, error
    category: shape, query, input
    action: added, removed, sorted, rejected
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - session.*: Session lifecycle
    - catalog.*: Catalog mutations and queries
    - config.*: Configuration loading
    - error.*: Rejected input and failures
    """

    # ========== Session Events ==========
    SESSION_STARTED = "session.started"
    """Interactive session loop started."""

    SESSION_ENDED = "session.ended"
    """Session loop finished (exit command or end of input)."""

    # ========== Catalog Events ==========
    SHAPE_ADDED = "catalog.shape.added"
    """Shape created by the factory and inserted."""

    SHAPE_REMOVED = "catalog.shape.removed"
    """Single shape removed by origin."""

    SHAPE_NOT_FOUND = "catalog.shape.not_found"
    """No shape matched the requested origin."""

    SHAPES_REMOVED_BY_TYPE = "catalog.shape.removed_by_type"
    """All shapes of one kind removed."""

    QUERY_SORTED = "catalog.query.sorted"
    """Sorted view produced."""

    QUERY_ENCLOSING = "catalog.query.enclosing"
    """Point containment query answered."""

    QUERY_ON_TOP = "catalog.query.on_top"
    """On-top-of query answered."""

    # ========== Config Events ==========
    CONFIG_LOADED = "config.loaded"
    """Configuration file parsed and validated."""

    CATALOG_SEEDED = "config.catalog.seeded"
    """Seed shapes from configuration inserted."""

    # ========== Error Events ==========
    INPUT_REJECTED = "error.input.rejected"
    """User input failed parsing or validation."""

    CONFIG_ERROR = "error.config"
    """Configuration could not be loaded."""
