"""
Structured Logging for Easel
============================

Bounded Context: Observability

JSON-structured logging for the session layer. The geometry and catalog
layers do not log.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from easel_logging import create_logger, LogEvent
    >>> logger = create_logger("session")
    >>> logger.info(
    ...     event=LogEvent.SHAPE_ADDED,
    ...     message="Added CIRCLE",
    ...     metadata={'count': 1}
    ... )
"""

from .events import LogEvent
from .structured import JSONFormatter, StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'JSONFormatter',
    'StructuredLogger',
    'create_logger',
]
