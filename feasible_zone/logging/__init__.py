"""
Structured Logging for Feasible Zone
====================================

Bounded Context: Observability

JSON-structured logging for the evaluator, level registry and CLI.

Public API
----------
    LogEvent: Typed event names (enum)
    StructuredLogger: JSON logger implementation
    create_logger: Factory function

Example:
    >>> from feasible_zone.logging import create_logger, LogEvent
    >>> logger = create_logger("evaluator")
    >>> logger.info(
    ...     event=LogEvent.SYSTEM_MATCHED,
    ...     message="Player system matches target",
    ...     metadata={'level_id': 2}
    ... )
"""

from .events import LogEvent
from .structured import StructuredLogger, create_logger

__all__ = [
    'LogEvent',
    'StructuredLogger',
    'create_logger',
]
