"""
Structured Log Event Types
==========================

Bounded Context: Observability Event Taxonomy

Typed event names for structured logging.

Event Naming Convention:
    <component>.<category>.<action>

    component: zone, level, cli, error
    category: evaluated, registered, loaded
    action: matched, mismatched, empty

Example log query:
    fields @timestamp, event, message, metadata.level_id
    | filter event = "zone.system.mismatched"
"""

from enum import Enum


class LogEvent(str, Enum):
    """
    Typed log event names for structured logging.

    Categories:
    - zone.*: Feasible-region evaluation
    - level.*: Level configuration and registry
    - cli.*: Command-line invocations
    - error.*: Error conditions
    """

    # ========== Zone Events ==========
    ZONE_EVALUATED = "zone.evaluated"
    """Player system evaluated against a level target."""

    ZONE_EMPTY = "zone.empty"
    """Player system is infeasible inside the domain."""

    SYSTEM_MATCHED = "zone.system.matched"
    """Player system equivalent to the target."""

    SYSTEM_MISMATCHED = "zone.system.mismatched"
    """Player system differs from the target on the lattice."""

    # ========== Level Events ==========
    LEVEL_LOADED = "level.loaded"
    """Campaign file parsed and validated."""

    LEVEL_REGISTERED = "level.registered"
    """Level added to the registry."""

    LEVEL_REMOVED = "level.removed"
    """Level removed from the registry."""

    # ========== CLI Events ==========
    CLI_COMMAND = "cli.command"
    """CLI subcommand executed."""

    # ========== Error Events ==========
    CONFIG_ERROR = "error.config"
    """Campaign file missing or invalid."""

    GEOMETRY_ERROR = "error.geometry"
    """Degenerate geometric input (zero normal, coincident handles)."""


# Event categories for filtering
ZONE_EVENTS = {
    LogEvent.ZONE_EVALUATED,
    LogEvent.ZONE_EMPTY,
    LogEvent.SYSTEM_MATCHED,
    LogEvent.SYSTEM_MISMATCHED,
}

LEVEL_EVENTS = {
    LogEvent.LEVEL_LOADED,
    LogEvent.LEVEL_REGISTERED,
    LogEvent.LEVEL_REMOVED,
}

ERROR_EVENTS = {
    LogEvent.CONFIG_ERROR,
    LogEvent.GEOMETRY_ERROR,
}
