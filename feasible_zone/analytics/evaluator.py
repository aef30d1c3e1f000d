"""
Zone Evaluator Module
=====================

Re-runs the full pipeline for one player edit and returns a snapshot.

Design:
- Target geometry computed once at init (immutable afterwards)
- evaluate() is a pure function of the player system + probe point
- Immutable outputs (ZoneReport)
- Logging through injected StructuredLogger

Pipeline stages:
1. Clip the domain by the player system (feasible polygon)
2. Area / emptiness
3. Lattice equivalence against the target system
4. Binding status of each constraint at the probe point (optional)
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Sequence, Tuple

from feasible_zone.analytics.equivalence import first_mismatch, systems_match_by_line
from feasible_zone.analytics.polygon import (
    BindingStatus,
    binding_report,
    is_empty_region,
    polygon_area,
    polygon_vertices,
)
from feasible_zone.geometry.clipper import feasible_polygon
from feasible_zone.geometry.halfplane import Constraint
from feasible_zone.geometry.shapes import Domain, Point, Polygon
from feasible_zone.geometry.tolerances import BINDING_TOL, LATTICE_STEP, LINE_MATCH_TOL
from feasible_zone.logging import LogEvent, StructuredLogger, create_logger


@dataclass(frozen=True)
class ZoneReport:
    """
    Immutable evaluation snapshot for one player system.

    Attributes:
        polygon: Player feasible polygon (fewer than 3 vertices = empty)
        area: Player feasible area
        target_area: Target feasible area
        matches_target: Lattice equivalence with the target system
        mismatch_point: First lattice point telling the systems apart
        probe: Query point the statuses refer to (None = no probe)
        statuses: {constraint id: BindingStatus} at the probe point
    """

    polygon: Polygon
    area: float
    target_area: float
    matches_target: bool
    mismatch_point: Optional[Point] = None
    probe: Optional[Point] = None
    statuses: Dict[str, BindingStatus] = field(default_factory=dict)

    @property
    def is_empty(self) -> bool:
        return is_empty_region(self.polygon)

    @property
    def vertex_count(self) -> int:
        return len(self.polygon)

    @property
    def binding_ids(self) -> Tuple[str, ...]:
        """Ids of the constraints that are binding at the probe."""
        return tuple(k for k, s in self.statuses.items() if s is BindingStatus.BINDING)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to JSON-compatible dict."""
        return {
            'vertices': [list(v) for v in polygon_vertices(self.polygon)],
            'area': self.area,
            'target_area': self.target_area,
            'is_empty': self.is_empty,
            'matches_target': self.matches_target,
            'mismatch_point': list(self.mismatch_point) if self.mismatch_point else None,
            'probe': list(self.probe) if self.probe else None,
            'statuses': {k: s.value for k, s in self.statuses.items()},
        }

    def __str__(self) -> str:
        """Human-readable representation."""
        state = "MATCH" if self.matches_target else "NO MATCH"
        return f"area={self.area:.2f} vertices={self.vertex_count} {state}"


class ZoneEvaluator:
    """
    Evaluates player systems against a fixed target system.

    Usage:
        evaluator = ZoneEvaluator(domain, target)

        # Every time the player edits a constraint
        report = evaluator.evaluate(player, probe=Point(3, 2))
        report.matches_target, report.area, report.statuses
    """

    def __init__(
        self,
        domain: Domain,
        target: Sequence[Constraint],
        lattice_step: float = LATTICE_STEP,
        binding_tol: float = BINDING_TOL,
        line_match_tol: float = LINE_MATCH_TOL,
        logger: Optional[StructuredLogger] = None,
        level_id: Optional[int] = None,
    ):
        """
        Args:
            domain: World rectangle for every polygon of this level
            target: Target system the player tries to reproduce
            lattice_step: Spacing of the equivalence lattice
            binding_tol: Residual tolerance for BINDING
            line_match_tol: Coefficient tolerance for lines_match()
            logger: Structured logger (default: "evaluator" component)
            level_id: Level identifier added to log metadata
        """
        if not lattice_step > 0:
            raise ValueError(f"lattice_step must be > 0, got {lattice_step}")

        self.domain = domain
        self.target: Tuple[Constraint, ...] = tuple(target)
        self.lattice_step = lattice_step
        self.binding_tol = binding_tol
        self.line_match_tol = line_match_tol
        self.level_id = level_id
        self.logger = logger or create_logger("evaluator")

        self.target_polygon = feasible_polygon(domain, self.target)
        self.target_area = polygon_area(self.target_polygon)

    def evaluate(
        self,
        player: Sequence[Constraint],
        probe: Optional[Sequence[float]] = None,
    ) -> ZoneReport:
        """
        Evaluate one snapshot of the player's system.

        Args:
            player: Player constraints (in the order they are applied)
            probe: Optional plan point for binding/slack classification

        Returns:
            Frozen ZoneReport
        """
        player = tuple(player)
        polygon = feasible_polygon(self.domain, player)
        area = polygon_area(polygon)
        mismatch = first_mismatch(self.domain, self.target, player, self.lattice_step)

        probe_point = Point(probe[0], probe[1]) if probe is not None else None
        statuses = (
            binding_report(probe_point, player, self.binding_tol)
            if probe_point is not None
            else {}
        )

        report = ZoneReport(
            polygon=polygon,
            area=area,
            target_area=self.target_area,
            matches_target=mismatch is None,
            mismatch_point=mismatch,
            probe=probe_point,
            statuses=statuses,
        )
        self._log_report(report, len(player))
        return report

    def lines_match(self, player: Sequence[Constraint]) -> bool:
        """
        Check the player's inequalities line by line against the target.

        Used by levels where the player places boundary lines by dragging
        two handles: each line counts once it lies within line_match_tol
        of a target line with the same orientation.
        """
        matched = systems_match_by_line(player, self.target, self.line_match_tol)
        self.logger.debug(
            event=LogEvent.SYSTEM_MATCHED if matched else LogEvent.SYSTEM_MISMATCHED,
            message="Compared player lines with target",
            metadata={
                'level_id': self.level_id,
                'mode': 'line',
                'tolerance': self.line_match_tol,
            },
        )
        return matched

    def _log_report(self, report: ZoneReport, constraint_count: int) -> None:
        metadata = {
            'level_id': self.level_id,
            'constraints': constraint_count,
            'vertices': report.vertex_count,
            'area': round(report.area, 6),
        }
        self.logger.debug(
            event=LogEvent.ZONE_EVALUATED,
            message="Evaluated player system",
            metadata=metadata,
        )

        if report.is_empty:
            self.logger.warning(
                event=LogEvent.ZONE_EMPTY,
                message="Player system has no feasible region inside the domain",
                metadata=metadata,
            )

        if report.matches_target:
            self.logger.info(
                event=LogEvent.SYSTEM_MATCHED,
                message="Player system matches target",
                metadata=metadata,
            )
        else:
            self.logger.debug(
                event=LogEvent.SYSTEM_MISMATCHED,
                message="Player system differs from target",
                metadata={**metadata, 'mismatch_point': list(report.mismatch_point)},
            )
