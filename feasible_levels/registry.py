"""
LevelRegistry - Explicit level registration

Bounded Context: Level lookup for evaluators and the CLI
Responsibilities:
  - Register levels by id
  - Fail fast on unknown or duplicate ids
  - Provide introspection (level_ids, list_levels)

Threading: Thread-safe (uses lock for write operations)
Pattern: Registry with explicit registration
"""

from typing import Dict, List, Optional
import threading

from feasible_zone.analytics.evaluator import ZoneEvaluator
from feasible_zone.logging import LogEvent, StructuredLogger
from feasible_levels.config import CampaignConfig, LevelConfig


class LevelNotFoundError(Exception):
    """Raised when looking up a level id that is not registered"""
    pass


class LevelRegistry:
    """
    Registry of levels keyed by level id.

    Thread Safety:
      - Uses lock for write operations (add, remove)
      - Read operations are lock-free (dict reads)

    Example:
        registry = LevelRegistry.from_campaign(get_campaign("feasible-zone"))
        level = registry.get(3)
        evaluator = registry.evaluator(3)

        try:
            registry.get(99)
        except LevelNotFoundError as e:
            print(f"Level not available: {e}")
    """

    def __init__(
        self,
        lattice_step: Optional[float] = None,
        binding_tol: Optional[float] = None,
        line_match_tol: Optional[float] = None,
        logger: Optional[StructuredLogger] = None,
    ):
        self._levels: Dict[int, LevelConfig] = {}
        self._lock = threading.Lock()
        self.lattice_step = lattice_step
        self.binding_tol = binding_tol
        self.line_match_tol = line_match_tol
        self.logger = logger

    @classmethod
    def from_campaign(
        cls,
        campaign: CampaignConfig,
        logger: Optional[StructuredLogger] = None,
    ) -> "LevelRegistry":
        """Registry holding every level of a campaign, with its tolerances."""
        registry = cls(
            lattice_step=campaign.lattice_step,
            binding_tol=campaign.binding_tol,
            line_match_tol=campaign.line_match_tol,
            logger=logger,
        )
        for level in campaign.levels:
            registry.add(level)
        return registry

    def add(self, level: LevelConfig) -> None:
        """
        Register a level.

        Raises:
            ValueError: If the level id is already registered

        Thread Safety: Uses lock for write operation
        """
        with self._lock:
            if level.level_id in self._levels:
                raise ValueError(f"Level {level.level_id} already registered")
            self._levels[level.level_id] = level

        if self.logger is not None:
            self.logger.debug(
                event=LogEvent.LEVEL_REGISTERED,
                message="Registered level",
                metadata={'level_id': level.level_id, 'title': level.title},
            )

    def remove(self, level_id: int) -> LevelConfig:
        """
        Unregister a level and return it.

        Raises:
            LevelNotFoundError: If level id not registered
        """
        with self._lock:
            if level_id not in self._levels:
                raise self._not_found(level_id)
            level = self._levels.pop(level_id)

        if self.logger is not None:
            self.logger.debug(
                event=LogEvent.LEVEL_REMOVED,
                message="Removed level",
                metadata={'level_id': level_id},
            )
        return level

    def get(self, level_id: int) -> LevelConfig:
        """
        Raises:
            LevelNotFoundError: If level id not registered
        """
        level = self._levels.get(level_id)
        if level is None:
            raise self._not_found(level_id)
        return level

    def evaluator(self, level_id: int) -> ZoneEvaluator:
        """ZoneEvaluator for a registered level, using the registry tolerances."""
        level = self.get(level_id)
        kwargs = {}
        if self.lattice_step is not None:
            kwargs['lattice_step'] = self.lattice_step
        if self.binding_tol is not None:
            kwargs['binding_tol'] = self.binding_tol
        if self.line_match_tol is not None:
            kwargs['line_match_tol'] = self.line_match_tol
        return ZoneEvaluator(
            level.domain,
            level.target,
            logger=self.logger,
            level_id=level_id,
            **kwargs,
        )

    def is_available(self, level_id: int) -> bool:
        return level_id in self._levels

    @property
    def level_ids(self) -> List[int]:
        """Sorted snapshot of registered level ids."""
        return sorted(self._levels)

    def list_levels(self) -> List[LevelConfig]:
        """Registered levels ordered by id (snapshot)."""
        return [self._levels[i] for i in self.level_ids]

    def count(self) -> int:
        return len(self._levels)

    def _not_found(self, level_id: int) -> LevelNotFoundError:
        return LevelNotFoundError(
            f"Level {level_id} not available. "
            f"Available levels: {', '.join(str(i) for i in self.level_ids) or 'none'}"
        )
