"""
Configuration schema for level campaigns.

A campaign is a named, ordered list of levels. Each level fixes the world
rectangle and the target system the player has to reproduce. Campaigns are
loaded from YAML and validated at load time (frozen dataclasses).
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union
import yaml

from feasible_zone.geometry.halfplane import Constraint
from feasible_zone.geometry.shapes import Domain
from feasible_zone.geometry.tolerances import BINDING_TOL, LATTICE_STEP, LINE_MATCH_TOL
from feasible_zone.logging import LogEvent, StructuredLogger


@dataclass(frozen=True)
class LevelConfig:
    """Level definition: domain plus target system."""

    level_id: int
    title: str
    domain: Domain
    target: Tuple[Constraint, ...]
    description: str = ""

    def __post_init__(self):
        """Validate level configuration."""
        object.__setattr__(self, "target", tuple(self.target))

        if self.level_id < 1:
            raise ValueError(f"level_id must be >= 1, got {self.level_id}")

        if not self.title:
            raise ValueError(f"Level {self.level_id} title cannot be empty")

        if not self.target:
            raise ValueError(
                f"Level {self.level_id} must have at least 1 target constraint"
            )

        ids = [k.id for k in self.target if k.id]
        if len(ids) != len(set(ids)):
            raise ValueError(
                f"Level {self.level_id} has duplicate constraint ids: {ids}"
            )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "level_id": self.level_id,
            "title": self.title,
            "description": self.description,
            "domain": self.domain.to_dict(),
            "target": [k.to_dict() for k in self.target],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "LevelConfig":
        """
        Deserialize from dict.

        The domain can be a mapping (xmin/xmax/ymin/ymax) or a
        [xmin, xmax, ymin, ymax] list.

        Raises:
            ValueError: If required keys missing or invalid values
        """
        try:
            domain_data = data["domain"]
            if isinstance(domain_data, (list, tuple)):
                if len(domain_data) != 4:
                    raise ValueError(
                        f"domain list must be [xmin, xmax, ymin, ymax], got {domain_data}"
                    )
                domain = Domain(*(float(v) for v in domain_data))
            else:
                domain = Domain.from_dict(domain_data)

            return cls(
                level_id=int(data["level_id"]),
                title=str(data["title"]),
                description=str(data.get("description", "")),
                domain=domain,
                target=tuple(Constraint.from_dict(k) for k in data["target"]),
            )
        except KeyError as e:
            raise ValueError(f"Missing required LevelConfig field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid LevelConfig data: {e}")


@dataclass(frozen=True)
class CampaignConfig:
    """
    Main configuration for a level campaign.

    Immutable after construction (frozen dataclass).
    """

    name: str
    levels: Tuple[LevelConfig, ...] = field(default_factory=tuple)

    # Tolerances shared by every level of the campaign
    lattice_step: float = LATTICE_STEP
    binding_tol: float = BINDING_TOL
    line_match_tol: float = LINE_MATCH_TOL

    def __post_init__(self):
        """Validate campaign configuration."""
        object.__setattr__(self, "levels", tuple(self.levels))

        if not self.name:
            raise ValueError("Campaign name cannot be empty")

        for name in ("lattice_step", "binding_tol", "line_match_tol"):
            value = getattr(self, name)
            if not value > 0:
                raise ValueError(f"{name} must be > 0, got {value}")

        level_ids = [level.level_id for level in self.levels]
        if len(level_ids) != len(set(level_ids)):
            raise ValueError(
                f"Campaign '{self.name}' has duplicate level ids: {level_ids}"
            )

    def get_level(self, level_id: int) -> Optional[LevelConfig]:
        for level in self.levels:
            if level.level_id == level_id:
                return level
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "lattice_step": self.lattice_step,
            "binding_tol": self.binding_tol,
            "line_match_tol": self.line_match_tol,
            "levels": [level.to_dict() for level in self.levels],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "CampaignConfig":
        if not isinstance(data, dict):
            raise ValueError(f"Campaign must be a mapping, got {type(data).__name__}")
        try:
            levels: List[LevelConfig] = [
                LevelConfig.from_dict(level) for level in data.get("levels", [])
            ]
            return cls(
                name=str(data["name"]),
                levels=tuple(levels),
                lattice_step=float(data.get("lattice_step", LATTICE_STEP)),
                binding_tol=float(data.get("binding_tol", BINDING_TOL)),
                line_match_tol=float(data.get("line_match_tol", LINE_MATCH_TOL)),
            )
        except KeyError as e:
            raise ValueError(f"Missing required CampaignConfig field: {e}")
        except TypeError as e:
            raise ValueError(f"Invalid CampaignConfig data: {e}")

    @classmethod
    def from_yaml(
        cls,
        yaml_path: Union[str, Path],
        logger: Optional[StructuredLogger] = None,
    ) -> "CampaignConfig":
        """
        Load campaign from YAML file.

        Example YAML:
            name: "night-market"
            lattice_step: 0.5

            levels:
              - level_id: 1
                title: "Budget and security"
                domain: {xmin: 0, xmax: 12, ymin: 0, ymax: 12}
                target:
                  - {id: budget, a: 2, b: 1, c: 12, comp: "<="}
                  - {id: security, a: 1, b: 0, c: 2, comp: ">="}

        Raises:
            FileNotFoundError: If the file does not exist
            ValueError: If YAML is invalid or fails validation
        """
        path = Path(yaml_path)
        if not path.exists():
            raise FileNotFoundError(f"Campaign file not found: {path}")

        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
            config = cls.from_dict(data)
        except (yaml.YAMLError, ValueError) as e:
            if logger is not None:
                logger.error(
                    event=LogEvent.CONFIG_ERROR,
                    message="Invalid campaign file",
                    metadata={"path": str(path)},
                    exc_info=e,
                )
            if isinstance(e, yaml.YAMLError):
                raise ValueError(f"Invalid YAML in {path}: {e}")
            raise

        if logger is not None:
            logger.info(
                event=LogEvent.LEVEL_LOADED,
                message="Loaded campaign",
                metadata={"path": str(path), "campaign": config.name, "levels": len(config.levels)},
            )
        return config
