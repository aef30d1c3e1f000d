"""
Feasible Levels
===============

Bounded Context: Level campaigns for the feasible zone engine.

Architecture:

    feasible_levels/
    ├── config.py      # LevelConfig, CampaignConfig (YAML)
    ├── catalog.py     # Built-in campaigns
    ├── registry.py    # LevelRegistry (thread-safe lookup)
    └── practice.py    # Noisy starting systems

Usage:

    from feasible_levels import LevelRegistry, get_campaign, perturb_system

    registry = LevelRegistry.from_campaign(get_campaign("feasible-zone"))
    evaluator = registry.evaluator(1)
    report = evaluator.evaluate(perturb_system(registry.get(1).target))
"""

from feasible_levels.config import LevelConfig, CampaignConfig
from feasible_levels.catalog import (
    BUILTIN_CAMPAIGNS,
    DEFAULT_CAMPAIGN,
    campaign_names,
    get_campaign,
)
from feasible_levels.registry import LevelRegistry, LevelNotFoundError
from feasible_levels.practice import perturb_system, round_half_up

__all__ = [
    "LevelConfig",
    "CampaignConfig",
    "BUILTIN_CAMPAIGNS",
    "DEFAULT_CAMPAIGN",
    "campaign_names",
    "get_campaign",
    "LevelRegistry",
    "LevelNotFoundError",
    "perturb_system",
    "round_half_up",
]
