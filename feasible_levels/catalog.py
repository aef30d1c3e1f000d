"""
Built-in level campaigns.

    feasible-zone     Multi-rule festival layouts (2 to 4 constraints)
    half-plane-hero   One inequality per level, including strict ones
    park-planner      One "≤" inequality per level
    open-rules        Sandbox with the four-rule festival system
"""

from typing import Dict, List

from feasible_zone.geometry.halfplane import Constraint
from feasible_zone.geometry.shapes import Domain
from feasible_levels.config import CampaignConfig, LevelConfig


def _square(size: float) -> Domain:
    return Domain(0, size, 0, size)


def _budget(a, b, c) -> Constraint:
    return Constraint(a, b, c, "<=", id="budget", label="Budget ≤", color="amber")


def _security(c) -> Constraint:
    return Constraint(1, 0, c, ">=", id="security", label="Security ≥", color="emerald")


def _noise(c, comp) -> Constraint:
    label = "Noise ≤" if comp == "<=" else "Noise min ≥"
    return Constraint(0, 1, c, comp, id="noise", label=label, color="fuchsia")


def _walkway(c) -> Constraint:
    return Constraint(1, 1, c, ">=", id="walkway", label="Walkway ≥", color="cyan")


FEASIBLE_ZONE = CampaignConfig(
    name="feasible-zone",
    levels=(
        LevelConfig(
            level_id=1,
            title="Two Rules: Budget & Security",
            description="Stay under budget and keep the security line to the right.",
            domain=_square(12),
            target=(_budget(2, 1, 12), _security(2)),
        ),
        LevelConfig(
            level_id=2,
            title="Add Noise Control",
            description="Budget, security, and keep noise under control.",
            domain=_square(14),
            target=(_budget(1, 2, 14), _security(1), _noise(1, ">=")),
        ),
        LevelConfig(
            level_id=3,
            title="Four Rules: Budget, Noise, Security, Walkway",
            description="Combine four city rules to get the legal build zone.",
            domain=_square(12),
            target=(_budget(3, 2, 18), _noise(7, "<="), _security(2), _walkway(6)),
        ),
    ),
)

HALF_PLANE_HERO = CampaignConfig(
    name="half-plane-hero",
    levels=(
        LevelConfig(
            level_id=1,
            title="Budget Line: Snacks & Booths",
            description="Each snack stall costs 2 credits and each game booth costs 1. "
                        "Spend at most 12 credits.",
            domain=_square(12),
            target=(Constraint(2, 1, 12, "<="),),
        ),
        LevelConfig(
            level_id=2,
            title="Space Constraint: Tents vs. Arcades",
            description="Arcades take double space. Total space ≤ 14 units.",
            domain=_square(14),
            target=(Constraint(1, 2, 14, "<="),),
        ),
        LevelConfig(
            level_id=3,
            title="Minimum Staff: Safety Team",
            description="You need at least 10 staff credits (snacks use 3, booths use 2).",
            domain=_square(12),
            target=(Constraint(3, 2, 10, ">="),),
        ),
        LevelConfig(
            level_id=4,
            title="Noise Barrier: Stay Above",
            description="Your music must be strictly louder than the rival line.",
            domain=_square(12),
            target=(Constraint(1, 1, 6, ">"),),
        ),
        LevelConfig(
            level_id=5,
            title="VIP Mix: Below Strictly",
            description="Only plans strictly under the taste line are allowed.",
            domain=_square(12),
            target=(Constraint(1, -1, 3, "<"),),
        ),
    ),
)

PARK_PLANNER = CampaignConfig(
    name="park-planner",
    levels=(
        LevelConfig(
            level_id=1,
            title="Budget Cap: Food vs Booths",
            description="Food stalls cost 2 credits each; booths cost 1. Spend ≤ 12 credits.",
            domain=_square(12),
            target=(Constraint(2, 1, 12, "<="),),
        ),
        LevelConfig(
            level_id=2,
            title="Floor Space: Layout",
            description="Booths take double the space. Total area ≤ 14 units.",
            domain=_square(14),
            target=(Constraint(1, 2, 14, "<="),),
        ),
        LevelConfig(
            level_id=3,
            title="Staff: Volunteers Available",
            description="Each food stall needs 3 staff, each booth needs 2. Staff ≤ 16.",
            domain=_square(12),
            target=(Constraint(3, 2, 16, "<="),),
        ),
    ),
)

OPEN_RULES = CampaignConfig(
    name="open-rules",
    levels=(
        LevelConfig(
            level_id=1,
            title="Open Rules",
            description="Free play with the four festival rules on a larger lot.",
            domain=_square(18),
            target=(_budget(2, 1, 16), _noise(12, "<="), _security(3), _walkway(10)),
        ),
    ),
)

BUILTIN_CAMPAIGNS: Dict[str, CampaignConfig] = {
    campaign.name: campaign
    for campaign in (FEASIBLE_ZONE, HALF_PLANE_HERO, PARK_PLANNER, OPEN_RULES)
}

DEFAULT_CAMPAIGN = FEASIBLE_ZONE.name


def campaign_names() -> List[str]:
    return sorted(BUILTIN_CAMPAIGNS)


def get_campaign(name: str) -> CampaignConfig:
    """
    Look up a built-in campaign by name.

    Raises:
        KeyError: If no built-in campaign has that name
    """
    try:
        return BUILTIN_CAMPAIGNS[name]
    except KeyError:
        raise KeyError(
            f"Unknown campaign '{name}'. "
            f"Available campaigns: {', '.join(campaign_names())}"
        )
