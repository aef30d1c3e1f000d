import threading

import pytest

from feasible_zone.geometry import Constraint, Domain
from feasible_levels import (
    BUILTIN_CAMPAIGNS,
    CampaignConfig,
    LevelConfig,
    LevelNotFoundError,
    LevelRegistry,
    campaign_names,
    get_campaign,
)


def make_level(level_id, c=12.0):
    return LevelConfig(
        level_id=level_id,
        title=f"Level {level_id}",
        domain=Domain(0, 12, 0, 12),
        target=(Constraint(2, 1, c, "<="),),
    )


def test_add_get_remove():
    registry = LevelRegistry()
    registry.add(make_level(2))
    registry.add(make_level(1))

    assert registry.count() == 2
    assert registry.level_ids == [1, 2]
    assert [level.level_id for level in registry.list_levels()] == [1, 2]
    assert registry.get(2).title == "Level 2"
    assert registry.is_available(1)

    removed = registry.remove(1)
    assert removed.level_id == 1
    assert not registry.is_available(1)
    assert registry.level_ids == [2]


def test_duplicate_registration_is_rejected():
    registry = LevelRegistry()
    registry.add(make_level(1))
    with pytest.raises(ValueError, match="already registered"):
        registry.add(make_level(1, c=10))


def test_unknown_level_fails_fast():
    registry = LevelRegistry()
    registry.add(make_level(1))
    with pytest.raises(LevelNotFoundError, match="Available levels: 1"):
        registry.get(7)
    with pytest.raises(LevelNotFoundError):
        registry.remove(7)
    with pytest.raises(LevelNotFoundError):
        registry.evaluator(7)


def test_from_campaign_uses_campaign_tolerances():
    campaign = CampaignConfig(
        name="coarse",
        levels=(make_level(1),),
        lattice_step=1.0,
        binding_tol=0.5,
        line_match_tol=0.05,
    )
    registry = LevelRegistry.from_campaign(campaign)
    evaluator = registry.evaluator(1)
    assert evaluator.lattice_step == 1.0
    assert evaluator.binding_tol == 0.5
    assert evaluator.line_match_tol == 0.05
    assert evaluator.level_id == 1


def test_evaluator_for_builtin_level():
    registry = LevelRegistry.from_campaign(get_campaign("feasible-zone"))
    assert registry.level_ids == [1, 2, 3]

    evaluator = registry.evaluator(3)
    assert evaluator.target_area == pytest.approx(4.0)
    assert evaluator.evaluate(registry.get(3).target).matches_target


def test_concurrent_registration():
    registry = LevelRegistry()

    def worker(start):
        for level_id in range(start, start + 25):
            registry.add(make_level(level_id))

    threads = [threading.Thread(target=worker, args=(1 + 25 * i,)) for i in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert registry.count() == 100
    assert registry.level_ids == list(range(1, 101))


def test_builtin_catalog():
    assert campaign_names() == ["feasible-zone", "half-plane-hero", "open-rules", "park-planner"]
    for campaign in BUILTIN_CAMPAIGNS.values():
        registry = LevelRegistry.from_campaign(campaign)
        for level_id in registry.level_ids:
            evaluator = registry.evaluator(level_id)
            assert evaluator.target_area > 0


def test_unknown_builtin_campaign():
    with pytest.raises(KeyError, match="Unknown campaign"):
        get_campaign("nope")
