import pytest

from feasible_zone.geometry import Constraint, Domain


@pytest.fixture
def dom12():
    return Domain(0, 12, 0, 12)


@pytest.fixture
def level1_target():
    """2x + y <= 12, x >= 2"""
    return [
        Constraint(2, 1, 12, "<=", id="budget"),
        Constraint(1, 0, 2, ">=", id="security"),
    ]


@pytest.fixture
def level3_target():
    """3x + 2y <= 18, y <= 7, x >= 2, x + y >= 6"""
    return [
        Constraint(3, 2, 18, "<=", id="budget"),
        Constraint(0, 1, 7, "<=", id="noise"),
        Constraint(1, 0, 2, ">=", id="security"),
        Constraint(1, 1, 6, ">=", id="walkway"),
    ]
