"""Tests for the compound interest projection."""

import math

import pytest

from finanzasmaster.calculators import compound
from finanzasmaster.calculators.compound import ProjectionInput


def _reference(initial, monthly, rate, years):
    total = initial
    paid = initial
    r = rate / 100 / 12
    for _ in range(years * 12):
        total = total * (1 + r) + monthly
        paid += monthly
    return total, paid


def test_matches_reference_loop():
    res = compound.project(ProjectionInput(1000, 200, 7, 10))
    total, paid = _reference(1000, 200, 7, 10)
    assert res.final_total == total
    assert res.total_contributed == paid == 25000
    assert res.interest_earned == total - paid


@pytest.mark.parametrize("inp", [
    ProjectionInput(1000, 200, 7, 10),
    ProjectionInput(0, 50, 3.5, 40),
    ProjectionInput(250000, 0, 12, 25),
    ProjectionInput(10, 10, 0, 1),
])
def test_total_is_contributions_plus_interest(inp):
    res = compound.project(inp)
    assert math.isclose(res.final_total, res.total_contributed + res.interest_earned, rel_tol=1e-9)


def test_zero_years_returns_initial_amount():
    res = compound.project(ProjectionInput(1000, 200, 7, 0))
    assert res.final_total == 1000
    assert res.interest_earned == 0


def test_zero_rate_earns_no_interest():
    res = compound.project(ProjectionInput(1000, 200, 0, 10))
    assert res.final_total == pytest.approx(25000.0)
    assert res.interest_earned == pytest.approx(0.0, abs=1e-9)


def test_simple_monthly_rate_convention():
    """12% a year is 1% a month, not the geometric equivalent."""
    res = compound.project(ProjectionInput(1000, 0, 12, 1))
    assert math.isclose(res.final_total, 1000 * 1.01 ** 12, rel_tol=1e-12)


def test_schedule_agrees_with_projection():
    inp = ProjectionInput(1000, 200, 7, 10)
    sched = compound.growth_schedule(inp)
    res = compound.project(inp)
    assert sched["year"].tolist() == list(range(11))
    assert sched["balance"][0] == 1000
    assert sched["balance"][-1] == pytest.approx(res.final_total)
    assert sched["contributed"][-1] == pytest.approx(res.total_contributed)
    assert sched["interest"][-1] == pytest.approx(res.interest_earned)


def test_repeated_calls_are_identical():
    inp = ProjectionInput(1234.5, 321.0, 6.25, 17)
    assert compound.project(inp) == compound.project(inp)
