"""Unit tests for the net salary calculator.

Expected values are hand-computed from the 2025 bracket schedule:
12 450 @ 19%, 20 200 @ 24%, 35 200 @ 30%, 60 000 @ 37%, 300 000 @ 45%,
above @ 47%.
"""

import copy
import math

import pytest

from finanzasmaster.calculators import salary
from finanzasmaster.calculators.salary import Dependent, DependentKind, SalaryInput


def _tax(gross=30000, payments=12, age=30, disability=0, dependents=()):
    return salary.compute_tax(SalaryInput(gross, payments, age, disability, dependents))


def test_bracket_quota_hand_computed():
    brackets = salary.load_tax_tables()["2025"]["brackets"]
    # 12450*0.19 + 7750*0.24 + 5856*0.30
    assert math.isclose(salary.bracket_quota(26056, brackets), 5982.3, rel_tol=1e-9)
    assert math.isclose(salary.bracket_quota(5550, brackets), 1054.5, rel_tol=1e-9)
    assert salary.bracket_quota(0, brackets) == 0.0


def test_reference_salary_no_dependents():
    res = _tax()
    assert math.isclose(res.social_security_amount, 1944.0, rel_tol=1e-9)
    assert math.isclose(res.taxable_income, 26056.0, rel_tol=1e-9)
    assert res.personal_minimum == 5550
    assert res.family_minimum == 0
    assert res.tax_amount == pytest.approx(5982.3 - 1054.5)
    assert res.net_annual == pytest.approx(30000 - 1944 - 4927.8)
    assert res.net_monthly == pytest.approx(23128.2 / 12)
    assert res.effective_tax_rate_percent == pytest.approx(4927.8 / 30000 * 100)


def test_fourteen_payments_splits_same_annual_net():
    res12 = _tax(payments=12)
    res14 = _tax(payments=14)
    assert res12.net_annual == res14.net_annual
    assert res14.net_monthly == pytest.approx(res14.net_annual / 14)


def test_invalid_payments_rejected():
    with pytest.raises(ValueError):
        _tax(payments=13)


def test_low_income_short_circuits_to_zero_tax():
    res = _tax(gross=1000)
    assert res.tax_amount == 0
    assert res.effective_tax_rate_percent == 0
    assert res.net_annual == pytest.approx(1000 - 64.8)
    assert res.net_monthly == pytest.approx(935.2 / 12)


def test_allowance_above_income_floors_tax_at_zero():
    # taxable 5481.6 is below the 5550 personal minimum
    res = _tax(gross=8000)
    assert res.taxable_income > 0
    assert res.tax_amount == 0.0


def test_top_bracket():
    res = _tax(gross=400000)
    expected = 2365.5 + 1860 + 4500 + 9176 + 108000 + 72080 * 0.47 - 1054.5
    assert res.tax_amount == pytest.approx(expected)


@pytest.mark.parametrize("age,expected", [(65, 5550), (66, 6700), (75, 6700), (76, 8100)])
def test_personal_minimum_by_age(age, expected):
    assert _tax(age=age).personal_minimum == expected


@pytest.mark.parametrize("level,expected", [(0, 5550), (33, 8550), (50, 8550), (65, 17550)])
def test_personal_minimum_by_disability(level, expected):
    assert _tax(disability=level).personal_minimum == expected


def test_descendant_tiers_follow_position():
    kids = [Dependent(age_years=10) for _ in range(5)]
    res = _tax(dependents=kids)
    assert res.family_minimum == 2400 + 2700 + 4000 + 4500 + 4500


def test_ascendants_do_not_advance_descendant_tier():
    deps = [
        Dependent(age_years=80, kind=DependentKind.ASCENDANT),
        Dependent(age_years=10),
        Dependent(age_years=70, kind="ascendant"),
        Dependent(age_years=8),
    ]
    res = _tax(dependents=deps)
    assert res.family_minimum == (1150 + 1400) + 2400 + 1150 + 2700


def test_young_child_and_dependent_disability_supplements():
    deps = [Dependent(age_years=2), Dependent(age_years=40, disability_level=65),
            Dependent(age_years=50, kind="ascendant", disability_level=33)]
    res = _tax(dependents=deps)
    assert res.family_minimum == (2400 + 2800) + (2700 + 12000) + (1150 + 3000)


def test_one_child_tax_hand_computed():
    res = _tax(dependents=[Dependent(age_years=5)])
    # quota(26056) - quota(5550 + 2400)
    assert res.tax_amount == pytest.approx(5982.3 - 7950 * 0.19)


def test_four_children_tax_hand_computed():
    res = _tax(dependents=[Dependent(age_years=10) for _ in range(4)])
    # total minimum 19150 -> 12450*0.19 + 6700*0.24
    assert res.tax_amount == pytest.approx(5982.3 - (2365.5 + 1608))


def test_adding_descendant_never_increases_tax():
    base = [Dependent(age_years=12)]
    for gross in (15000, 30000, 55000, 120000):
        without = _tax(gross=gross, dependents=base)
        with_child = _tax(gross=gross, dependents=base + [Dependent(age_years=1)])
        assert with_child.tax_amount <= without.tax_amount


def test_tax_monotonic_in_gross_salary():
    deps = [Dependent(age_years=4), Dependent(age_years=78, kind="ascendant")]
    previous = -1.0
    for gross in range(0, 200001, 2500):
        tax = _tax(gross=gross, dependents=deps).tax_amount
        assert tax >= previous
        previous = tax


def test_dependents_order_is_preserved():
    deps = [Dependent(age_years=1), Dependent(age_years=9, kind="ascendant")]
    inp = SalaryInput(30000, dependents=deps)
    assert isinstance(inp.dependents, tuple)
    assert [d.age_years for d in inp.dependents] == [1, 9]


def test_unknown_dependent_kind_rejected():
    with pytest.raises(ValueError):
        Dependent(age_years=3, kind="cousin")


def test_custom_tax_tables_are_used():
    tables = copy.deepcopy(salary.load_tax_tables())
    tables["2025"]["brackets"] = [{"start": 0, "end": None, "rate": 0.10}]
    res = salary.compute_tax(SalaryInput(30000), tax_tables=tables)
    assert res.tax_amount == pytest.approx((26056 - 5550) * 0.10)


def test_repeated_calls_are_identical():
    inp = SalaryInput(45678, 14, 70, 33, [Dependent(2), Dependent(80, "ascendant", 65)])
    assert salary.compute_tax(inp) == salary.compute_tax(inp)
