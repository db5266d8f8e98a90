"""Pension drawdown longevity.

Given the savings available at retirement, the monthly spending wanted and
the public pension received, estimate how long the savings last.  The
shortfall between spending and pension is withdrawn every month, and the
remaining balance grows at the *real* return (investment return minus
inflation, converted to its geometric monthly equivalent).

* If the pension covers the spending, savings are never touched and the
  result is indefinite.
* The simulation stops after 50 years; savings still standing by then are
  reported as lasting "+50" years.
* A plan is considered sustainable when savings last at least 30 years.

Example
-------

>>> res = solve(PensionInput(current_savings=360000, desired_monthly_spend=2000,
...                          monthly_pension_income=1000, inflation_percent=3,
...                          investment_return_percent=3))
>>> res.years_of_longevity, res.is_sustainable
(30.0, True)
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict

import numpy as np

from .fire import monthly_equivalent, round_years

logger = logging.getLogger(__name__)

MAX_MONTHS = 600  # 50 years
SUSTAINABLE_MONTHS = 360  # 30 years


class Longevity(str, Enum):
    DEPLETED = "depleted"
    EXCEEDS_HORIZON = "exceeds_horizon"
    INDEFINITE = "indefinite"


@dataclass(frozen=True)
class PensionInput:
    current_savings: float
    desired_monthly_spend: float
    monthly_pension_income: float
    inflation_percent: float
    investment_return_percent: float


@dataclass(frozen=True)
class PensionResult:
    years_of_longevity: float
    is_sustainable: bool
    outcome: Longevity = Longevity.DEPLETED


def real_monthly_return(investment_return_percent: float, inflation_percent: float) -> float:
    return monthly_equivalent(investment_return_percent - inflation_percent)


def monthly_gap(inp: PensionInput) -> float:
    """Amount drawn from savings each month (never negative)."""
    return max(0.0, inp.desired_monthly_spend - inp.monthly_pension_income)


def solve(inp: PensionInput) -> PensionResult:
    """Simulate the monthly drawdown and report how long savings last.

    Raises
    ------
    ValueError
        If the real return (return minus inflation) is below -100%.
    """
    rate = real_monthly_return(inp.investment_return_percent, inp.inflation_percent)
    if inp.monthly_pension_income >= inp.desired_monthly_spend:
        return PensionResult(years_of_longevity=math.inf, is_sustainable=True, outcome=Longevity.INDEFINITE)

    gap = inp.desired_monthly_spend - inp.monthly_pension_income

    balance = inp.current_savings
    months = 0
    while balance > 0 and months < MAX_MONTHS:
        balance = balance * (1 + rate) - gap
        months += 1

    sustainable = months >= SUSTAINABLE_MONTHS
    if months >= MAX_MONTHS:
        logger.debug("Savings last beyond the %d-month horizon", MAX_MONTHS)
        return PensionResult(
            years_of_longevity=round_years(MAX_MONTHS),
            is_sustainable=sustainable,
            outcome=Longevity.EXCEEDS_HORIZON,
        )
    return PensionResult(years_of_longevity=round_years(months), is_sustainable=sustainable)


def drawdown_schedule(inp: PensionInput) -> Dict[str, np.ndarray]:
    """Year-end savings balance over the 50-year horizon.

    The balance is floored at zero and the series stops at the year the
    savings run out.
    """
    rate = real_monthly_return(inp.investment_return_percent, inp.inflation_percent)
    gap = monthly_gap(inp)

    balance = inp.current_savings
    years = [0.0]
    balances = [max(0.0, balance)]
    months = 0
    while months < MAX_MONTHS:
        if gap > 0 and balance <= 0:
            break
        balance = balance * (1 + rate) - gap
        months += 1
        if months % 12 == 0 or balance <= 0:
            years.append(months / 12)
            balances.append(max(0.0, balance))

    return {
        "year": np.array(years),
        "balance": np.array(balances),
    }


__all__ = [
    "Longevity",
    "PensionInput",
    "PensionResult",
    "MAX_MONTHS",
    "SUSTAINABLE_MONTHS",
    "real_monthly_return",
    "monthly_gap",
    "solve",
    "drawdown_schedule",
]
