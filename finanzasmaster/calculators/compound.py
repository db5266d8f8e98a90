"""Compound interest projection.

Savings grow month by month: each month the balance earns one twelfth of the
annual rate and then receives the monthly contribution.  Contributions are
seeded with the initial amount, so the interest earned is simply the final
balance minus everything paid in.

Note that the monthly rate is a simple division of the annual rate.  The FIRE
and pension calculators use the geometric monthly equivalent instead; the two
conventions give different figures for the same "annual rate".

Example
-------

>>> res = project(ProjectionInput(initial_amount=1000, monthly_contribution=0,
...                               annual_rate_percent=12, years=1))
>>> round(res.final_total, 2)
1126.83
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict

import numpy as np


@dataclass(frozen=True)
class ProjectionInput:
    initial_amount: float
    monthly_contribution: float
    annual_rate_percent: float
    years: int


@dataclass(frozen=True)
class ProjectionResult:
    final_total: float
    total_contributed: float
    interest_earned: float


def _monthly_rate(annual_rate_percent: float) -> float:
    return annual_rate_percent / 100 / 12


def project(inp: ProjectionInput) -> ProjectionResult:
    """Simulate ``years * 12`` months of growth plus contributions."""
    monthly_rate = _monthly_rate(inp.annual_rate_percent)
    total = inp.initial_amount
    contributed = inp.initial_amount
    for _ in range(int(inp.years) * 12):
        total = total * (1 + monthly_rate) + inp.monthly_contribution
        contributed += inp.monthly_contribution
    return ProjectionResult(
        final_total=total,
        total_contributed=contributed,
        interest_earned=total - contributed,
    )


def growth_schedule(inp: ProjectionInput) -> Dict[str, np.ndarray]:
    """Year-end balances for charting.

    Row 0 is the starting point; the last row matches :func:`project`.
    """
    monthly_rate = _monthly_rate(inp.annual_rate_percent)
    years = max(0, int(inp.years))
    total = inp.initial_amount
    contributed = inp.initial_amount

    balance = [total]
    paid_in = [contributed]
    for _ in range(years):
        for _month in range(12):
            total = total * (1 + monthly_rate) + inp.monthly_contribution
            contributed += inp.monthly_contribution
        balance.append(total)
        paid_in.append(contributed)

    balance_arr = np.array(balance)
    paid_arr = np.array(paid_in)
    return {
        "year": np.arange(years + 1),
        "balance": balance_arr,
        "contributed": paid_arr,
        "interest": balance_arr - paid_arr,
    }


__all__ = ["ProjectionInput", "ProjectionResult", "project", "growth_schedule"]
