"""FIRE (financial independence) target and time-to-target.

The FIRE number is the capital whose yearly withdrawal at
``withdrawal_rate_percent`` covers the annual spending.  The solver then
saves month by month, compounding at the monthly equivalent of the annual
return, until the balance reaches the target or 100 years have passed.

Example
-------

>>> res = solve(FireInput(annual_spend=24000, current_savings=0, monthly_savings=0,
...                       annual_return_percent=5, withdrawal_rate_percent=4))
>>> res.fire_target_amount
600000.0
>>> res.years_to_target is None
True
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional

import numpy as np

logger = logging.getLogger(__name__)

MAX_MONTHS = 1200  # 100 years


@dataclass(frozen=True)
class FireInput:
    annual_spend: float
    current_savings: float
    monthly_savings: float
    annual_return_percent: float
    withdrawal_rate_percent: float


@dataclass(frozen=True)
class FireResult:
    fire_target_amount: float
    # None when the target cannot be reached within 100 years
    years_to_target: Optional[float]

    @property
    def is_reachable(self) -> bool:
        return self.years_to_target is not None


def round_years(months: int) -> float:
    """Express a month count in years, rounded half-up to one decimal."""
    return math.floor(months / 12 * 10 + 0.5) / 10


def monthly_equivalent(annual_rate_percent: float) -> float:
    """Geometric monthly rate that compounds to the given annual rate.

    Raises ``ValueError`` below -100%, where the twelfth root has no real value.
    """
    if annual_rate_percent < -100:
        raise ValueError(f"annual rate must be at least -100%, got {annual_rate_percent!r}")
    return (1 + annual_rate_percent / 100) ** (1 / 12) - 1


def fire_target(annual_spend: float, withdrawal_rate_percent: float) -> float:
    if withdrawal_rate_percent <= 0:
        raise ValueError(f"withdrawal_rate_percent must be positive, got {withdrawal_rate_percent!r}")
    return annual_spend / (withdrawal_rate_percent / 100)


def solve(inp: FireInput) -> FireResult:
    """Return the FIRE number and the years needed to accumulate it.

    Raises
    ------
    ValueError
        If ``withdrawal_rate_percent`` is zero or negative, or
        ``annual_return_percent`` is below -100%.
    """
    target = fire_target(inp.annual_spend, inp.withdrawal_rate_percent)
    rate = monthly_equivalent(inp.annual_return_percent)

    if inp.monthly_savings <= 0 and inp.current_savings < target:
        logger.debug("FIRE target %.2f unreachable without monthly savings", target)
        return FireResult(fire_target_amount=target, years_to_target=None)
    if inp.current_savings >= target:
        return FireResult(fire_target_amount=target, years_to_target=0.0)

    balance = inp.current_savings
    months = 0
    while balance < target and months < MAX_MONTHS:
        balance = balance * (1 + rate) + inp.monthly_savings
        months += 1

    if balance < target:
        logger.debug("FIRE target %.2f not reached after %d months", target, MAX_MONTHS)
        return FireResult(fire_target_amount=target, years_to_target=None)
    return FireResult(fire_target_amount=target, years_to_target=round_years(months))


def accumulation_schedule(inp: FireInput) -> Dict[str, np.ndarray]:
    """Year-end savings balance until the target is reached (or 100 years).

    The last point sits at the month the target was hit, so the final year
    may be fractional.  When :func:`solve` reports the target as never
    reached for lack of monthly savings, only the starting point is returned.
    """
    target = fire_target(inp.annual_spend, inp.withdrawal_rate_percent)
    rate = monthly_equivalent(inp.annual_return_percent)

    balance = inp.current_savings
    years = [0.0]
    balances = [balance]
    months = 0
    if inp.monthly_savings > 0 or balance >= target:
        while balance < target and months < MAX_MONTHS:
            balance = balance * (1 + rate) + inp.monthly_savings
            months += 1
            if months % 12 == 0 or balance >= target:
                years.append(months / 12)
                balances.append(balance)

    return {
        "year": np.array(years),
        "balance": np.array(balances),
        "target": np.full(len(balances), target),
    }


__all__ = [
    "FireInput",
    "FireResult",
    "MAX_MONTHS",
    "round_years",
    "monthly_equivalent",
    "fire_target",
    "solve",
    "accumulation_schedule",
]
