"""Net salary and income-tax withholding calculator.

This module estimates the yearly withholding on a Spanish-style salary.  The
worker's social-security contribution and a fixed general deduction are
removed from the gross salary to obtain the taxable income.  The progressive
bracket schedule is then applied twice: once to the taxable income and once
to the personal and family minimum allowance.  The tax owed is the difference
between both quotas (the "minimum exemption" technique), floored at zero.

The defaults embed the 2025 parameters shipped in ``data/tax_tables.json``.
The logic does not model regional scales, joint filing or any credit beyond
the personal and family minimums.

Example
-------

>>> # 30 000 gross, 12 payments, 30 years old, no dependents
>>> res = compute_tax(SalaryInput(gross_annual_salary=30000, num_payments=12, age=30))
>>> round(res.tax_amount, 2)
4927.8
>>> round(res.net_monthly, 2)
1927.35
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Dict, Optional, Sequence, Tuple

logger = logging.getLogger(__name__)

_DEFAULT_TAX_TABLE_PATH = Path(__file__).resolve().parent.parent / "data" / "tax_tables.json"

VALID_PAYMENTS = (12, 14)


class DependentKind(str, Enum):
    DESCENDANT = "descendant"
    ASCENDANT = "ascendant"


@dataclass(frozen=True)
class Dependent:
    """A person whose allowance adds to the taxpayer's family minimum.

    ``disability_level`` is one of 0, 33 or 65 (percent).
    """

    age_years: int
    kind: DependentKind = DependentKind.DESCENDANT
    disability_level: int = 0

    def __post_init__(self):
        # accept plain strings from forms and JSON
        object.__setattr__(self, "kind", DependentKind(self.kind))


@dataclass(frozen=True)
class SalaryInput:
    gross_annual_salary: float
    num_payments: int = 12
    age: int = 30
    disability_level: int = 0
    dependents: Tuple[Dependent, ...] = field(default_factory=tuple)

    def __post_init__(self):
        # freeze the caller's list, keeping insertion order
        object.__setattr__(self, "dependents", tuple(self.dependents))


@dataclass(frozen=True)
class SalaryResult:
    net_annual: float
    net_monthly: float
    tax_amount: float
    social_security_amount: float
    effective_tax_rate_percent: float
    taxable_income: float = 0.0
    personal_minimum: float = 0.0
    family_minimum: float = 0.0


def load_tax_tables(path: Optional[Path] = None) -> Dict[str, Dict]:
    """Load withholding tables from JSON.  If ``path`` is not provided, load
    the default file shipped with the package.

    Parameters
    ----------
    path : Path, optional
        Path to a JSON file containing the tax tables.

    Returns
    -------
    dict
        The parsed tax tables keyed by year.
    """
    p = path or _DEFAULT_TAX_TABLE_PATH
    logger.debug("Loading tax tables from %s", p)
    with open(p, "r", encoding="utf-8") as f:
        tables = json.load(f)
    return tables


def _disability_allowance(level: float, table: Dict) -> float:
    if level >= 65:
        return float(table["severe"])
    if level >= 33:
        return float(table["moderate"])
    return 0.0


def personal_minimum(age: float, disability_level: float, year_tables: Dict) -> float:
    """Taxpayer's own minimum: base amount plus age and disability supplements."""
    rules = year_tables["personal_minimum"]
    amount = float(rules["base"])
    if age > 65:
        amount += rules["age_over_65"]
    if age > 75:
        amount += rules["age_over_75"]
    amount += _disability_allowance(disability_level, year_tables["disability_minimum"])
    return amount


def family_minimum(dependents: Sequence[Dependent], year_tables: Dict) -> float:
    """Sum the allowances of every dependent, in the order given.

    Descendants are tiered by their position among the descendants listed so
    far (1st, 2nd, 3rd, 4th and beyond), never by age.
    """
    tiers = year_tables["descendant_minimum"]
    ascendant = year_tables["ascendant_minimum"]
    total = 0.0
    descendants_seen = 0
    for dep in dependents:
        if dep.kind is DependentKind.DESCENDANT:
            descendants_seen += 1
            amount = float(tiers[min(descendants_seen, len(tiers)) - 1])
            if dep.age_years < 3:
                amount += year_tables["descendant_under_3"]
        else:
            amount = float(ascendant["base"])
            if dep.age_years > 75:
                amount += ascendant["age_over_75"]
        total += amount + _disability_allowance(dep.disability_level, year_tables["disability_minimum"])
    return total


def bracket_quota(amount: float, brackets: Sequence[Dict]) -> float:
    """Apply the progressive schedule to ``amount``.

    Each bracket taxes the slice of ``amount`` that falls inside it; the
    open-ended top bracket has ``end`` set to ``None``.
    """
    quota = 0.0
    remaining = amount
    for bracket in brackets:
        if remaining <= 0:
            break
        end = bracket["end"] if bracket["end"] is not None else float("inf")
        width = end - bracket["start"]
        taxed = min(remaining, width)
        quota += taxed * bracket["rate"]
        remaining -= taxed
    return quota


def compute_tax(
    salary: SalaryInput,
    year: int = 2025,
    tax_tables: Optional[Dict[str, Dict]] = None,
) -> SalaryResult:
    """Compute withholding, social security and net pay for one salary.

    Parameters
    ----------
    salary : SalaryInput
        Gross salary, number of yearly payments, the taxpayer's age and
        disability level, and the ordered list of dependents.
    year : int, optional
        Tax year whose table is applied (default 2025).
    tax_tables : dict, optional
        Tables with the schema of ``data/tax_tables.json``.  Loaded from the
        packaged file when omitted.

    Returns
    -------
    SalaryResult
        Net annual and per-payment pay, tax owed, social security and the
        effective tax rate as a percentage of gross salary.

    Raises
    ------
    ValueError
        If ``num_payments`` is not 12 or 14.
    """
    if salary.num_payments not in VALID_PAYMENTS:
        raise ValueError(f"num_payments must be one of {VALID_PAYMENTS}, got {salary.num_payments!r}")

    tables = tax_tables or load_tax_tables()
    year_tables = tables[str(year)]

    gross = salary.gross_annual_salary
    social_security = gross * year_tables["social_security_rate"]
    taxable_income = gross - social_security - year_tables["general_deduction"]

    if taxable_income <= 0:
        net_annual = gross - social_security
        return SalaryResult(
            net_annual=net_annual,
            net_monthly=net_annual / salary.num_payments,
            tax_amount=0.0,
            social_security_amount=social_security,
            effective_tax_rate_percent=0.0,
            taxable_income=taxable_income,
        )

    personal = personal_minimum(salary.age, salary.disability_level, year_tables)
    family = family_minimum(salary.dependents, year_tables)

    brackets = year_tables["brackets"]
    tax_amount = max(0.0, bracket_quota(taxable_income, brackets) - bracket_quota(personal + family, brackets))

    net_annual = gross - social_security - tax_amount
    effective = tax_amount / gross * 100
    return SalaryResult(
        net_annual=net_annual,
        net_monthly=net_annual / salary.num_payments,
        tax_amount=tax_amount,
        social_security_amount=social_security,
        effective_tax_rate_percent=effective,
        taxable_income=taxable_income,
        personal_minimum=personal,
        family_minimum=family,
    )


__all__ = [
    "DependentKind",
    "Dependent",
    "SalaryInput",
    "SalaryResult",
    "load_tax_tables",
    "personal_minimum",
    "family_minimum",
    "bracket_quota",
    "compute_tax",
]
