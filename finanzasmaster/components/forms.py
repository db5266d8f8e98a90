import streamlit as st

from ..calculators.compound import ProjectionInput
from ..calculators.fire import FireInput
from ..calculators.pension import PensionInput
from ..calculators.salary import Dependent, DependentKind, SalaryInput
from ..config import DEFAULTS, DISABILITY_LEVELS
from .i18n import t

# Stable widget keys so values survive tab switches and reruns
WIDGET_KEYS = {
    "initial_amount": "in_initial_amount",
    "monthly_contribution": "in_monthly_contribution",
    "annual_rate_percent": "in_annual_rate_percent",
    "years": "in_years",

    "gross_annual_salary": "in_gross_annual_salary",
    "num_payments": "in_num_payments",
    "age": "in_age",
    "disability_level": "in_disability_level",

    "annual_spend": "in_annual_spend",
    "current_savings": "in_current_savings",
    "monthly_savings": "in_monthly_savings",
    "annual_return_percent": "in_annual_return_percent",
    "withdrawal_rate_percent": "in_withdrawal_rate_percent",

    "pension_savings": "in_pension_savings",
    "desired_monthly_spend": "in_desired_monthly_spend",
    "monthly_pension_income": "in_monthly_pension_income",
    "inflation_percent": "in_inflation_percent",
    "investment_return_percent": "in_investment_return_percent",
}

DEPENDENTS_KEY = "dependent_rows"
NEXT_ID_KEY = "dependent_next_id"
_ROW_WIDGETS = ("dep_age", "dep_kind", "dep_dis", "dep_del")


def _d(tool, key):
    return DEFAULTS[tool][key]


def compound_form(lang: str) -> ProjectionInput:
    st.subheader(t("investmentParams", lang))
    initial = st.number_input(
        t("initialInvestment", lang), min_value=0.0, step=100.0,
        value=_d("compound", "initial_amount"), key=WIDGET_KEYS["initial_amount"],
    )
    monthly = st.number_input(
        t("monthlyContribution", lang), min_value=0.0, step=50.0,
        value=_d("compound", "monthly_contribution"), key=WIDGET_KEYS["monthly_contribution"],
    )
    rate = st.number_input(
        t("annualReturn", lang), min_value=0.0, max_value=100.0, step=0.5,
        value=_d("compound", "annual_rate_percent"), key=WIDGET_KEYS["annual_rate_percent"],
        help=t("sp500Tooltip", lang),
    )
    years = st.number_input(
        t("timeHorizon", lang), min_value=0, max_value=100, step=1,
        value=_d("compound", "years"), key=WIDGET_KEYS["years"],
    )
    return ProjectionInput(
        initial_amount=float(initial),
        monthly_contribution=float(monthly),
        annual_rate_percent=float(rate),
        years=int(years),
    )


def salary_form(lang: str) -> SalaryInput:
    st.subheader(t("personalData", lang))
    gross = st.number_input(
        t("grossSalary", lang), min_value=0.0, step=1000.0,
        value=_d("salary", "gross_annual_salary"), key=WIDGET_KEYS["gross_annual_salary"],
    )
    payments = st.radio(
        t("payments", lang), [12, 14], horizontal=True,
        index=[12, 14].index(_d("salary", "num_payments")), key=WIDGET_KEYS["num_payments"],
    )
    age = st.number_input(
        t("age", lang), min_value=16, max_value=120, step=1,
        value=_d("salary", "age"), key=WIDGET_KEYS["age"],
    )
    disability = st.selectbox(
        t("disability", lang), list(DISABILITY_LEVELS),
        index=DISABILITY_LEVELS.index(_d("salary", "disability_level")),
        key=WIDGET_KEYS["disability_level"],
    )
    dependents = dependents_editor(lang)
    return SalaryInput(
        gross_annual_salary=float(gross),
        num_payments=int(payments),
        age=int(age),
        disability_level=int(disability),
        dependents=dependents,
    )


def dependents_editor(lang: str) -> list:
    """Editable list of dependents kept in session state.

    Rows keep their insertion order; editing a row never moves it, since the
    position among descendants decides its allowance tier.
    """
    st.subheader(t("dependents", lang))
    rows = st.session_state.setdefault(DEPENDENTS_KEY, [])

    # Row widgets are keyed by a stable row id, not by position
    next_id = st.session_state.get(
        NEXT_ID_KEY, max((r["id"] for r in rows if "id" in r), default=-1) + 1
    )
    for row in rows:
        if "id" not in row:
            row["id"] = next_id
            next_id += 1
    st.session_state[NEXT_ID_KEY] = next_id

    # Handle add before rendering so the new row appears immediately
    if st.button(t("addDependent", lang), key="dep_add"):
        rows.append({"id": next_id, "age": 0, "kind": DependentKind.DESCENDANT.value, "disability": 0})
        st.session_state[NEXT_ID_KEY] = next_id + 1
        st.session_state[DEPENDENTS_KEY] = rows
        st.rerun()

    if not rows:
        st.caption(t("noDependents", lang))

    kinds = [k.value for k in DependentKind]
    removed = []
    for i, row in enumerate(rows):
        rid = row["id"]
        c1, c2, c3, c4 = st.columns([1, 1.4, 1, 0.3], gap="small")
        age = c1.number_input(
            t("dependentAge", lang), min_value=0, max_value=120, step=1,
            value=int(row.get("age", 0)), key=f"dep_age_{rid}",
        )
        kind = c2.selectbox(
            t("dependentKind", lang), kinds,
            index=kinds.index(row.get("kind", kinds[0])),
            format_func=lambda k: t(k, lang), key=f"dep_kind_{rid}",
        )
        disability = c3.selectbox(
            t("disability", lang), list(DISABILITY_LEVELS),
            index=DISABILITY_LEVELS.index(row.get("disability", 0)), key=f"dep_dis_{rid}",
        )
        if c4.button("✖", key=f"dep_del_{rid}"):
            removed.append(rid)
        rows[i] = {"id": rid, "age": int(age), "kind": kind, "disability": int(disability)}

    if removed:
        rows = [r for r in rows if r["id"] not in removed]
        for rid in removed:
            for prefix in _ROW_WIDGETS:
                st.session_state.pop(f"{prefix}_{rid}", None)
        st.session_state[DEPENDENTS_KEY] = rows
        st.rerun()

    return [Dependent(age_years=r["age"], kind=r["kind"], disability_level=r["disability"]) for r in rows]


def fire_form(lang: str) -> FireInput:
    st.info(f"**{t('proTip', lang)}:** {t('fireTip', lang)}")
    spend = st.number_input(
        t("annualExpenses", lang), min_value=0.0, step=1000.0,
        value=_d("fire", "annual_spend"), key=WIDGET_KEYS["annual_spend"],
    )
    savings = st.number_input(
        t("currentNetWorth", lang), min_value=0.0, step=1000.0,
        value=_d("fire", "current_savings"), key=WIDGET_KEYS["current_savings"],
    )
    monthly = st.number_input(
        t("monthlySavings", lang), min_value=0.0, step=50.0,
        value=_d("fire", "monthly_savings"), key=WIDGET_KEYS["monthly_savings"],
    )
    roi = st.number_input(
        t("realReturn", lang), min_value=-20.0, max_value=50.0, step=0.5,
        value=_d("fire", "annual_return_percent"), key=WIDGET_KEYS["annual_return_percent"],
        help=t("realReturnTooltip", lang),
    )
    withdrawal = st.number_input(
        t("withdrawalRate", lang), min_value=0.5, max_value=20.0, step=0.25,
        value=_d("fire", "withdrawal_rate_percent"), key=WIDGET_KEYS["withdrawal_rate_percent"],
    )
    return FireInput(
        annual_spend=float(spend),
        current_savings=float(savings),
        monthly_savings=float(monthly),
        annual_return_percent=float(roi),
        withdrawal_rate_percent=float(withdrawal),
    )


def pension_form(lang: str) -> PensionInput:
    st.caption(t("pensionIntro", lang))
    savings = st.number_input(
        t("savingsAtRetirement", lang), min_value=0.0, step=1000.0,
        value=_d("pension", "current_savings"), key=WIDGET_KEYS["pension_savings"],
    )
    spend = st.number_input(
        t("desiredMonthlySpend", lang), min_value=0.0, step=50.0,
        value=_d("pension", "desired_monthly_spend"), key=WIDGET_KEYS["desired_monthly_spend"],
    )
    pension = st.number_input(
        t("publicPension", lang), min_value=0.0, step=50.0,
        value=_d("pension", "monthly_pension_income"), key=WIDGET_KEYS["monthly_pension_income"],
    )
    c1, c2 = st.columns(2)
    inflation = c1.number_input(
        t("inflation", lang), min_value=-5.0, max_value=30.0, step=0.5,
        value=_d("pension", "inflation_percent"), key=WIDGET_KEYS["inflation_percent"],
    )
    ret = c2.number_input(
        t("savingsReturn", lang), min_value=-20.0, max_value=30.0, step=0.5,
        value=_d("pension", "investment_return_percent"), key=WIDGET_KEYS["investment_return_percent"],
    )
    return PensionInput(
        current_savings=float(savings),
        desired_monthly_spend=float(spend),
        monthly_pension_income=float(pension),
        inflation_percent=float(inflation),
        investment_return_percent=float(ret),
    )
