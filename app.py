# app.py
import logging

import pandas as pd
import streamlit as st

from finanzasmaster.calculators import compound, fire, pension, salary
from finanzasmaster.calculators.pension import Longevity
from finanzasmaster.components.charts import (
    drawdown_chart,
    fire_progress_chart,
    growth_chart,
    salary_breakdown_chart,
)
from finanzasmaster.components.forms import compound_form, fire_form, pension_form, salary_form
from finanzasmaster.components.i18n import format_money, format_years, t
from finanzasmaster.components.report import build_pdf
from finanzasmaster.components.theme import chart_template, inject_theme
from finanzasmaster.config import APP_NAME, LANGUAGES, TAX_YEAR, UISettings

logging.basicConfig(level=logging.INFO)

# ---------- Page config ----------
st.set_page_config(
    page_title=APP_NAME,
    page_icon="🧮",
    layout="wide",
    initial_sidebar_state="auto",
)

# ---------- Session boot ----------
st.session_state.setdefault("ui", UISettings())
st.session_state.setdefault("dependent_rows", [])


# ====== SIDEBAR: SETTINGS ======
def settings_sidebar() -> UISettings:
    ui: UISettings = st.session_state["ui"]
    st.sidebar.header(t("settings", ui.language))
    language = st.sidebar.selectbox(
        t("language", ui.language), list(LANGUAGES),
        index=LANGUAGES.index(ui.language),
        format_func=lambda code: {"es": "Español", "en": "English"}[code],
        key="in_language",
    )
    dark = st.sidebar.toggle(t("darkMode", ui.language), value=ui.theme == "dark", key="in_dark")
    ui = UISettings(theme="dark" if dark else "light", language=language)
    st.session_state["ui"] = ui
    return ui


ui = settings_sidebar()
lang = ui.language
template = chart_template(ui)
inject_theme(ui)


# ---------- Header bar ----------
st.markdown(f"### 🧮 **{APP_NAME}**")
st.caption(t("tagline", lang))


def _downloads(name: str, title: str, ledger: dict, inputs, results, extra=None):
    """CSV of the yearly ledger plus a PDF summary of the run."""
    df = pd.DataFrame(ledger)
    c1, c2 = st.columns(2)
    c1.download_button(
        t("download_csv", lang),
        data=df.to_csv(index=False).encode("utf-8"),
        file_name=f"{name}.csv",
        mime="text/csv",
        key=f"csv_{name}",
    )
    c2.download_button(
        t("download_pdf", lang),
        data=build_pdf(title, inputs, results, extra, language=lang),
        file_name=f"{name}.pdf",
        mime="application/pdf",
        key=f"pdf_{name}",
    )


tab_compound, tab_salary, tab_fire, tab_pension = st.tabs([
    t("tab_compound", lang),
    t("tab_salary", lang),
    t("tab_fire", lang),
    t("tab_pension", lang),
])

# ====== COMPOUND INTEREST ======
with tab_compound:
    st.header(t("title_compound", lang))
    left, right = st.columns(2)
    with left:
        proj_in = compound_form(lang)
    with right:
        res = compound.project(proj_in)
        st.subheader(t("wealthProjection", lang))
        st.metric(t("finalCapital", lang), format_money(res.final_total))
        m1, m2 = st.columns(2)
        m1.metric(t("yourContributions", lang), format_money(res.total_contributed))
        m2.metric(t("generatedProfit", lang), format_money(res.interest_earned))

    sched = compound.growth_schedule(proj_in)
    st.plotly_chart(
        growth_chart(
            sched["year"], sched["contributed"], sched["interest"],
            labels=(t("principal", lang), t("interest", lang)),
            title=t("wealthProjection", lang), template=template,
        ),
        use_container_width=True,
    )
    _downloads("compound", t("title_compound", lang), sched, proj_in, res)

# ====== NET SALARY ======
with tab_salary:
    st.header(t("title_salary", lang))
    left, right = st.columns(2)
    with left:
        sal_in = salary_form(lang)
    with right:
        try:
            sal = salary.compute_tax(sal_in, year=TAX_YEAR)
        except ValueError as exc:
            st.error(str(exc))
        else:
            st.metric(t("netAnnual", lang), format_money(sal.net_annual))
            st.metric(f"{t('netMonthly', lang)} ({sal_in.num_payments})", format_money(sal.net_monthly))
            m1, m2, m3 = st.columns(3)
            m1.metric(t("taxAmount", lang), format_money(sal.tax_amount))
            m2.metric(t("socialSecurity", lang), format_money(sal.social_security_amount))
            m3.metric(t("effectiveRate", lang), f"{sal.effective_tax_rate_percent:.2f}%")
            st.plotly_chart(
                salary_breakdown_chart(
                    sal.net_annual, sal.tax_amount, sal.social_security_amount,
                    labels=(t("netAnnual", lang), t("taxAmount", lang), t("socialSecurity", lang)),
                    title=t("salaryBreakdown", lang), template=template,
                ),
                use_container_width=True,
            )
            ledger = {
                "concept": ["gross", "social_security", "taxable_income", "personal_minimum",
                            "family_minimum", "tax", "net_annual", "net_per_payment"],
                "amount": [sal_in.gross_annual_salary, sal.social_security_amount, sal.taxable_income,
                           sal.personal_minimum, sal.family_minimum, sal.tax_amount,
                           sal.net_annual, sal.net_monthly],
            }
            _downloads("salary", t("title_salary", lang), ledger, sal_in, sal)

# ====== FIRE ======
with tab_fire:
    st.header(t("title_fire", lang))
    left, right = st.columns(2)
    with left:
        fire_in = fire_form(lang)
    with right:
        try:
            fres = fire.solve(fire_in)
        except ValueError as exc:
            st.error(str(exc))
        else:
            st.metric(t("fireNumber", lang), format_money(fres.fire_target_amount))
            when = format_years(fres.years_to_target, lang) if fres.is_reachable else t("never", lang)
            st.metric(t("timeToRetire", lang), when)

            acc = fire.accumulation_schedule(fire_in)
            st.plotly_chart(
                fire_progress_chart(
                    acc["year"], acc["balance"], fres.fire_target_amount,
                    title=t("fireProgress", lang), template=template,
                ),
                use_container_width=True,
            )
            _downloads("fire", t("title_fire", lang), acc, fire_in, fres, {"time_to_target": when})

# ====== PENSION LONGEVITY ======
with tab_pension:
    st.header(t("title_pension", lang))
    left, right = st.columns(2)
    with left:
        pen_in = pension_form(lang)
    with right:
        try:
            pres = pension.solve(pen_in)
        except ValueError as exc:
            st.error(str(exc))
        else:
            st.metric(t("monthlyGap", lang), format_money(pension.monthly_gap(pen_in)))
            lasts = format_years(
                pres.years_of_longevity, lang, exceeds=pres.outcome is Longevity.EXCEEDS_HORIZON
            )
            st.metric(t("moneyLasts", lang), lasts)
            if pres.is_sustainable:
                st.success(t("sustainableMsg", lang))
            else:
                st.warning(t("unsustainableMsg", lang))

            dd = pension.drawdown_schedule(pen_in)
            st.plotly_chart(
                drawdown_chart(
                    dd["year"], dd["balance"],
                    sustainable_years=pension.SUSTAINABLE_MONTHS / 12,
                    title=t("savingsDrawdown", lang), template=template,
                ),
                use_container_width=True,
            )
            _downloads("pension", t("title_pension", lang), dd, pen_in, pres, {"money_lasts": lasts})
