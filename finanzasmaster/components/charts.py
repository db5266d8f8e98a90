# components/charts.py
# Plotly chart helpers used across the app.
# All functions return a Plotly Figure that Streamlit can display with st.plotly_chart(...).

from typing import Sequence

import plotly.graph_objects as go


def _fit(series, n):
    arr = list(series)
    if len(arr) < n: arr += [0.0] * (n - len(arr))
    return arr[:n]


def _layout(fig: go.Figure, title: str, template: str, height: int = 380, **axes) -> go.Figure:
    fig.update_layout(
        title=title,
        template=template,
        height=height,
        margin=dict(l=10, r=10, t=40, b=10),
        legend=dict(orientation="h", yanchor="bottom", y=1.02, xanchor="right", x=1),
        **axes,
    )
    return fig


# ---------- Compound growth (stacked principal / interest) ----------
def growth_chart(years: Sequence[float],
                 contributed: Sequence[float],
                 interest: Sequence[float],
                 labels: Sequence[str] = ("Principal", "Interest"),
                 title: str = "Wealth Projection",
                 template: str = "plotly_white") -> go.Figure:
    """Stacked area of money paid in versus interest earned, per year."""
    n = len(years)
    fig = go.Figure()
    for name, series in zip(labels, (contributed, interest)):
        fig.add_trace(go.Scatter(
            x=list(years), y=_fit(series, n), mode="lines", name=name,
            stackgroup="one",
            hovertemplate="%{x}<br>$%{y:,.0f}<extra></extra>"
        ))
    return _layout(fig, title, template, xaxis_title="Years", yaxis_title="Dollars")


# ---------- FIRE progress (balance vs target) ----------
def fire_progress_chart(years: Sequence[float],
                        balance: Sequence[float],
                        target: float,
                        title: str = "Path to your FIRE Number",
                        template: str = "plotly_white") -> go.Figure:
    n = len(years)
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=list(years), y=_fit(balance, n), mode="lines+markers", name="Balance",
        hovertemplate="%{x:.1f}<br>$%{y:,.0f}<extra></extra>"
    ))
    fig.add_hline(y=target, line_dash="dash", annotation_text=f"${target:,.0f}")
    return _layout(fig, title, template, xaxis_title="Years", yaxis_title="Dollars")


# ---------- Pension drawdown ----------
def drawdown_chart(years: Sequence[float],
                   balance: Sequence[float],
                   sustainable_years: float = 30.0,
                   title: str = "Savings Over Time",
                   template: str = "plotly_white") -> go.Figure:
    """Remaining savings per year, with a marker at the sustainability threshold."""
    n = len(years)
    fig = go.Figure(go.Scatter(
        x=list(years), y=_fit(balance, n), mode="lines", name="Savings",
        fill="tozeroy",
        hovertemplate="%{x:.1f}<br>$%{y:,.0f}<extra></extra>"
    ))
    fig.add_vline(x=sustainable_years, line_dash="dot")
    return _layout(fig, title, template, xaxis_title="Years", yaxis_title="Dollars (real)")


# ---------- Gross salary breakdown ----------
def salary_breakdown_chart(net_annual: float,
                           tax_amount: float,
                           social_security: float,
                           labels: Sequence[str] = ("Net", "Income tax", "Social security"),
                           title: str = "Gross Salary Breakdown",
                           template: str = "plotly_white") -> go.Figure:
    """Donut of where the gross salary goes; negative slices are clamped to zero."""
    values = [max(0.0, float(v)) for v in (net_annual, tax_amount, social_security)]
    fig = go.Figure(go.Pie(
        labels=list(labels), values=values, hole=0.55, sort=False,
        hovertemplate="%{label}<br>$%{value:,.0f} (%{percent})<extra></extra>"
    ))
    return _layout(fig, title, template, height=320)
