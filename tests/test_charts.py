"""Tests for the plotly chart helpers."""

from finanzasmaster.calculators import compound, pension
from finanzasmaster.calculators.compound import ProjectionInput
from finanzasmaster.calculators.pension import PensionInput
from finanzasmaster.components import charts


def test_growth_chart_stacks_principal_and_interest():
    sched = compound.growth_schedule(ProjectionInput(1000, 200, 7, 5))
    fig = charts.growth_chart(sched["year"], sched["contributed"], sched["interest"])
    assert len(fig.data) == 2
    assert all(trace.stackgroup == "one" for trace in fig.data)
    assert len(fig.data[0].x) == 6


def test_growth_chart_pads_short_series():
    fig = charts.growth_chart([0, 1, 2], [1, 2], [0])
    for trace in fig.data:
        assert len(trace.y) == 3


def test_drawdown_chart_uses_dark_template():
    sched = pension.drawdown_schedule(PensionInput(150000, 2500, 1200, 3, 4))
    fig = charts.drawdown_chart(sched["year"], sched["balance"], template="plotly_dark")
    assert fig.layout.template.layout.paper_bgcolor is not None
    assert len(fig.data) == 1


def test_salary_breakdown_clamps_negative_slices():
    fig = charts.salary_breakdown_chart(-5.0, 100.0, 50.0)
    assert list(fig.data[0].values) == [0.0, 100.0, 50.0]


def test_fire_progress_chart_has_balance_trace():
    fig = charts.fire_progress_chart([0, 1, 2], [0, 12000, 24000], 30000)
    assert len(fig.data) == 1
    assert list(fig.data[0].y) == [0, 12000, 24000]
