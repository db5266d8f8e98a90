"""Expose component submodules for convenience."""

from .charts import growth_chart, fire_progress_chart, drawdown_chart, salary_breakdown_chart
from .i18n import t
from .report import build_pdf

__all__ = [
    "growth_chart",
    "fire_progress_chart",
    "drawdown_chart",
    "salary_breakdown_chart",
    "t",
    "build_pdf",
]
