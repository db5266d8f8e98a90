"""PDF summary export for a single calculator run."""

import io
import math
from dataclasses import asdict, is_dataclass
from enum import Enum
from typing import Mapping

from reportlab.lib import colors
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import getSampleStyleSheet
from reportlab.platypus import Paragraph, SimpleDocTemplate, Spacer, Table, TableStyle

from ..config import APP_NAME
from .i18n import t


def _rows(record, language: str = "es") -> list:
    """Flatten a dataclass or mapping into ``[field, value]`` rows.

    ``None`` (a target never reached) and infinity (savings that never run
    out) are written as translated words.
    """
    data = asdict(record) if is_dataclass(record) else dict(record)
    rows = []

    def _flatten(prefix: str, obj):
        if isinstance(obj, dict):
            for k, v in obj.items():
                key = f"{prefix}{k}" if prefix else k
                _flatten(f"{key}.", v)
        elif isinstance(obj, (list, tuple)):
            for i, v in enumerate(obj):
                _flatten(f"{prefix}{i}.", v)
        elif isinstance(obj, Enum):
            rows.append([prefix[:-1], obj.value])
        elif obj is None:
            rows.append([prefix[:-1], t("never", language)])
        elif isinstance(obj, float) and math.isinf(obj):
            rows.append([prefix[:-1], t("infinite", language)])
        elif isinstance(obj, float):
            rows.append([prefix[:-1], f"{obj:,.2f}"])
        else:
            rows.append([prefix[:-1], str(obj)])

    _flatten("", data)
    return rows


def _table(rows: list) -> Table:
    table = Table([["Field", "Value"]] + rows, hAlign="LEFT")
    table.setStyle(
        TableStyle(
            [
                ("BACKGROUND", (0, 0), (-1, 0), colors.HexColor("#DBEAFE")),
                ("GRID", (0, 0), (-1, -1), 0.25, colors.grey),
                ("FONTNAME", (0, 0), (-1, 0), "Helvetica-Bold"),
            ]
        )
    )
    return table


def build_pdf(title: str, inputs, results, extra: Mapping[str, object] = None,
              language: str = "es") -> bytes:
    """Create a PDF listing the inputs and results of one calculation.

    ``inputs`` and ``results`` may be dataclass records or plain mappings.
    ``extra`` holds additional labelled values (e.g. a formatted outcome).
    """
    buffer = io.BytesIO()
    doc = SimpleDocTemplate(buffer, pagesize=A4, leftMargin=36, rightMargin=36)
    styles = getSampleStyleSheet()
    story = [Paragraph(f"{APP_NAME}: {title}", styles["Title"]), Spacer(1, 12)]

    story.append(Paragraph("Inputs", styles["Heading2"]))
    story.extend([_table(_rows(inputs, language)), Spacer(1, 12)])

    story.append(Paragraph("Results", styles["Heading2"]))
    result_rows = _rows(results, language)
    if extra:
        result_rows += [[k, str(v)] for k, v in extra.items()]
    story.extend([_table(result_rows), Spacer(1, 12)])

    doc.build(story)
    pdf_bytes = buffer.getvalue()
    buffer.close()
    return pdf_bytes
