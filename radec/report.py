from __future__ import annotations

"""
Session report generator
------------------------
This module generates a DOCX report for the current selection of a plot
session: what was loaded, which ids and time window were selected, a
per-object summary table and the scatter chart.

Design goals:
- Keep the rest of the package usable even if report dependencies are
  missing (lazy imports).
- Report on the *current selection*, never on the raw files.
"""

from dataclasses import dataclass
from typing import List, Optional, Sequence
import os
import tempfile

from .chart import AxisBounds, ChartConfig, render_scatter
from .models import Sample
from . import store


@dataclass
class ReportConfig:
    """High-level knobs to control how the report is written."""
    title: str = "RA/Dec Plot Report"
    subtitle: str = "Object positions over time"

    # How many rows to show in the preview table
    max_rows_preview: int = 15

    # Optional: list of CLI commands used to create the current selection
    command_log: Optional[List[str]] = None

    # Optional: the record files the samples came from
    sources: Optional[List[str]] = None


def summary_frame(samples: Sequence[Sample]):
    """Per-object summary (count, time span, RA/Dec extents) as a DataFrame."""
    try:
        import pandas as pd
    except ImportError as e:
        raise ImportError(
            "Missing dependency: pandas.\n"
            "Install it with: python -m pip install pandas"
        ) from e

    df = pd.DataFrame(
        [s.as_tuple() for s in samples],
        columns=["time", "object_id", "right_ascension", "declination"],
    )
    return (
        df.groupby("object_id", sort=True)
        .agg(
            samples=("time", "size"),
            first_time=("time", "min"),
            last_time=("time", "max"),
            ra_min=("right_ascension", "min"),
            ra_max=("right_ascension", "max"),
            dec_min=("declination", "min"),
            dec_max=("declination", "max"),
        )
        .reset_index()
    )


def generate_docx_report(
    samples: Sequence[Sample],
    out_path: str,
    *,
    window: Optional[tuple] = None,
    config: Optional[ReportConfig] = None,
    bounds: Optional[AxisBounds] = None,
) -> str:
    """
    Generate a DOCX report + chart for a list of samples.

    `window` is the (start, stop) time window the samples were selected
    with; it defaults to the range of the samples themselves.
    """
    config = config or ReportConfig()

    # Lazy imports: only required when "report" is used.
    try:
        from docx import Document
        from docx.shared import Pt, Inches
        from docx.enum.text import WD_ALIGN_PARAGRAPH
    except ImportError as e:
        raise ImportError(
            "Missing dependency: python-docx.\n"
            "Install it with: python -m pip install python-docx"
        ) from e

    if not samples:
        raise ValueError("No samples to report on (selection is empty).")

    groups = store.group_by_id(samples)
    start, stop = window if window is not None else store.get_range(samples)
    table = summary_frame(samples)

    tmpdir = tempfile.mkdtemp(prefix="radec_report_")
    chart_path = render_scatter(
        groups,
        os.path.join(tmpdir, "scatter.png"),
        config=ChartConfig(title=f"Positions, t = {start} to {stop}"),
        bounds=bounds,
    )

    doc = Document()
    style = doc.styles["Normal"]
    style.font.name = "Calibri"
    style.font.size = Pt(11)

    def _center_title(text: str, size: int, bold: bool = False, italic: bool = False) -> None:
        p = doc.add_paragraph()
        r = p.add_run(text)
        r.bold = bold
        r.italic = italic
        r.font.size = Pt(size)
        p.alignment = WD_ALIGN_PARAGRAPH.CENTER

    def _kv(key: str, value: str) -> None:
        p = doc.add_paragraph()
        r = p.add_run(f"{key}: ")
        r.bold = True
        p.add_run(value)

    _center_title(config.title, 22, bold=True)
    _center_title(config.subtitle, 12, italic=True)

    doc.add_paragraph("")
    _kv("Samples in selection", str(len(samples)))
    _kv("Objects", ", ".join(str(k) for k in groups))
    _kv("Time window", f"{start} to {stop}")
    if config.sources:
        _kv("Record files", ", ".join(os.path.basename(p) for p in config.sources))

    if config.command_log:
        doc.add_paragraph("")
        doc.add_heading("Command log", level=1)
        for line in config.command_log:
            doc.add_paragraph(line, style="List Bullet")

    doc.add_paragraph("")
    doc.add_heading("Per-object summary", level=1)
    t = doc.add_table(rows=1, cols=len(table.columns))
    for i, name in enumerate(table.columns):
        t.rows[0].cells[i].text = name
    for row in table.itertuples(index=False):
        cells = t.add_row().cells
        for i, v in enumerate(row):
            cells[i].text = f"{v:.6f}" if isinstance(v, float) else str(v)

    doc.add_paragraph("")
    doc.add_heading("Chart", level=1)
    doc.add_picture(chart_path, width=Inches(6.5))

    doc.add_paragraph("")
    doc.add_heading("Preview of first few samples", level=1)
    t2 = doc.add_table(rows=1, cols=4)
    h = t2.rows[0].cells
    h[0].text = "Time"
    h[1].text = "ID"
    h[2].text = "Right Ascension"
    h[3].text = "Declination"
    for s in list(samples)[:config.max_rows_preview]:
        r = t2.add_row().cells
        r[0].text = str(s.time)
        r[1].text = str(s.object_id)
        r[2].text = f"{s.right_ascension:.6f}"
        r[3].text = f"{s.declination:.6f}"

    from . import __version__
    from datetime import datetime as _dt
    doc.add_paragraph("")
    doc.add_paragraph(f"radec version: {__version__}")
    doc.add_paragraph(f"Report generated at: {_dt.now().isoformat(timespec='seconds')}")

    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    doc.save(out_path)
    return out_path
