"""
Scatter chart
=============

Draws per-object series (right ascension on x, declination on y) with
matplotlib. One series per object id, labelled with the id.

The axes behave like a "sticky zoom": `AxisBounds` remembers the extent of
everything plotted so far and each new plot can only widen it. Narrowing
the time window therefore does not rescale the chart, which keeps object
trails comparable while scrubbing through time.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple
import logging
import os

import numpy as np

from .models import Sample

_logger = logging.getLogger(__name__)

Extent = Tuple[float, float]


@dataclass
class ChartConfig:
    """Knobs for the scatter plot."""
    title: Optional[str] = None
    xlabel: str = "Right Ascension"
    ylabel: str = "Declination"
    width_in: float = 8.0
    height_in: float = 6.0
    dpi: int = 150
    marker_size: float = 12.0
    # fraction of the data span added on each side of the axes
    margin: float = 0.05
    legend: bool = True


@dataclass
class AxisBounds:
    """Axis extents that only ever grow (reset with `clear`)."""
    x: Optional[Extent] = None
    y: Optional[Extent] = None

    def extend(self, x: Extent, y: Extent) -> None:
        self.x = x if self.x is None else (min(self.x[0], x[0]), max(self.x[1], x[1]))
        self.y = y if self.y is None else (min(self.y[0], y[0]), max(self.y[1], y[1]))

    def clear(self) -> None:
        self.x = None
        self.y = None


def _pad(lo: float, hi: float, margin: float) -> Extent:
    span = hi - lo
    if span == 0:
        # single value: centre it in a box as wide as its magnitude (or 1)
        half = (abs(lo) or 1.0) / 2
        return lo - half, hi + half
    return lo - span * margin, hi + span * margin


def series_xy(groups: Dict[int, List[Sample]]) -> Dict[int, Tuple[List[float], List[float]]]:
    """Split each group into (ra values, dec values) for plotting."""
    return {
        key: ([s.right_ascension for s in members], [s.declination for s in members])
        for key, members in groups.items()
    }


def data_extent(groups: Dict[int, List[Sample]], margin: float = 0.0) -> Optional[Tuple[Extent, Extent]]:
    """Return ((xmin, xmax), (ymin, ymax)) over finite values, or None if there are none."""
    members = [s for g in groups.values() for s in g]
    xs = np.array([s.right_ascension for s in members], dtype=float)
    ys = np.array([s.declination for s in members], dtype=float)
    xs = xs[np.isfinite(xs)]
    ys = ys[np.isfinite(ys)]
    if xs.size == 0 or ys.size == 0:
        return None
    return _pad(float(xs.min()), float(xs.max()), margin), _pad(float(ys.min()), float(ys.max()), margin)


def render_scatter(
    groups: Dict[int, List[Sample]],
    out_path: str,
    *,
    config: Optional[ChartConfig] = None,
    bounds: Optional[AxisBounds] = None,
) -> str:
    """Render `groups` (object id -> samples) as a scatter chart image.

    If `bounds` is given, it is widened to cover this plot and the axes are
    fixed to it. Returns `out_path`.
    """
    config = config or ChartConfig()

    # Lazy import: only required when a chart is drawn.
    try:
        from matplotlib.figure import Figure
    except ImportError as e:
        raise ImportError(
            "Missing dependency: matplotlib.\n"
            "Install it with: python -m pip install matplotlib"
        ) from e

    fig = Figure(figsize=(config.width_in, config.height_in))
    ax = fig.add_subplot(111)
    for key, (xs, ys) in series_xy(groups).items():
        ax.scatter(xs, ys, s=config.marker_size, label=str(key))

    if config.title:
        ax.set_title(config.title)
    ax.set_xlabel(config.xlabel)
    ax.set_ylabel(config.ylabel)
    if config.legend and groups:
        ax.legend(title="ID", loc="best", fontsize="small")

    extent = data_extent(groups, margin=config.margin)
    if bounds is not None:
        if extent is not None:
            bounds.extend(*extent)
        extent = (bounds.x, bounds.y) if bounds.x is not None else None
    if extent is not None:
        ax.set_xlim(*extent[0])
        ax.set_ylim(*extent[1])

    os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)
    fig.tight_layout()
    fig.savefig(out_path, dpi=config.dpi)
    _logger.info("chart with %d series written to %s", len(groups), out_path)
    return out_path
