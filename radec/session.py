"""
Plot session
============

The state behind an interactive plotting session:

1) Load record files -> list of Sample records (appended, never edited)
2) Build indices -> fast lookup by object id and by time
3) Maintain a *current selection*: the selected ids and the time window
4) Narrow the selection and build per-object chart series from it
5) Export or plot the current selection

The pure operations live in `store.py`; this class only holds the state
they are applied to. Selection changes can be undone and redone.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Tuple
import csv
import json
import logging

from .chart import AxisBounds, ChartConfig, render_scatter
from .dsa import union_sorted
from .indices import Indices, build_indices, selection_positions
from .loader import ParsePolicy, dump_samples, load_files
from .models import Sample
from . import store

_logger = logging.getLogger(__name__)


@dataclass
class SelectionState:
    """Selected object ids (sorted) and the inclusive time window."""
    selected_ids: List[int]
    start: int
    stop: int

    def copy(self) -> "SelectionState":
        return SelectionState(self.selected_ids[:], self.start, self.stop)


@dataclass
class PlotSession:
    """Loaded points plus the current selection over them.

    `load` selects every id and opens the window to the full time range,
    as loading a new file should show everything.
    """
    points: List[Sample] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)
    # Stores CLI commands (for reproducibility in reports)
    command_log: List[str] = field(default_factory=list)
    bounds: AxisBounds = field(default_factory=AxisBounds)
    state: SelectionState = field(init=False)
    idx: Indices = field(init=False)

    # Stacks for undo/redo (store snapshots of the selection)
    _undo: List[SelectionState] = field(default_factory=list, init=False)
    _redo: List[SelectionState] = field(default_factory=list, init=False)

    def __post_init__(self) -> None:
        self.points = list(self.points)
        self._reindex()

    def _reindex(self) -> None:
        self.idx = build_indices(self.points)
        start, stop = store.get_range(self.points)
        self.state = SelectionState(store.get_ids(self.points), start, stop)
        self._undo.clear()
        self._redo.clear()

    # ---------------- History (Stacks) ----------------
    def _push_history(self) -> None:
        self._undo.append(self.state.copy())
        self._redo.clear()

    def undo(self) -> bool:
        if not self._undo:
            return False
        self._redo.append(self.state.copy())
        self.state = self._undo.pop()
        return True

    def redo(self) -> bool:
        if not self._redo:
            return False
        self._undo.append(self.state.copy())
        self.state = self._redo.pop()
        return True

    # ---------------- Loading ----------------
    def load(self, samples: Iterable[Sample], source: Optional[str] = None) -> int:
        """Append samples, then select all ids over the full time range."""
        new = list(samples)
        self.points.extend(new)
        if source:
            self.sources.append(source)
        self._reindex()
        _logger.info("loaded %d samples (%d total)", len(new), len(self.points))
        return len(new)

    def load_files(self, paths: List[str], policy: Optional[ParsePolicy] = None) -> int:
        n = 0
        for p in paths:
            n += self.load(load_files([p], policy), source=p)
        return n

    def clear(self) -> None:
        """Drop all points, the selection and the cached chart axes."""
        self.points = []
        self.sources = []
        self.bounds.clear()
        self._reindex()

    # ---------------- Selection ----------------
    @property
    def all_ids(self) -> List[int]:
        return sorted(self.idx.by_id)

    @property
    def full_range(self) -> Tuple[int, int]:
        return store.get_range(self.points)

    def select_ids(self, ids: Iterable[int], add: bool = False) -> None:
        """Select `ids` (or add them to the current selection)."""
        self._push_history()
        ids = sorted(set(ids))
        if add:
            ids = union_sorted(self.state.selected_ids, ids)
        self.state.selected_ids = ids

    def select_all(self) -> None:
        self._push_history()
        self.state.selected_ids = self.all_ids

    def set_window(self, start: int, stop: int) -> None:
        """Set the inclusive time window (start > stop selects nothing)."""
        self._push_history()
        self.state.start = start
        self.state.stop = stop

    def reset_window(self) -> None:
        self._push_history()
        self.state.start, self.state.stop = self.full_range

    # ---------------- Output operations ----------------
    def visible(self) -> List[Sample]:
        """Samples inside the window whose id is selected, in load order."""
        pos = selection_positions(self.idx, self.state.selected_ids, self.state.start, self.state.stop)
        return [self.points[i] for i in pos]

    def series(self) -> Dict[int, List[Sample]]:
        """Visible samples grouped per object id (chart series)."""
        return store.group_by_id(self.visible())

    def snapshots(self) -> Dict[int, List[Sample]]:
        """Visible samples grouped per time."""
        return store.group_by_time(self.visible())

    def plot(self, out_path: str, config: Optional[ChartConfig] = None) -> str:
        return render_scatter(self.series(), out_path, config=config, bounds=self.bounds)

    def export_txt(self, path: str) -> int:
        with open(path, "w", encoding="utf-8") as f:
            return dump_samples(self.visible(), f)

    def export_csv(self, path: str) -> None:
        rows = self.visible()
        with open(path, "w", newline="", encoding="utf-8") as f:
            w = csv.writer(f)
            w.writerow(["time", "object_id", "right_ascension", "declination"])
            for s in rows:
                w.writerow([s.time, s.object_id, s.right_ascension, s.declination])

    def export_json(self, path: str) -> None:
        """Export the current selection to a JSON file (list of objects)."""
        rows = self.visible()
        payload = [
            {
                "time": s.time,
                "object_id": s.object_id,
                "right_ascension": s.right_ascension,
                "declination": s.declination,
            }
            for s in rows
        ]
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2)
