"""
radec Command Line Interface (CLI)
==================================

This file provides the interactive terminal program you run like:

    python -m radec.cli --file radec.txt --file more.txt

It demonstrates:
- Argument parsing (argparse)
- A REPL loop (Read-Eval-Print Loop) for commands
- Mapping user commands to session methods (select, window, plot, export)

The CLI never modifies the record files. It loads them into memory and works
on an in-memory selection of samples.
"""

from __future__ import annotations
import argparse, logging, shlex
from typing import List, Optional

from .loader import ParsePolicy, SKIP, FAIL
from .report import ReportConfig, generate_docx_report
from .session import PlotSession
from .store import is_empty_range

_logger = logging.getLogger(__name__)

HELP = """
Commands:
  help
  stats
  quit

  load "<file>" ["<file>" ...]     append record files and show everything
  clear                            drop all loaded samples

  ids                              list all ids (* marks selected ones)
  select all | <id> [<id> ...]     choose which objects are shown
  select add <id> [<id> ...]       add objects to the selection
  window <start> <stop>            inclusive time window
  window reset                     full time range of the loaded samples
  range                            show full range and current window

  show [n]                         first n visible samples
  groups id | time                 visible samples grouped per id or time

  plot "<out.png>"                 scatter chart of the visible samples
  export txt|csv|json "<path>"     write the visible samples
  report "<out.docx>"              DOCX summary of the visible samples

  undo
  redo
"""


def _init_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logging.getLogger("matplotlib").setLevel(logging.WARNING)


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="radec-plotter", description="Plot RA/Dec samples over time.")
    ap.add_argument("--file", action="append", default=[], help="Record file to load (repeatable)")
    ap.add_argument("--on-bad-shape", choices=(SKIP, FAIL), default=SKIP,
                    help="Lines without exactly 4 fields (default: skip)")
    ap.add_argument("--on-bad-value", choices=(SKIP, FAIL), default=FAIL,
                    help="Lines with a non-numeric field (default: fail)")
    ap.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, ...)")
    return ap


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the radec CLI.

    1) Load the record files given on the command line
    2) Start an interactive REPL over the session
    """
    args = build_parser().parse_args(argv)
    _init_logging(args.log_level)

    session = PlotSession()
    policy = ParsePolicy(on_bad_shape=args.on_bad_shape, on_bad_value=args.on_bad_value)
    if args.file:
        print("Loading records...")
        session.load_files(args.file, policy)
    print(f"Loaded {len(session.points)} samples. Type 'help' for commands.")

    while True:
        try:
            line = input("radec> ")
        except EOFError:
            break
        stripped = line.strip()
        if not stripped:
            continue
        if stripped.lower() in ("quit", "exit"):
            break
        cmd0 = stripped.split()[0].lower()
        if cmd0 not in ("help", "show", "ids", "range", "stats", "groups"):
            session.command_log.append(stripped)
        try:
            handle(session, stripped, policy)
        except Exception as e:
            _logger.debug("command failed: %s", stripped, exc_info=True)
            print(f"Error: {e}")


def handle(session: PlotSession, line: str, policy: Optional[ParsePolicy] = None) -> None:
    """Handle one CLI command line.

    This parses the command and calls the appropriate session method.
    """
    parts = shlex.split(line)
    cmd = parts[0].lower()

    if cmd == "help":
        print(HELP)
        return

    if cmd == "stats":
        print(f"Samples: {len(session.points)} | Visible: {len(session.visible())} | "
              f"Objects: {len(session.all_ids)} | Selected: {len(session.state.selected_ids)}")
        return

    if cmd == "load":
        if len(parts) < 2:
            raise ValueError('Usage: load "<file>" ["<file>" ...]')
        n = session.load_files(parts[1:], policy)
        print(f"Loaded {n} samples. Total={len(session.points)}")
        return

    if cmd == "clear":
        session.clear()
        print("Cleared.")
        return

    if cmd == "undo":
        print("Undone." if session.undo() else "Nothing to undo.")
        return

    if cmd == "redo":
        print("Redone." if session.redo() else "Nothing to redo.")
        return

    if cmd == "ids":
        selected = set(session.state.selected_ids)
        for i in session.all_ids:
            print(f"{'*' if i in selected else ' '} {i}")
        return

    if cmd == "select":
        if len(parts) < 2:
            raise ValueError("Usage: select all | [add] <id> [<id> ...]")
        if parts[1].lower() == "all":
            session.select_all()
        elif parts[1].lower() == "add":
            session.select_ids([int(p) for p in parts[2:]], add=True)
        else:
            session.select_ids([int(p) for p in parts[1:]])
        print(f"Selected {len(session.state.selected_ids)} ids. Visible={len(session.visible())}")
        return

    if cmd == "window":
        if len(parts) == 2 and parts[1].lower() == "reset":
            session.reset_window()
        elif len(parts) == 3:
            session.set_window(int(parts[1]), int(parts[2]))
        else:
            raise ValueError("Usage: window <start> <stop> | window reset")
        print(f"Window {session.state.start}-{session.state.stop}. Visible={len(session.visible())}")
        return

    if cmd == "range":
        start, stop = session.full_range
        if is_empty_range(start, stop):
            print("No data loaded.")
        else:
            print(f"Full range: {start}-{stop}")
        print(f"Window: {session.state.start}-{session.state.stop}")
        return

    if cmd == "show":
        n = int(parts[1]) if len(parts) >= 2 else 10
        _print_rows(session.visible()[:n])
        return

    if cmd == "groups":
        kind = parts[1].lower() if len(parts) >= 2 else "id"
        if kind == "id":
            groups = session.series()
        elif kind == "time":
            groups = session.snapshots()
        else:
            raise ValueError("groups kind must be: id | time")
        for key, members in groups.items():
            print(f"{kind}={key}: {len(members)} samples")
        return

    if cmd == "plot":
        if len(parts) < 2:
            raise ValueError('Usage: plot "<out.png>"')
        print(f"Chart written to {session.plot(parts[1])}")
        return

    if cmd == "export":
        # export <txt|csv|json> "<path>"
        if len(parts) < 3:
            print('Usage: export txt "out.txt"  OR  export csv "out.csv"  OR  export json "out.json"')
            return
        fmt = parts[1].lower()
        out_path = parts[2]
        if not session.visible():
            print("Nothing to export: current selection is empty.")
            return
        if fmt == "txt":
            session.export_txt(out_path)
        elif fmt == "csv":
            session.export_csv(out_path)
        elif fmt == "json":
            session.export_json(out_path)
        else:
            print("Unknown export format. Use: txt, csv or json")
            return
        print(f"Exported {fmt.upper()} to {out_path}")
        return

    if cmd == "report":
        if len(parts) < 2:
            raise ValueError('Usage: report "<out.docx>"')
        cfg = ReportConfig(command_log=session.command_log, sources=session.sources)
        generate_docx_report(
            session.visible(), parts[1],
            window=(session.state.start, session.state.stop),
            config=cfg,
            bounds=session.bounds,
        )
        print(f"Report written to {parts[1]}")
        return

    print("Unknown command. Type 'help'.")


def _print_rows(rows):
    for s in rows:
        print(f"t={s.time} | id={s.object_id} | ra={s.right_ascension:.6f} dec={s.declination:.6f}")


if __name__ == "__main__":
    main()
