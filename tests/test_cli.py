import pytest

from radec.cli import build_parser, handle, main
from radec.session import PlotSession


def test_parser_defaults():
    args = build_parser().parse_args(["--file", "a.txt", "--file", "b.txt"])
    assert args.file == ["a.txt", "b.txt"]
    assert args.on_bad_shape == "skip"
    assert args.on_bad_value == "fail"


def test_select_window_show(capsys, samples):
    s = PlotSession(points=samples)
    handle(s, "select 1 3")
    handle(s, "window 5 7")
    assert [x.object_id for x in s.visible()] == [1, 3, 1]
    capsys.readouterr()
    handle(s, "show 2")
    out = capsys.readouterr().out.splitlines()
    assert len(out) == 2
    assert out[0].startswith("t=5 | id=1")


def test_groups_and_ids(capsys, samples):
    s = PlotSession(points=samples)
    handle(s, "select 2")
    handle(s, "ids")
    out = capsys.readouterr().out
    assert "* 2" in out
    assert "  1" in out
    handle(s, "groups time")
    assert "time=10: 1 samples" in capsys.readouterr().out


def test_range_reports_no_data(capsys):
    handle(PlotSession(), "range")
    assert "No data loaded." in capsys.readouterr().out


def test_bad_window_usage_raises(samples):
    with pytest.raises(ValueError):
        handle(PlotSession(points=samples), "window 5")


def test_load_and_export(tmp_path, capsys, record_file):
    s = PlotSession()
    handle(s, f'load "{record_file}"')
    assert len(s.points) == 4
    out = tmp_path / "o.json"
    handle(s, f'export json "{out}"')
    assert out.exists()


def test_main_repl(monkeypatch, capsys, record_file):
    commands = iter(["select 1", "stats", "bogus", "window x y", "quit"])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(commands))
    main(["--file", record_file])
    out = capsys.readouterr().out
    assert "Loaded 4 samples." in out
    assert "Samples: 4 | Visible: 2" in out
    assert "Unknown command." in out
    assert "Error:" in out
