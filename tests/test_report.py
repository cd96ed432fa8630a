import pytest

from radec.report import ReportConfig, generate_docx_report, summary_frame


def test_summary_frame(samples):
    pytest.importorskip("pandas")
    df = summary_frame(samples)
    assert list(df["object_id"]) == [1, 2, 3]
    row = df[df["object_id"] == 1].iloc[0]
    assert row["samples"] == 3
    assert row["first_time"] == 0
    assert row["last_time"] == 7
    assert row["ra_max"] == 14.0
    assert row["dec_min"] == 20.0


def test_generate_docx_report(tmp_path, samples):
    pytest.importorskip("docx")
    pytest.importorskip("matplotlib")
    out = tmp_path / "r.docx"
    cfg = ReportConfig(command_log=["select 1 2"], sources=["/data/radec.txt"])
    generate_docx_report(samples, str(out), window=(0, 10), config=cfg)
    assert out.stat().st_size > 0

    import docx
    text = "\n".join(p.text for p in docx.Document(str(out)).paragraphs)
    assert "Time window: 0 to 10" in text
    assert "radec.txt" in text


def test_report_rejects_empty_selection(tmp_path):
    pytest.importorskip("docx")
    with pytest.raises(ValueError):
        generate_docx_report([], str(tmp_path / "r.docx"))
