# tests/test_scan.py
"""
Tests for the range scanner and the report block.

Run: pytest -v
"""

from __future__ import annotations

import io
from decimal import Decimal

import pytest

from perfectroot.context import PerfectReport, ScanConfig, SqrtResult
from perfectroot.display import build_report, print_report, render_report
from perfectroot.fmt import format_decimal, strip_ansi
from perfectroot.output_manager import OutputManager
from perfectroot.progress import ScanProgress
from perfectroot.runtime import current as _rt_current
from perfectroot.scan import iter_perfect, run_scan

# ---------- helpers -----------------------------------------------------------


def _quiet_om() -> OutputManager:
    return OutputManager(output_file=None, quiet=True, capture=True)


# ---------- scanning ----------------------------------------------------------

def test_default_range_finds_exactly_four():
    assert list(iter_perfect(ScanConfig())) == [6, 28, 496, 8128]


def test_default_config_values():
    cfg = ScanConfig()
    assert (cfg.lower_bound, cfg.upper_bound, cfg.precision) == (1, 10_000, 15)


@pytest.mark.parametrize("lower,upper,expected", [
    (1, 5, []),
    (6, 6, [6]),
    (7, 495, [28]),
    (29, 8128, [496, 8128]),
    (8129, 20_000, []),
])
def test_sub_ranges(lower, upper, expected):
    assert list(iter_perfect(ScanConfig(lower, upper))) == expected


@pytest.mark.parametrize("lower,upper", [
    (0, 10_000),
    (-10, 10),
    (1, 0),
    (10, -5),
    (500, 100),
])
def test_degenerate_ranges_are_empty(lower, upper):
    cfg = ScanConfig(lower, upper)
    assert cfg.is_empty
    assert list(iter_perfect(cfg)) == []
    om = _quiet_om()
    assert run_scan(cfg, om) == []
    assert om.getvalue() == ""


def test_run_scan_reports_in_ascending_order():
    om = _quiet_om()
    found = run_scan(ScanConfig(), om)
    assert found == [6, 28, 496, 8128]

    text = om.getvalue()
    heads = [ln for ln in text.splitlines() if ln.startswith("Perfect number:")]
    assert [int(h.split()[2]) for h in heads] == found


def test_run_scan_prints_to_stdout(capsys):
    run_scan(ScanConfig(1, 30), OutputManager())
    out = capsys.readouterr().out
    assert "Perfect number: 6 = 1 + 2 + 3;" in out
    assert "Perfect number: 28 = 1 + 2 + 4 + 7 + 14;" in out


def test_progress_goes_to_stderr(capsys):
    run_scan(ScanConfig(1, 30), OutputManager(), progress=True)
    captured = capsys.readouterr()
    assert "%" in captured.err
    assert "%" not in captured.out
    assert captured.out.count("Perfect number:") == 2


def test_progress_redraws_about_once_per_percent():
    stream = io.StringIO()
    bar = ScanProgress(range(1, 1001), stream=stream)
    for i, n in enumerate(bar.candidates, 1):
        bar.tick(i, n, 0)
    assert stream.getvalue().count("\r[") == 100
    assert stream.getvalue().endswith("100%  n = 1000  found 0")


def test_progress_clear_only_after_draw():
    stream = io.StringIO()
    bar = ScanProgress(range(1, 11), stream=stream)
    bar.clear()
    assert stream.getvalue() == ""
    bar.tick(1, 1, 0)
    bar.clear()
    assert stream.getvalue().endswith("\r\x1b[2K")


def test_progress_disabled_for_empty_range():
    stream = io.StringIO()
    bar = ScanProgress(range(5, 1), stream=stream)
    bar.tick(1, 5, 0)
    assert stream.getvalue() == ""


# ---------- output manager ----------------------------------------------------

def test_output_manager_keeps_nothing_by_default(capsys):
    om = OutputManager()
    for _ in range(3):
        om.write("Perfect number: 6 = 1 + 2 + 3;")
    assert om.getvalue() == ""
    assert capsys.readouterr().out.count("Perfect number: 6") == 3


def test_output_manager_capture_keeps_lines():
    om = OutputManager(quiet=True, capture=True)
    om.write("a")
    om.write("b", "c", sep="-")
    assert om.getvalue() == "a\nb-c\n"


def test_output_manager_separator_only_after_writes(tmp_path):
    target = tmp_path / "scan.txt"
    om = OutputManager(output_file=str(target), quiet=True)
    om.close()
    assert not target.exists()

    om = OutputManager(output_file=str(target), quiet=True)
    om.write("\x1b[32mPerfect number: 6\x1b[0m")
    om.close()
    assert target.read_text(encoding="utf-8") == "Perfect number: 6\n\n"


# ---------- report block ------------------------------------------------------

def test_report_block_for_six():
    lines = render_report(build_report(6))
    assert lines[0] == "Perfect number: 6 = 1 + 2 + 3;"
    assert lines[1] == "Expected sqrt() of 6 = 2.449489742783178;"
    assert lines[2] == "Computed square root of 6 = 2.449489742783178;"
    assert lines[3].startswith("\treached in ")
    assert lines[3].endswith(" iterations.")
    assert lines[4] == ""


def test_report_block_for_8128():
    lines = render_report(build_report(8128))
    assert lines[0].startswith("Perfect number: 8128 = 1 + 2 + 4 + 8 + 16 + 32 + 64 + 127 + ")
    assert lines[0].endswith(" + 4064;")
    expected = lines[1].removeprefix("Expected sqrt() of 8128 = ")
    computed = lines[2].removeprefix("Computed square root of 8128 = ")
    assert expected.startswith("90.155421356")
    assert computed == expected
    assert len(expected.rstrip(";").split(".")[1]) == 15


def test_report_uses_configured_precision():
    lines = render_report(build_report(28, precision=5))
    assert lines[1] == "Expected sqrt() of 28 = 5.29150;"
    assert lines[2] == "Computed square root of 28 = 5.29150;"


def test_render_report_from_explicit_values():
    report = PerfectReport(
        n=6,
        divisors=(1, 2, 3),
        expected=Decimal("2.4494897427831780982"),
        computed=SqrtResult(Decimal("2.4494897427831780982"), 7),
        precision=15,
    )
    assert render_report(report)[3] == "\treached in 7 iterations."


def test_colored_report_strips_to_plain():
    report = build_report(28)
    colored = render_report(report, color=True)
    assert colored[0] != render_report(report)[0]
    assert [strip_ansi(ln) for ln in colored] == render_report(report)


def test_print_report_debug_crosscheck(capsys):
    _rt_current().debug = True
    print_report(496, om=_quiet_om())
    err = capsys.readouterr().err
    assert "[debug]" in err
    assert "2^4 × 31" in err
    assert "σ(n) = 992" in err


@pytest.mark.parametrize("value,places,expected", [
    (Decimal("2.4494897427831780982"), 15, "2.449489742783178"),
    (Decimal(2), 3, "2.000"),
    (Decimal("0.5"), 0, "0"),        # half-even
    (Decimal("1.25"), 1, "1.2"),
    (Decimal("90.155421356677236"), 40, "90.1554213566772360000000000000000000000000"),
])
def test_format_decimal(value, places, expected):
    assert format_decimal(value, places) == expected
