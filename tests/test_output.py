import json

import pytest

from shared.config import MeterConfig
from shared.console import GaugeConsole
from gauge.analyzers.checklist import build_checklist
from gauge.analyzers.strength import SUGGEST_COMMON, SUGGEST_LENGTH, analyze
from gauge.core.engine import GaugeEngine
from gauge.output.console import GaugeConsoleOutput, mask_password, meter_percent
from gauge.output.report import GaugeReportGenerator


@pytest.mark.parametrize(
    "bits, expected",
    [
        (0.0, 6),
        (5.0, 6),
        (20.0, 10),
        (100.0, 50),
        (200.0, 100),
        (500.0, 100),
    ],
)
def test_meter_percent(bits, expected):
    assert meter_percent(bits, MeterConfig()) == expected


@pytest.mark.parametrize(
    "password, masked",
    [("", ""), ("a", "*"), ("ab", "**"), ("secret", "s****t")],
)
def test_mask_password(password, masked):
    assert mask_password(password) == masked


def _render(password, meter=None):
    console = GaugeConsole(record=True, width=120)
    output = GaugeConsoleOutput(console, meter)
    analysis = analyze(password)
    output.display_analysis(analysis, build_checklist(analysis), password)
    return console.export_text()


def test_display_analysis_layout():
    text = _render("password1")
    assert "Strength: Fair" in text
    assert "p*******1" in text
    assert "password1" not in text
    assert "Checklist:" in text
    assert "Not an extremely common password" in text
    assert text.index("Checklist:") < text.index("Suggestions:")
    assert text.index(SUGGEST_COMMON) < text.index(SUGGEST_LENGTH)


def test_unmasked_display():
    text = _render("password1", MeterConfig(mask_password=False))
    assert "password1" in text


def test_markup_in_password_is_literal():
    text = _render("[bold]x[/bold]", MeterConfig(mask_password=False))
    assert "[bold]x[/bold]" in text


def test_no_suggestions_prints_nothing():
    console = GaugeConsole(record=True, width=120)
    GaugeConsoleOutput(console).display_suggestions(analyze("xK9#mP2$vL7@nQ4!"))
    assert console.export_text() == ""


def test_json_report(tmp_path):
    result = GaugeEngine().analyze_password("Qwerty123!")
    path = GaugeReportGenerator().generate_json(result, tmp_path / "out" / "report.json")
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["report_metadata"]["target"] == "[password]"
    assert data["report_metadata"]["tool"] == "gauge"
    assert data["summary"]["total_findings"] == len(data["findings"])
    assert data["metadata"]["analysis"]["keyboard_seqs"] == 1
    assert data["findings"][0]["severity"] == "LOW"


def test_findings_table_lists_findings_in_order():
    console = GaugeConsole(record=True, width=160)
    result = GaugeEngine().analyze_password("password1")
    console.findings_table(result.findings)
    text = console.export_text()
    assert "Findings" in text
    assert text.index("Extremely Common Password") < text.index("Password Strength: Fair")
    assert "CRITICAL" in text


def test_findings_table_empty_prints_nothing():
    console = GaugeConsole(record=True, width=120)
    console.findings_table([])
    assert console.export_text() == ""
