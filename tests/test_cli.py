import json

import pytest
from click.testing import CliRunner

from gauge import __version__
from gauge.cli import cli


@pytest.fixture
def runner():
    return CliRunner()


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert __version__ in result.output


def test_analyze_console(runner):
    result = runner.invoke(cli, ["-q", "analyze", "Qwerty123!"])
    assert result.exit_code == 0, result.output
    assert "Strength: Good" in result.output
    assert "Checklist:" in result.output
    assert "Findings" in result.output
    assert "Qwerty123!" not in result.output


def test_analyze_json(runner):
    result = runner.invoke(cli, ["-o", "json", "analyze", "password1"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["metadata"]["analysis"]["is_common"] is True
    assert data["findings"][0]["title"] == "Extremely Common Password"


def test_analyze_json_to_file(runner, tmp_path):
    path = tmp_path / "report.json"
    result = runner.invoke(cli, ["-o", "json", "-f", str(path), "analyze", "abc"])
    assert result.exit_code == 0, result.output
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["metadata"]["analysis"]["seqs"] == 1


def test_checklist_prompts_for_password(runner):
    result = runner.invoke(cli, ["-q", "checklist"], input="hunter2\n")
    assert result.exit_code == 0, result.output
    assert "Length: 7 characters (recommended 12+)" in result.output
    assert "Suggestions:" in result.output


def test_checklist_json(runner):
    result = runner.invoke(cli, ["-o", "json", "checklist", "xK9#mP2$vL7@nQ4!"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert all(item["ok"] for item in data["checklist"])
    assert data["suggestions"] == []


def test_generate_json(runner):
    result = runner.invoke(cli, ["-o", "json", "generate", "-l", "20", "-n", "3"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert len(data) == 3
    for entry in data:
        assert len(entry["password"]) == 20
        assert entry["analysis"]["pool"] == 94


def test_generate_without_analysis(runner):
    result = runner.invoke(cli, ["-o", "json", "generate", "--no-analysis"])
    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert len(data) == 1
    assert "analysis" not in data[0]
    assert len(data[0]["password"]) == 16


def test_generate_console(runner):
    result = runner.invoke(cli, ["-q", "generate", "-n", "2"])
    assert result.exit_code == 0, result.output
    assert "Generated Passwords" in result.output
    assert "Strength Meter" in result.output


def test_generate_rejects_short_length(runner):
    result = runner.invoke(cli, ["-q", "generate", "-l", "2"])
    assert result.exit_code == 1
    assert "at least 4" in result.output
