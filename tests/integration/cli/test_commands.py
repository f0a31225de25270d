"""Integration tests for the headlines and objects commands"""

import json

import pytest
from typer.testing import CliRunner

from orgscan.cli.cli import app


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("ORGSCAN_TODO_KEYWORDS_OPEN", raising=False)
    monkeypatch.delenv("ORGSCAN_TODO_KEYWORDS_CLOSED", raising=False)


def _records(output: str) -> list[dict]:
    return [json.loads(line) for line in output.splitlines() if line.startswith("{")]


def test_headlines_cmd(org_tree):
    """Each headline is printed as JSON with its source path."""
    result = CliRunner().invoke(app, ["headlines", str(org_tree), "--todo", "TODO,NEXT"])
    assert result.exit_code == 0, result.output
    records = _records(result.output)
    assert [r["raw"] for r in records] == [
        "Plan the release",
        "Draft /announcement/ notes",
        "Tag [[https://example.org][v1.0]]",
        "Reading list",
    ]
    assert records[0]["priority"] == "A"
    assert records[0]["planning"]["deadline"]["kind"] == "active"
    assert records[1]["keyword"] == "NEXT"
    assert records[3]["properties"]["pairs"] == [["AUTHOR", "Knuth"]]
    assert records[3]["path"].endswith("notes.org")


def test_headlines_cmd_reads_config_yaml(org_tree):
    (org_tree / "config.yaml").write_text("todo_keywords_open: [NEXT]\n")
    result = CliRunner().invoke(app, ["headlines", str(org_tree / "project.org")])
    assert result.exit_code == 0, result.output
    keywords = [r.get("keyword") for r in _records(result.output)]
    assert keywords == [None, "NEXT", "DONE"]


def test_headlines_cmd_missing_path(tmp_path):
    result = CliRunner().invoke(app, ["headlines", str(tmp_path / "nope.org")])
    assert result.exit_code == 1
    assert "No such file or directory" in result.output


def test_headlines_cmd_invalid_config(org_tree):
    (org_tree / "config.yaml").write_text("key: [unclosed\n")
    result = CliRunner().invoke(app, ["headlines", str(org_tree)])
    assert result.exit_code == 1
    assert "Invalid config.yaml" in result.output


def test_objects_cmd(tmp_path):
    f = tmp_path / "inline.org"
    f.write_text("Normal =verbatim= and *bold*", encoding="utf-8")
    result = CliRunner().invoke(app, ["objects", str(f)])
    assert result.exit_code == 0, result.output
    records = _records(result.output)
    assert [r["kind"] for r in records] == ["text", "verbatim", "text", "bold"]
    assert records[1] == {"offset": 7, "length": 10, "kind": "verbatim", "value": "verbatim"}
    assert records[3]["end"] == 5


def test_objects_cmd_titles_only(org_tree):
    result = CliRunner().invoke(app, ["objects", str(org_tree / "project.org"), "--titles"])
    assert result.exit_code == 0, result.output
    kinds = {r["kind"] for r in _records(result.output)}
    assert "link" in kinds
    assert "code" not in kinds


def test_objects_cmd_missing_file(tmp_path):
    result = CliRunner().invoke(app, ["objects", str(tmp_path / "nope.org")])
    assert result.exit_code == 1


def test_verbose_flag(tmp_path):
    f = tmp_path / "a.org"
    f.write_text("* Title\n", encoding="utf-8")
    result = CliRunner().invoke(app, ["--verbose", "headlines", str(f)])
    assert result.exit_code == 0, result.output
