# tests/test_cli.py

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from scribble.cli import app
from scribble.utils import mock_file_path

runner = CliRunner()


def test_tokens_command_prints_table() -> None:
    result = runner.invoke(app, ["tokens", str(mock_file_path("body_sample.yml"))])
    assert result.exit_code == 0, result.output
    assert "Body Tokens" in result.output
    assert "8 token(s)" in result.output


def test_export_command_to_file(tmp_path: Path) -> None:
    out = tmp_path / "tokens.json"
    result = runner.invoke(
        app,
        ["export", str(mock_file_path("body_sample.yml")), "--out", str(out), "--pretty"],
    )
    assert result.exit_code == 0, result.output

    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data) == 8
    assert data[0]["kind"] == "form"
    assert data[3] == {
        "kind": "newline",
        "contents": "\n",
        "is_newline": True,
        "is_leading_ws": False,
        "is_trailing_ws": False,
    }


def test_malformed_events_exit_with_error(tmp_path: Path) -> None:
    path = tmp_path / "bad.yml"
    path.write_text("- text: ab\n- pop: 5\n", encoding="utf-8")

    result = runner.invoke(app, ["export", str(path)])
    assert result.exit_code == 1


def test_export_command_compact_file(tmp_path: Path) -> None:
    out = tmp_path / "out" / "tokens.json"
    result = runner.invoke(app, ["export", str(mock_file_path("body_sample.yml")), "-o", str(out)])
    assert result.exit_code == 0, result.output

    text = out.read_text(encoding="utf-8")
    assert "\n" not in text
    assert len(json.loads(text)) == 8
    # Nothing is printed when writing to a file.
    assert result.stdout.strip() == ""


def test_export_command_to_stdout() -> None:
    result = runner.invoke(app, ["export", str(mock_file_path("body_sample.yml"))])
    assert result.exit_code == 0, result.output
    assert json.loads(result.stdout)[0]["kind"] == "form"
