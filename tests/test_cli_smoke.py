from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from statbook.cli.app import app


def test_cli_help_smoke() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    # Basic sanity checks that a top-level command is registered.
    assert "player" in result.stdout


def test_cli_player_help_lists_commands() -> None:
    runner = CliRunner()
    result = runner.invoke(app, ["player", "--help"])
    assert result.exit_code == 0
    for command in ("stats", "news", "summary"):
        assert command in result.stdout


def test_cli_missing_keys_exit_nonzero(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("STATS_API_KEY", raising=False)
    monkeypatch.delenv("NEWS_API_KEY", raising=False)

    runner = CliRunner()
    result = runner.invoke(app, ["player", "stats", "Josh Allen"])

    assert result.exit_code == 1
    assert "Missing API key: STATS_API_KEY" in result.output


def test_cli_malformed_settings_exit_nonzero(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("STATS_API_KEY", "stats-key")
    monkeypatch.setenv("NEWS_API_KEY", "news-key")
    monkeypatch.setenv("NEWS__SORT_BY", "newest")

    runner = CliRunner()
    result = runner.invoke(app, ["player", "stats", "Josh Allen"])

    assert result.exit_code == 1
    assert "Error: Invalid settings" in result.output
    assert "sort_by" in result.output
