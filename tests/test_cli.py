"""Tests for the command line interface."""

from __future__ import annotations

from pathlib import Path

import pytest
from typer.testing import CliRunner

from main import app

from tests.corpus import write_json


@pytest.fixture
def runner(monkeypatch: pytest.MonkeyPatch) -> CliRunner:
    for name in (
        "CLDR_DATA_DIR",
        "CLDR_LOCALES",
        "CLDR_DEFAULT_LOCALE",
        "CLDR_DEV",
        "CLDR_MAX_WORKERS",
    ):
        monkeypatch.delenv(name, raising=False)
    return CliRunner()


def _invoke(runner: CliRunner, data_dir: Path, *args: str):
    return runner.invoke(
        app,
        ["--data-dir", str(data_dir), "--default-locale", "en", "--locales", "en,fr,ar", *args],
    )


class TestCli:
    def test_locales(self, runner: CliRunner, data_dir: Path) -> None:
        result = _invoke(runner, data_dir, "locales")
        assert result.exit_code == 0
        assert result.stdout.split() == ["ar", "en", "fr", "root"]

    def test_show(self, runner: CliRunner, data_dir: Path) -> None:
        result = _invoke(runner, data_dir, "show", "en")
        assert result.exit_code == 0
        assert "default=latn" in result.stdout
        assert "RBNF spellout: spellout_lenient, spellout_numbering" in result.stdout
        assert "Calendars: gregorian, japanese" in result.stdout

    def test_show_unknown_locale(self, runner: CliRunner, data_dir: Path) -> None:
        result = _invoke(runner, data_dir, "show", "xx")
        assert result.exit_code == 1
        assert "Locale definition was not found" in result.output

    def test_expand(self, runner: CliRunner, data_dir: Path) -> None:
        result = _invoke(runner, data_dir, "expand", "en-A+")
        assert result.exit_code == 0
        assert result.stdout.split() == ["en", "en-AG", "en-AI", "en-AS", "en-AT", "en-AU"]

    def test_expand_invalid_pattern(self, runner: CliRunner, data_dir: Path) -> None:
        result = _invoke(runner, data_dir, "expand", "en-[A")
        assert result.exit_code == 1
        assert "Invalid regex" in result.output

    def test_like(self, runner: CliRunner, data_dir: Path) -> None:
        result = _invoke(runner, data_dir, "like", "ar", "default")
        assert result.exit_code == 0
        assert result.stdout.strip() == "ar\tarab"

    def test_like_unknown_system(self, runner: CliRunner, data_dir: Path) -> None:
        result = _invoke(runner, data_dir, "like", "en", "bogus")
        assert result.exit_code == 1
        assert "'bogus' is unknown" in result.output

    def test_preload(self, runner: CliRunner, data_dir: Path) -> None:
        result = _invoke(runner, data_dir, "preload")
        assert result.exit_code == 0
        assert "Successfully loaded 4 locales" in result.stdout

    def test_invalid_environment_setting(
        self, runner: CliRunner, data_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("CLDR_MAX_WORKERS", "0")
        result = _invoke(runner, data_dir, "locales")
        assert result.exit_code == 1
        assert "Error:" in result.output
        assert "max_workers" in result.output

    def test_malformed_number_systems(self, runner: CliRunner, data_dir: Path) -> None:
        write_json(data_dir / "number_systems.json", {"latn": {"type": "imaginary"}})
        result = _invoke(runner, data_dir, "locales")
        assert result.exit_code == 1
        assert "number_systems.json" in result.output
