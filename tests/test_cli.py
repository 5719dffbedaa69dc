"""Tests for CLI commands."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest
from typer.testing import CliRunner

from vbar.cli import app

runner = CliRunner()

EMPLOYMENT = "jjjjj nnnnn nnnn"


@pytest.fixture(autouse=True)
def _use_tmp_config(tmp_path: Path):
    """Redirect all CLI tests to a temporary config file."""
    cfg_dir = tmp_path / "config"
    with patch("vbar.config._CONFIG_DIR", cfg_dir), patch(
        "vbar.config._CONFIG_FILE", cfg_dir / "config.json"
    ):
        yield


class TestQuestions:
    def test_lists_categories(self) -> None:
        result = runner.invoke(app, ["questions"])
        assert result.exit_code == 0
        assert "W (primary)" in result.output
        assert "OP (secondary)" in result.output


class TestSources:
    def test_lists_sources(self) -> None:
        result = runner.invoke(app, ["sources"])
        assert result.exit_code == 0
        assert "Bronnen" in result.output


class TestScore:
    def test_employment(self) -> None:
        result = runner.invoke(app, ["score", "--answers", EMPLOYMENT])
        assert result.exit_code == 0
        assert "Let op!" in result.output
        assert "W Score: 7.0" in result.output
        assert "Z+OP Score: 0.0" in result.output
        assert "RI = -7.0" in result.output

    def test_self_employment(self) -> None:
        result = runner.invoke(app, ["score", "-a", "n" * 5 + "j" * 9])
        assert result.exit_code == 0
        assert "Prima!" in result.output

    def test_undetermined(self) -> None:
        result = runner.invoke(app, ["score", "-a", "n" * 14])
        assert result.exit_code == 0
        assert "We twijfelen" in result.output

    def test_insufficient(self) -> None:
        result = runner.invoke(app, ["score", "-a", "j" * 6 + "-" * 8])
        assert result.exit_code == 0
        assert "Nog te weinig" in result.output
        assert "Answered: 6/14" in result.output

    def test_threshold_override(self) -> None:
        result = runner.invoke(app, ["score", "-a", EMPLOYMENT, "--threshold", "7"])
        assert result.exit_code == 0
        assert "We twijfelen" in result.output

    def test_configured_threshold_used(self) -> None:
        runner.invoke(app, ["config", "--threshold", "8"])
        result = runner.invoke(app, ["score", "-a", EMPLOYMENT])
        assert "We twijfelen" in result.output

    def test_negative_threshold(self) -> None:
        result = runner.invoke(app, ["score", "-a", EMPLOYMENT, "--threshold=-1"])
        assert result.exit_code == 1

    def test_invalid_answers(self) -> None:
        result = runner.invoke(app, ["score", "-a", "jjj"])
        assert result.exit_code == 1
        assert "Invalid answers" in result.output


class TestAssess:
    def test_interactive_employment(self) -> None:
        result = runner.invoke(app, ["assess"], input="j\n" * 5 + "n\n" * 9)
        assert result.exit_code == 0
        assert "Let op!" in result.output

    def test_reprompts_on_bad_input(self) -> None:
        result = runner.invoke(app, ["assess"], input="x\n" + "n\n" * 14)
        assert result.exit_code == 0
        assert "Please enter" in result.output
        assert "We twijfelen" in result.output

    def test_skipping_everything(self) -> None:
        result = runner.invoke(app, ["assess"], input="\n" * 14)
        assert result.exit_code == 0
        assert "Nog te weinig" in result.output


class TestChart:
    def test_writes_png(self, tmp_path: Path) -> None:
        out = tmp_path / "charts" / "result.png"
        result = runner.invoke(app, ["chart", "-a", EMPLOYMENT, "--output", str(out)])
        assert result.exit_code == 0
        assert out.exists()
        assert "Chart saved" in result.output

    def test_invalid_answers(self, tmp_path: Path) -> None:
        out = tmp_path / "result.png"
        result = runner.invoke(app, ["chart", "-a", "zz", "--output", str(out)])
        assert result.exit_code == 1
        assert not out.exists()


class TestConfig:
    def test_show_default(self) -> None:
        result = runner.invoke(app, ["config", "--show"])
        assert result.exit_code == 0
        assert "Threshold: 2.0" in result.output

    def test_set_threshold(self) -> None:
        result = runner.invoke(app, ["config", "--threshold", "3"])
        assert result.exit_code == 0
        assert "Threshold set to 3.0" in result.output
        result = runner.invoke(app, ["config", "--show"])
        assert "Threshold: 3.0" in result.output

    def test_negative_threshold(self) -> None:
        result = runner.invoke(app, ["config", "--threshold=-2"])
        assert result.exit_code == 1

    def test_reset(self) -> None:
        runner.invoke(app, ["config", "--threshold", "3"])
        result = runner.invoke(app, ["config", "--reset"])
        assert result.exit_code == 0
        assert "Reset" in result.output

    def test_no_flags(self) -> None:
        result = runner.invoke(app, ["config"])
        assert result.exit_code == 0
        assert "--threshold" in result.output


class TestVerbose:
    def test_verbose_flag(self) -> None:
        result = runner.invoke(app, ["--verbose", "questions"])
        assert result.exit_code == 0
