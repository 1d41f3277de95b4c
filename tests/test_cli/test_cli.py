"""Tests for the prompt-question CLI commands."""

from __future__ import annotations

import json

from click.testing import CliRunner

from prompt_question import __version__
from prompt_question.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "inspect" in result.output
        assert "resolve" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# inspect command
# ---------------------------------------------------------------------------


class TestInspectCommand:
    def test_name_only(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect", "color"])
        assert result.exit_code == 0
        assert "Name:    color" in result.output
        assert "Type:    input" in result.output
        assert "Message: color" in result.output
        assert "Choices:" not in result.output

    def test_choices_and_default(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["inspect", "color", "-m", "Favorite color?", "-c", "red", "-c", "blue", "--default", "blue"],
        )
        assert result.exit_code == 0
        assert "Message: Favorite color?" in result.output
        assert "Default: blue" in result.output
        assert "[ ] red" in result.output
        assert "[ ] blue" in result.output

    def test_json(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect", "color", "--radio", "-c", "red", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["name"] == "color"
        assert data["options"] == {"radio": True}
        assert data["choices"][0]["name"] == "red"

    def test_invalid_name(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["inspect", ""])
        assert result.exit_code == 1
        assert "Error:" in result.output


# ---------------------------------------------------------------------------
# resolve command
# ---------------------------------------------------------------------------


class TestResolveCommand:
    def test_default(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "color", "--default", "blue"])
        assert result.exit_code == 0
        assert result.output.strip() == "blue"

    def test_answer_overrides_default(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "color", "red", "--default", "blue"])
        assert result.output.strip() == "red"

    def test_checked_choices(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["resolve", "color", "-c", "red", "-c", "blue", "--check", "red", "--check", "blue"]
        )
        assert result.exit_code == 0
        assert json.loads(result.output) == ["red", "blue"]

    def test_default_index(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["resolve", "color", "-c", "red", "-c", "blue", "--default-index", "1", "--radio"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "blue"

    def test_strict_empty_answer(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "color", "", "--default", "blue", "--strict"])
        assert result.output.strip() == "blue"

    def test_unknown_check(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["resolve", "color", "-c", "red", "--check", "green"])
        assert result.exit_code == 2
        assert "unknown choice" in result.output
