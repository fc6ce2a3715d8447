"""Tests for the selectorkit CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from selectorkit import __version__
from selectorkit.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "build and check CSS selectors" in result.output

    def test_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "build" in result.output
        assert "check" in result.output
        assert "combine" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# build command
# ---------------------------------------------------------------------------


class TestBuildCommand:
    def test_build_orders_parts(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli,
            [
                "build",
                "--pseudo-class", "focus",
                "--attr", 'href$=".png"',
                "--element", "a",
            ],
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_build_repeated_classes(self) -> None:
        runner = CliRunner()
        result = runner.invoke(
            cli, ["build", "--id", "main", "-c", "container", "-c", "editable"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "#main.container.editable"

    def test_build_without_parts_fails(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["build"])
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# check command
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_check_valid(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["check", "ul>li.item"])
        assert result.exit_code == 0
        assert result.output.strip() == "ul > li.item"

    def test_check_order_violation(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["check", "a:hover.x"])
        assert result.exit_code == 1

    def test_check_syntax_error(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["check", "a[href"])
        assert result.exit_code == 1

    def test_verbose_flag_accepted(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--verbose", "check", "div"])
        assert result.exit_code == 0


# ---------------------------------------------------------------------------
# combine command
# ---------------------------------------------------------------------------


class TestCombineCommand:
    def test_combine(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["combine", "div#main", "+", "table#data"])
        assert result.exit_code == 0
        assert result.output.strip() == "div#main + table#data"

    def test_combine_unknown_token_default(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["combine", "a", "|", "b"])
        assert result.exit_code == 0
        assert result.output.strip() == "a | b"

    def test_combine_unknown_token_strict(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["combine", "--strict", "a", "|", "b"])
        assert result.exit_code == 1
