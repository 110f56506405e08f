"""Tests for --examples flag on CLI commands."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from litcal.cli import cli

# (CLI args, expected keywords in output)
EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["easter", "--examples"], ["litcal easter 2025"]),
    (["year", "--examples"], ["litcal year 2026 --liturgical"]),
    (["cycle", "--examples"], ["litcal cycle 2026"]),
    (["feasts", "--examples"], ["litcal feasts 2025"]),
    (["day", "--examples"], ["litcal day 2025-12-25"]),
    (["season", "--examples"], ["litcal season list", "litcal season at"]),
    (["season", "list", "--examples"], ["--liturgical"]),
    (["season", "at", "--examples"], ["litcal season at 2026-03-01"]),
    (["proper", "--examples"], ["litcal proper list", "litcal proper at"]),
    (["proper", "list", "--examples"], ["litcal proper list 2025"]),
    (["proper", "at", "--examples"], ["2026-07-15"]),
    (["check", "--examples"], ["litcal check --start 2000 --end 2050"]),
    (["export", "--examples"], ["litcal export seasons", "litcal export diff"]),
    (["export", "seasons", "--examples"], ["--output seasons.json"]),
    (["export", "diff", "--examples"], ["litcal export diff seasons.json"]),
]


def _examples_id(item: tuple[list[str], list[str]]) -> str:
    """Generate a readable test ID from args."""
    args, _ = item
    return "_".join(a for a in args if a != "--examples")


@pytest.mark.parametrize(
    "args,expected_keywords",
    EXAMPLES_COMMANDS,
    ids=[_examples_id(item) for item in EXAMPLES_COMMANDS],
)
def test_examples_flag(
    cli_runner: CliRunner, args: list[str], expected_keywords: list[str]
) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0
    assert "Examples for" in result.output
    for kw in expected_keywords:
        assert kw in result.output, f"Expected '{kw}' in examples output for {args}"


class TestExamplesInHelp:
    """--examples appears in --help output for commands that have it."""

    @pytest.mark.parametrize(
        "args",
        [
            ["easter", "--help"],
            ["season", "--help"],
            ["season", "list", "--help"],
            ["proper", "at", "--help"],
            ["check", "--help"],
            ["export", "diff", "--help"],
        ],
    )
    def test_examples_in_help(self, cli_runner: CliRunner, args: list[str]) -> None:
        result = cli_runner.invoke(cli, args)
        assert result.exit_code == 0
        assert "--examples" in result.output


class TestExamplesEagerExit:
    """--examples exits before argument validation."""

    def test_skips_required_year(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["easter", "--examples"])
        assert result.exit_code == 0
        assert "Examples for" in result.output

    def test_skips_required_options(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "seasons", "--examples"])
        assert result.exit_code == 0

    def test_skips_missing_file(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["export", "diff", "--examples"])
        assert result.exit_code == 0
