"""CLI smoke tests."""

from click.testing import CliRunner
from rest_schema_analyzer.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    assert "generate" in result.output
    assert "generate-config" in result.output


def test_generate_help_lists_options() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["generate", "-h"])

    assert result.exit_code == 0
    for option in ("--catalog", "--config", "--output", "--format", "--log-level"):
        assert option in result.output
