"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from rest_schema_analyzer.configuration import DEFAULT_CONFIG_FILENAME, write_default_configuration
from rest_schema_analyzer.document_writing import OutputFormat
from rest_schema_analyzer.run_execution import (
    AnalysisRequest,
    AnalysisRunError,
    execute_schema_analysis_run,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


class CliError(Exception):
    """Custom CLI error."""


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="rest-schema-analyzer")
def cli() -> None:
    """Schema analyzer for REST resource catalogs."""


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML analyzer configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a YAML analyzer configuration listing every default."""
    try:
        resolved_output = write_default_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="generate")
@click.option(
    "--catalog",
    "catalog_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON resource catalog",
)
@click.option(
    "--config",
    "config_path",
    required=False,
    type=click.Path(path_type=str),
    help="Optional YAML/JSON analyzer configuration file",
)
@click.option(
    "--output",
    "output_path",
    required=False,
    type=click.Path(path_type=str),
    help="File for the OpenAPI document; printed to stdout when omitted",
)
@click.option(
    "--format",
    "output_format",
    required=False,
    type=click.Choice([fmt.value for fmt in OutputFormat]),
    help="Document syntax; defaults to the output file suffix, else json",
)
@click.option(
    "--log-level",
    "log_level",
    default="WARNING",
    show_default=True,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging verbosity on stderr",
)
def generate(
    catalog_path: str,
    config_path: str | None,
    output_path: str | None,
    output_format: str | None,
    log_level: str,
) -> None:
    """Assemble the schema document for a resource catalog."""
    _configure_logging(log_level)
    try:
        outcome = execute_schema_analysis_run(
            AnalysisRequest(
                catalog_path=catalog_path,
                config_path=config_path,
                output_path=output_path,
                output_format=OutputFormat(output_format) if output_format else None,
            )
        )
    except AnalysisRunError as exc:
        raise CliError(str(exc)) from exc

    if outcome.output_path is None:
        click.echo(outcome.text, nl=False)
        return
    report = outcome.report
    click.echo(
        f"documented {len(report.documented)} of {len(report.processed)} resources "
        f"({report.schema_count} schemas)",
        err=True,
    )
    click.echo(str(outcome.output_path))


def _configure_logging(log_level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
