"""
Command-line entry point.

Usage:
    archguard check src --config rules.json
    archguard check src --package conference --config rules.json --format plain
    archguard rules

Exit codes:
    0 - no violations
    1 - violations reported
    2 - configuration or model fault
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
import jsonschema
from rich.console import Console
from rich.table import Table

from archguard.application.evaluator import RuleEvaluator
from archguard.config import load_rules_file
from archguard.domain.exceptions import (
    InapplicableTargetError,
    ModelLoadError,
    RuleConfigurationError,
)
from archguard.domain.models import EvaluationReport
from archguard.infrastructure.model import PythonSourceModelProvider
from archguard.infrastructure.registry import RuleRegistry

logger = logging.getLogger("archguard")

EXIT_PASSED = 0
EXIT_VIOLATIONS = 1
EXIT_FAULT = 2


def _configure_logging(debug: bool) -> None:
    """Send library logs to stderr; the report itself goes to stdout."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )


def render_table(console: Console, report: EvaluationReport) -> None:
    table = Table(title="Architecture violations", show_lines=False)
    table.add_column("#", justify="right", style="dim")
    table.add_column("Rule", style="cyan")
    table.add_column("Declaration")
    table.add_column("Reason")
    for i, violation in enumerate(report.violations, 1):
        table.add_row(str(i), violation.rule_id, violation.declaration_id, violation.reason)
    console.print(table)


def render_plain(report: EvaluationReport) -> None:
    for violation in report.violations:
        click.echo(str(violation))


@click.group()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def cli(debug: bool) -> None:
    """Architecture rule checks over a Python code base."""
    _configure_logging(debug)


@cli.command()
@click.argument(
    "source_root", type=click.Path(exists=True, file_okay=False, path_type=Path)
)
@click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON rule-set file",
)
@click.option("--package", default=None, help="Dotted package to restrict the scan to")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["table", "plain"]),
    default="table",
    show_default=True,
)
def check(
    source_root: Path, config_path: Path, package: str | None, output_format: str
) -> None:
    """Evaluate the configured rules against SOURCE_ROOT."""
    console = Console()
    try:
        rules = load_rules_file(config_path)
        provider = PythonSourceModelProvider(source_root, package=package)
        report = RuleEvaluator().check(rules, provider)
    except jsonschema.ValidationError as e:
        logger.error("Invalid rule set %s: %s", config_path, e.message)
        click.echo(f"Invalid rule set {config_path}: {e.message}", err=True)
        sys.exit(EXIT_FAULT)
    except (RuleConfigurationError, InapplicableTargetError, ModelLoadError) as e:
        logger.error("%s: %s", type(e).__name__, e)
        click.echo(f"{type(e).__name__}: {e}", err=True)
        sys.exit(EXIT_FAULT)

    if report.violations:
        if output_format == "table":
            render_table(console, report)
        else:
            render_plain(report)
    click.echo(report.summary())
    sys.exit(EXIT_PASSED if report.passed else EXIT_VIOLATIONS)


@cli.command(name="rules")
def list_rules() -> None:
    """List the available rule types."""
    for name in RuleRegistry.available():
        click.echo(name)


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
