"""Report CLI command.

This module provides the command that turns a recorded feature run into a
report. It includes functionality for:
- Loading a recorded run from YAML or JSON
- Displaying a scenario summary and flattened steps in the console
- Writing a cucumber-compatible JSON or a markdown report

Example:
    $ featurerun report --input run.yaml --format markdown --show-steps
"""

# Standard library imports
from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Optional, NoReturn

# Third-party imports
import click
from rich.console import Console
from rich.markup import escape

# Local application imports
from ...config import get_config
from ...core.errors import FeatureRunError
from ...core.feature_result import FeatureResult
from ...core.loader import ResultLoader
from ...logger import get_logger
from ...utils.string_utils import to_id_string
from .formatters import MarkdownFeatureResultFormatter, RichFeatureResultFormatter
from .report_writer import FeatureReportWriter

logger = get_logger("report")

REPORT_FORMATS = ('json', 'markdown')

class ExitCode(Enum):
    """Exit codes for CLI commands."""
    SUCCESS = 0
    ERROR = 1
    SCENARIO_FAILED = 2

def _handle_error(error: Exception, message: str) -> NoReturn:
    """Handle errors in a consistent way.

    Args:
        error: The exception that occurred
        message: Error message to display

    Raises:
        click.Abort: Always raises to abort the command
    """
    logger.error(f"{message}: {str(error)}")
    details = getattr(error, 'details', None)
    if details:
        logger.debug(f"Error details: {details}")
    raise click.Abort()

def _generate_report_path(feature_result: FeatureResult, report_format: str) -> Path:
    """Generate a path for the report inside the configured report directory.

    Args:
        feature_result: The feature result to generate a report for
        report_format: 'json' or 'markdown'

    Returns:
        Path object for the report file
    """
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    suffix = 'json' if report_format == 'json' else 'md'
    name = to_id_string(feature_result.feature.name) or 'feature'
    return get_config().report_dir / f"{name}_{timestamp}_report.{suffix}"

def _display_summary(
    console: Console,
    feature_result: FeatureResult,
    rich_formatter: RichFeatureResultFormatter,
    show_steps: bool
) -> None:
    """Display a summary of the feature run.

    Args:
        console: Rich console for output
        feature_result: The feature result to display
        rich_formatter: Formatter for rich output
        show_steps: Whether to also print the flattened steps of every scenario
    """
    feature = feature_result.feature
    console.print("\nFeature Results Summary")
    console.print("=" * 50)
    console.print(f"- Feature: {escape(feature.name)}")
    console.print(f"- File: {escape(feature.relative_path)}")

    status = 'failed' if feature_result.is_failed else 'passed'
    console.print(f"\nOverall Status: {rich_formatter.format_status(status)}")
    console.print(f"Scenarios: {feature_result.passed_count} passed, {feature_result.failed_count} failed")

    console.print(rich_formatter.format_table(feature_result))

    if show_steps:
        for result in feature_result.scenario_results:
            if feature.background is not None:
                console.print(rich_formatter.format_steps(result.background_to_map()))
            console.print(rich_formatter.format_steps(result.to_map()))

@click.command()
@click.option('--input', '-i', 'input_path', type=click.Path(exists=True, dir_okay=False), required=True,
              help='Recorded feature run (YAML or JSON)')
@click.option('--output', '-o', type=click.Path(dir_okay=False), default=None,
              help='Report file path (default: generated inside the configured report directory)')
@click.option('--format', '-f', 'report_format', type=click.Choice(REPORT_FORMATS), default='json',
              help='Report format (default: json)')
@click.option('--show-steps', is_flag=True, help='Print the flattened steps of every scenario')
@click.option('--strict', is_flag=True, help=f'Exit with code {ExitCode.SCENARIO_FAILED.value} when a scenario failed')
@click.pass_context
def report(
    ctx: click.Context,
    input_path: str,
    output: Optional[str],
    report_format: str,
    show_steps: bool,
    strict: bool
) -> None:
    """Build a report from a recorded feature run.

    Args:
        input_path: Path to the recorded run
        output: Optional report file path
        report_format: 'json' or 'markdown'
        show_steps: Whether to print flattened steps
        strict: Whether a failed scenario fails the command
    """
    console = Console()

    try:
        feature_result = ResultLoader().load_from_file(Path(input_path))
    except FeatureRunError as e:
        _handle_error(e, "Failed to load recorded results")

    rich_formatter = RichFeatureResultFormatter(console)
    _display_summary(console, feature_result, rich_formatter, show_steps)

    report_path = Path(output) if output else _generate_report_path(feature_result, report_format)
    writer = FeatureReportWriter(feature_result, MarkdownFeatureResultFormatter(), logger)
    try:
        if report_format == 'json':
            writer.write_json(report_path)
        else:
            writer.write_markdown(report_path)
    except FeatureRunError as e:
        _handle_error(e, "Report generation error")

    console.print(f"\nReport saved to: {escape(str(report_path))}")

    if strict and feature_result.is_failed:
        for message in feature_result.error_messages:
            logger.error(f"Failed: {message}")
        ctx.exit(ExitCode.SCENARIO_FAILED.value)
