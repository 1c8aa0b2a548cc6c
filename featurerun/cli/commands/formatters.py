"""Feature result formatters for the featurerun CLI."""

from typing import Any, Dict, List, Protocol, runtime_checkable

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from ...core.feature_result import FeatureResult
from ...core.types import STATUS_EMOJI

def _format_duration(duration_nanos: int) -> str:
    return f"{duration_nanos / 1_000_000:.2f} ms"

@runtime_checkable
class FeatureResultFormatter(Protocol):
    """Interface shared by the console and file formatters."""

    def format_status(self, status: str) -> str:
        ...

    def format_table(self, feature_result: FeatureResult) -> Any:
        ...

    def format_steps(self, record: Dict[str, Any]) -> Any:
        ...

class MarkdownFeatureResultFormatter(FeatureResultFormatter):
    """Formats feature results in Markdown format.

    This formatter is used for writing results to files in a human-readable
    Markdown format.
    """

    def format_status(self, status: str) -> str:
        """Format a status with emoji.

        Args:
            status: The status string to format (e.g., 'passed', 'failed')

        Returns:
            A formatted status string with emoji
        """
        return f"{STATUS_EMOJI.get(status, STATUS_EMOJI['unknown'])} {status.upper()}"

    def format_table(self, feature_result: FeatureResult) -> List[str]:
        """Format the scenarios of a feature run as a markdown table.

        Args:
            feature_result: The feature result to format

        Returns:
            List of strings representing the markdown table
        """
        lines = []
        lines.append("| Scenario | Line | Status | Duration | Failure |")
        lines.append("|----------|------|--------|----------|---------|")

        for result in feature_result.scenario_results:
            failure = result.get_failure_message_for_display() or ''
            lines.append(
                f"| {result.scenario.name} | {result.scenario.line} "
                f"| {self.format_status(result.status.value)} "
                f"| {_format_duration(result.duration_nanos)} | {failure} |"
            )

        return lines

    def format_steps(self, record: Dict[str, Any]) -> List[str]:
        """Format the flattened steps of an exported scenario or background.

        Args:
            record: Exported scenario or background mapping

        Returns:
            List of strings, one bullet per step record
        """
        lines = []
        for step in record.get('steps', []):
            result = step.get('result', {})
            keyword = step.get('keyword', '')
            text = f"{keyword} {step.get('name', '')}" if keyword else step.get('name', '')
            lines.append(f"- {self.format_status(result.get('status', 'unknown'))} `{text}` (line {step.get('line')})")
            if result.get('error_message'):
                lines.append(f"  - {result['error_message']}")
        return lines

class RichFeatureResultFormatter(FeatureResultFormatter):
    """Formats feature results using the Rich library.

    This formatter is used for displaying results in the console using
    Rich's table formatting capabilities.
    """

    def __init__(self, console: Console):
        """Initialize the formatter with a Rich console.

        Args:
            console: Rich console instance for output
        """
        self.console = console

    def format_status(self, status: str) -> str:
        """Format a status with emoji.

        Args:
            status: The status string to format (e.g., 'passed', 'failed')

        Returns:
            A formatted status string with emoji
        """
        return f"{STATUS_EMOJI.get(status, STATUS_EMOJI['unknown'])} {status.upper()}"

    def format_table(self, feature_result: FeatureResult) -> Table:
        """Format the scenarios of a feature run as a Rich table.

        Args:
            feature_result: The feature result to format

        Returns:
            A Rich Table object containing the formatted results
        """
        table = Table(show_header=True, header_style="bold magenta")
        table.add_column("Scenario", style="dim")
        table.add_column("Line", justify="right")
        table.add_column("Status")
        table.add_column("Duration", justify="right")
        table.add_column("Failure")

        for result in feature_result.scenario_results:
            table.add_row(
                escape(result.scenario.name),
                str(result.scenario.line),
                self.format_status(result.status.value),
                _format_duration(result.duration_nanos),
                escape(result.get_failure_message_for_display() or '')
            )

        return table

    def format_steps(self, record: Dict[str, Any]) -> Table:
        """Format the flattened steps of an exported scenario or background.

        Args:
            record: Exported scenario or background mapping

        Returns:
            A Rich Table with one row per step record
        """
        table = Table(
            title=f"{escape(record.get('keyword', ''))}: {escape(record.get('name', ''))}",
            show_header=True
        )
        table.add_column("Line", justify="right")
        table.add_column("Keyword", style="cyan")
        table.add_column("Step")
        table.add_column("Status")
        table.add_column("Duration", justify="right")

        for step in record.get('steps', []):
            result = step.get('result', {})
            table.add_row(
                str(step.get('line', '')),
                escape(step.get('keyword', '')),
                escape(step.get('name', '')),
                self.format_status(result.get('status', 'unknown')),
                _format_duration(result.get('duration', 0))
            )

        return table
