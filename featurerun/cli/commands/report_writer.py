"""Feature report writing functionality."""

import json
import logging
from pathlib import Path
from typing import TextIO

from ...core.errors import ReportGenerationError
from ...core.feature_result import FeatureResult
from .formatters import FeatureResultFormatter

class FeatureReportWriter:
    """Handles writing feature reports to files."""

    def __init__(self, result: FeatureResult, formatter: FeatureResultFormatter, logger: logging.Logger):
        """Initialize the report writer.

        Args:
            result: The feature result to write
            formatter: Formatter for markdown output
            logger: Logger instance for reporting
        """
        self.result = result
        self.formatter = formatter
        self.logger = logger

    def write_json(self, file_path: Path) -> None:
        """Write the cucumber-compatible JSON report.

        The file holds a list with the single feature record.

        Args:
            file_path: Path where the report should be written

        Raises:
            ReportGenerationError: If report writing fails
        """
        try:
            self.logger.info(f"Writing JSON report to {file_path}")
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'w', encoding='utf-8') as f:
                json.dump([self.result.to_map()], f, indent=2)
            self.logger.info("JSON report written successfully")
        except (OSError, TypeError, ValueError) as e:
            self.logger.error(f"Failed to write report: {str(e)}")
            raise ReportGenerationError(f"Failed to write report: {str(e)}", {"file_path": str(file_path)}) from e

    def write_markdown(self, file_path: Path) -> None:
        """Write a markdown summary report.

        Args:
            file_path: Path where the report should be written

        Raises:
            ReportGenerationError: If report writing fails
        """
        try:
            self.logger.info(f"Writing markdown report to {file_path}")
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'w', encoding='utf-8') as f:
                self._write_report_header(f)
                self._write_overall_status(f)
                self._write_scenario_table(f)
                self._write_scenario_details(f)
                self._write_failures(f)
            self.logger.info("Markdown report written successfully")
        except OSError as e:
            self.logger.error(f"Failed to write report: {str(e)}")
            raise ReportGenerationError(f"Failed to write report: {str(e)}", {"file_path": str(file_path)}) from e

    def _write_report_header(self, f: TextIO) -> None:
        """Write the report header section."""
        feature = self.result.feature
        f.write(f"# Feature: {feature.name}\n\n")
        f.write(f"- File: `{feature.relative_path}`\n")
        f.write(f"- Scenarios: {self.result.scenario_count}\n")
        f.write(f"- Duration: {self.result.duration_nanos / 1_000_000:.2f} ms\n\n")

    def _write_overall_status(self, f: TextIO) -> None:
        """Write the overall status section."""
        status = 'failed' if self.result.is_failed else 'passed'
        f.write(f"Overall Status: {self.formatter.format_status(status)} ")
        f.write(f"({self.result.passed_count} passed, {self.result.failed_count} failed)\n\n")

    def _write_scenario_table(self, f: TextIO) -> None:
        """Write the scenario summary table."""
        f.write("## Scenarios\n\n")
        for line in self.formatter.format_table(self.result):
            f.write(line + "\n")
        f.write("\n")

    def _write_scenario_details(self, f: TextIO) -> None:
        """Write the flattened steps of every scenario."""
        f.write("## Steps\n\n")
        has_background = self.result.feature.background is not None
        for result in self.result.scenario_results:
            f.write(f"### {result.scenario.keyword}: {result.scenario.name}\n\n")
            if has_background:
                for line in self.formatter.format_steps(result.background_to_map()):
                    f.write(line + "\n")
            for line in self.formatter.format_steps(result.to_map()):
                f.write(line + "\n")
            f.write("\n")

    def _write_failures(self, f: TextIO) -> None:
        """Write the failure locators section."""
        if not self.result.is_failed:
            return

        f.write("## Failures\n\n")
        for message in self.result.error_messages:
            f.write(f"- `{message}`\n")
