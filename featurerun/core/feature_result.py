"""Feature result aggregation.

A FeatureResult holds the scenario results of one feature execution. It is
used both for a top-level feature run and for a feature invoked from a step,
in which case it carries the call name and call argument shown in reports.
"""

import json
from typing import Any, Dict, List, Optional

from .feature import Feature, tags_to_result_list
from .records import FeatureRecord
from .scenario_result import ScenarioResult
from .step_result import StepResult
from ..logger import get_logger
from ..utils.string_utils import to_id_string

logger = get_logger("feature_result")

class FeatureResult:
    """Results of all scenarios of one feature execution.

    Attributes:
        feature: The executed feature
        call_arg: Argument the feature was called with, if it was called from a step
    """

    def __init__(
        self,
        feature: Feature,
        call_name: Optional[str] = None,
        call_arg: Optional[Dict[str, Any]] = None
    ):
        """Initialize the feature result.

        Args:
            feature: The executed feature
            call_name: Name shown for the call, defaults to the feature path
            call_arg: Argument the feature was called with
        """
        self.feature = feature
        self.call_arg = call_arg
        self._call_name = call_name
        self._scenario_results: List[ScenarioResult] = []

    @property
    def call_name(self) -> str:
        return self._call_name or self.feature.relative_path

    @property
    def call_arg_pretty(self) -> Optional[str]:
        """Call argument as indented JSON, None when there is no argument."""
        if self.call_arg is None:
            return None
        return json.dumps(self.call_arg, indent=2, default=str)

    def add_result(self, scenario_result: ScenarioResult) -> None:
        """Append the result of one scenario run.

        Args:
            scenario_result: The finished scenario result
        """
        self._scenario_results.append(scenario_result)
        if scenario_result.is_failed:
            logger.debug(f"Scenario failed: {scenario_result.get_failure_message_for_display()}")

    @property
    def scenario_results(self) -> List[ScenarioResult]:
        return list(self._scenario_results)

    @property
    def step_results(self) -> List[StepResult]:
        """Step results of all scenarios, in execution order."""
        return [sr for result in self._scenario_results for sr in result.step_results]

    @property
    def duration_nanos(self) -> int:
        return sum(result.duration_nanos for result in self._scenario_results)

    @property
    def scenario_count(self) -> int:
        return len(self._scenario_results)

    @property
    def failed_count(self) -> int:
        return sum(1 for result in self._scenario_results if result.is_failed)

    @property
    def passed_count(self) -> int:
        return self.scenario_count - self.failed_count

    @property
    def is_failed(self) -> bool:
        return self.failed_count > 0

    @property
    def errors(self) -> List[BaseException]:
        """Errors of the failed scenarios, skipping failures without an exception."""
        return [result.error for result in self._scenario_results if result.error is not None]

    @property
    def error_messages(self) -> List[str]:
        """Failure locators of the failed scenarios."""
        return [
            result.get_failure_message_for_display()
            for result in self._scenario_results
            if result.is_failed
        ]

    def to_record(self) -> FeatureRecord:
        """Build the feature record.

        Each scenario contributes its background record, when the feature
        has a background, followed by its scenario record.
        """
        elements = []
        for result in self._scenario_results:
            if self.feature.background is not None:
                elements.append(result.background_to_record())
            elements.append(result.to_record())
        feature = self.feature
        return FeatureRecord(
            name=feature.name,
            uri=feature.relative_path,
            line=feature.line,
            id=to_id_string(feature.name),
            description=feature.description,
            elements=tuple(elements),
            tags=tags_to_result_list(feature.tags) if feature.tags else None
        )

    def to_map(self) -> Dict[str, Any]:
        return self.to_record().to_dict()

    def __repr__(self) -> str:
        return (
            f"FeatureResult(feature={self.feature.relative_path!r}, "
            f"scenarios={self.scenario_count}, failed={self.failed_count})"
        )
