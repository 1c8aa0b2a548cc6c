"""Scenario result aggregation.

This module provides the ScenarioResult class which collects the outcome of
every step of one scenario run. It keeps the steps in execution order,
remembers the first failure, sums up durations and exports the run as
flattened background and scenario records for reporting.

Example:
    >>> result = ScenarioResult(scenario)
    >>> result.add_step_result(StepResult(step, Result.passed(100)))
    >>> result.add_error("afterScenario hook failed", error)
    >>> result.is_failed
    True
    >>> result.to_map()['steps']
    [...]
"""

from typing import Any, Dict, Iterable, List, Optional, Tuple

from .feature import Scenario, tags_to_result_list
from .flatten import flatten_calls
from .records import BackgroundRecord, ScenarioRecord, StepRecord
from .result import Result
from .step import Step
from .step_result import StepResult
from .types import StepStatus
from ..utils.string_utils import to_id_string

class ScenarioResult:
    """Accumulates the step results of a single scenario run.

    Step results are append-only. The first failed step is recorded once and
    never replaced by later failures. The instance is owned by the thread
    executing the scenario; it does no locking of its own.

    Attributes:
        scenario: The scenario that was executed
        thread_name: Name of the thread that ran the scenario
        start_time: Start timestamp set by the caller
        end_time: End timestamp set by the caller
    """

    def __init__(self, scenario: Scenario, step_results: Optional[Iterable[StepResult]] = None):
        """Initialize the scenario result.

        Args:
            scenario: The scenario being executed
            step_results: Existing step results to seed the result with
        """
        self.scenario = scenario
        self.thread_name: Optional[str] = None
        self.start_time: int = 0
        self.end_time: int = 0
        self._step_results: List[StepResult] = []
        self._failed_step: Optional[StepResult] = None
        self._duration_nanos = 0
        for step_result in step_results or ():
            self.add_step_result(step_result)

    def add_step_result(self, step_result: StepResult) -> None:
        """Append a step result.

        The step result must carry a result.

        Args:
            step_result: The step result to append
        """
        result = step_result.result
        self._step_results.append(step_result)
        self._duration_nanos += result.duration_nanos
        if result.is_failed and self._failed_step is None:
            self._failed_step = step_result

    def add_error(self, message: str, error: Optional[BaseException]) -> None:
        """Record a failure that happened outside of any step.

        Args:
            message: Description shown as the step text
            error: The exception that was raised
        """
        step = Step.error_step(self.scenario, message)
        self.add_step_result(StepResult(step, Result.failed(0, error)))

    @property
    def step_results(self) -> Tuple[StepResult, ...]:
        return tuple(self._step_results)

    @property
    def failed_step(self) -> Optional[StepResult]:
        return self._failed_step

    @property
    def is_failed(self) -> bool:
        return self._failed_step is not None

    @property
    def status(self) -> StepStatus:
        return StepStatus.FAILED if self.is_failed else StepStatus.PASSED

    @property
    def error(self) -> Optional[BaseException]:
        return None if self._failed_step is None else self._failed_step.result.error

    @property
    def duration_nanos(self) -> int:
        return self._duration_nanos

    @property
    def duration_millis(self) -> float:
        return self._duration_nanos / 1_000_000

    def get_failure_message_for_display(self) -> Optional[str]:
        """Locate the first failure as '<feature path>:<line> <step text>'.

        Returns:
            The failure locator, or None if no step failed
        """
        if self._failed_step is None:
            return None
        step = self._failed_step.step
        feature_path = self.scenario.feature.relative_path
        return f"{feature_path}:{step.line} {step.text}"

    def step_records(self, background: bool) -> List[StepRecord]:
        """Export either the background or the foreground steps.

        Each matching step is followed by the flattened records of the
        features it called.

        Args:
            background: True for background steps, False for scenario steps

        Returns:
            Ordered step records
        """
        records: List[StepRecord] = []
        for step_result in self._step_results:
            if step_result.step.is_background == background:
                records.append(step_result.to_record())
                records.extend(flatten_calls(step_result, 0))
        return records

    def background_to_record(self) -> BackgroundRecord:
        background = self.scenario.feature.background
        return BackgroundRecord(
            steps=tuple(self.step_records(True)),
            line=background.line if background is not None else None
        )

    def background_to_map(self) -> Dict[str, Any]:
        return self.background_to_record().to_dict()

    def to_record(self) -> ScenarioRecord:
        scenario = self.scenario
        return ScenarioRecord(
            name=scenario.name,
            steps=tuple(self.step_records(False)),
            line=scenario.line,
            id=to_id_string(scenario.name),
            description=scenario.description,
            keyword=scenario.keyword,
            tags=tags_to_result_list(scenario.tags) if scenario.tags else None
        )

    def to_map(self) -> Dict[str, Any]:
        return self.to_record().to_dict()

    def __repr__(self) -> str:
        return (
            f"ScenarioResult(scenario={self.scenario.name!r}, "
            f"steps={len(self._step_results)}, status={self.status.value})"
        )
