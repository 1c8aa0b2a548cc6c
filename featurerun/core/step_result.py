"""Step result model pairing a step with its outcome."""

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, List, Optional

from .records import StepRecord
from .result import Result
from .step import Step

if TYPE_CHECKING:
    from .feature_result import FeatureResult

@dataclass
class StepResult:
    """A step together with its outcome.

    Attributes:
        step: The executed step
        result: Outcome of the step
        call_results: Features invoked by this step, in call order
        step_log: Log output captured while the step ran
    """
    step: Step
    result: Result
    call_results: Optional[List['FeatureResult']] = None
    step_log: Optional[str] = None

    @property
    def is_failed(self) -> bool:
        return self.result.is_failed

    def _doc_string(self) -> Optional[str]:
        parts = [part for part in (self.step.doc_string, self.step_log) if part]
        return '\n'.join(parts) if parts else None

    def to_record(self) -> StepRecord:
        """Build the export record of this step, without its calls."""
        return StepRecord(
            line=self.step.line,
            keyword=self.step.prefix,
            name=self.step.text,
            result=self.result.to_dict(),
            doc_string=self._doc_string()
        )

    def to_map(self) -> Dict[str, Any]:
        return self.to_record().to_dict()
