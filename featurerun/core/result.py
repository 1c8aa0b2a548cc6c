"""Step outcome model."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .types import StepStatus

@dataclass(frozen=True)
class Result:
    """Outcome of executing one step.

    Attributes:
        status: Step status
        duration_nanos: Time the step took, in nanoseconds
        error: Exception raised by the step if it failed
    """
    status: StepStatus
    duration_nanos: int = 0
    error: Optional[BaseException] = None

    @classmethod
    def passed(cls, duration_nanos: int) -> 'Result':
        """Create a passed result.

        Args:
            duration_nanos: Step duration in nanoseconds

        Returns:
            New passed result
        """
        return cls(status=StepStatus.PASSED, duration_nanos=duration_nanos)

    @classmethod
    def failed(cls, duration_nanos: int, error: Optional[BaseException]) -> 'Result':
        """Create a failed result.

        Args:
            duration_nanos: Step duration in nanoseconds
            error: The exception that caused the failure

        Returns:
            New failed result
        """
        return cls(status=StepStatus.FAILED, duration_nanos=duration_nanos, error=error)

    @classmethod
    def skipped(cls) -> 'Result':
        """Create a skipped result with zero duration."""
        return cls(status=StepStatus.SKIPPED)

    @property
    def is_failed(self) -> bool:
        return self.status == StepStatus.FAILED

    @property
    def error_message(self) -> Optional[str]:
        """Error rendered as '<ExceptionClass>: <message>', or None."""
        if self.error is None:
            return None
        return f"{type(self.error).__name__}: {self.error}"

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result to its report representation."""
        data = {
            'status': self.status.value,
            'duration': self.duration_nanos
        }
        if self.error is not None:
            data['error_message'] = self.error_message
        return data
