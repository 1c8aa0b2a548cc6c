"""Step model.

This module defines the Step model used to represent a single executed step,
including the synthetic steps created for injected errors and for the
markers that announce a nested feature call in flattened reports.
"""

from dataclasses import dataclass, field
from typing import Optional

from .feature import Scenario
from .types import CALL_DEPTH_MARKER, ERROR_STEP_PREFIX
from ..utils.string_utils import repeat

@dataclass(frozen=True)
class Step:
    """A single step of a scenario.

    Attributes:
        line: Source line of the step
        prefix: Keyword or presentation marker, e.g. 'Given', '*' or '>>'
        text: Step text following the prefix
        doc_string: Optional multi-line argument of the step
        background: Whether the step belongs to the feature background
        scenario: The scenario the step was executed in
    """
    line: int
    prefix: str
    text: str
    doc_string: Optional[str] = None
    background: bool = False
    scenario: Optional[Scenario] = field(default=None, repr=False, compare=False)

    @property
    def is_background(self) -> bool:
        return self.background

    @classmethod
    def error_step(cls, scenario: Scenario, message: str) -> 'Step':
        """Create the synthetic step standing in for an out-of-step failure.

        Args:
            scenario: Scenario in which the failure happened
            message: Description of what failed

        Returns:
            Step placed at the scenario's own line with the '*' prefix
        """
        return cls(
            line=scenario.line,
            prefix=ERROR_STEP_PREFIX,
            text=message,
            scenario=scenario
        )

    @classmethod
    def call_marker(cls, parent: 'Step', depth: int, call_name: str, doc_string: Optional[str] = None) -> 'Step':
        """Create the marker announcing a nested feature call.

        Args:
            parent: The step that performed the call
            depth: Nesting depth of the call, 0 for calls made by scenario steps
            call_name: Name of the called feature
            doc_string: Pretty-printed call argument

        Returns:
            Step on the parent's line whose prefix is one '>' per depth level
        """
        return cls(
            line=parent.line,
            prefix=repeat(CALL_DEPTH_MARKER, depth),
            text=call_name,
            doc_string=doc_string,
            scenario=parent.scenario
        )
