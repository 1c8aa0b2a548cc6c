"""Flattening of nested feature calls into a single ordered record list.

A step may call another feature, whose steps may call further features.
Reports consume a flat list, so the call tree is walked depth first and
nesting is encoded in '>' markers:

- every call emits a passed, zero-duration marker step whose prefix holds
  ``depth`` markers and whose text is the call name;
- every step inside the call follows its marker with ``depth + 1`` markers
  and a space prepended to its keyword.

Example, a scenario step calling ``auth.feature`` which itself calls
``token.feature``::

    Given call read('auth.feature')
          auth.feature               <- marker, depth 0
    > Given url authUrl
    > When call read('token.feature')
    >     token.feature              <- marker, depth 1
    >> Then status 200
"""

from typing import List

from .records import StepRecord
from .result import Result
from .step import Step
from .step_result import StepResult
from .types import CALL_DEPTH_MARKER
from ..utils.string_utils import repeat

def flatten_calls(step_result: StepResult, depth: int = 0) -> List[StepRecord]:
    """
    Flatten the call tree below a step result.

    The step result's own record is not included.

    Args:
        step_result: Step result whose calls should be flattened
        depth: Nesting depth of the calls made by this step

    Returns:
        Ordered records for every call marker and nested step
    """
    records: List[StepRecord] = []
    _recurse(records, step_result, depth)
    return records

def _recurse(records: List[StepRecord], step_result: StepResult, depth: int) -> None:
    if not step_result.call_results:
        return
    nested_prefix = repeat(CALL_DEPTH_MARKER, depth + 1)
    for call in step_result.call_results:
        marker = Step.call_marker(step_result.step, depth, call.call_name, call.call_arg_pretty)
        records.append(StepResult(marker, Result.passed(0)).to_record())
        for nested in call.step_results:
            records.append(nested.to_record().with_keyword_prefix(nested_prefix))
            _recurse(records, nested, depth + 1)
