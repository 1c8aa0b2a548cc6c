"""Loading of recorded feature runs.

This module rebuilds a FeatureResult from a recorded run stored as YAML or
JSON, so reports can be produced after the fact. Nested feature calls are
loaded recursively.

Example file::

    feature:
      name: Users API
      path: features/users.feature
      background: {line: 3}
    scenarios:
      - name: create user
        line: 8
        tags: ['@smoke']
        steps:
          - {line: 4, keyword: Given, text: url baseUrl, background: true, duration: 1200}
          - line: 9
            keyword: When
            text: call read('auth.feature')
            duration: 5400
            calls:
              - name: auth.feature
                arg: {user: admin}
                scenarios: [...]
          - {line: 10, keyword: Then, text: status 201, status: failed, error: expected 201 but was 500}
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional

import yaml

from .errors import RecordedStepError, ResultLoadError
from .feature import Background, Feature, Scenario, Tag
from .feature_result import FeatureResult
from .result import Result
from .scenario_result import ScenarioResult
from .step import Step
from .step_result import StepResult
from .types import DEFAULT_SCENARIO_KEYWORD, ERROR_STEP_PREFIX, StepStatus
from ..logger import get_logger

logger = get_logger("loader")

@dataclass
class ValidationRule:
    """A validation rule for a recorded field.

    Attributes:
        field: The field name to validate
        required: Whether the field is required
        type: The expected type of the field
        validator: Optional check that raises ValueError for a bad value
    """
    field: str
    required: bool = True
    type: Optional[type] = None
    validator: Optional[Callable[[Any], None]] = None

def _non_negative(value: int) -> None:
    if value < 0:
        raise ValueError(f"must not be negative, got {value}")

FEATURE_RULES = [
    ValidationRule('name', type=str),
    ValidationRule('path', type=str),
    ValidationRule('line', required=False, type=int),
    ValidationRule('description', required=False, type=str),
    ValidationRule('tags', required=False, type=list),
    ValidationRule('background', required=False, type=dict)
]

SCENARIO_RULES = [
    ValidationRule('name', type=str),
    ValidationRule('line', type=int),
    ValidationRule('keyword', required=False, type=str),
    ValidationRule('description', required=False, type=str),
    ValidationRule('tags', required=False, type=list),
    ValidationRule('thread', required=False, type=str),
    ValidationRule('start_time', required=False, type=int, validator=_non_negative),
    ValidationRule('end_time', required=False, type=int, validator=_non_negative),
    ValidationRule('steps', required=False, type=list),
    ValidationRule('failure', required=False, type=dict)
]

STEP_RULES = [
    ValidationRule('line', type=int),
    ValidationRule('text', type=str),
    ValidationRule('keyword', required=False, type=str),
    ValidationRule('background', required=False, type=bool),
    ValidationRule('status', required=False, type=str),
    ValidationRule('duration', required=False, type=int, validator=_non_negative),
    ValidationRule('doc_string', required=False, type=str),
    ValidationRule('log', required=False, type=str),
    ValidationRule('error', required=False, type=str),
    ValidationRule('calls', required=False, type=list)
]

CALL_RULES = [
    ValidationRule('name', required=False, type=str),
    ValidationRule('arg', required=False, type=dict),
    ValidationRule('feature', required=False, type=dict),
    ValidationRule('scenarios', type=list)
]

FAILURE_RULES = [
    ValidationRule('message', type=str),
    ValidationRule('error', required=False, type=str)
]

class ResultLoader:
    """Loads recorded feature runs into FeatureResult objects."""

    def load_from_file(self, path: Path) -> FeatureResult:
        """Load a recorded run from a YAML or JSON file.

        Args:
            path: Path to the recorded run

        Returns:
            The rebuilt feature result

        Raises:
            ResultLoadError: If the file cannot be read or is invalid
        """
        path = Path(path)
        logger.info(f"Loading recorded results from {path}")
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except OSError as e:
            raise ResultLoadError(f"Failed to read result file: {str(e)}", {"path": str(path)}) from e
        except yaml.YAMLError as e:
            raise ResultLoadError(f"Invalid YAML in result file: {str(e)}", {"path": str(path)}) from e

        feature_result = self.parse(data)
        logger.info(
            f"Loaded {feature_result.scenario_count} scenario(s) "
            f"from {feature_result.feature.relative_path}"
        )
        return feature_result

    def parse(self, data: Any) -> FeatureResult:
        """Build a feature result from already parsed data.

        Args:
            data: Mapping with 'feature' and 'scenarios' entries

        Returns:
            The rebuilt feature result

        Raises:
            ResultLoadError: If the data is invalid
        """
        return self._parse_feature_result(data, 'root')

    def _parse_feature_result(
        self,
        data: Any,
        location: str,
        call_name: Optional[str] = None,
        call_arg: Optional[Dict[str, Any]] = None,
        default_feature: Optional[Feature] = None
    ) -> FeatureResult:
        if not isinstance(data, dict):
            raise ResultLoadError(
                "Invalid result format: expected a dictionary",
                {"path": location}
            )
        if 'feature' in data:
            self._validate(data, [ValidationRule('feature', type=dict)], location)
            feature = self._parse_feature(data['feature'], f"{location}.feature")
        elif default_feature is not None:
            feature = default_feature
        else:
            raise ResultLoadError("Missing required fields: feature", {"path": location})

        self._validate(data, [ValidationRule('scenarios', type=list)], location)
        feature_result = FeatureResult(feature, call_name=call_name, call_arg=call_arg)
        for index, scenario_data in enumerate(data['scenarios']):
            scenario_location = f"{location}.scenarios[{index}]"
            feature_result.add_result(self._parse_scenario(scenario_data, feature, scenario_location))
        return feature_result

    def _parse_feature(self, data: Dict[str, Any], location: str) -> Feature:
        self._validate(data, FEATURE_RULES, location)
        background = None
        if 'background' in data:
            self._validate(data['background'], [ValidationRule('line', type=int)], f"{location}.background")
            background = Background(line=data['background']['line'])
        return Feature(
            name=data['name'],
            relative_path=data['path'],
            line=data.get('line', 1),
            description=data.get('description', ''),
            background=background,
            tags=self._parse_tags(data.get('tags'), location)
        )

    def _parse_scenario(self, data: Any, feature: Feature, location: str) -> ScenarioResult:
        self._validate(data, SCENARIO_RULES, location)
        scenario = Scenario(
            feature=feature,
            name=data['name'],
            line=data['line'],
            keyword=data.get('keyword', DEFAULT_SCENARIO_KEYWORD),
            description=data.get('description', ''),
            tags=self._parse_tags(data.get('tags'), location)
        )
        result = ScenarioResult(scenario)
        result.thread_name = data.get('thread')
        result.start_time = data.get('start_time', 0)
        result.end_time = data.get('end_time', 0)
        for index, step_data in enumerate(data.get('steps', [])):
            result.add_step_result(self._parse_step(step_data, scenario, f"{location}.steps[{index}]"))

        if 'failure' in data:
            failure = data['failure']
            self._validate(failure, FAILURE_RULES, f"{location}.failure")
            error = RecordedStepError(failure.get('error', failure['message']))
            result.add_error(failure['message'], error)
        return result

    def _parse_step(self, data: Any, scenario: Scenario, location: str) -> StepResult:
        self._validate(data, STEP_RULES, location)
        step = Step(
            line=data['line'],
            prefix=data.get('keyword', ERROR_STEP_PREFIX),
            text=data['text'],
            doc_string=data.get('doc_string'),
            background=data.get('background', False),
            scenario=scenario
        )

        error_text = data.get('error')
        status_text = data.get('status', StepStatus.FAILED.value if error_text else StepStatus.PASSED.value)
        try:
            status = StepStatus.from_str(status_text)
        except ValueError as e:
            raise ResultLoadError(str(e), {"path": location}) from e

        duration = data.get('duration', 0)
        error = RecordedStepError(error_text) if error_text else None
        result = Result(status=status, duration_nanos=duration, error=error)

        call_results = None
        if data.get('calls'):
            call_results = [
                self._parse_call(call_data, f"{location}.calls[{index}]")
                for index, call_data in enumerate(data['calls'])
            ]
        return StepResult(step, result, call_results=call_results, step_log=data.get('log'))

    def _parse_call(self, data: Any, location: str) -> FeatureResult:
        self._validate(data, CALL_RULES, location)
        call_name = data.get('name')
        if 'feature' not in data and not call_name:
            raise ResultLoadError(
                "Call must have a 'name' or a 'feature' entry",
                {"path": location}
            )
        default_feature = None if 'feature' in data else Feature(name=call_name, relative_path=call_name)
        return self._parse_feature_result(
            data,
            location,
            call_name=call_name,
            call_arg=data.get('arg'),
            default_feature=default_feature
        )

    def _parse_tags(self, tags: Optional[List[Any]], location: str) -> Optional[tuple]:
        if not tags:
            return None
        parsed = []
        for tag in tags:
            if not isinstance(tag, str):
                raise ResultLoadError(
                    f"Invalid tag: {tag!r}, expected a string",
                    {"path": location}
                )
            parsed.append(Tag.from_text(tag))
        return tuple(parsed)

    def _validate(self, data: Any, rules: List[ValidationRule], location: str) -> None:
        """Check required fields, field types and field values.

        Raises:
            ResultLoadError: If a required field is missing, has the wrong type or fails its validator
        """
        if not isinstance(data, dict):
            raise ResultLoadError(
                "Invalid result format: expected a dictionary",
                {"path": location, "data": data}
            )

        missing_fields = [
            rule.field for rule in rules
            if rule.required and rule.field not in data
        ]
        if missing_fields:
            raise ResultLoadError(
                f"Missing required fields: {', '.join(missing_fields)}",
                {"path": location, "missing_fields": missing_fields}
            )

        type_errors = []
        for rule in rules:
            if rule.type is None or rule.field not in data:
                continue
            value = data[rule.field]
            # bool is an int subclass, reject it for numeric fields
            if isinstance(value, bool) and rule.type is not bool:
                type_errors.append(f"{rule.field} must be {rule.type.__name__}")
            elif not isinstance(value, rule.type):
                type_errors.append(f"{rule.field} must be {rule.type.__name__}")
        if type_errors:
            raise ResultLoadError(
                f"Type validation errors: {', '.join(type_errors)}",
                {"path": location, "type_errors": type_errors}
            )

        value_errors = []
        for rule in rules:
            if rule.field in data and rule.validator is not None:
                try:
                    rule.validator(data[rule.field])
                except ValueError as e:
                    value_errors.append(f"{rule.field} {str(e)}")
        if value_errors:
            raise ResultLoadError(
                f"Value validation errors: {', '.join(value_errors)}",
                {"path": location, "value_errors": value_errors}
            )
