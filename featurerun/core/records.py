"""Export records consumed by report renderers.

Each record is an immutable snapshot of one exported element. ``to_dict``
produces the cucumber-compatible mapping that report renderers read; the
field set of each mapping is fixed.
"""

from dataclasses import dataclass, field, replace
from typing import Any, Dict, List, Optional, Tuple

from .types import (
    BACKGROUND_KEYWORD,
    BACKGROUND_TYPE,
    FEATURE_KEYWORD,
    SCENARIO_TYPE,
    STEP_MATCH_LOCATION
)

@dataclass(frozen=True)
class StepRecord:
    """Exported form of a single step result.

    Attributes:
        line: Source line of the step
        keyword: Step keyword, prefixed with '>' markers when the step ran inside a call
        name: Step text
        result: Result mapping with status, duration and optional error_message
        doc_string: Doc string and step log text, if any
    """
    line: int
    keyword: str
    name: str
    result: Dict[str, Any]
    doc_string: Optional[str] = None

    def with_keyword_prefix(self, prefix: str) -> 'StepRecord':
        """Return a copy whose keyword reads '<prefix> <keyword>'."""
        return replace(self, keyword=f"{prefix} {self.keyword}")

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'line': self.line,
            'keyword': self.keyword,
            'name': self.name,
            'result': dict(self.result),
            'match': {'location': STEP_MATCH_LOCATION, 'arguments': []}
        }
        if self.doc_string:
            data['doc_string'] = {
                'content_type': '',
                'value': self.doc_string,
                'line': self.line
            }
        return data

@dataclass(frozen=True)
class ScenarioRecord:
    """Exported form of the foreground part of a scenario.

    Attributes:
        name: Scenario name
        steps: Flattened foreground step records
        line: Source line of the scenario
        id: Identifier derived from the name
        description: Scenario description
        keyword: Scenario keyword text
        tags: Tag records, None when the scenario has no tags
    """
    name: str
    steps: Tuple[StepRecord, ...]
    line: int
    id: str
    description: str
    keyword: str
    tags: Optional[List[Dict[str, Any]]] = None
    type: str = field(default=SCENARIO_TYPE, init=False)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'name': self.name,
            'steps': [step.to_dict() for step in self.steps],
            'line': self.line,
            'id': self.id,
            'description': self.description,
            'type': self.type,
            'keyword': self.keyword
        }
        if self.tags is not None:
            data['tags'] = [dict(tag) for tag in self.tags]
        return data

@dataclass(frozen=True)
class BackgroundRecord:
    """Exported form of the background steps of one scenario run.

    Attributes:
        steps: Flattened background step records
        line: Source line of the feature background, None if the feature has none
    """
    steps: Tuple[StepRecord, ...]
    line: Optional[int]
    name: str = field(default='', init=False)
    description: str = field(default='', init=False)
    type: str = field(default=BACKGROUND_TYPE, init=False)
    keyword: str = field(default=BACKGROUND_KEYWORD, init=False)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'name': self.name,
            'steps': [step.to_dict() for step in self.steps],
            'line': self.line,
            'description': self.description,
            'type': self.type,
            'keyword': self.keyword
        }

@dataclass(frozen=True)
class FeatureRecord:
    """Exported form of a whole feature run.

    Attributes:
        name: Feature name
        uri: Feature path relative to the project root
        line: Source line of the feature keyword
        id: Identifier derived from the name
        description: Feature description
        elements: Background and scenario records, in execution order
        tags: Tag records, None when the feature has no tags
    """
    name: str
    uri: str
    line: int
    id: str
    description: str
    elements: Tuple[Any, ...]
    tags: Optional[List[Dict[str, Any]]] = None
    keyword: str = field(default=FEATURE_KEYWORD, init=False)

    def to_dict(self) -> Dict[str, Any]:
        data = {
            'keyword': self.keyword,
            'name': self.name,
            'id': self.id,
            'uri': self.uri,
            'line': self.line,
            'description': self.description,
            'elements': [element.to_dict() for element in self.elements]
        }
        if self.tags is not None:
            data['tags'] = [dict(tag) for tag in self.tags]
        return data
