"""Feature, background, scenario and tag models.

These are read-only descriptions of the parsed test source. The aggregation
layer only reads names, lines and the feature path from them.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .types import DEFAULT_SCENARIO_KEYWORD

@dataclass(frozen=True)
class Tag:
    """A tag attached to a feature or scenario.

    Attributes:
        name: Tag name without the leading '@'
        line: Source line of the tag
    """
    name: str
    line: int = 0

    @classmethod
    def from_text(cls, text: str, line: int = 0) -> 'Tag':
        """Create a Tag from its source text, with or without the '@'."""
        return cls(name=text[1:] if text.startswith('@') else text, line=line)

    @property
    def text(self) -> str:
        return f"@{self.name}"

def tags_to_result_list(tags: Optional[Sequence[Tag]]) -> List[Dict[str, Any]]:
    """
    Convert tags into the ordered list of tag records used in reports.

    Args:
        tags: Tags to convert, may be None

    Returns:
        List of ``{"name": "@tag", "line": n}`` dictionaries
    """
    if not tags:
        return []
    return [{'name': tag.text, 'line': tag.line} for tag in tags]

@dataclass(frozen=True)
class Background:
    """The shared background block of a feature.

    Attributes:
        line: Source line of the Background keyword
    """
    line: int

@dataclass(frozen=True)
class Feature:
    """A feature file.

    Attributes:
        name: Feature name
        relative_path: Path of the feature file relative to the project root
        line: Source line of the Feature keyword
        description: Free-form description text
        background: Background block, if the feature has one
        tags: Feature level tags
    """
    name: str
    relative_path: str
    line: int = 1
    description: str = ''
    background: Optional[Background] = None
    tags: Optional[Tuple[Tag, ...]] = None

@dataclass(frozen=True)
class Scenario:
    """A single scenario of a feature.

    Attributes:
        feature: The owning feature
        name: Scenario name
        line: Source line of the scenario keyword
        keyword: Keyword text, e.g. 'Scenario' or 'Scenario Outline'
        description: Free-form description text
        tags: Scenario tags in source order
    """
    feature: Feature
    name: str
    line: int
    keyword: str = DEFAULT_SCENARIO_KEYWORD
    description: str = ''
    tags: Optional[Tuple[Tag, ...]] = None
