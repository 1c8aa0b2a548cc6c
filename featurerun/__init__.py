"""featurerun - result aggregation and reporting for behavior-driven test runs."""

from .core.types import StepStatus
from .core.feature import Background, Feature, Scenario, Tag, tags_to_result_list
from .core.step import Step
from .core.result import Result
from .core.step_result import StepResult
from .core.records import BackgroundRecord, FeatureRecord, ScenarioRecord, StepRecord
from .core.flatten import flatten_calls
from .core.scenario_result import ScenarioResult
from .core.feature_result import FeatureResult
from .core.loader import ResultLoader
from .utils.string_utils import to_id_string

__version__ = "0.1.0"

__all__ = [
    'StepStatus',
    'Background',
    'Feature',
    'Scenario',
    'Tag',
    'tags_to_result_list',
    'Step',
    'Result',
    'StepResult',
    'BackgroundRecord',
    'FeatureRecord',
    'ScenarioRecord',
    'StepRecord',
    'flatten_calls',
    'ScenarioResult',
    'FeatureResult',
    'ResultLoader',
    'to_id_string',
]
