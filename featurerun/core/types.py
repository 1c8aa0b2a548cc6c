"""Enums and constants for scenario results.

This module defines the status values and fixed export constants used
throughout the result aggregation layer.

The module provides:
- StepStatus: Enum for step outcome statuses
- STATUS_EMOJI: Mapping of status values to emoji representations
- Type and keyword constants for exported records
- Presentation markers for synthetic steps

Example:
    >>> from featurerun.core.types import StepStatus
    >>> status = StepStatus.PASSED
    >>> print(f"Status: {status.value}")
    Status: passed
"""

from enum import Enum
from typing import Dict, Final

class StepStatus(str, Enum):
    """Enum for step outcome values.
    
    Attributes:
        PASSED: Step completed successfully
        FAILED: Step failed or raised an error
        SKIPPED: Step was not executed
        
    Example:
        >>> status = StepStatus.from_str("Failed")
        >>> print(status.value)  # failed
    """
    PASSED = 'passed'
    FAILED = 'failed'
    SKIPPED = 'skipped'

    @classmethod
    def from_str(cls, value: str) -> 'StepStatus':
        """Convert string to StepStatus enum.
        
        Args:
            value: String value to convert (case-insensitive)
            
        Returns:
            StepStatus enum value
            
        Raises:
            ValueError: If value is not a valid status
        """
        try:
            return cls(value.lower())
        except (ValueError, AttributeError):
            valid_values = [s.value for s in cls]
            raise ValueError(
                f"Invalid step status: {value}. "
                f"Must be one of {valid_values}"
            )

# Emoji mapping for step statuses
STATUS_EMOJI: Final[Dict[str, str]] = {
    StepStatus.PASSED.value: '✅',
    StepStatus.FAILED.value: '❌',
    StepStatus.SKIPPED.value: '⏭️',
    'unknown': '❓'
}

# Fixed values of exported records
SCENARIO_TYPE: Final[str] = 'scenario'
BACKGROUND_TYPE: Final[str] = 'background'
BACKGROUND_KEYWORD: Final[str] = 'Background'
FEATURE_KEYWORD: Final[str] = 'Feature'
DEFAULT_SCENARIO_KEYWORD: Final[str] = 'Scenario'

# Presentation markers for synthetic steps
ERROR_STEP_PREFIX: Final[str] = '*'
CALL_DEPTH_MARKER: Final[str] = '>'

# Placeholder step location expected by cucumber-style report renderers
STEP_MATCH_LOCATION: Final[str] = 'featurerun'

# Default values for configuration
DEFAULT_REPORT_DIR: Final[str] = 'test-results'
DEFAULT_LOG_LEVEL: Final[str] = 'INFO'
