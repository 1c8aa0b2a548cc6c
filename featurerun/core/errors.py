"""Error types for result aggregation and reporting.

This module defines the custom exceptions used by the loader, the report
writer and the CLI. The aggregation core itself never raises: step failures
are recorded as data on the scenario result.
"""

from typing import Optional, Any

class FeatureRunError(Exception):
    """Base class for all featurerun errors.
    
    Attributes:
        message: A descriptive error message
        details: Optional additional error details
    """
    
    def __init__(self, message: str, details: Optional[Any] = None):
        """Initialize a new FeatureRunError.
        
        Args:
            message: A descriptive error message
            details: Optional additional error details
        """
        self.message = message
        self.details = details
        super().__init__(self.message)

class ConfigurationError(FeatureRunError):
    """Error raised when there is a problem with configuration.
    
    This error is raised when:
    - An environment file given explicitly does not exist
    - A configuration value cannot be interpreted
    
    Example:
        >>> raise ConfigurationError("Invalid log level", {"value": "LOUD"})
    """
    pass

class ResultLoadError(FeatureRunError):
    """Error raised when a recorded result file cannot be loaded.
    
    This error is raised when:
    - The file is missing or is not valid YAML/JSON
    - Required fields are missing or have the wrong type
    - A step status is not recognised
    
    Example:
        >>> raise ResultLoadError("Missing required fields: name", {"path": "scenarios[0]"})
    """
    pass

class ReportGenerationError(FeatureRunError):
    """Error raised when report generation fails.
    
    Example:
        >>> raise ReportGenerationError("Failed to write report to file", {"file_path": "report.json"})
    """
    pass

class RecordedStepError(FeatureRunError):
    """A step failure replayed from a recorded result file.
    
    Recorded runs only carry the failure text, so this stands in for the
    exception originally raised by the step.
    """
    pass
