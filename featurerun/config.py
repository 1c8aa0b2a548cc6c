"""
Configuration module for featurerun.
"""
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Any
from dotenv import load_dotenv

from .core.errors import ConfigurationError
from .core.types import DEFAULT_LOG_LEVEL, DEFAULT_REPORT_DIR

logger = logging.getLogger(__name__)

_VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')

class Config:
    """Configuration manager for featurerun."""
    _instance = None

    def __new__(cls, *args, **kwargs):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, env_file: Optional[str] = None):
        if not hasattr(self, 'initialized'):
            self.env_file = env_file or '.env'
            self.explicit_env_file = env_file is not None
            self._config = {}
            self._load_env()
            self.initialized = True

    def _load_env(self):
        """Load environment variables from .env file."""
        logger.debug(f"Looking for env file: {self.env_file}")

        if self.explicit_env_file and not os.path.exists(self.env_file):
            raise ConfigurationError(
                f"Environment file not found: {self.env_file}",
                {"env_file": self.env_file}
            )

        # First try to load from the explicitly set env file path
        if os.path.exists(self.env_file):
            logger.debug(f"Loading from explicit path: {self.env_file}")
            load_dotenv(self.env_file, override=True)
            return

        # Look for .env file in current directory and parent directories
        current_dir = Path.cwd()
        while current_dir != current_dir.parent:
            potential_path = current_dir / self.env_file
            if potential_path.exists():
                logger.debug(f"Found env file at: {potential_path}")
                load_dotenv(potential_path, override=True)
                return
            current_dir = current_dir.parent

        # Fall back to the user's home directory
        home_env = Path.home() / '.featurerun' / '.env'
        if home_env.exists():
            logger.debug(f"Loading from home directory: {home_env}")
            load_dotenv(home_env, override=True)

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: The configuration key to get
            default: Default value if key is not found

        Returns:
            The configuration value or default
        """
        return self._config.get(key, default)

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value.

        Args:
            key: The configuration key to set
            value: The value to set
        """
        self._config[key] = value

    def update(self, config_dict: Dict[str, Any]) -> None:
        """
        Update configuration with a dictionary of values.

        Args:
            config_dict: Dictionary of configuration values
        """
        self._config.update(config_dict)

    @property
    def report_dir(self) -> Path:
        """Directory reports are written to."""
        return Path(self.get('report_dir') or os.getenv('FEATURERUN_REPORT_DIR') or DEFAULT_REPORT_DIR)

    @property
    def log_dir(self) -> Optional[Path]:
        """Directory for log files, None disables file logging."""
        value = self.get('log_dir') or os.getenv('FEATURERUN_LOG_DIR')
        return Path(value) if value else None

    @property
    def log_level(self) -> str:
        """Console log level name."""
        level = str(self.get('log_level') or os.getenv('FEATURERUN_LOG_LEVEL') or DEFAULT_LOG_LEVEL).upper()
        if level not in _VALID_LOG_LEVELS:
            raise ConfigurationError(
                f"Invalid log level: {level}. Must be one of {list(_VALID_LOG_LEVELS)}",
                {"log_level": level}
            )
        return level

def get_config(env_file: Optional[str] = None) -> Config:
    """
    Get the singleton Config instance.

    Args:
        env_file: Optional path to .env file

    Returns:
        Config: The singleton configuration instance
    """
    return Config(env_file)
