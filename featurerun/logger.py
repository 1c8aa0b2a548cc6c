"""
Logging utility for featurerun.
"""
import logging
from datetime import datetime
from rich.console import Console
from rich.logging import RichHandler

from .config import get_config
from .core.errors import ConfigurationError
from .core.types import DEFAULT_LOG_LEVEL

console = Console()

def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the specified name.

    An invalid configured log level falls back to the default level with a
    warning, so importing featurerun never fails on a bad environment.

    Args:
        name: The name of the logger

    Returns:
        A configured logger instance
    """
    logger = logging.getLogger(f"featurerun.{name}")
    logger.setLevel(logging.DEBUG)

    # Add rich handler for console output if no handlers exist
    if not logger.handlers:
        config = get_config()
        try:
            level = config.log_level
            level_error = None
        except ConfigurationError as e:
            level = DEFAULT_LOG_LEVEL
            level_error = e
        console_handler = RichHandler(console=console)
        console_handler.setLevel(level)
        logger.addHandler(console_handler)
        if level_error is not None:
            logger.warning(f"{level_error.message}. Using {DEFAULT_LOG_LEVEL}")

        # Add file handler for detailed logs
        output_dir = config.log_dir
        if output_dir is not None:
            output_dir.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            log_file = output_dir / f"{name}_{timestamp}.log"
            file_handler = logging.FileHandler(log_file)
            file_handler.setLevel(logging.DEBUG)
            logger.addHandler(file_handler)

    return logger
