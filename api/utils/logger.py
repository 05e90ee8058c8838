"""
Logging setup for the Fireworks API.

Configures the root logger once from the `logging` config section and hands
out module loggers.
"""

import functools
import logging
import logging.handlers
import sys
import time
from pathlib import Path
from typing import Optional


# Loggers handed out so far, by name
_loggers = {}

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    log_level: str = "INFO",
    log_format: Optional[str] = None,
    date_format: Optional[str] = None,
    log_file: Optional[str] = None,
    max_bytes: int = 10485760,  # 10 MB
    backup_count: int = 5,
    console_enabled: bool = True,
    file_enabled: bool = False
):
    """
    Configure the root logger.

    Args:
        log_level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_format: Log message format
        date_format: Date format for timestamps
        log_file: Path to log file
        max_bytes: Maximum size of log file before rotation
        backup_count: Number of rotated files to keep
        console_enabled: Log to stdout
        file_enabled: Log to `log_file` with rotation

    Example:
        >>> setup_logging(log_level="DEBUG", log_file="data/logs/fireworks.log", file_enabled=True)
    """
    level = getattr(logging, log_level.upper())
    formatter = logging.Formatter(log_format or DEFAULT_FORMAT, datefmt=date_format or DEFAULT_DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if console_enabled:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setLevel(level)
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if file_enabled and log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_file,
            maxBytes=max_bytes,
            backupCount=backup_count,
            encoding='utf-8'
        )
        file_handler.setLevel(logging.DEBUG)  # File gets all messages
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    root_logger.info(f"Logging initialized: level={log_level}, file={'enabled' if file_enabled and log_file else 'disabled'}")


def get_logger(name: str, level: Optional[str] = None) -> logging.Logger:
    """
    Get or create a logger for a module.

    Args:
        name: Logger name (usually __name__)
        level: Optional log level override

    Returns:
        Logger instance
    """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)
    if level:
        logger.setLevel(getattr(logging, level.upper()))

    _loggers[name] = logger
    return logger


def setup_from_config(config):
    """
    Configure logging from a ConfigLoader or a full config dict.

    Args:
        config: ConfigLoader instance or dict with a 'logging' key

    Example:
        >>> from config import get_config
        >>> setup_from_config(get_config())
    """
    if hasattr(config, 'get_section'):
        logging_config = config.get_section('logging')
    elif isinstance(config, dict):
        logging_config = config.get('logging', {})
    else:
        raise TypeError(f"config must be ConfigLoader or dict, got {type(config)}")

    file_config = logging_config.get('file', {})
    console_config = logging_config.get('console', {})

    setup_logging(
        log_level=logging_config.get('level', 'INFO'),
        log_format=logging_config.get('format'),
        date_format=logging_config.get('date_format'),
        log_file=file_config.get('path'),
        max_bytes=file_config.get('max_bytes', 10485760),
        backup_count=file_config.get('backup_count', 5),
        console_enabled=console_config.get('enabled', True),
        file_enabled=file_config.get('enabled', False)
    )

    for module_name, module_level in logging_config.get('loggers', {}).items():
        logging.getLogger(module_name).setLevel(getattr(logging, module_level.upper()))


def log_execution_time(logger: logging.Logger):
    """
    Decorator that logs how long the wrapped call took.

    Failures are logged with their elapsed time and re-raised.

    Args:
        logger: Logger instance

    Example:
        >>> logger = get_logger(__name__)
        >>> @log_execution_time(logger)
        ... def ingest(image_bytes):
        ...     pass
    """
    def decorator(func):
        @functools.wraps(func)
        def wrapper(*args, **kwargs):
            func_name = func.__qualname__
            start_time = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                elapsed = (time.perf_counter() - start_time) * 1000
                logger.warning(f"{func_name} failed after {elapsed:.1f}ms: {e}")
                raise
            elapsed = (time.perf_counter() - start_time) * 1000
            logger.debug(f"{func_name} completed in {elapsed:.1f}ms")
            return result
        return wrapper
    return decorator
