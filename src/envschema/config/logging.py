"""
Centralized logging configuration.

bootstrap_logging configures logging for CLI entry points, using a
logging.ini in the working directory when present and basic stderr
logging otherwise.
"""
import logging
import logging.config
import os
import sys
from pathlib import Path
from typing import Optional

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
DEFAULT_FORMAT = '%(levelname)s: %(name)s: %(message)s'


def _find_logging_config() -> Optional[Path]:
    """Find logging.ini in the current working directory or its config/ subdirectory."""
    for candidate in (Path('logging.ini'), Path('config') / 'logging.ini'):
        if candidate.exists():
            return candidate
    return None


def _resolve_log_level(debug: bool = False) -> str:
    """Resolve the effective level from the debug flag and LOG_LEVEL."""
    if debug:
        return 'DEBUG'

    log_level = os.environ.get('LOG_LEVEL', 'WARNING').strip().upper()
    if log_level not in LOG_LEVELS:
        print(f"Warning: Invalid LOG_LEVEL '{log_level}', using INFO", file=sys.stderr)
        return 'INFO'
    return log_level


def bootstrap_logging(debug: bool = False) -> None:
    """
    Bootstrap logging configuration.

    This function:
    1. Resolves the level from --debug or the LOG_LEVEL environment variable
    2. Loads logging.ini with logging.config.fileConfig() if one is found
    3. Falls back to basicConfig on stderr otherwise, or if the INI is invalid
    4. Applies the resolved level to the envschema logger

    Args:
        debug: Force DEBUG level regardless of LOG_LEVEL
    """
    level = _resolve_log_level(debug)
    config_path = _find_logging_config()

    if config_path is not None:
        try:
            logging.config.fileConfig(str(config_path), disable_existing_loggers=False)
        except Exception as e:
            print(f"Warning: Failed to load logging config from {config_path}: {e}", file=sys.stderr)
            config_path = None

    if config_path is None:
        logging.basicConfig(level=getattr(logging, level), format=DEFAULT_FORMAT, stream=sys.stderr)

    logging.getLogger('envschema').setLevel(getattr(logging, level))
    logging.getLogger(__name__).debug(f"Logging configured at {level}" + (f" from {config_path}" if config_path else ""))
