"""
Loading of ``.env`` files into an environment table.
"""
import logging
from pathlib import Path
from typing import Dict, Union

from dotenv import dotenv_values

from .environ import EnvironmentTable

logger = logging.getLogger(__name__)

DOTENV_FILENAME = ".env"


def load_dotenv_file(environ: EnvironmentTable, app_root: Union[str, Path],
                     filename: str = DOTENV_FILENAME) -> Dict[str, str]:
    """Load ``<app_root>/<filename>`` into the environment table without override.

    Keys already present in the table are left alone. Keys declared without
    a value are skipped. A missing file is not an error.

    Args:
        environ: Table to populate
        app_root: Directory containing the env file
        filename: Env file name (default: .env)

    Returns:
        The variables actually written to the table
    """
    dotenv_path = Path(app_root) / filename
    if not dotenv_path.is_file():
        logger.debug(f"No env file at {dotenv_path}, skipping")
        return {}

    written = {}
    for key, value in dotenv_values(dotenv_path).items():
        if value is None:
            continue
        if environ.setdefault(key, value):
            written[key] = value

    logger.debug(f"Loaded {len(written)} variables from {dotenv_path}")
    return written
