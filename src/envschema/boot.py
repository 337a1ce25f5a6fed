"""
Application boot hook.

Call boot() once at application startup. It registers the schema manifest
and validates: strictly in production, with warnings elsewhere.
"""
import logging
import os
from pathlib import Path
from typing import Optional, Union

import envschema
from .config import Validator, register_manifest, default_manifest_path

logger = logging.getLogger(__name__)

PRODUCTION = 'production'
ENVIRONMENT_VARIABLES = ('APP_ENV', 'ENVIRONMENT')
DEFAULT_ENVIRONMENT = 'development'


def resolve_environment(environment: Optional[str] = None) -> str:
    """Determine the deployment environment name.

    Precedence: explicit argument, APP_ENV, ENVIRONMENT, then 'development'.
    """
    if environment:
        return environment.strip().lower()
    for name in ENVIRONMENT_VARIABLES:
        value = os.environ.get(name)
        if value and value.strip():
            return value.strip().lower()
    return DEFAULT_ENVIRONMENT


def boot(app_root: Union[str, Path] = None, manifest: Union[str, Path] = None,
         environment: Optional[str] = None, strict: bool = False) -> Validator:
    """Register the schema manifest and validate the environment.

    Args:
        app_root: Application root (default: current working directory)
        manifest: Manifest path; defaults to config/env_schema.yaml under
            app_root, which is skipped silently if absent
        environment: Deployment environment name (see resolve_environment)
        strict: Validate strictly regardless of the environment

    Returns:
        The shared validator

    Raises:
        ManifestError: If an explicit manifest is missing or any manifest is invalid
        ValidationError: If validation fails
    """
    validator = envschema.configure(app_root)

    manifest_path = Path(manifest) if manifest else default_manifest_path(validator.app_root)
    if manifest or manifest_path.exists():
        register_manifest(validator, manifest_path)

    env_name = resolve_environment(environment)
    logger.debug(f"Validating environment for '{env_name}' with {len(validator.registry)} variables")

    if strict or env_name == PRODUCTION:
        validator.validate_strict()
    else:
        validator.validate()
    return validator
