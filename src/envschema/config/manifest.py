"""
Schema manifest loader.

Lets an application declare its environment variables in YAML instead of
code. The manifest is a ``variables`` mapping from name to options:

    variables:
      DATABASE_URL:
        required: true
        strict: true
        description: PostgreSQL connection URL
      PORT:
        type: integer
        default: 3000
"""
import logging
from pathlib import Path
from typing import List, Union

import yaml
from pydantic import ValidationError as PydanticValidationError

from .exceptions import InvalidVariableTypeError, ManifestError
from .models import VariableSpec, VariableType

logger = logging.getLogger(__name__)

DEFAULT_MANIFEST_PATH = Path("config") / "env_schema.yaml"

ALLOWED_OPTIONS = {"type", "required", "strict", "default", "description"}


def default_manifest_path(app_root: Union[str, Path] = None) -> Path:
    """Get the conventional manifest location under ``app_root`` (default: cwd)."""
    root = Path.cwd() if app_root is None else Path(app_root)
    return root / DEFAULT_MANIFEST_PATH


def load_manifest(path: Union[str, Path]) -> List[VariableSpec]:
    """Load variable specs from a YAML manifest, preserving declaration order."""
    manifest_path = Path(path)

    if not manifest_path.exists():
        raise ManifestError(f"Schema manifest not found: {manifest_path}", path=manifest_path)

    try:
        with open(manifest_path, 'r') as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ManifestError(f"Invalid YAML in schema manifest {manifest_path}: {e}", path=manifest_path) from e

    if not isinstance(data, dict) or 'variables' not in data:
        raise ManifestError(f"Invalid schema manifest: missing 'variables' key in {manifest_path}", path=manifest_path)

    variables = data['variables'] or {}
    if not isinstance(variables, dict):
        raise ManifestError(f"'variables' must be a mapping in {manifest_path}", path=manifest_path)

    specs = []
    for name, options in variables.items():
        options = options or {}
        if not isinstance(options, dict):
            raise ManifestError(f"Options for '{name}' must be a mapping in {manifest_path}", path=manifest_path)

        unknown = set(options) - ALLOWED_OPTIONS
        if unknown:
            raise ManifestError(
                f"Unknown options for '{name}': {', '.join(sorted(unknown))}. "
                f"Allowed options: {', '.join(sorted(ALLOWED_OPTIONS))}",
                path=manifest_path
            )

        try:
            var_type = VariableType.parse(options['type'], variable_name=str(name)) if options.get('type') is not None else None
        except InvalidVariableTypeError as e:
            raise ManifestError(f"{e} (variable '{name}' in {manifest_path})", path=manifest_path) from e

        try:
            spec = VariableSpec(
                key=str(name),
                type=var_type,
                required=options.get('required', False),
                strict=options.get('strict', False),
                default=options.get('default'),
                description=options.get('description')
            )
        except PydanticValidationError as e:
            raise ManifestError(f"Invalid options for '{name}' in {manifest_path}: {e}", path=manifest_path) from e
        specs.append(spec)

    logger.debug(f"Loaded {len(specs)} variables from {manifest_path}")
    return specs


def register_manifest(validator, path: Union[str, Path]) -> List[VariableSpec]:
    """Register every variable declared in a manifest with ``validator``."""
    return [validator.registry.add(spec) for spec in load_manifest(path)]
