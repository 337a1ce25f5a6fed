"""
envschema: declare, load and validate environment variables.

Module-level functions delegate to a single Validator created lazily for
the current working directory:

    import envschema

    envschema.register("DATABASE_URL", required=True, strict=True)
    envschema.register("PORT", type="integer", default=3000)
    envschema.validate()
"""
from pathlib import Path
from typing import Optional, Union

from .config import (
    EnvironmentTable,
    EnvSchemaError,
    InvalidVariableTypeError,
    InvalidVariableOptionsError,
    ValidationError,
    MissingVariablesError,
    InvalidTypeError,
    ManifestError,
    VariableSpec,
    VariableType,
    Validator
)

__version__ = '0.1.0'

_validator: Optional[Validator] = None


def configure(app_root: Union[str, Path] = None, environ: Optional[EnvironmentTable] = None) -> Validator:
    """Create the shared validator if needed and return it.

    ``app_root`` and ``environ`` only take effect when the validator is
    created; call reset() first to rebind an existing one.
    """
    global _validator
    if _validator is None:
        _validator = Validator(app_root, environ=environ)
    return _validator


def get_validator() -> Validator:
    return configure()


def reset() -> None:
    """Discard the shared validator and its registry."""
    global _validator
    _validator = None


def register(key: str, **options) -> VariableSpec:
    """Register an environment variable with the shared validator.

    Options: type, required, strict, default, description.
    """
    return get_validator().register(key, **options)


def load() -> None:
    get_validator().load()


def validate() -> None:
    """Validate registered variables; missing ones warn unless marked strict."""
    get_validator().validate()


def validate_strict() -> None:
    """Validate registered variables; any missing required variable is an error."""
    get_validator().validate_strict()


__all__ = [
    'configure',
    'get_validator',
    'reset',
    'register',
    'load',
    'validate',
    'validate_strict',
    'EnvironmentTable',
    'EnvSchemaError',
    'InvalidVariableTypeError',
    'InvalidVariableOptionsError',
    'ValidationError',
    'MissingVariablesError',
    'InvalidTypeError',
    'ManifestError',
    'VariableSpec',
    'VariableType',
    'Validator'
]
