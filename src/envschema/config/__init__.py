"""
Environment schema registration and validation.
"""

from .environ import EnvironmentTable
from .exceptions import (
    EnvSchemaError,
    InvalidVariableTypeError,
    InvalidVariableOptionsError,
    ValidationError,
    MissingVariablesError,
    InvalidTypeError,
    ManifestError
)
from .manifest import load_manifest, register_manifest, default_manifest_path
from .models import VariableSpec, VariableType, TypeMismatch, parse_value
from .registry import SchemaRegistry
from .validator import Validator

__all__ = [
    'EnvironmentTable',
    'EnvSchemaError',
    'InvalidVariableTypeError',
    'InvalidVariableOptionsError',
    'ValidationError',
    'MissingVariablesError',
    'InvalidTypeError',
    'ManifestError',
    'load_manifest',
    'register_manifest',
    'default_manifest_path',
    'VariableSpec',
    'VariableType',
    'TypeMismatch',
    'parse_value',
    'SchemaRegistry',
    'Validator'
]
