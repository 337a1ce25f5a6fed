"""
Environment validation pipeline.

A Validator owns a schema registry and an environment table. Validation
loads the project's .env file once, reports missing required variables
(as a warning, or an error under strict conditions), then checks every
present typed variable and raises on the first nonconforming value.
"""
import logging
import sys
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO, Union

from .dotenv_loader import load_dotenv_file
from .environ import EnvironmentTable
from .exceptions import InvalidTypeError, MissingVariablesError
from .messages import (
    example_file_exists,
    invalid_type_diagnostic,
    missing_variables_diagnostic,
)
from .models import Scalar, VariableSpec, parse_value
from .registry import SchemaRegistry

logger = logging.getLogger(__name__)

FileLoader = Callable[[EnvironmentTable, Union[str, Path]], Dict[str, str]]


class Validator:
    """Registers environment variables and validates them against the environment.

    Example:
        validator = Validator(Path.cwd())
        validator.register("API_KEY", required=True, strict=True)
        validator.register("PORT", type="integer", default=3000)
        validator.validate()
    """

    def __init__(self, app_root: Union[str, Path] = None, environ: Optional[EnvironmentTable] = None,
                 loader: FileLoader = load_dotenv_file, stream: Optional[TextIO] = None):
        """
        Args:
            app_root: Directory holding the .env file (default: current directory)
            environ: Environment table to validate (default: the process environment)
            loader: Callable that loads the env file into the table
            stream: Diagnostic stream for warnings (default: sys.stderr at write time)
        """
        self.app_root = Path.cwd() if app_root is None else Path(app_root)
        self.environ = environ if environ is not None else EnvironmentTable()
        self.registry = SchemaRegistry(self.environ)
        self.dotenv_loaded = False
        self._loader = loader
        self._stream = stream

    def register(self, key: str, **options) -> VariableSpec:
        """Register a variable. See SchemaRegistry.register for the options."""
        return self.registry.register(key, **options)

    def load(self) -> None:
        """Load the .env file into the environment table if not done yet."""
        if self.dotenv_loaded:
            return
        self._loader(self.environ, self.app_root)
        self.dotenv_loaded = True

    def validate(self, strict: bool = False) -> None:
        """Validate all registered variables.

        Args:
            strict: Treat every missing required variable as an error

        Raises:
            MissingVariablesError: If required variables are missing and either
                ``strict`` is set or any missing variable is itself strict
            InvalidTypeError: If a present value does not match its declared type
        """
        self.load()
        self._check_missing(strict)
        self._check_types()

    def validate_strict(self) -> None:
        """Validate with every missing required variable treated as an error."""
        self.validate(strict=True)

    def missing(self) -> List[VariableSpec]:
        return [spec for spec in self.registry if spec.required and spec.key not in self.environ]

    def invalid(self) -> List[VariableSpec]:
        return [
            spec for spec in self.registry
            if spec.type is not None and spec.key in self.environ and not spec.conforms(self.environ[spec.key])
        ]

    def get(self, key: str) -> Optional[Scalar]:
        """Return the typed value of a registered variable, or None if unset.

        Raises:
            KeyError: If ``key`` was never registered
            TypeMismatch: If the value does not conform to the declared type
        """
        spec = self.registry.get(key)
        if spec is None:
            raise KeyError(key)
        raw = self.environ.get(key)
        if raw is None:
            return None
        return parse_value(spec.type, raw)

    def _check_missing(self, strict: bool) -> None:
        missing = self.missing()
        if not missing:
            return

        diagnostic = missing_variables_diagnostic(missing, example_file_exists())
        if strict or any(spec.strict for spec in missing):
            raise MissingVariablesError(diagnostic, [spec.key for spec in missing])

        logger.debug(f"{len(missing)} required variables missing, warning only")
        stream = self._stream or sys.stderr
        color = hasattr(stream, "isatty") and stream.isatty()
        print(diagnostic.render(color=color), file=stream)

    def _check_types(self) -> None:
        invalid = self.invalid()
        if not invalid:
            return

        # Only the first offender is reported
        spec = invalid[0]
        raise InvalidTypeError(
            invalid_type_diagnostic(spec),
            key=spec.key,
            expected=spec.type.value,
            value=self.environ[spec.key]
        )
