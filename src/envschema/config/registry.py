"""
Schema registry: the ordered set of registered variable specs.
"""
import logging
from typing import Dict, Iterator, Optional

from pydantic import ValidationError as PydanticValidationError

from .environ import EnvironmentTable
from .exceptions import InvalidVariableOptionsError
from .models import Scalar, VariableSpec, VariableType, stringify

logger = logging.getLogger(__name__)


class SchemaRegistry:
    """Ordered mapping from variable name to its VariableSpec.

    Registration validates the declared type, applies any default to the
    environment table, and stores the VariableSpec (re-registering a key replaces it).
    """

    def __init__(self, environ: EnvironmentTable):
        self._environ = environ
        self._specs: Dict[str, VariableSpec] = {}

    def register(self, key: str, type=None, required: bool = False, strict: bool = False,
                 default: Optional[Scalar] = None, description: Optional[str] = None) -> VariableSpec:
        """Register an environment variable.

        Args:
            key: Environment variable name
            type: One of string, integer, boolean, float (case-insensitive)
            required: Whether the variable must be present
            strict: Escalate this variable's absence to an error
            default: Value written to the environment if the key is unset
            description: Human-readable purpose, shown in diagnostics

        Returns:
            The stored VariableSpec

        Raises:
            InvalidVariableTypeError: If ``type`` is not a recognised type
            InvalidVariableOptionsError: If any other option has an unusable value
            ValueError: If ``key`` is empty
        """
        if not key or not str(key).strip():
            raise ValueError("Environment variable name cannot be empty")

        var_type = VariableType.parse(type, variable_name=key) if type is not None else None

        try:
            spec = VariableSpec(
                key=key,
                type=var_type,
                required=required,
                strict=strict,
                default=default,
                description=description
            )
        except PydanticValidationError as e:
            raise InvalidVariableOptionsError(key, e) from e

        # Nothing is written until the options are known to be valid
        if spec.default is not None and self._environ.setdefault(key, stringify(spec.default)):
            logger.debug(f"Applied default for {key}")

        self._specs[key] = spec
        logger.debug(f"Registered {key} (type={var_type.value if var_type else None}, required={spec.required}, strict={spec.strict})")
        return spec

    def add(self, spec: VariableSpec) -> VariableSpec:
        """Register a pre-built spec, applying its default like ``register``."""
        return self.register(
            spec.key,
            type=spec.type,
            required=spec.required,
            strict=spec.strict,
            default=spec.default,
            description=spec.description
        )

    def get(self, key: str) -> Optional[VariableSpec]:
        return self._specs.get(key)

    def __contains__(self, key: str) -> bool:
        return key in self._specs

    def __iter__(self) -> Iterator[VariableSpec]:
        return iter(list(self._specs.values()))

    def __len__(self) -> int:
        return len(self._specs)
