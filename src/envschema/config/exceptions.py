"""
Exception classes with built-in guidance for environment validation.
"""
from typing import List, Optional


class EnvSchemaError(Exception):
    """Base exception for all environment schema errors."""
    def __init__(self, message: str, variable_name: str = None):
        super().__init__(message)
        self.variable_name = variable_name
        self.guidance = self._generate_guidance()

    def _generate_guidance(self):
        """Override in subclasses to provide specific guidance."""
        return f"""
❌ Environment configuration error: {self}
💡 Check your environment variables and try again
"""


class InvalidVariableTypeError(EnvSchemaError, ValueError):
    """Raised when a variable is registered with an unrecognised type."""
    def __init__(self, given, valid_types: List[str], variable_name: str = None):
        self.given = given
        self.valid_types = valid_types
        super().__init__(
            f"Invalid type: {given}. Valid types are: {', '.join(valid_types)}",
            variable_name=variable_name
        )

    def _generate_guidance(self):
        target = f" for '{self.variable_name}'" if self.variable_name else ""
        return f"""
❌ Invalid type{target}: {self.given}
💡 Use one of: {', '.join(self.valid_types)}
"""


class InvalidVariableOptionsError(EnvSchemaError, ValueError):
    """Raised when a variable is registered with options that cannot be used."""
    def __init__(self, variable_name: str, cause):
        self.fields = sorted({str(error["loc"][0]) for error in cause.errors() if error.get("loc")})
        super().__init__(
            f"Invalid options for '{variable_name}': {', '.join(self.fields)}",
            variable_name=variable_name
        )

    def _generate_guidance(self):
        return f"""
❌ Invalid options for '{self.variable_name}': {', '.join(self.fields)}
💡 required and strict take booleans; default takes a string, integer, float or boolean
"""


class ValidationError(EnvSchemaError):
    """Raised when registered variables fail validation.

    The message is plain text; ``styled()`` renders it with terminal emphasis.
    """
    def __init__(self, diagnostic, variable_name: str = None):
        self.diagnostic = diagnostic
        super().__init__(diagnostic.render(), variable_name=variable_name)

    def styled(self) -> str:
        return self.diagnostic.render(color=True)

    def _generate_guidance(self):
        return f"\n{self.diagnostic.render()}\n"


class MissingVariablesError(ValidationError):
    """Raised when required variables are absent under strict validation."""
    def __init__(self, diagnostic, missing_keys: List[str]):
        self.missing_keys = list(missing_keys)
        super().__init__(diagnostic)


class InvalidTypeError(ValidationError):
    """Raised when a variable's value does not conform to its declared type."""
    def __init__(self, diagnostic, key: str, expected: str, value: Optional[str] = None):
        self.key = key
        self.expected = expected
        self.value = value
        super().__init__(diagnostic, variable_name=key)


class ManifestError(EnvSchemaError):
    """Raised when a schema manifest is missing or malformed."""
    def __init__(self, message: str, path=None):
        self.path = path
        super().__init__(message)

    def _generate_guidance(self):
        location = self.path or "config/env_schema.yaml"
        return f"""
❌ Schema manifest error: {self}
💡 Resolve this in one of the following ways:
   1. Generate a starter manifest: envschema install
   2. Or fix the 'variables' mapping in {location}
"""
