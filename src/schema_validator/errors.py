"""Exception types raised by schema_validator collaborators.

Incompatibility is never an exception: it is carried as data in a
Verdict. These exceptions cover the cases where a check could not run.
"""

from typing import Any, Iterable, Optional


class SchemaValidatorError(Exception):
    """Base class for all schema_validator errors."""


class ParseError(SchemaValidatorError):
    """Raised when schema text or a schema structure cannot be parsed."""


class InvalidModeError(SchemaValidatorError):
    """Raised when a declared compatibility mode is outside the closed set."""

    def __init__(self, value: Any, valid_modes: Iterable[str]):
        self.value = value
        self.valid_modes = sorted(valid_modes)
        super().__init__(
            f"Invalid compatibility mode {value!r}. "
            f"Must be one of {self.valid_modes}"
        )


class RegistryError(SchemaValidatorError):
    """Base class for schema registry failures."""


class NotFoundError(RegistryError):
    """Raised when the registry does not know the requested subject."""

    def __init__(self, subject: str):
        self.subject = subject
        super().__init__(f"Subject '{subject}' not found in registry")


class FetchError(RegistryError):
    """Raised for any other unsuccessful registry request."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        self.status_code = status_code
        super().__init__(message)
