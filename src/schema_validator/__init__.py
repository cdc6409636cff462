"""schema_validator: compatibility gate for proposed Avro schemas against a schema registry."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("schema-validator")
except PackageNotFoundError:
    __version__ = "dev"

from schema_validator.api import validate, validate_schema_dir
from schema_validator.contracts import RunOutcome, SubjectError, SubjectOutcome, Verdict
from schema_validator.codes import ValidationCode
from schema_validator.errors import (
    FetchError,
    InvalidModeError,
    NotFoundError,
    ParseError,
    RegistryError,
    SchemaValidatorError,
)

__all__ = [
    "__version__",
    "validate",
    "validate_schema_dir",
    "RunOutcome",
    "SubjectError",
    "SubjectOutcome",
    "Verdict",
    "ValidationCode",
    "FetchError",
    "InvalidModeError",
    "NotFoundError",
    "ParseError",
    "RegistryError",
    "SchemaValidatorError",
]
