"""Outcome code constants for schema_validator.validate().

These constants prevent stringly-typed error codes and ensure
client code uses the correct outcome codes.
"""

from enum import Enum


class ValidationCode(str, Enum):
    """Subject error and note codes."""

    # Errors (subject marked as failed)
    READ_ERROR = "READ_ERROR"
    PARSE_ERROR = "PARSE_ERROR"
    INVALID_MODE = "INVALID_MODE"
    FETCH_ERROR = "FETCH_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Notes (non-blocking)
    NO_POLICY = "NO_POLICY"
    MODE_NONE = "MODE_NONE"
    NEW_SUBJECT = "NEW_SUBJECT"
