"""Compatibility modes and declared-mode resolution."""

from enum import Enum
from typing import Any, Optional

from schema_validator.errors import InvalidModeError


class Direction(str, Enum):
    """Which side of the (reader, writer) pair the proposed schema takes."""
    BACKWARD = "backward"  # proposed schema reads registered data
    FORWARD = "forward"  # registered schemas read proposed data
    FULL = "full"  # both


class CompatibilityMode(str, Enum):
    """Closed set of declarable compatibility modes."""
    NONE = "none"
    BACKWARD = "backward"
    BACKWARD_TRANSITIVE = "backward-transitive"
    FORWARD = "forward"
    FORWARD_TRANSITIVE = "forward-transitive"
    FULL = "full"
    FULL_TRANSITIVE = "full-transitive"

    @property
    def direction(self) -> Optional[Direction]:
        """Direction facet, or None for NONE."""
        if self is CompatibilityMode.NONE:
            return None
        return Direction(self.value.split("-")[0])

    @property
    def transitive(self) -> bool:
        """True when every registered version is checked, not only the latest."""
        return self.value.endswith("-transitive")


VALID_MODES = frozenset(mode.value for mode in CompatibilityMode)


def resolve_mode(declared: Any) -> Optional[CompatibilityMode]:
    """
    Validate a declared compatibility mode.

    Returns None when no mode was declared. This is "no policy", which is
    not the same as an explicit "none": callers skip checking but should
    record that the gate was bypassed.

    Raises:
        InvalidModeError: if the value is not one of VALID_MODES.
    """
    if declared is None:
        return None
    if not isinstance(declared, str) or declared not in VALID_MODES:
        raise InvalidModeError(declared, VALID_MODES)
    return CompatibilityMode(declared)
