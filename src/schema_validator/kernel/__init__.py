"""Validation orchestration kernel: mode resolution, pair selection, checking and aggregation."""

from .modes import CompatibilityMode, Direction, VALID_MODES, resolve_mode
from .selection import LabeledSchema, RegisteredVersion, SchemaPair, select_pairs
from .checker import CompatibilityOracle, check_compatibility
from .aggregate import fold_run, hard_error_outcome, subject_outcome
from .history import Failed, Found, NotRegistered, fetch_history
from .subject import derive_subject

__all__ = [
    "CompatibilityMode",
    "Direction",
    "VALID_MODES",
    "resolve_mode",
    "LabeledSchema",
    "RegisteredVersion",
    "SchemaPair",
    "select_pairs",
    "CompatibilityOracle",
    "check_compatibility",
    "fold_run",
    "hard_error_outcome",
    "subject_outcome",
    "Failed",
    "Found",
    "NotRegistered",
    "fetch_history",
    "derive_subject",
]
