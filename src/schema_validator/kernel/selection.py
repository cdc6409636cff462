"""Selection of (reader, writer) pairs to check for a proposed schema."""

from dataclasses import dataclass
from typing import Any, List, Sequence

from .modes import CompatibilityMode, Direction

PROPOSED_LABEL = "proposed"


@dataclass(frozen=True)
class RegisteredVersion:
    """A schema version already registered for a subject."""
    version: int  # Registry-assigned, increases with registration time
    schema: Any  # Parsed schema object

    @property
    def label(self) -> str:
        return f"version {self.version}"


@dataclass(frozen=True)
class LabeledSchema:
    """A schema object plus the identifier used in verdicts."""
    label: str
    schema: Any


@dataclass(frozen=True)
class SchemaPair:
    """An ordered (reader, writer) pair. Swapping the two is a different check."""
    reader: LabeledSchema
    writer: LabeledSchema


def select_pairs(
    mode: CompatibilityMode,
    proposed: Any,
    history: Sequence[RegisteredVersion],
) -> List[SchemaPair]:
    """
    Select the pairs the oracle must evaluate.

    Rules:
    - NONE or empty history: nothing to check
    - History is sorted by version first; the registry may list out of order
    - Non-transitive modes use the latest version only, transitive modes use
      every version in ascending order
    - backward: (proposed, candidate); forward: (candidate, proposed);
      full: both, backward first
    """
    if mode is CompatibilityMode.NONE or not history:
        return []

    ordered = sorted(history, key=lambda registered: registered.version)
    candidates = ordered if mode.transitive else ordered[-1:]

    proposed_schema = LabeledSchema(PROPOSED_LABEL, proposed)
    direction = mode.direction
    pairs: List[SchemaPair] = []
    for candidate in candidates:
        registered = LabeledSchema(candidate.label, candidate.schema)
        if direction in (Direction.BACKWARD, Direction.FULL):
            pairs.append(SchemaPair(reader=proposed_schema, writer=registered))
        if direction in (Direction.FORWARD, Direction.FULL):
            pairs.append(SchemaPair(reader=registered, writer=proposed_schema))
    return pairs
