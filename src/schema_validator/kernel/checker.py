"""Drive the compatibility oracle over the selected pairs for one subject."""

from typing import Any, List, Protocol, Sequence

from schema_validator.contracts import Verdict
from .modes import CompatibilityMode
from .selection import LabeledSchema, RegisteredVersion, select_pairs


class CompatibilityOracle(Protocol):
    """Answers whether `reader` can read data written with `writer`."""

    def check(
        self,
        mode: CompatibilityMode,
        reader: LabeledSchema,
        writer: LabeledSchema,
    ) -> Verdict:
        ...


def check_compatibility(
    mode: CompatibilityMode,
    proposed: Any,
    history: Sequence[RegisteredVersion],
    oracle: CompatibilityOracle,
) -> List[Verdict]:
    """
    Evaluate every selected pair, one oracle call per pair, in selection order.

    Oracle exceptions (ParseError) are not caught: a schema that cannot be
    read invalidates every pair referencing it, so the whole subject fails.
    """
    return [
        oracle.check(mode, pair.reader, pair.writer)
        for pair in select_pairs(mode, proposed, history)
    ]
