"""Fold verdicts into subject outcomes and subject outcomes into a run outcome."""

from typing import Iterable, List, Optional, Sequence

from schema_validator.codes import ValidationCode
from schema_validator.contracts import RunOutcome, SubjectError, SubjectOutcome, Verdict


def subject_outcome(
    subject: str,
    path: str,
    verdicts: Sequence[Verdict],
    mode: Optional[str] = None,
    notes: Optional[List[str]] = None,
) -> SubjectOutcome:
    """Subject is ok when every verdict is compatible (vacuously true when empty).

    All verdicts are kept, including those after the first incompatible one.
    """
    verdict_list = list(verdicts)
    return SubjectOutcome(
        subject=subject,
        path=path,
        mode=mode,
        verdicts=verdict_list,
        ok=all(verdict.compatible for verdict in verdict_list),
        notes=list(notes or []),
    )


def hard_error_outcome(
    subject: str,
    path: str,
    code: ValidationCode,
    message: str,
    mode: Optional[str] = None,
) -> SubjectOutcome:
    """Outcome for a subject whose check could not run."""
    return SubjectOutcome(
        subject=subject,
        path=path,
        mode=mode,
        verdicts=[],
        ok=False,
        error=SubjectError(code=code.value, message=message),
    )


def fold_run(outcomes: Iterable[SubjectOutcome]) -> RunOutcome:
    """Run is ok when every subject is ok. Order only affects reporting."""
    subjects = list(outcomes)
    return RunOutcome(
        subjects=subjects,
        ok=all(outcome.ok for outcome in subjects),
    )
