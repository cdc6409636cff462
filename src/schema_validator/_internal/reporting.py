"""Plain-text rendering of validation outcomes.

Rendering is kept apart from aggregation: these functions only build
lines, the CLI decides where they go.
"""

from typing import List

from schema_validator.contracts import RunOutcome, SubjectOutcome

SUCCESS_LINE = "[Success] All newly proposed schemas are compatible."
FAILURE_LINE = "[Error] Invalid schemas found."


def render_subject(outcome: SubjectOutcome) -> List[str]:
    """Render one subject: header, error or notes, every verdict, status."""
    mode = outcome.mode if outcome.mode is not None else "unset"
    lines = [
        f"Comparing proposed schema {outcome.path} with registered schemas "
        f"on subject {outcome.subject} (compatibility: {mode})"
    ]
    if outcome.error is not None:
        lines.append(f"  [{outcome.error.code}] {outcome.error.message}")
    for note in outcome.notes:
        lines.append(f"  Note: {note}")
    for verdict in outcome.verdicts:
        status = "OK" if verdict.compatible else "INCOMPATIBLE"
        lines.append(f"  [{status}] {verdict.message}")
    lines.append(f"  Status: {'OK' if outcome.ok else 'FAILED'}")
    return lines


def render_summary(run: RunOutcome) -> List[str]:
    lines = [f"Checked {run.checked} schema(s), {run.failed} failed"]
    lines.append(SUCCESS_LINE if run.ok else FAILURE_LINE)
    return lines
