"""Tests for plain-text rendering of outcomes."""

from schema_validator.codes import ValidationCode
from schema_validator.contracts import Verdict
from schema_validator.kernel.aggregate import fold_run, hard_error_outcome, subject_outcome
from schema_validator._internal.reporting import (
    FAILURE_LINE,
    SUCCESS_LINE,
    render_subject,
    render_summary,
)


def test_render_subject_with_verdicts():
    outcome = subject_outcome(
        "orders",
        "schemas/orders.avsc",
        [
            Verdict(compatible=False, reader="proposed", writer="version 1", message="first problem"),
            Verdict(compatible=True, reader="proposed", writer="version 2", message="fine"),
        ],
        mode="backward-transitive",
    )
    lines = render_subject(outcome)
    assert lines[0] == (
        "Comparing proposed schema schemas/orders.avsc with registered schemas "
        "on subject orders (compatibility: backward-transitive)"
    )
    assert "  [INCOMPATIBLE] first problem" in lines
    assert "  [OK] fine" in lines
    assert lines[-1] == "  Status: FAILED"


def test_render_subject_with_error_and_unset_mode():
    outcome = hard_error_outcome("orders", "orders.avsc", ValidationCode.PARSE_ERROR, "bad json")
    lines = render_subject(outcome)
    assert "(compatibility: unset)" in lines[0]
    assert "  [PARSE_ERROR] bad json" in lines


def test_render_subject_notes():
    outcome = subject_outcome("w", "w.avsc", [], notes=["NEW_SUBJECT: nothing to check"])
    assert "  Note: NEW_SUBJECT: nothing to check" in render_subject(outcome)


def test_render_summary():
    ok_run = fold_run([subject_outcome("a", "a.avsc", [])])
    bad_run = fold_run([
        subject_outcome("a", "a.avsc", []),
        hard_error_outcome("b", "b.avsc", ValidationCode.FETCH_ERROR, "HTTP 500"),
    ])
    assert render_summary(ok_run) == ["Checked 1 schema(s), 0 failed", SUCCESS_LINE]
    assert render_summary(bad_run) == ["Checked 2 schema(s), 1 failed", FAILURE_LINE]
