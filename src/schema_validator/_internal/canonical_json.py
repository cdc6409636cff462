"""Byte-stable JSON rendering of a RunOutcome.

Two runs with the same outcome write identical report files, so CI can
diff reports between runs.
"""

import json

from ..contracts import RunOutcome


def dump_report(run: RunOutcome) -> str:
    """
    Render `run` as one compact JSON document with sorted keys.

    Computed fields (checked, failed) are included. Subject and verdict
    order is kept as validated.
    """
    payload = run.model_dump(mode="json")
    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False) + "\n"
