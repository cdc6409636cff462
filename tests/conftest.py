"""Pytest configuration and shared fakes for tests.

No sys.path hacks - tests should import from installed schema_validator package.
"""

import json
from pathlib import Path
from typing import Dict, List, Optional

import pytest

from schema_validator.contracts import Verdict
from schema_validator.errors import FetchError, NotFoundError


class FakeRegistry:
    """In-memory registry: subject -> {version: schema text}."""

    def __init__(self, subjects: Optional[Dict[str, Dict[int, str]]] = None, failing: Optional[set] = None):
        self.subjects = subjects or {}
        self.failing = failing or set()
        self.calls: List[tuple] = []

    def list_versions(self, subject: str) -> List[int]:
        self.calls.append(("list_versions", subject))
        if subject in self.failing:
            raise FetchError(f"HTTP 500 for {subject}", status_code=500)
        if subject not in self.subjects:
            raise NotFoundError(subject)
        return list(self.subjects[subject].keys())

    def get_schema(self, subject: str, version: int) -> str:
        self.calls.append(("get_schema", subject, version))
        return self.subjects[subject][version]


class ScriptedOracle:
    """Oracle answering from a set of incompatible (reader, writer) label pairs."""

    def __init__(self, incompatible: Optional[set] = None):
        self.incompatible = incompatible or set()
        self.calls: List[tuple] = []

    def check(self, mode, reader, writer) -> Verdict:
        self.calls.append((mode, reader.label, writer.label))
        ok = (reader.label, writer.label) not in self.incompatible
        return Verdict(
            compatible=ok,
            reader=reader.label,
            writer=writer.label,
            message=f"{reader.label} <- {writer.label}: {'ok' if ok else 'incompatible'}",
        )


def record_schema(name: str, fields: List[dict], compatibility: Optional[str] = None) -> dict:
    schema = {"type": "record", "name": name, "namespace": "com.example", "fields": fields}
    if compatibility is not None:
        schema["compatibility"] = compatibility
    return schema


@pytest.fixture
def write_schema(tmp_path):
    """Write a schema document (dict or raw text) as <name> under tmp_path."""
    def _write(filename: str, document) -> Path:
        path = tmp_path / filename
        path.parent.mkdir(parents=True, exist_ok=True)
        text = document if isinstance(document, str) else json.dumps(document, indent=2)
        path.write_text(text, encoding="utf-8")
        return path
    return _write
