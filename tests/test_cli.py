"""CLI tests for schema-validator."""

import json
import sys

import httpx
import pytest

from schema_validator import cli
from schema_validator._internal.io.registry import RegistryClient

from conftest import record_schema

ID = {"name": "id", "type": "string"}

REGISTERED = {
    "orders": {1: record_schema("Order", [ID])},
}


def _handler(request: httpx.Request) -> httpx.Response:
    parts = request.url.path.strip("/").split("/")
    subject = parts[1]
    if subject not in REGISTERED:
        return httpx.Response(404, json={"error_code": 40401})
    versions = REGISTERED[subject]
    if len(parts) == 3:
        return httpx.Response(200, json=list(versions))
    return httpx.Response(200, json={"schema": json.dumps(versions[int(parts[3])])})


@pytest.fixture(autouse=True)
def mock_registry(monkeypatch):
    for name in ("REGISTRY_URL", "TIMEOUT", "MAX_WORKERS", "USERNAME", "PASSWORD"):
        monkeypatch.delenv(f"SCHEMA_VALIDATOR_{name}", raising=False)

    def _factory(base_url, timeout=10.0, auth=None):
        return RegistryClient(base_url, client=httpx.Client(transport=httpx.MockTransport(_handler)))

    monkeypatch.setattr("schema_validator.api.RegistryClient", _factory)


def _run_cli(args, monkeypatch):
    monkeypatch.setattr(sys, "argv", ["schema-validator"] + args)
    with pytest.raises(SystemExit) as excinfo:
        cli.main()
    return excinfo.value.code


def test_compatible_schemas_exit_zero(tmp_path, write_schema, monkeypatch, capsys):
    write_schema("orders.avsc", record_schema("Order", [ID, {"name": "note", "type": "string", "default": ""}], "backward"))
    write_schema("new-widget.avsc", record_schema("Widget", [ID], "full-transitive"))

    code = _run_cli(["-r", "http://registry.test", "-d", str(tmp_path)], monkeypatch)

    assert code == 0
    out = capsys.readouterr().out
    assert "on subject orders (compatibility: backward)" in out
    assert "No previous versions found for subject new-widget" in out
    assert "Checked 2 schema(s), 0 failed" in out
    assert "[Success] All newly proposed schemas are compatible." in out


def test_incompatible_schema_exit_one(tmp_path, write_schema, monkeypatch, capsys):
    write_schema("orders.avsc", record_schema("Order", [ID, {"name": "amount", "type": "double"}], "backward"))

    code = _run_cli(["--registry-url", "http://registry.test", "--schema-dir", str(tmp_path)], monkeypatch)

    assert code == 1
    out = capsys.readouterr().out
    assert "[INCOMPATIBLE]" in out
    assert "[Error] Invalid schemas found." in out


def test_extensions_and_report(tmp_path, write_schema, monkeypatch, capsys):
    schemas = tmp_path / "schemas"
    write_schema("schemas/orders.json", record_schema("Order", [ID], "strict"))
    write_schema("schemas/ignored.avsc", "not even json")
    report = tmp_path / "out" / "report.json"

    code = _run_cli(
        ["-r", "http://registry.test", "-d", str(schemas), "-e", "json", "--report", str(report), "--quiet"],
        monkeypatch,
    )

    assert code == 1
    assert capsys.readouterr().out.strip() == "[Error] Invalid schemas found."
    data = json.loads(report.read_text(encoding="utf-8"))
    assert data["ok"] is False
    assert data["checked"] == 1
    assert data["subjects"][0]["error"]["code"] == "INVALID_MODE"


def test_registry_url_from_environment(tmp_path, write_schema, monkeypatch, capsys):
    write_schema("orders.avsc", record_schema("Order", [ID], "none"))
    monkeypatch.setenv("SCHEMA_VALIDATOR_REGISTRY_URL", "http://registry.test")

    assert _run_cli(["-d", str(tmp_path)], monkeypatch) == 0


def test_missing_registry_url_is_usage_error(tmp_path, monkeypatch, capsys):
    assert _run_cli(["-d", str(tmp_path)], monkeypatch) == 2
    assert "--registry-url" in capsys.readouterr().err


def test_missing_schema_dir(tmp_path, monkeypatch, capsys):
    code = _run_cli(["-r", "http://registry.test", "-d", str(tmp_path / "missing")], monkeypatch)
    assert code == 1
    assert "Error: Schema directory not found" in capsys.readouterr().err


def test_invalid_registry_url(tmp_path, monkeypatch, capsys):
    code = _run_cli(["-r", "registry.test", "-d", str(tmp_path)], monkeypatch)
    assert code == 1
    assert "Error:" in capsys.readouterr().err
