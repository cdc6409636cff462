"""Avro reader/writer schema resolution.

Answers one question per call: can data written with the writer schema be
decoded with the reader schema? Rules follow Avro schema resolution:

- primitives must match, or the writer type must promote to the reader type
  (int -> long/float/double, long -> float/double, float -> double,
  string <-> bytes)
- records, enums and fixed must share an unqualified name (or a reader alias)
- every reader field must exist in the writer or carry a default
- writer enum symbols must be known to the reader unless it declares a default
- every branch of a writer union must be readable; a non-union writer must
  match at least one branch of a reader union
"""

from typing import Any, Dict, List, Set, Tuple

from schema_validator.contracts import Verdict
from schema_validator.errors import ParseError
from schema_validator.kernel.modes import CompatibilityMode
from schema_validator.kernel.selection import LabeledSchema
from .parser import AvroSchema

PRIMITIVES = frozenset({"null", "boolean", "int", "long", "float", "double", "bytes", "string"})
NAMED_TYPES = frozenset({"record", "error", "enum", "fixed"})
COMPLEX_TYPES = NAMED_TYPES | {"array", "map"}

# writer type -> reader types it can be read as
PROMOTIONS: Dict[str, frozenset] = {
    "int": frozenset({"long", "float", "double"}),
    "long": frozenset({"float", "double"}),
    "float": frozenset({"double"}),
    "string": frozenset({"bytes"}),
    "bytes": frozenset({"string"}),
}


def _short_name(name: str) -> str:
    return name.rsplit(".", 1)[-1]


def _index_names(node: Any, names: Dict[str, Any]) -> None:
    """Collect named type definitions by full and unqualified name."""
    if isinstance(node, list):
        for branch in node:
            _index_names(branch, names)
        return
    if not isinstance(node, dict):
        return
    type_name = node.get("type")
    if isinstance(type_name, (dict, list)):
        _index_names(type_name, names)
        return
    if type_name in NAMED_TYPES and "name" in node:
        names[node["name"]] = node
        names.setdefault(_short_name(node["name"]), node)
    if type_name in ("record", "error"):
        for field in node.get("fields", []):
            _index_names(field.get("type"), names)
    elif type_name == "array":
        _index_names(node.get("items"), names)
    elif type_name == "map":
        _index_names(node.get("values"), names)


def _kind(node: Any) -> str:
    if isinstance(node, str):
        return node
    if isinstance(node, list):
        return "union"
    return node["type"]


def _describe(node: Any) -> str:
    if isinstance(node, dict) and "name" in node:
        return f"{node['type']} '{node['name']}'"
    return _kind(node)


def _unwrap(schema: Any) -> Any:
    if isinstance(schema, AvroSchema):
        return schema.parsed
    raise ParseError(f"Expected a parsed Avro schema, got {type(schema).__name__}")


class _Resolution:
    """One reader/writer resolution pass, collecting every incompatibility."""

    def __init__(self, reader: Any, writer: Any):
        self.reader = reader
        self.writer = writer
        self.reader_names: Dict[str, Any] = {}
        self.writer_names: Dict[str, Any] = {}
        _index_names(reader, self.reader_names)
        _index_names(writer, self.writer_names)
        self.issues: List[str] = []
        self._in_progress: Set[Tuple[str, str]] = set()

    def run(self) -> List[str]:
        self._resolve(self.reader, self.writer, "")
        return self.issues

    def _deref(self, node: Any, names: Dict[str, Any]) -> Any:
        if isinstance(node, str):
            if node in PRIMITIVES:
                return node
            if node in names:
                return names[node]
            raise ParseError(f"Unknown type reference '{node}'")
        if isinstance(node, list):
            return node
        if isinstance(node, dict):
            type_name = node.get("type")
            if isinstance(type_name, (dict, list)):
                return self._deref(type_name, names)
            if type_name in PRIMITIVES:
                # logical types resolve on their underlying type
                return type_name
            if type_name in COMPLEX_TYPES:
                return node
            if isinstance(type_name, str):
                return self._deref(type_name, names)
        raise ParseError(f"Not an Avro schema node: {node!r}")

    def _resolve_issues(self, reader: Any, writer: Any, path: str) -> List[str]:
        saved = self.issues
        self.issues = []
        try:
            self._resolve(reader, writer, path)
            return self.issues
        finally:
            self.issues = saved

    def _names_match(self, reader: Dict[str, Any], writer: Dict[str, Any]) -> bool:
        writer_name = _short_name(writer["name"])
        if _short_name(reader["name"]) == writer_name:
            return True
        return writer_name in {_short_name(alias) for alias in reader.get("aliases", [])}

    def _resolve(self, reader: Any, writer: Any, path: str) -> None:
        reader = self._deref(reader, self.reader_names)
        writer = self._deref(writer, self.writer_names)
        reader_kind = _kind(reader)
        writer_kind = _kind(writer)
        where = path or "/"

        if writer_kind == "union":
            for i, branch in enumerate(writer):
                self._resolve(reader, branch, f"{path}/{i}")
            return

        if reader_kind == "union":
            for branch in reader:
                if not self._resolve_issues(branch, writer, path):
                    return
            self.issues.append(
                f"{where}: reader union has no branch that can read writer type {_describe(writer)}"
            )
            return

        if reader_kind in PRIMITIVES and writer_kind in PRIMITIVES:
            if reader_kind != writer_kind and reader_kind not in PROMOTIONS.get(writer_kind, ()):
                self.issues.append(
                    f"{where}: reader type '{reader_kind}' cannot read writer type '{writer_kind}'"
                )
            return

        if reader_kind != writer_kind and not {reader_kind, writer_kind} <= {"record", "error"}:
            self.issues.append(
                f"{where}: reader type {_describe(reader)} does not match writer type {_describe(writer)}"
            )
            return

        if reader_kind in ("record", "error"):
            self._resolve_record(reader, writer, path)
        elif reader_kind == "enum":
            self._resolve_enum(reader, writer, where)
        elif reader_kind == "fixed":
            if not self._names_match(reader, writer):
                self.issues.append(f"{where}: fixed name '{reader['name']}' does not match '{writer['name']}'")
            elif reader.get("size") != writer.get("size"):
                self.issues.append(
                    f"{where}: fixed size {reader.get('size')} does not match writer size {writer.get('size')}"
                )
        elif reader_kind == "array":
            self._resolve(reader["items"], writer["items"], f"{path}/items")
        elif reader_kind == "map":
            self._resolve(reader["values"], writer["values"], f"{path}/values")

    def _resolve_record(self, reader: Dict[str, Any], writer: Dict[str, Any], path: str) -> None:
        where = path or "/"
        if not self._names_match(reader, writer):
            self.issues.append(
                f"{where}: reader record '{reader['name']}' does not match writer record '{writer['name']}'"
            )
            return

        key = (reader["name"], writer["name"])
        if key in self._in_progress:
            # recursive reference already being resolved higher up
            return
        self._in_progress.add(key)
        try:
            writer_fields = {field["name"]: field for field in writer.get("fields", [])}
            for field in reader.get("fields", []):
                name = field["name"]
                field_path = f"{path}/fields/{name}"
                written = writer_fields.get(name)
                if written is None:
                    for alias in field.get("aliases", []):
                        if alias in writer_fields:
                            written = writer_fields[alias]
                            break
                if written is None:
                    if "default" not in field:
                        self.issues.append(
                            f"{field_path}: reader field '{name}' is missing from the writer and has no default"
                        )
                    continue
                self._resolve(field["type"], written["type"], f"{field_path}/type")
        finally:
            self._in_progress.discard(key)

    def _resolve_enum(self, reader: Dict[str, Any], writer: Dict[str, Any], where: str) -> None:
        if not self._names_match(reader, writer):
            self.issues.append(f"{where}: enum name '{reader['name']}' does not match '{writer['name']}'")
            return
        known = set(reader.get("symbols", []))
        unknown = [symbol for symbol in writer.get("symbols", []) if symbol not in known]
        if unknown and "default" not in reader:
            self.issues.append(f"{where}: reader enum is missing writer symbols {unknown}")


def find_incompatibilities(reader: AvroSchema, writer: AvroSchema) -> List[str]:
    """Return every reason `reader` cannot read `writer` data (empty when compatible)."""
    return _Resolution(_unwrap(reader), _unwrap(writer)).run()


class AvroCompatibilityOracle:
    """Compatibility oracle backed by Avro schema resolution."""

    def check(
        self,
        mode: CompatibilityMode,
        reader: LabeledSchema,
        writer: LabeledSchema,
    ) -> Verdict:
        issues = find_incompatibilities(reader.schema, writer.schema)
        if issues:
            message = (
                f"[{mode.value}] {reader.label} cannot read data written by {writer.label}: "
                + "; ".join(issues)
            )
        else:
            message = f"[{mode.value}] {reader.label} can read data written by {writer.label}"
        return Verdict(
            compatible=not issues,
            reader=reader.label,
            writer=writer.label,
            message=message,
        )
