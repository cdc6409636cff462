"""Avro schema text parsing.

The compatibility mode is declared inside the proposed schema document as a
top-level "compatibility" property. It is metadata, not part of the schema,
so it is stripped before the schema is handed to fastavro.
"""

import json
from dataclasses import dataclass
from typing import Any, Optional

from fastavro import parse_schema
from fastavro.schema import SchemaParseException, UnknownType

from schema_validator.errors import ParseError

MODE_PROPERTY = "compatibility"


@dataclass(frozen=True)
class AvroSchema:
    """A parsed Avro schema.

    `parsed` is fastavro's normalized form: named types carry fully-qualified
    names and later references to them are fully-qualified strings.
    """
    parsed: Any
    text: str


def _decode(raw_text: str) -> Any:
    try:
        return json.loads(raw_text)
    except (TypeError, ValueError) as e:
        raise ParseError(f"Schema is not valid JSON: {e}") from e


class AvroSchemaParser:
    """Parses Avro schema text (.avsc) into AvroSchema objects."""

    def parse(self, raw_text: str) -> AvroSchema:
        """
        Parse schema text.

        Raises:
            ParseError: if the text is not JSON or not a valid Avro schema.
        """
        document = _decode(raw_text)
        if isinstance(document, dict):
            document = {k: v for k, v in document.items() if k != MODE_PROPERTY}
        try:
            parsed = parse_schema(document, _write_hint=False)
        except (SchemaParseException, UnknownType) as e:
            raise ParseError(f"Invalid Avro schema: {e}") from e
        except (TypeError, KeyError, AttributeError, ValueError) as e:
            # fastavro assumes well-formed nodes; malformed ones surface as these
            raise ParseError(f"Invalid Avro schema: {e!r}") from e
        return AvroSchema(parsed=parsed, text=raw_text)

    def extract_mode(self, raw_text: str) -> Optional[Any]:
        """Return the declared compatibility value, or None when absent.

        Only a top-level JSON object can declare a mode; primitive, union and
        array schemas never do.

        Raises:
            ParseError: if the text is not JSON.
        """
        document = _decode(raw_text)
        if not isinstance(document, dict):
            return None
        return document.get(MODE_PROPERTY)
