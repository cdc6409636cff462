"""Avro schema parsing and reader/writer resolution."""

from .parser import AvroSchema, AvroSchemaParser
from .compatibility import AvroCompatibilityOracle, find_incompatibilities

__all__ = [
    "AvroSchema",
    "AvroSchemaParser",
    "AvroCompatibilityOracle",
    "find_incompatibilities",
]
