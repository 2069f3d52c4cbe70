"""File I/O related utilities.

This package groups the modules that turn a schema tree into documents and
write them to disk.
"""

from .schema_writer import (
    SUPPORTED_FORMATS,
    JsonSchemaWriter,
    check_json_schema,
    save_json_schema,
    to_json_schema,
)

__all__ = [
    "SUPPORTED_FORMATS",
    "JsonSchemaWriter",
    "check_json_schema",
    "save_json_schema",
    "to_json_schema",
]
