# Copyright 2025 TIER IV, inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Serialize a schema tree back into a JSON Schema document.

Combined schemas are written in insertion order, not evaluation order, so the
output mirrors what the author built. Synthetic ``allOf`` nodes are inlined
into their parent object instead of being written as an explicit ``allOf``.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, List

import jsonschema
import yaml
from jsonschema.exceptions import SchemaError

from .. import JSON_SCHEMA_DRAFT
from ..exceptions import SchemaDocumentError
from ..models.combined_schema import CombinedSchema
from ..models.criterion import ALL_CRITERION
from ..models.schema import (
    ConstSchema,
    EmptySchema,
    FalseSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    StringSchema,
)
from ..models.visitor import SchemaVisitor

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("json", "yaml")


class JsonSchemaWriter(SchemaVisitor):
    """Builds the document of one schema node; nested nodes get their own writer."""

    def __init__(self):
        self.document: Dict[str, Any] = {}

    @classmethod
    def write(cls, schema: Schema) -> Dict[str, Any]:
        writer = cls()
        for key, value in (("title", schema.title), ("description", schema.description), ("$id", schema.schema_id)):
            if value is not None:
                writer.document[key] = value
        schema.accept(writer)
        return writer.document

    def visit_empty_schema(self, schema: EmptySchema) -> None:
        pass

    def visit_false_schema(self, schema: FalseSchema) -> None:
        self.document["not"] = {}

    def visit_const_schema(self, schema: ConstSchema) -> None:
        self.document["const"] = schema.value

    def visit_string_schema(self, schema: StringSchema) -> None:
        self.document["type"] = "string"
        if schema.min_length is not None:
            self.document["minLength"] = schema.min_length
        if schema.max_length is not None:
            self.document["maxLength"] = schema.max_length

    def visit_number_schema(self, schema: NumberSchema) -> None:
        self.document["type"] = "integer" if schema.requires_integer else "number"
        if schema.minimum is not None:
            self.document["minimum"] = schema.minimum
        if schema.maximum is not None:
            self.document["maximum"] = schema.maximum

    def visit_object_schema(self, schema: ObjectSchema) -> None:
        self.document["type"] = "object"
        if schema.property_schemas:
            self.document["properties"] = {
                name: self.write(property_schema) for name, property_schema in schema.property_schemas.items()
            }
        if schema.required_properties:
            self.document["required"] = list(schema.required_properties)

    def visit_combined_schema(self, schema: CombinedSchema) -> None:
        children = [self.write(subschema) for subschema in schema.subschemas]
        if not (schema.synthetic and schema.criterion == ALL_CRITERION):
            self.document[schema.criterion.name] = children
            return

        leftovers: List[Dict[str, Any]] = []
        for child in children:
            if any(key in self.document for key in child):
                leftovers.append(child)
            else:
                self.document.update(child)
        if leftovers:
            self.document.setdefault(ALL_CRITERION.name, []).extend(leftovers)


def to_json_schema(schema: Schema) -> Dict[str, Any]:
    """Return the JSON Schema document describing *schema*."""
    return JsonSchemaWriter.write(schema)


def check_json_schema(document: Dict[str, Any]) -> None:
    """Check *document* against the draft-07 metaschema.

    Raises:
        SchemaDocumentError: If the document is not a valid JSON Schema
    """
    try:
        jsonschema.Draft7Validator.check_schema(document)
    except SchemaError as e:
        path = "/" + "/".join(str(p) for p in e.absolute_path) if e.absolute_path else ""
        raise SchemaDocumentError(f"Invalid JSON Schema document at '{path}': {e.message}") from e


def save_json_schema(output_path: str, schema: Schema, fmt: str = "json") -> Dict[str, Any]:
    """Serialize *schema*, check it and save it as JSON or YAML."""

    if fmt not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported format '{fmt}'. Valid formats: {SUPPORTED_FORMATS}")

    document = {"$schema": JSON_SCHEMA_DRAFT, **to_json_schema(schema)}
    check_json_schema(document)

    output_dir = os.path.dirname(output_path)
    if output_dir:
        os.makedirs(output_dir, exist_ok=True)
    try:
        with open(output_path, "w", encoding="utf-8") as f:
            if fmt == "yaml":
                yaml.safe_dump(document, f, sort_keys=False)
            else:
                json.dump(document, f, indent=2, ensure_ascii=True)
        logger.info(f"Saved JSON Schema ({fmt}): {output_path}")
    except Exception as e:
        logger.error(f"Failed to save JSON Schema: {output_path}: {e}")
        raise
    return document
