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

"""Walks a schema tree against a subject and collects the violations.

Each schema node is visited with its own :class:`ValidatingVisitor`. Failures
found directly at a node are collected; nested schemas (subschemas of a
combined schema, property schemas of an object schema) are validated in
isolated visitors so that their failures can be counted or re-rooted before
being reported by the parent.
"""

from __future__ import annotations

import json
import logging
from typing import Any, List, Optional

from ..config import ValidatorConfig
from ..exceptions import CriterionNotSatisfied, ValidationException
from ..models.combined_schema import CombinedSchema
from ..models.schema import (
    ConstSchema,
    EmptySchema,
    FalseSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    StringSchema,
    json_equals,
)
from ..models.visitor import SchemaVisitor

logger = logging.getLogger(__name__)


def json_type_name(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, dict):
        return "object"
    if isinstance(value, (list, tuple)):
        return "array"
    return type(value).__name__


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


class ValidatingVisitor(SchemaVisitor):
    """Validates one subject against one schema node."""

    def __init__(self, subject: Any, config: Optional[ValidatorConfig] = None):
        self.subject = subject
        self.config = config or ValidatorConfig()
        self._failures: List[ValidationException] = []

    def validate(self, schema: Schema) -> None:
        """Visit *schema* and raise the collected failures, if any."""
        schema.accept(self)
        failure = self._collected(schema)
        if failure is not None:
            raise failure

    def failure_of(self, schema: Schema, subject: Any) -> Optional[ValidationException]:
        try:
            ValidatingVisitor(subject, self.config).validate(schema)
        except ValidationException as e:
            return e
        return None

    def _collected(self, schema: Schema) -> Optional[ValidationException]:
        if not self._failures:
            return None
        if len(self._failures) == 1:
            return self._failures[0]
        return ValidationException(
            schema,
            f"{len(self._failures)} schema violations found",
            causing_exceptions=self._failures,
        )

    def _report(self, failure: ValidationException) -> None:
        if self.config.fail_early:
            raise failure
        self._failures.append(failure)

    def _failure(self, schema: Schema, message: str, keyword: str) -> None:
        self._report(ValidationException(schema, message, keyword=keyword))

    def visit_empty_schema(self, schema: EmptySchema) -> None:
        pass

    def visit_false_schema(self, schema: FalseSchema) -> None:
        self._failure(schema, "false schema always fails", "false")

    def visit_const_schema(self, schema: ConstSchema) -> None:
        if not json_equals(self.subject, schema.value):
            expected = json.dumps(schema.value, default=repr)
            self._failure(schema, f"value does not match the const {expected}", "const")

    def visit_string_schema(self, schema: StringSchema) -> None:
        if not isinstance(self.subject, str):
            self._failure(schema, f"expected type: string, found: {json_type_name(self.subject)}", "type")
            return
        length = len(self.subject)
        if schema.min_length is not None and length < schema.min_length:
            self._failure(schema, f"expected minLength: {schema.min_length}, actual: {length}", "minLength")
        if schema.max_length is not None and length > schema.max_length:
            self._failure(schema, f"expected maxLength: {schema.max_length}, actual: {length}", "maxLength")

    def visit_number_schema(self, schema: NumberSchema) -> None:
        expected = "integer" if schema.requires_integer else "number"
        if not _is_number(self.subject):
            self._failure(schema, f"expected type: {expected}, found: {json_type_name(self.subject)}", "type")
            return
        if schema.requires_integer and not (isinstance(self.subject, int) or self.subject.is_integer()):
            self._failure(schema, f"expected type: integer, found: {json_type_name(self.subject)}", "type")
            return
        if schema.minimum is not None and self.subject < schema.minimum:
            self._failure(schema, f"{self.subject} is not greater or equal to {schema.minimum}", "minimum")
        if schema.maximum is not None and self.subject > schema.maximum:
            self._failure(schema, f"{self.subject} is not less or equal to {schema.maximum}", "maximum")

    def visit_object_schema(self, schema: ObjectSchema) -> None:
        if not isinstance(self.subject, dict):
            self._failure(schema, f"expected type: object, found: {json_type_name(self.subject)}", "type")
            return
        for name in schema.required_properties:
            if name not in self.subject:
                self._failure(schema, f"required key [{name}] not found", "required")
        for name, property_schema in schema.property_schemas.items():
            if name not in self.subject:
                continue
            failure = self.failure_of(property_schema, self.subject[name])
            if failure is not None:
                self._report(failure.prepend(name))

    def visit_combined_schema(self, schema: CombinedSchema) -> None:
        criterion = schema.criterion
        subschemas = schema.subschemas_with_combined_first
        logger.debug(f"Evaluating {criterion} with {len(subschemas)} subschemas")

        failures: List[ValidationException] = []
        for subschema in subschemas:
            failure = self.failure_of(subschema, self.subject)
            if failure is not None:
                failures.append(failure)
            logger.debug(
                f"{criterion}: {type(subschema).__name__} {'failed' if failure is not None else 'matched'}"
            )

        matching_count = len(subschemas) - len(failures)
        try:
            criterion.validate(len(subschemas), matching_count)
        except CriterionNotSatisfied as e:
            logger.debug(f"{criterion} not satisfied: {e.error_message}")
            self._report(
                ValidationException(
                    schema,
                    e.error_message,
                    keyword=e.keyword,
                    causing_exceptions=failures,
                    pointer=e.pointer_to_violation,
                )
            )
