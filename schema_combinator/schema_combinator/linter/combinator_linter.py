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

"""Authoring linter for combined schemas.

Nothing reported here makes a subject invalid; the checks point at schema
shapes that are likely mistakes (redundant sibling combinators, combinators
that can never or will always pass).
"""

from __future__ import annotations

from typing import List

from ..models.combined_schema import CombinedSchema
from ..models.criterion import ALL_CRITERION, ANY_CRITERION, ONE_CRITERION
from ..models.schema import ObjectSchema, Schema
from ..models.visitor import SchemaVisitor
from .report import LintResult


def _escape(token: str) -> str:
    return token.replace("~", "~0").replace("/", "~1")


class CombinatorLinter(SchemaVisitor):
    """Walks a schema tree, recording one LintResult per combined schema with issues."""

    def __init__(self):
        self.results: List[LintResult] = []
        self._pointer = "#"

    def lint(self, schema: Schema, pointer: str = "#") -> List[LintResult]:
        previous = self._pointer
        self._pointer = pointer
        try:
            schema.accept(self)
        finally:
            self._pointer = previous
        return self.results

    def visit_schema(self, schema: Schema) -> None:
        pass

    def visit_object_schema(self, schema: ObjectSchema) -> None:
        for name, property_schema in schema.property_schemas.items():
            self.lint(property_schema, f"{self._pointer}/properties/{_escape(name)}")

    def visit_combined_schema(self, schema: CombinedSchema) -> None:
        result = LintResult(self._pointer)
        keyword = schema.criterion.name

        if schema.has_multiple_combined_schemas_of_same_criterion():
            result.add_warning(
                f"'{keyword}' has several nested combined schemas with the same criterion; "
                "consider merging them",
                keyword=keyword,
            )
        if not schema.subschemas:
            if schema.criterion in (ANY_CRITERION, ONE_CRITERION):
                result.add_error(f"empty '{keyword}' can never be satisfied", keyword=keyword)
            elif schema.criterion == ALL_CRITERION:
                result.add_warning(f"empty '{keyword}' accepts every subject", keyword=keyword)

        if result.has_issues:
            self.results.append(result)

        pointer = self._pointer
        for index, subschema in enumerate(schema.subschemas):
            self.lint(subschema, f"{pointer}/{keyword}/{index}")


def lint_schema(schema: Schema) -> List[LintResult]:
    """Lint a schema tree.

    Args:
        schema: Root of the schema tree

    Returns:
        List of LintResult objects, one per schema node with issues
    """
    return CombinatorLinter().lint(schema)
