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

"""Double-dispatch base for walking a schema tree.

Every schema type calls exactly one ``visit_*`` method from its ``accept``.
Unhandled types fall through to :meth:`SchemaVisitor.visit_schema`.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .combined_schema import CombinedSchema
    from .schema import (
        ConstSchema,
        EmptySchema,
        FalseSchema,
        NumberSchema,
        ObjectSchema,
        Schema,
        StringSchema,
    )


class SchemaVisitor:

    def visit_schema(self, schema: "Schema") -> None:
        raise NotImplementedError(f"{type(self).__name__} cannot visit {type(schema).__name__}")

    def visit_empty_schema(self, schema: "EmptySchema") -> None:
        self.visit_schema(schema)

    def visit_false_schema(self, schema: "FalseSchema") -> None:
        self.visit_schema(schema)

    def visit_const_schema(self, schema: "ConstSchema") -> None:
        self.visit_schema(schema)

    def visit_string_schema(self, schema: "StringSchema") -> None:
        self.visit_schema(schema)

    def visit_number_schema(self, schema: "NumberSchema") -> None:
        self.visit_schema(schema)

    def visit_object_schema(self, schema: "ObjectSchema") -> None:
        self.visit_schema(schema)

    def visit_combined_schema(self, schema: "CombinedSchema") -> None:
        self.visit_schema(schema)
