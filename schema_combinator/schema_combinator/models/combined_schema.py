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

"""Validator node for ``allOf``, ``anyOf`` and ``oneOf`` schemas."""

from __future__ import annotations

from collections import Counter
from typing import TYPE_CHECKING, Any, Iterable, List, Optional, Tuple

from ..exceptions import CriterionNotSatisfied, SchemaConstructionError
from .criterion import ALL_CRITERION, ANY_CRITERION, ONE_CRITERION, ValidationCriterion
from .schema import Schema

if TYPE_CHECKING:
    from .visitor import SchemaVisitor


def _combined_first_key(schema: Schema) -> Tuple[int, str]:
    return (0 if isinstance(schema, CombinedSchema) else 1, repr(schema))


class CombinedSchema(Schema):
    """A composition node judged by a :class:`ValidationCriterion`.

    ``subschemas`` keeps the order the caller supplied. The order used for
    evaluation, equality and hashing is ``subschemas_with_combined_first``:
    nested combined schemas come before every other subschema. Ties inside
    each group are broken by ``repr``, which is the same across processes for
    a given input but carries no meaning.
    """

    def __init__(
        self,
        criterion: ValidationCriterion,
        subschemas: Iterable[Schema],
        *,
        synthetic: bool = False,
        title: Optional[str] = None,
        description: Optional[str] = None,
        schema_id: Optional[str] = None,
    ):
        super().__init__(title=title, description=description, schema_id=schema_id)
        if criterion is None:
            raise SchemaConstructionError("criterion cannot be None")
        if subschemas is None:
            raise SchemaConstructionError("subschemas cannot be None")
        self._criterion = criterion
        self._synthetic = bool(synthetic)
        self._subschemas: Tuple[Schema, ...] = tuple(subschemas)
        # sorted() is stable, so equal keys keep insertion order
        self._sorted_subschemas: Tuple[Schema, ...] = tuple(sorted(self._subschemas, key=_combined_first_key))
        self._hash = hash((self._metadata(), self._sorted_subschemas, self._criterion, self._synthetic))

    @property
    def criterion(self) -> ValidationCriterion:
        return self._criterion

    @property
    def subschemas(self) -> Tuple[Schema, ...]:
        """The subschemas in insertion order."""
        return self._subschemas

    @property
    def subschemas_with_combined_first(self) -> Tuple[Schema, ...]:
        """The subschemas in the order they are evaluated."""
        return self._sorted_subschemas

    @property
    def synthetic(self) -> bool:
        return self._synthetic

    def has_multiple_combined_schemas_of_same_criterion(self) -> bool:
        counts = Counter(
            schema.criterion for schema in self._subschemas if isinstance(schema, CombinedSchema)
        )
        return any(count > 1 for count in counts.values())

    def defines_property(self, field: str) -> bool:
        matching = [schema for schema in self._subschemas if schema.defines_property(field)]
        try:
            self._criterion.validate(len(self._subschemas), len(matching))
        except CriterionNotSatisfied:
            return False
        return True

    def accept(self, visitor: "SchemaVisitor") -> None:
        visitor.visit_combined_schema(self)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, CombinedSchema) or type(self) is not type(other):
            return False
        return (
            self._sorted_subschemas == other._sorted_subschemas
            and self._criterion == other._criterion
            and self._synthetic == other._synthetic
            and self._metadata() == other._metadata()
        )

    def __hash__(self) -> int:
        return self._hash

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}({self._criterion.name!r}, {list(self._sorted_subschemas)!r}, "
            f"synthetic={self._synthetic}{self._metadata_repr()})"
        )


class CombinedSchemaBuilder:
    """Accumulates the parts of a :class:`CombinedSchema`. Not thread-safe."""

    def __init__(self):
        self._criterion: Optional[ValidationCriterion] = None
        self._subschemas: Optional[List[Schema]] = []
        self._synthetic = False
        self._title: Optional[str] = None
        self._description: Optional[str] = None
        self._schema_id: Optional[str] = None

    def criterion(self, criterion: ValidationCriterion) -> "CombinedSchemaBuilder":
        self._criterion = criterion
        return self

    def subschema(self, subschema: Schema) -> "CombinedSchemaBuilder":
        if self._subschemas is None:
            self._subschemas = []
        self._subschemas.append(subschema)
        return self

    def subschemas(self, subschemas: Optional[Iterable[Schema]]) -> "CombinedSchemaBuilder":
        self._subschemas = None if subschemas is None else list(subschemas)
        return self

    def is_synthetic(self, synthetic: bool) -> "CombinedSchemaBuilder":
        self._synthetic = synthetic
        return self

    def title(self, title: Optional[str]) -> "CombinedSchemaBuilder":
        self._title = title
        return self

    def description(self, description: Optional[str]) -> "CombinedSchemaBuilder":
        self._description = description
        return self

    def schema_id(self, schema_id: Optional[str]) -> "CombinedSchemaBuilder":
        self._schema_id = schema_id
        return self

    def build(self) -> CombinedSchema:
        return CombinedSchema(
            self._criterion,
            self._subschemas,
            synthetic=self._synthetic,
            title=self._title,
            description=self._description,
            schema_id=self._schema_id,
        )


_NO_SUBSCHEMAS: Any = object()


def builder(subschemas: Optional[Iterable[Schema]] = _NO_SUBSCHEMAS) -> CombinedSchemaBuilder:
    """Return a builder, optionally preset with *subschemas*.

    An explicit ``None`` is kept, so that ``build()`` reports the missing
    subschema collection.
    """
    result = CombinedSchemaBuilder()
    if subschemas is not _NO_SUBSCHEMAS:
        result.subschemas(subschemas)
    return result


def all_of(schemas: Optional[Iterable[Schema]]) -> CombinedSchemaBuilder:
    return builder(schemas).criterion(ALL_CRITERION)


def any_of(schemas: Optional[Iterable[Schema]]) -> CombinedSchemaBuilder:
    return builder(schemas).criterion(ANY_CRITERION)


def one_of(schemas: Optional[Iterable[Schema]]) -> CombinedSchemaBuilder:
    return builder(schemas).criterion(ONE_CRITERION)
