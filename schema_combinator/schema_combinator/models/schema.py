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

"""Schema node types.

A schema tree is immutable once built. Every node carries the same identity
metadata (title, description, id) and answers two questions without looking
at any document: which visitor method handles it (``accept``) and whether it
declares a given property (``defines_property``).
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping, Optional, Tuple

from ..exceptions import SchemaConstructionError

if TYPE_CHECKING:
    from .visitor import SchemaVisitor


def _split_pointer(field: str) -> Tuple[str, Optional[str]]:
    """Split ``#/a/b`` (or ``/a/b`` or ``a/b``) into ``("a", "b")``."""
    if field.startswith("#"):
        field = field[1:]
    if field.startswith("/"):
        field = field[1:]
    head, sep, tail = field.partition("/")
    head = head.replace("~1", "/").replace("~0", "~")
    return head, (tail if sep else None)


def json_equals(left: Any, right: Any) -> bool:
    """Compare two JSON values the way JSON Schema does (``true`` is not ``1``)."""
    if isinstance(left, bool) or isinstance(right, bool):
        return isinstance(left, bool) and isinstance(right, bool) and left == right
    if isinstance(left, (int, float)) and isinstance(right, (int, float)):
        return left == right
    if isinstance(left, dict) and isinstance(right, dict):
        return left.keys() == right.keys() and all(json_equals(left[k], right[k]) for k in left)
    if isinstance(left, list) and isinstance(right, list):
        return len(left) == len(right) and all(json_equals(a, b) for a, b in zip(left, right))
    return type(left) is type(right) and left == right


class Schema:
    """Base class of all schema nodes."""

    def __init__(
        self,
        *,
        title: Optional[str] = None,
        description: Optional[str] = None,
        schema_id: Optional[str] = None,
    ):
        self._title = title
        self._description = description
        self._schema_id = schema_id

    @property
    def title(self) -> Optional[str]:
        return self._title

    @property
    def description(self) -> Optional[str]:
        return self._description

    @property
    def schema_id(self) -> Optional[str]:
        return self._schema_id

    def defines_property(self, field: str) -> bool:
        return False

    def accept(self, visitor: "SchemaVisitor") -> None:
        visitor.visit_schema(self)

    def validate(self, subject: Any) -> None:
        """Validate *subject*, raising ValidationException on failure."""
        from ..validation.validator import Validator

        Validator().perform_validation(self, subject)

    def _metadata(self) -> Tuple[Optional[str], ...]:
        return (self._title, self._description, self._schema_id)

    def _equality_key(self) -> Tuple[Any, ...]:
        return ()

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Schema) or type(self) is not type(other):
            return False
        return self._metadata() == other._metadata() and self._equality_key() == other._equality_key()

    def __hash__(self) -> int:
        return hash((type(self).__name__, self._metadata(), self._equality_key()))

    def _metadata_repr(self) -> str:
        names = ("title", "description", "schema_id")
        return "".join(f", {name}={value!r}" for name, value in zip(names, self._metadata()) if value is not None)

    def __repr__(self) -> str:
        parts = ", ".join(repr(part) for part in self._equality_key())
        return f"{type(self).__name__}({parts}{self._metadata_repr()})"


class EmptySchema(Schema):
    """Accepts every subject (the ``true`` schema)."""

    def accept(self, visitor: "SchemaVisitor") -> None:
        visitor.visit_empty_schema(self)


class FalseSchema(Schema):
    """Rejects every subject (the ``false`` schema)."""

    def accept(self, visitor: "SchemaVisitor") -> None:
        visitor.visit_false_schema(self)


class ConstSchema(Schema):
    def __init__(self, value: Any, **metadata: Optional[str]):
        super().__init__(**metadata)
        self._value = value

    @property
    def value(self) -> Any:
        return self._value

    def accept(self, visitor: "SchemaVisitor") -> None:
        visitor.visit_const_schema(self)

    def _equality_key(self) -> Tuple[Any, ...]:
        return (json.dumps(self._value, sort_keys=True, default=repr),)


class StringSchema(Schema):
    def __init__(
        self,
        min_length: Optional[int] = None,
        max_length: Optional[int] = None,
        **metadata: Optional[str],
    ):
        super().__init__(**metadata)
        if min_length is not None and max_length is not None and min_length > max_length:
            raise SchemaConstructionError(f"minLength {min_length} is greater than maxLength {max_length}")
        self._min_length = min_length
        self._max_length = max_length

    @property
    def min_length(self) -> Optional[int]:
        return self._min_length

    @property
    def max_length(self) -> Optional[int]:
        return self._max_length

    def accept(self, visitor: "SchemaVisitor") -> None:
        visitor.visit_string_schema(self)

    def _equality_key(self) -> Tuple[Any, ...]:
        return (self._min_length, self._max_length)


class NumberSchema(Schema):
    def __init__(
        self,
        minimum: Optional[float] = None,
        maximum: Optional[float] = None,
        requires_integer: bool = False,
        **metadata: Optional[str],
    ):
        super().__init__(**metadata)
        self._minimum = minimum
        self._maximum = maximum
        self._requires_integer = requires_integer

    @property
    def minimum(self) -> Optional[float]:
        return self._minimum

    @property
    def maximum(self) -> Optional[float]:
        return self._maximum

    @property
    def requires_integer(self) -> bool:
        return self._requires_integer

    def accept(self, visitor: "SchemaVisitor") -> None:
        visitor.visit_number_schema(self)

    def _equality_key(self) -> Tuple[Any, ...]:
        return (self._minimum, self._maximum, self._requires_integer)


class ObjectSchema(Schema):
    """Object subject with declared property schemas and required property names."""

    def __init__(
        self,
        property_schemas: Optional[Mapping[str, Schema]] = None,
        required_properties: Iterable[str] = (),
        **metadata: Optional[str],
    ):
        super().__init__(**metadata)
        self._property_schemas: Dict[str, Schema] = dict(property_schemas or {})
        self._required_properties: Tuple[str, ...] = tuple(dict.fromkeys(required_properties))

    @property
    def property_schemas(self) -> Dict[str, Schema]:
        return dict(self._property_schemas)

    @property
    def required_properties(self) -> Tuple[str, ...]:
        return self._required_properties

    def defines_property(self, field: str) -> bool:
        current, remaining = _split_pointer(field)
        if current in self._property_schemas:
            if remaining is None:
                return True
            return self._property_schemas[current].defines_property(remaining)
        return remaining is None and current in self._required_properties

    def accept(self, visitor: "SchemaVisitor") -> None:
        visitor.visit_object_schema(self)

    def _equality_key(self) -> Tuple[Any, ...]:
        return (
            tuple(sorted(self._property_schemas.items(), key=lambda item: item[0])),
            tuple(sorted(self._required_properties)),
        )
