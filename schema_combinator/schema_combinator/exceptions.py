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

"""Custom exceptions for the schema combinator system."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, List, Optional, Tuple

if TYPE_CHECKING:
    from .models.schema import Schema


class SchemaCombinatorError(Exception):
    """Base exception for schema-combinator related errors."""
    pass


class SchemaConstructionError(SchemaCombinatorError):
    """Exception raised when a schema object graph is malformed."""
    pass


class SchemaDocumentError(SchemaCombinatorError):
    """Exception raised when a serialized schema is rejected by the metaschema."""
    pass


class ValidationException(SchemaCombinatorError):
    """A subject failed to validate against a schema.

    Failures of nested schemas are kept in ``causing_exceptions`` so that the
    caller can inspect the whole tree of violations. A leaf exception (no
    causes) counts as one violation.
    """

    def __init__(
        self,
        violated_schema: Optional["Schema"],
        message: str,
        keyword: Optional[str] = None,
        causing_exceptions: Iterable["ValidationException"] = (),
        pointer: str = "#",
    ):
        self.violated_schema = violated_schema
        self.error_message = message
        self.keyword = keyword
        self.causing_exceptions: Tuple[ValidationException, ...] = tuple(causing_exceptions)
        self.pointer_to_violation = pointer
        super().__init__(f"{pointer}: {message}")

    @property
    def violation_count(self) -> int:
        if not self.causing_exceptions:
            return 1
        return sum(cause.violation_count for cause in self.causing_exceptions)

    def prepend(self, fragment: str) -> "ValidationException":
        """Return a copy whose pointer (and its causes' pointers) is nested under *fragment*."""
        escaped = str(fragment).replace("~", "~0").replace("/", "~1")
        return ValidationException(
            self.violated_schema,
            self.error_message,
            keyword=self.keyword,
            causing_exceptions=[cause.prepend(fragment) for cause in self.causing_exceptions],
            pointer="#/" + escaped + self.pointer_to_violation[1:],
        )

    def all_messages(self) -> List[str]:
        if not self.causing_exceptions:
            return [str(self)]
        messages: List[str] = []
        for cause in self.causing_exceptions:
            messages.extend(cause.all_messages())
        return messages

    def to_dict(self) -> Dict[str, Any]:
        result: Dict[str, Any] = {
            "pointerToViolation": self.pointer_to_violation,
            "keyword": self.keyword,
            "message": self.error_message,
        }
        if self.causing_exceptions:
            result["causingExceptions"] = [cause.to_dict() for cause in self.causing_exceptions]
        return result


class CriterionNotSatisfied(ValidationException):
    """Exception raised by a validation criterion when the match count violates its rule."""

    def __init__(self, message: str, keyword: str):
        super().__init__(None, message, keyword=keyword)
