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

"""Pass/fail criteria for combined schemas (``allOf``, ``anyOf``, ``oneOf``)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ..exceptions import CriterionNotSatisfied


class ValidationCriterion(ABC):
    """Decides whether a combined schema passes from its subschema match counts.

    Subclasses define ``NAME`` (the keyword used in diagnostics) and
    implement :meth:`validate`.
    """

    NAME: str

    @property
    def name(self) -> str:
        name = getattr(type(self), "NAME", None)
        if not isinstance(name, str) or not name:
            raise NotImplementedError("Criterion must define NAME")
        return name

    @abstractmethod
    def validate(self, subschema_count: int, matching_count: int) -> None:
        """Raise :class:`CriterionNotSatisfied` if the criterion is not fulfilled.

        Args:
            subschema_count: Total number of checked subschemas
            matching_count: Number of subschemas which matched
        """

    def fail(self, message: str) -> None:
        raise CriterionNotSatisfied(message, keyword=self.name)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationCriterion):
            return NotImplemented
        return type(self) is type(other) and self.name == other.name

    def __hash__(self) -> int:
        return hash((type(self).__name__, self.name))

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


class AllCriterion(ValidationCriterion):
    NAME = "allOf"

    def validate(self, subschema_count: int, matching_count: int) -> None:
        if matching_count < subschema_count:
            self.fail(f"only {matching_count} subschema matches out of {subschema_count}")


class AnyCriterion(ValidationCriterion):
    NAME = "anyOf"

    def validate(self, subschema_count: int, matching_count: int) -> None:
        if matching_count == 0:
            self.fail(f"no subschema matched out of the total {subschema_count} subschemas")


class OneCriterion(ValidationCriterion):
    NAME = "oneOf"

    def validate(self, subschema_count: int, matching_count: int) -> None:
        if matching_count != 1:
            self.fail(f"{matching_count} subschemas matched instead of one")


ALL_CRITERION = AllCriterion()
ANY_CRITERION = AnyCriterion()
ONE_CRITERION = OneCriterion()
