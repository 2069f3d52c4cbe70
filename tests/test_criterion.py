from __future__ import annotations

import pytest

from schema_combinator.exceptions import CriterionNotSatisfied, ValidationException
from schema_combinator.models.criterion import (
    ALL_CRITERION,
    ANY_CRITERION,
    ONE_CRITERION,
    ValidationCriterion,
)


def _passes(criterion: ValidationCriterion, total: int, matching: int) -> bool:
    try:
        criterion.validate(total, matching)
    except CriterionNotSatisfied:
        return False
    return True


@pytest.mark.parametrize("total", range(0, 5))
def test_builtin_criteria_policies(total: int) -> None:
    for matching in range(0, total + 1):
        assert _passes(ALL_CRITERION, total, matching) == (matching == total)
        assert _passes(ANY_CRITERION, total, matching) == (matching > 0)
        assert _passes(ONE_CRITERION, total, matching) == (matching == 1)


def test_all_criterion_message() -> None:
    with pytest.raises(CriterionNotSatisfied) as excinfo:
        ALL_CRITERION.validate(3, 2)

    assert excinfo.value.error_message == "only 2 subschema matches out of 3"
    assert excinfo.value.keyword == "allOf"
    assert excinfo.value.violated_schema is None


def test_any_criterion_message() -> None:
    with pytest.raises(CriterionNotSatisfied) as excinfo:
        ANY_CRITERION.validate(4, 0)

    assert excinfo.value.error_message == "no subschema matched out of the total 4 subschemas"
    assert excinfo.value.keyword == "anyOf"


def test_one_criterion_message() -> None:
    with pytest.raises(CriterionNotSatisfied) as excinfo:
        ONE_CRITERION.validate(3, 2)

    assert excinfo.value.error_message == "2 subschemas matched instead of one"
    assert excinfo.value.keyword == "oneOf"


def test_criterion_failure_is_a_validation_exception() -> None:
    with pytest.raises(ValidationException):
        ONE_CRITERION.validate(2, 0)


def test_names_are_canonical_keywords() -> None:
    assert [str(c) for c in (ALL_CRITERION, ANY_CRITERION, ONE_CRITERION)] == ["allOf", "anyOf", "oneOf"]
    assert len({ALL_CRITERION, ANY_CRITERION, ONE_CRITERION}) == 3


def test_custom_criterion() -> None:
    class AtLeastTwo(ValidationCriterion):
        NAME = "atLeastTwo"

        def validate(self, subschema_count: int, matching_count: int) -> None:
            if matching_count < 2:
                self.fail(f"{matching_count} subschemas matched instead of at least two")

    criterion = AtLeastTwo()
    criterion.validate(3, 2)
    with pytest.raises(CriterionNotSatisfied) as excinfo:
        criterion.validate(3, 1)

    assert excinfo.value.keyword == "atLeastTwo"
    assert criterion == AtLeastTwo()
    assert criterion != ALL_CRITERION


def test_criterion_without_name_is_rejected() -> None:
    class Nameless(ValidationCriterion):
        def validate(self, subschema_count: int, matching_count: int) -> None:
            pass

    with pytest.raises(NotImplementedError):
        Nameless().name
