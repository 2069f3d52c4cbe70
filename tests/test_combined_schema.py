from __future__ import annotations

from collections import Counter

import pytest

from schema_combinator.exceptions import SchemaConstructionError, ValidationException
from schema_combinator.models import (
    ALL_CRITERION,
    ANY_CRITERION,
    CombinedSchema,
    CombinedSchemaBuilder,
    ConstSchema,
    NumberSchema,
    StringSchema,
    all_of,
    any_of,
    builder,
    one_of,
)


def test_evaluation_order_puts_combined_schemas_first() -> None:
    leaf_a = StringSchema(min_length=1)
    combined_b = any_of([NumberSchema()]).build()
    leaf_c = ConstSchema("c")
    combined_d = one_of([StringSchema()]).build()

    schema = all_of([leaf_a, combined_b, leaf_c, combined_d]).build()

    ordered = list(schema.subschemas_with_combined_first)
    assert set(ordered[:2]) == {combined_b, combined_d}
    assert set(ordered[2:]) == {leaf_a, leaf_c}
    assert list(schema.subschemas) == [leaf_a, combined_b, leaf_c, combined_d]


def test_evaluation_order_is_a_permutation() -> None:
    children = [
        ConstSchema(1),
        all_of([ConstSchema(2)]).build(),
        ConstSchema(1),
        StringSchema(),
        any_of([]).build(),
    ]

    schema = any_of(children).build()

    assert len(schema.subschemas_with_combined_first) == len(children)
    assert Counter(schema.subschemas_with_combined_first) == Counter(children)


def test_evaluation_order_is_deterministic() -> None:
    children = [ConstSchema(i) for i in range(10)] + [all_of([ConstSchema(i)]).build() for i in range(3)]

    first = all_of(children).build()
    second = all_of(list(children)).build()

    assert first.subschemas_with_combined_first == second.subschemas_with_combined_first


def test_insertion_order_does_not_affect_equality() -> None:
    a = StringSchema(min_length=1)
    b = NumberSchema(minimum=0)
    nested = any_of([ConstSchema("x")]).build()

    left = all_of([a, nested, b]).build()
    right = all_of([b, a, nested]).build()

    assert left == right
    assert hash(left) == hash(right)


def test_different_criteria_are_not_equal() -> None:
    children = [StringSchema(), NumberSchema()]

    assert all_of(children).build() != any_of(children).build()


def test_synthetic_flag_and_metadata_take_part_in_equality() -> None:
    children = [StringSchema()]

    plain = all_of(children).build()

    assert plain != all_of(children).is_synthetic(True).build()
    assert plain != all_of(children).title("named").build()
    assert plain == all_of(children).build()


def test_combined_schema_is_not_equal_to_other_schema_types() -> None:
    assert all_of([]).build() != StringSchema()
    assert all_of([]).build() != "allOf"


def test_equal_schemas_collapse_in_sets() -> None:
    children = [ConstSchema(1), ConstSchema(2)]

    assert len({all_of(children).build(), all_of(list(reversed(children))).build()}) == 1


def test_has_multiple_combined_schemas_of_same_criterion() -> None:
    x, y, z = ConstSchema("x"), ConstSchema("y"), ConstSchema("z")

    repeated = any_of([all_of([x]).build(), all_of([y]).build(), any_of([z]).build()]).build()
    distinct = any_of([all_of([x]).build(), any_of([y]).build()]).build()

    assert repeated.has_multiple_combined_schemas_of_same_criterion() is True
    assert distinct.has_multiple_combined_schemas_of_same_criterion() is False


def test_has_multiple_ignores_leaf_children() -> None:
    schema = all_of([ConstSchema(1), ConstSchema(2), any_of([]).build()]).build()

    assert schema.has_multiple_combined_schemas_of_same_criterion() is False


def test_defines_property_all_of(defines_x, lacks_x) -> None:
    children = [defines_x("s1"), defines_x("s2"), lacks_x("s3")]

    assert all_of(children).build().defines_property("x") is False
    assert any_of(children).build().defines_property("x") is True


def test_defines_property_one_of(defines_x) -> None:
    schema = one_of([defines_x("s1"), defines_x("s2")]).build()

    assert schema.defines_property("x") is False


def test_defines_property_one_of_single_match(defines_x, lacks_x) -> None:
    schema = one_of([defines_x("s1"), lacks_x("s2")]).build()

    assert schema.defines_property("x") is True


def test_defines_property_recurses_into_nested_combined(defines_x) -> None:
    nested = all_of([defines_x("inner")]).build()

    assert any_of([nested]).build().defines_property("x") is True
    assert any_of([nested]).build().defines_property("missing") is False


def test_defines_property_on_empty_subschemas() -> None:
    assert all_of([]).build().defines_property("x") is True
    assert any_of([]).build().defines_property("x") is False


def test_missing_criterion_is_a_construction_error() -> None:
    with pytest.raises(SchemaConstructionError):
        builder().subschema(StringSchema()).build()


def test_missing_subschemas_is_a_construction_error() -> None:
    with pytest.raises(SchemaConstructionError):
        all_of(None).build()
    with pytest.raises(SchemaConstructionError):
        CombinedSchema(ANY_CRITERION, None)


def test_construction_error_is_not_a_validation_exception() -> None:
    with pytest.raises(SchemaConstructionError) as excinfo:
        CombinedSchema(None, [])

    assert not isinstance(excinfo.value, ValidationException)


def test_builder_accumulates_parts() -> None:
    first, second = StringSchema(), NumberSchema()

    schema = (
        CombinedSchemaBuilder()
        .criterion(ALL_CRITERION)
        .subschema(first)
        .subschema(second)
        .is_synthetic(True)
        .title("title")
        .description("description")
        .schema_id("urn:combined")
        .build()
    )

    assert schema.criterion is ALL_CRITERION
    assert schema.subschemas == (first, second)
    assert schema.synthetic is True
    assert (schema.title, schema.description, schema.schema_id) == ("title", "description", "urn:combined")


def test_builder_subschemas_replaces_collection() -> None:
    replacement = [ConstSchema(2)]

    schema = builder().criterion(ANY_CRITERION).subschema(ConstSchema(1)).subschemas(replacement).build()

    assert schema.subschemas == (ConstSchema(2),)


def test_built_schema_does_not_track_later_builder_changes() -> None:
    schema_builder = all_of([ConstSchema(1)])
    schema = schema_builder.build()

    schema_builder.subschema(ConstSchema(2))

    assert schema.subschemas == (ConstSchema(1),)
    assert len(schema_builder.build().subschemas) == 2


def test_convenience_constructors_preset_criterion() -> None:
    assert all_of([]).build().criterion.name == "allOf"
    assert any_of([]).build().criterion.name == "anyOf"
    assert one_of([]).build().criterion.name == "oneOf"


def test_builder_can_be_preset_with_subschemas() -> None:
    child = StringSchema()

    schema = builder([child]).criterion(ANY_CRITERION).build()

    assert schema.subschemas == (child,)
    assert schema.criterion is ANY_CRITERION
    assert builder().criterion(ANY_CRITERION).build().subschemas == ()


def test_leaf_order_does_not_depend_on_hashing() -> None:
    a, b, c = ConstSchema("a"), ConstSchema("b"), ConstSchema("c")

    schema = all_of([c, a, b]).build()

    assert schema.subschemas_with_combined_first == (a, b, c)


def test_leaves_differing_only_in_metadata_are_ordered_by_content() -> None:
    plain = StringSchema()
    titled = StringSchema(title="named")

    assert all_of([plain, titled]).build() == all_of([titled, plain]).build()


def test_subclass_is_not_equal_to_base_combined_schema() -> None:
    class TaggedCombinedSchema(CombinedSchema):
        pass

    children = [StringSchema()]
    base = CombinedSchema(ALL_CRITERION, children)
    tagged = TaggedCombinedSchema(ALL_CRITERION, children)

    assert base != tagged
    assert tagged != base
