"""Schema object graph.

This package intentionally avoids depending on the traversal modules
(validation/file_io/linter) so that the object graph stays independent of
how it is walked.
"""

from .criterion import (
    ALL_CRITERION,
    ANY_CRITERION,
    ONE_CRITERION,
    AllCriterion,
    AnyCriterion,
    OneCriterion,
    ValidationCriterion,
)
from .combined_schema import CombinedSchema, CombinedSchemaBuilder, all_of, any_of, builder, one_of
from .schema import (
    ConstSchema,
    EmptySchema,
    FalseSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    StringSchema,
)
from .visitor import SchemaVisitor

__all__ = [
    "ALL_CRITERION",
    "ANY_CRITERION",
    "ONE_CRITERION",
    "AllCriterion",
    "AnyCriterion",
    "OneCriterion",
    "ValidationCriterion",
    "CombinedSchema",
    "CombinedSchemaBuilder",
    "all_of",
    "any_of",
    "builder",
    "one_of",
    "ConstSchema",
    "EmptySchema",
    "FalseSchema",
    "NumberSchema",
    "ObjectSchema",
    "Schema",
    "StringSchema",
    "SchemaVisitor",
]
