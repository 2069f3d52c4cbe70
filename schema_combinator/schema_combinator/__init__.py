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

"""Combined (``allOf`` / ``anyOf`` / ``oneOf``) JSON Schema validation."""

__version__ = "0.1.0"

# Metaschema used when writing schema documents
JSON_SCHEMA_DRAFT = "http://json-schema.org/draft-07/schema#"

from .config import ValidatorConfig  # noqa: E402
from .exceptions import (  # noqa: E402
    CriterionNotSatisfied,
    SchemaCombinatorError,
    SchemaConstructionError,
    SchemaDocumentError,
    ValidationException,
)
from .models import (  # noqa: E402
    ALL_CRITERION,
    ANY_CRITERION,
    ONE_CRITERION,
    CombinedSchema,
    CombinedSchemaBuilder,
    ConstSchema,
    EmptySchema,
    FalseSchema,
    NumberSchema,
    ObjectSchema,
    Schema,
    SchemaVisitor,
    StringSchema,
    ValidationCriterion,
    all_of,
    any_of,
    builder,
    one_of,
)
from .validation import Validator  # noqa: E402

__all__ = [
    "JSON_SCHEMA_DRAFT",
    "ValidatorConfig",
    "CriterionNotSatisfied",
    "SchemaCombinatorError",
    "SchemaConstructionError",
    "SchemaDocumentError",
    "ValidationException",
    "ALL_CRITERION",
    "ANY_CRITERION",
    "ONE_CRITERION",
    "CombinedSchema",
    "CombinedSchemaBuilder",
    "ConstSchema",
    "EmptySchema",
    "FalseSchema",
    "NumberSchema",
    "ObjectSchema",
    "Schema",
    "SchemaVisitor",
    "StringSchema",
    "ValidationCriterion",
    "all_of",
    "any_of",
    "builder",
    "one_of",
    "Validator",
]
