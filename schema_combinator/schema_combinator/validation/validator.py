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

from __future__ import annotations

import logging
from typing import Any, Optional

from ..config import ValidatorConfig
from ..exceptions import ValidationException
from ..models.schema import Schema
from .validating_visitor import ValidatingVisitor

logger = logging.getLogger(__name__)


class Validator:
    """Entry point for validating subjects against a schema tree."""

    def __init__(self, config: Optional[ValidatorConfig] = None):
        self.config = config or ValidatorConfig()

    def perform_validation(self, schema: Schema, subject: Any) -> None:
        """Validate *subject* against *schema*.

        Raises:
            ValidationException: If the subject violates the schema
        """
        try:
            ValidatingVisitor(subject, self.config).validate(schema)
        except ValidationException as e:
            logger.debug(f"Validation failed with {e.violation_count} violation(s): {e}")
            raise

    def is_valid(self, schema: Schema, subject: Any) -> bool:
        try:
            self.perform_validation(schema, subject)
        except ValidationException:
            return False
        return True
