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

"""Error reporting for the linter."""

from typing import Any, Dict, List, Optional


class LintResult:
    """Container for linting results for a single schema node."""

    def __init__(self, schema_pointer: str):
        """Initialize lint result.

        Args:
            schema_pointer: JSON pointer of the schema node being linted
        """
        self.schema_pointer = schema_pointer
        self.errors: List[Dict[str, Any]] = []
        self.warnings: List[Dict[str, Any]] = []

    @property
    def has_errors(self) -> bool:
        return bool(self.errors)

    @property
    def has_issues(self) -> bool:
        return bool(self.errors or self.warnings)

    def add_error(self, message: str, keyword: Optional[str] = None):
        """Add an error message.

        Args:
            message: Error message
            keyword: Optional schema keyword the error is about
        """
        error = {'message': message}
        if keyword is not None:
            error['keyword'] = keyword
        self.errors.append(error)

    def add_warning(self, message: str, keyword: Optional[str] = None):
        warning = {'message': message}
        if keyword is not None:
            warning['keyword'] = keyword
        self.warnings.append(warning)

    def format(self) -> str:
        lines = [f"{self.schema_pointer}:"]
        lines.extend(f"  error: {e['message']}" for e in self.errors)
        lines.extend(f"  warning: {w['message']}" for w in self.warnings)
        return "\n".join(lines)
