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

"""Validator configuration.

Settings can be given explicitly or read from the environment:

  * ``SCHEMA_COMBINATOR_FAIL_EARLY`` - stop at the first violation instead of
    collecting every violation of the subject.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

FAIL_EARLY_ENV = "SCHEMA_COMBINATOR_FAIL_EARLY"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"", "0", "false", "no", "off"}


def _parse_bool(name: str, raw: str) -> bool:
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value for {name}: '{raw}'. Expected one of: {sorted(_TRUE_VALUES | _FALSE_VALUES)}")


@dataclass(frozen=True)
class ValidatorConfig:
    """Options for a validation run."""

    fail_early: bool = False

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ValidatorConfig":
        env = os.environ if environ is None else environ
        raw = env.get(FAIL_EARLY_ENV)
        if raw is None:
            return cls()
        return cls(fail_early=_parse_bool(FAIL_EARLY_ENV, raw))
