# Copyright 2026 Firefly Software Solutions Inc.
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
"""JMS value types."""

from __future__ import annotations

from enum import Enum
from typing import Any


class AcknowledgeMode(Enum):
    """Session acknowledge modes, valued with their JMS session codes."""

    TRANSACTED = 0
    AUTO = 1
    CLIENT = 2
    DUPS_OK = 3

    @property
    def code(self) -> int:
        """Numeric session acknowledge mode understood by listener containers."""
        return self.value

    @classmethod
    def parse(cls, value: Any) -> AcknowledgeMode:
        """Accept a member, its code, or a case-insensitive name (``dups-ok`` works too)."""
        if isinstance(value, cls):
            return value
        if isinstance(value, int) and not isinstance(value, bool):
            return cls(value)
        if isinstance(value, str):
            key = value.strip().upper().replace("-", "_")
            if key in cls.__members__:
                return cls[key]
        raise ValueError(
            f"Unknown acknowledge mode {value!r}; expected one of {', '.join(cls.__members__)}"
        )
