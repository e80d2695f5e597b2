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
"""JMS configuration properties (pyjms.jms.*)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from pyjms.core.config import config_properties
from pyjms.jms.types import AcknowledgeMode


class ListenerProperties(BaseModel):
    """Listener container settings (pyjms.jms.listener.*)."""

    model_config = ConfigDict(frozen=True)

    auto_startup: bool = True
    acknowledge_mode: AcknowledgeMode | None = None
    concurrency: int | None = Field(default=None, ge=1)
    max_concurrency: int | None = Field(default=None, ge=1)

    @field_validator("acknowledge_mode", mode="before")
    @classmethod
    def _parse_acknowledge_mode(cls, value: Any) -> AcknowledgeMode | None:
        if value is None or value == "":
            return None
        return AcknowledgeMode.parse(value)

    @model_validator(mode="after")
    def _check_concurrency_range(self) -> ListenerProperties:
        if (
            self.concurrency is not None
            and self.max_concurrency is not None
            and self.max_concurrency < self.concurrency
        ):
            raise ValueError(
                f"max_concurrency ({self.max_concurrency}) must not be lower "
                f"than concurrency ({self.concurrency})"
            )
        return self

    def format_concurrency(self) -> str | None:
        """Render the bounds as a concurrency specification.

        ``(3, 10)`` -> ``"3-10"``, ``(3, None)`` -> ``"3"``,
        ``(None, 10)`` -> ``"1-10"``, ``(None, None)`` -> ``None``.
        """
        if self.concurrency is None:
            return f"1-{self.max_concurrency}" if self.max_concurrency is not None else None
        if self.max_concurrency is not None:
            return f"{self.concurrency}-{self.max_concurrency}"
        return str(self.concurrency)


@config_properties(prefix="pyjms.jms")
class JmsProperties(BaseModel):
    """Configuration for JMS listener defaults (pyjms.jms.*)."""

    model_config = ConfigDict(frozen=True)

    pub_sub_domain: bool = False
    listener: ListenerProperties = Field(default_factory=ListenerProperties)
