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
"""Listener container factory settings."""

from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any

from pyjms.jms.ports.outbound import ConnectionFactory, DestinationResolver, TransactionManager


@dataclass
class DefaultJmsListenerContainerFactory:
    """Mutable settings a listener container factory hands to the containers it creates.

    ``None`` means "not set": the container's own default applies.
    """

    connection_factory: ConnectionFactory | None = None
    pub_sub_domain: bool = False
    transaction_manager: TransactionManager | None = None
    session_transacted: bool = False
    destination_resolver: DestinationResolver | None = None
    auto_startup: bool = True
    session_acknowledge_mode: int | None = None
    concurrency: str | None = None

    def snapshot(self) -> dict[str, Any]:
        """Field values by name; referenced collaborators are not copied."""
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULTS: dict[str, Any] = DefaultJmsListenerContainerFactory().snapshot()
