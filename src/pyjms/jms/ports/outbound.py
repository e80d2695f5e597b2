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
"""Outbound ports for the collaborators a listener container factory holds."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class ConnectionFactory(Protocol):
    def create_connection(self) -> Any: ...


@runtime_checkable
class Session(Protocol):
    def create_queue(self, name: str) -> Any: ...

    def create_topic(self, name: str) -> Any: ...


@runtime_checkable
class DestinationResolver(Protocol):
    """Maps a logical destination name to a broker destination."""

    def resolve_destination_name(
        self,
        session: Session,
        destination_name: str,
        pub_sub_domain: bool,
    ) -> Any: ...


@runtime_checkable
class TransactionManager(Protocol):
    """Coordinates transaction demarcation across resources."""

    def get_transaction(self, definition: Any = None) -> Any: ...

    def commit(self, status: Any) -> None: ...

    def rollback(self, status: Any) -> None: ...
