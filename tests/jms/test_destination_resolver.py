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
"""Tests for DynamicDestinationResolver."""

from __future__ import annotations

import pytest

from pyjms.jms.adapters.destination import DynamicDestinationResolver
from pyjms.jms.ports.outbound import DestinationResolver, Session
from pyjms.kernel.exceptions import InvalidArgumentException


class RecordingSession:
    def create_queue(self, name: str) -> tuple[str, str]:
        return ("queue", name)

    def create_topic(self, name: str) -> tuple[str, str]:
        return ("topic", name)


class TestDynamicDestinationResolver:
    def test_satisfies_port(self) -> None:
        assert isinstance(DynamicDestinationResolver(), DestinationResolver)
        assert isinstance(RecordingSession(), Session)

    def test_point_to_point_resolves_queue(self) -> None:
        resolver = DynamicDestinationResolver()
        assert resolver.resolve_destination_name(RecordingSession(), "orders", False) == ("queue", "orders")

    def test_pub_sub_resolves_topic(self) -> None:
        resolver = DynamicDestinationResolver()
        assert resolver.resolve_destination_name(RecordingSession(), "prices", True) == ("topic", "prices")

    def test_empty_name_rejected(self) -> None:
        with pytest.raises(InvalidArgumentException, match="Destination name"):
            DynamicDestinationResolver().resolve_destination_name(RecordingSession(), "", False)

    def test_none_session_rejected(self) -> None:
        with pytest.raises(InvalidArgumentException, match="Session"):
            DynamicDestinationResolver().resolve_destination_name(None, "orders", False)  # type: ignore[arg-type]
