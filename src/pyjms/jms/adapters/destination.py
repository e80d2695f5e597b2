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
"""Default destination resolution: ask the session for a queue or a topic."""

from __future__ import annotations

from typing import Any

from pyjms.jms.ports.outbound import Session
from pyjms.kernel.exceptions import InvalidArgumentException


class DynamicDestinationResolver:
    """Resolve names to topics in publish/subscribe mode and to queues otherwise."""

    def resolve_destination_name(
        self,
        session: Session,
        destination_name: str,
        pub_sub_domain: bool,
    ) -> Any:
        if session is None:
            raise InvalidArgumentException("Session must not be None")
        if not destination_name:
            raise InvalidArgumentException("Destination name must not be empty")
        if pub_sub_domain:
            return session.create_topic(destination_name)
        return session.create_queue(destination_name)
