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
"""LoggingPort — how a context sets up logging before its beans are created."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from pyjms.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """Logging backend driven by the ``pyjms.logging`` section.

    ``ApplicationContext.start()`` calls :meth:`configure` once, before any
    condition is evaluated, so startup events already use the configured
    levels and renderer.
    """

    def configure(self, config: Config) -> None:
        """Apply ``pyjms.logging.level.*`` and ``pyjms.logging.format``."""
        ...

    def get_logger(self, name: str) -> Any: ...

    def set_level(self, name: str, level: str) -> None:
        """Change the level of one logger, e.g. ``pyjms.jms.configurer``."""
        ...
