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
"""Unified exception hierarchy for pyjms.

All library exceptions inherit from PyJmsException so callers can catch
every pyjms error in one place, or a specific subclass for targeted handling.

Categories:
- BusinessException: caller errors, validation and argument failures
- InfrastructureException: wiring and startup failures
"""

from __future__ import annotations

from typing import Any

# =============================================================================
# Base Exception
# =============================================================================


class PyJmsException(Exception):
    """Base exception for all pyjms errors.

    Args:
        message: Human-readable error description.
        code: Machine-readable error code (e.g. "INVALID_ARGUMENT").
        context: Arbitrary key-value pairs for error context and debugging.
    """

    def __init__(
        self,
        message: str,
        code: str | None = None,
        context: dict | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.context: dict = context if context is not None else {}


# =============================================================================
# Business Exceptions
# =============================================================================


class BusinessException(PyJmsException):
    """Caller-side rule violations."""


class ValidationException(BusinessException):
    """Input validation failures."""


class InvalidArgumentException(ValidationException):
    """A required argument was missing or malformed."""

    def __init__(self, message: str, context: dict | None = None) -> None:
        super().__init__(message, code="INVALID_ARGUMENT", context=context)


def require_not_none(value: Any, message: str) -> Any:
    """Return *value*, raising InvalidArgumentException when it is ``None``."""
    if value is None:
        raise InvalidArgumentException(message)
    return value


# =============================================================================
# Infrastructure Exceptions
# =============================================================================


class InfrastructureException(PyJmsException):
    """Wiring, startup and environment failures."""
