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
"""Processing order for beans and configuration classes."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TypeVar

from pyjms.kernel.exceptions import InvalidArgumentException

T = TypeVar("T", bound=type)

HIGHEST_PRECEDENCE: int = -(2**31)
LOWEST_PRECEDENCE: int = 2**31 - 1

DEFAULT_ORDER = 0
AUTO_CONFIGURATION_ORDER = 1000

_ORDER_ATTR = "__pyjms_order__"


def order(value: int) -> Callable[[T], T]:
    """Give a class an explicit position; lower values are processed first.

    Auto-configurations without ``@order`` sit at ``AUTO_CONFIGURATION_ORDER``,
    other classes at ``DEFAULT_ORDER``.
    """
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgumentException(f"Order must be an int, got {value!r}")
    if not HIGHEST_PRECEDENCE <= value <= LOWEST_PRECEDENCE:
        raise InvalidArgumentException(
            f"Order {value} is outside [HIGHEST_PRECEDENCE, LOWEST_PRECEDENCE]",
            context={"order": value},
        )

    def decorator(cls: T) -> T:
        setattr(cls, _ORDER_ATTR, value)
        return cls

    return decorator


def get_order(cls: type) -> int:
    return getattr(cls, _ORDER_ATTR, DEFAULT_ORDER)


def sort_by_order(classes: Iterable[type]) -> list[type]:
    """Sort by ``@order``; classes with equal order keep their incoming order."""
    return sorted(classes, key=get_order)
