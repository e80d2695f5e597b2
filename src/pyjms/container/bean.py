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
"""@bean factory methods and the @primary marker."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar, overload

F = TypeVar("F", bound=Callable)
T = TypeVar("T", bound=type)


@overload
def bean(func: F) -> F: ...


@overload
def bean(*, name: str = "") -> Callable[[F], F]: ...


def bean(func: F | None = None, *, name: str = "") -> F | Callable[[F], F]:
    """Mark a method inside a @configuration class as a singleton bean factory.

    The return type annotation determines the type the bean is registered as.
    The method name is the bean name unless *name* is given.
    """

    def decorator(func: F) -> F:
        func.__pyjms_bean__ = True  # type: ignore[attr-defined]
        if name:
            func.__pyjms_bean_name__ = name  # type: ignore[attr-defined]
        return func

    if func is not None:
        return decorator(func)
    return decorator


def primary(cls: T) -> T:
    """Mark a class as the primary implementation when multiple candidates exist."""
    cls.__pyjms_primary__ = True  # type: ignore[attr-defined]
    return cls
