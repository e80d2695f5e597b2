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
"""Conditional bean decorators — control when beans are registered.

Every decorator works on classes and on ``@bean`` factory methods alike.
"""

from __future__ import annotations

import importlib
from typing import Any, TypeVar

from pyjms.container.ordering import AUTO_CONFIGURATION_ORDER
from pyjms.container.types import Scope

T = TypeVar("T")

_CONDITIONS_ATTR = "__pyjms_conditions__"


def _add_condition(target: T, condition: dict[str, Any]) -> T:
    # Copy so a subclass never appends to its parent's condition list
    conditions = [*getattr(target, _CONDITIONS_ATTR, []), condition]
    setattr(target, _CONDITIONS_ATTR, conditions)
    return target


def conditional_on_property(key: str, having_value: str = "") -> Any:
    """Only register this bean if the given config property matches.

    Evaluated at ApplicationContext startup against the Config.
    """

    def decorator(target: T) -> T:
        return _add_condition(target, {
            "type": "on_property",
            "key": key,
            "having_value": having_value,
        })

    return decorator


def conditional_on_class(module_name: str) -> Any:
    """Only register this bean if the given module is importable."""

    def _check() -> bool:
        try:
            importlib.import_module(module_name)
            return True
        except ImportError:
            return False

    def decorator(target: T) -> T:
        return _add_condition(target, {
            "type": "on_class",
            "module_name": module_name,
            "check": _check,
        })

    return decorator


def conditional_on_missing_bean(bean_type: type) -> Any:
    """Only register this bean if no other bean of the given type exists."""

    def decorator(target: T) -> T:
        return _add_condition(target, {"type": "on_missing_bean", "bean_type": bean_type})

    return decorator


def conditional_on_bean(bean_type: type) -> Any:
    """Only register this bean if another bean of the given type exists."""

    def decorator(target: T) -> T:
        return _add_condition(target, {"type": "on_bean", "bean_type": bean_type})

    return decorator


def auto_configuration(cls: type[T]) -> type[T]:
    """Mark a @configuration class as auto-configuration.

    Auto-configuration classes:
    - Are processed AFTER user @configuration classes
    - Get an implicit @order(AUTO_CONFIGURATION_ORDER) (lower priority)
    - Work with @conditional_on_* decorators
    """
    cls.__pyjms_auto_configuration__ = True  # type: ignore[attr-defined]
    cls.__pyjms_injectable__ = True  # type: ignore[attr-defined]
    cls.__pyjms_stereotype__ = "configuration"  # type: ignore[attr-defined]
    if not hasattr(cls, "__pyjms_scope__"):
        cls.__pyjms_scope__ = Scope.SINGLETON  # type: ignore[attr-defined]
    if not hasattr(cls, "__pyjms_order__"):
        cls.__pyjms_order__ = AUTO_CONFIGURATION_ORDER  # type: ignore[attr-defined]
    return cls


def is_auto_configuration(cls: type) -> bool:
    return bool(getattr(cls, "__pyjms_auto_configuration__", False))
