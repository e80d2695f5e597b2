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
"""Condition evaluator — evaluates @conditional_on_* decorators during startup."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pyjms.kernel.exceptions import InvalidArgumentException

if TYPE_CHECKING:
    from pyjms.container.container import Container
    from pyjms.core.config import Config


# Condition types that depend on the bean registry (must be evaluated in pass 2).
_BEAN_DEPENDENT_TYPES = frozenset({"on_bean", "on_missing_bean"})


class ConditionEvaluator:
    """Evaluates @conditional_on_* decorators during ApplicationContext startup.

    Uses a two-pass strategy:
    - **Pass 1:** conditions independent of the bean registry
      (``on_property``, ``on_class``).
    - **Pass 2:** bean-dependent conditions (``on_bean``,
      ``on_missing_bean``) against the surviving set from pass 1.

    ``@bean`` methods are evaluated in a single pass with :meth:`matches`
    right before they are called.
    """

    def __init__(self, config: Config, container: Container) -> None:
        self._config = config
        self._container = container

    def should_include(self, cls: type, *, bean_pass: bool = False) -> bool:
        """Return True if all conditions of the requested pass hold for *cls*."""
        for cond in getattr(cls, "__pyjms_conditions__", []):
            is_bean_dep = cond["type"] in _BEAN_DEPENDENT_TYPES
            if is_bean_dep != bean_pass:
                continue
            if not self._evaluate(cond, declaring=cls):
                return False
        return True

    def matches(self, target: Any) -> bool:
        """Return True if every condition on *target* holds."""
        return all(
            self._evaluate(cond, declaring=None)
            for cond in getattr(target, "__pyjms_conditions__", [])
        )

    def _evaluate(self, cond: dict, *, declaring: type | None) -> bool:
        cond_type = cond["type"]
        if cond_type == "on_property":
            return self._eval_on_property(cond)
        if cond_type == "on_class":
            return cond["check"]()
        if cond_type == "on_missing_bean":
            return not self._container.has_bean_of_type(cond["bean_type"], exclude=declaring)
        if cond_type == "on_bean":
            return self._container.has_bean_of_type(cond["bean_type"], exclude=declaring)
        raise InvalidArgumentException(
            f"Unknown condition type {cond_type!r}",
            context={"condition": cond, "declaring": getattr(declaring, "__qualname__", None)},
        )

    def _eval_on_property(self, cond: dict) -> bool:
        value = self._config.get(cond["key"])
        if value is None:
            return False
        if cond["having_value"]:
            return str(value).lower() == cond["having_value"].lower()
        return True
