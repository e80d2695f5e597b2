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
"""ApplicationContext — the central bean registry and startup sequence."""

from __future__ import annotations

import inspect
import typing
from typing import Any, TypeVar

import structlog

from pyjms.container.container import Container
from pyjms.container.exceptions import BeanCreationException, NoSuchBeanError, NoUniqueBeanError
from pyjms.container.ordering import sort_by_order
from pyjms.container.types import Scope
from pyjms.context.condition_evaluator import ConditionEvaluator
from pyjms.context.conditions import is_auto_configuration
from pyjms.core.config import Config
from pyjms.logging.port import LoggingPort

T = TypeVar("T")

logger = structlog.get_logger("pyjms.context")


class ApplicationContext:
    """Central bean registry and composition root.

    Wraps the DI Container and adds:
    - @bean factory method resolution from @configuration classes
    - @conditional_on_* evaluation for classes and @bean methods
    - ordered processing of auto-configuration classes
    - optional logging setup through a LoggingPort
    """

    def __init__(self, config: Config, logging_port: LoggingPort | None = None) -> None:
        self._config = config
        self._container = Container()
        self._logging_port = logging_port
        self._started = False

        self._container.register_instance(config, as_type=Config)

    # ------------------------------------------------------------------
    # Bean registration
    # ------------------------------------------------------------------

    def register_bean(self, cls: type, *, name: str = "", scope: Scope | None = None) -> None:
        """Register a bean class with the context."""
        bean_name = name or getattr(cls, "__pyjms_bean_name__", "")
        bean_scope = scope or getattr(cls, "__pyjms_scope__", Scope.SINGLETON)
        self._container.register(cls, scope=bean_scope, name=bean_name)
        self._container.bind_interfaces(cls)

    def register_instance(self, instance: Any, *, as_type: type | None = None, name: str = "") -> None:
        """Register an already-built object, e.g. a connection factory owned by the caller."""
        self._container.register_instance(instance, as_type=as_type, name=name)

    def import_configurations(self, *configurations: type) -> None:
        """Register configuration classes in the given order."""
        for cls in configurations:
            self.register_bean(cls)

    # ------------------------------------------------------------------
    # Bean access
    # ------------------------------------------------------------------

    def get_bean(self, bean_type: type[T]) -> T:
        """Resolve a bean by type."""
        return self._container.resolve(bean_type)

    def get_bean_by_name(self, name: str) -> Any:
        """Resolve a bean by its registered name."""
        return self._container.resolve_by_name(name)

    def contains_bean(self, name: str) -> bool:
        """Check if a named bean exists."""
        return self._container.contains(name)

    def has_bean(self, bean_type: type) -> bool:
        """Check if a bean of the given type is registered."""
        return self._container.has_bean_of_type(bean_type)

    @property
    def container(self) -> Container:
        """Escape hatch: direct access to the underlying Container."""
        return self._container

    @property
    def config(self) -> Config:
        return self._config

    @property
    def is_started(self) -> bool:
        return self._started

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    async def start(self) -> None:
        """Evaluate conditions, run @bean methods and eagerly create singletons."""
        if self._started:
            return
        try:
            self._do_start()
        except BeanCreationException:
            raise
        except Exception as exc:
            raise BeanCreationException(
                subsystem="startup",
                provider="context",
                reason=str(exc),
            ) from exc
        self._started = True
        logger.info("context_started", beans=len(self._container.registered_types))

    async def stop(self) -> None:
        self._started = False
        logger.info("context_stopped")

    def _do_start(self) -> None:
        if self._logging_port is not None:
            self._logging_port.configure(self._config)

        evaluator = ConditionEvaluator(self._config, self._container)

        # 1. Property/class conditions for everything registered
        self._filter(evaluator, bean_pass=False, auto=None)

        # 2. User configurations, then bean conditions for user beans
        for cls in self._configurations(auto=False):
            self._process_configuration(cls, evaluator)
        self._filter(evaluator, bean_pass=True, auto=False)

        # 3. Auto-configurations by @order; a stable sort keeps declaration order for ties
        for cls in sort_by_order(self._configurations(auto=True)):
            if not evaluator.should_include(cls, bean_pass=True):
                self._skip(cls)
                continue
            self._process_configuration(cls, evaluator)

        # 4. Eagerly resolve remaining singletons
        for cls in sort_by_order(self._container.registered_types):
            reg = self._container.registration(cls)
            if reg.scope == Scope.SINGLETON and reg.instance is None:
                self._container.resolve(cls)

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _configurations(self, *, auto: bool) -> list[type]:
        return [
            cls
            for cls in self._container.registered_types
            if getattr(cls, "__pyjms_stereotype__", "") == "configuration"
            and is_auto_configuration(cls) == auto
        ]

    def _filter(self, evaluator: ConditionEvaluator, *, bean_pass: bool, auto: bool | None) -> None:
        for cls in self._container.registered_types:
            if auto is not None and is_auto_configuration(cls) != auto:
                continue
            if not evaluator.should_include(cls, bean_pass=bean_pass):
                self._skip(cls)

    def _skip(self, cls: type) -> None:
        self._container.unregister(cls)
        logger.debug("bean_skipped", bean=cls.__qualname__, reason="condition")

    def _process_configuration(self, cls: type, evaluator: ConditionEvaluator) -> None:
        """Call the @bean methods of a configuration class in definition order."""
        config_instance = self._container.resolve(cls)

        for attr_name in _bean_method_names(cls):
            method = getattr(config_instance, attr_name)
            if not evaluator.matches(method):
                logger.debug("bean_method_skipped", configuration=cls.__qualname__, method=attr_name)
                continue

            return_type = typing.get_type_hints(method).get("return")
            if return_type is None:
                continue

            source = f"{cls.__qualname__}.{attr_name}"
            if self._container.is_registered(return_type):
                # bean definitions never replace an existing registration
                logger.warning(
                    "bean_definition_ignored",
                    bean=source,
                    existing=self._container.registration(return_type).origin,
                )
                continue

            result = self._call_bean_method(cls, method)
            bean_name = getattr(method, "__pyjms_bean_name__", "") or attr_name

            self._container.register(return_type, scope=Scope.SINGLETON, name=bean_name, source=source)
            self._container.registration(return_type).instance = result
            if isinstance(return_type, type):
                self._container.bind_interfaces(return_type)

    def _call_bean_method(self, cls: type, method: Any) -> Any:
        """Call a @bean method, injecting its parameters from the container."""
        hints = typing.get_type_hints(method)
        hints.pop("return", None)
        sig = inspect.signature(method)

        kwargs: dict[str, Any] = {}
        for param_name, param_type in hints.items():
            param = sig.parameters.get(param_name)
            has_default = param is not None and param.default is not inspect.Parameter.empty
            try:
                kwargs[param_name] = self._container.resolve_param(param_type)
            except (NoSuchBeanError, NoUniqueBeanError):
                if has_default:
                    continue
                raise NoSuchBeanError(
                    bean_type=param_type if isinstance(param_type, type) else None,
                    required_by=f"{cls.__qualname__}.{method.__name__}()",
                    parameter=f"{param_name}: {getattr(param_type, '__name__', repr(param_type))}",
                ) from None

        return method(**kwargs)


def _bean_method_names(cls: type) -> list[str]:
    """@bean method names, base classes first, each class in definition order."""
    names: dict[str, None] = {}
    for klass in reversed(inspect.getmro(cls)):
        for attr_name, attr in vars(klass).items():
            if getattr(attr, "__pyjms_bean__", False):
                names[attr_name] = None
    return list(names)
