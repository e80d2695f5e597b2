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
"""Lightweight DI container with type-hint based resolution."""

from __future__ import annotations

import abc
import difflib
import inspect
import types
import typing
from typing import Any, Protocol, TypeVar, Union, cast, get_args, get_origin

from pyjms.container.exceptions import (
    BeanCurrentlyInCreationError,
    NoSuchBeanError,
    NoUniqueBeanError,
)
from pyjms.container.registry import Registration
from pyjms.container.types import Scope

T = TypeVar("T")


class Container:
    """Dependency injection container.

    Supports constructor injection via type hints, singleton and transient
    scopes, interface-to-implementation binding, named beans, @primary
    resolution, ``T | None`` parameters (resolved to ``None`` when no bean
    exists) and circular dependency detection.
    """

    def __init__(self) -> None:
        self._registrations: dict[type, Registration] = {}
        self._named: dict[str, Registration] = {}
        self._bindings: dict[type, list[type]] = {}
        self._resolving: dict[type, None] = {}  # insertion-ordered, O(1) lookup

    @property
    def registered_types(self) -> list[type]:
        """Registered bean types, in registration order."""
        return list(self._registrations)

    def registration(self, cls: type) -> Registration:
        return self._registrations[cls]

    def is_registered(self, cls: type) -> bool:
        return cls in self._registrations

    def register(
        self,
        cls: type,
        scope: Scope = Scope.SINGLETON,
        name: str = "",
        source: str = "",
    ) -> None:
        """Register a class for injection."""
        bean_name = name or getattr(cls, "__pyjms_bean_name__", "")
        bean_scope = getattr(cls, "__pyjms_scope__", None) or scope
        reg = Registration(impl_type=cls, scope=bean_scope, name=bean_name, source=source)
        self._registrations[cls] = reg
        if bean_name:
            self._named[bean_name] = reg

    def register_instance(self, instance: Any, as_type: type | None = None, name: str = "") -> None:
        """Register an already-built object as a singleton bean."""
        cls = as_type or type(instance)
        self.register(cls, scope=Scope.SINGLETON, name=name, source="instance")
        self._registrations[cls].instance = instance
        if as_type is None:
            self.bind_interfaces(cls)

    def unregister(self, cls: type) -> None:
        """Remove a registration, its name and any bindings to it."""
        reg = self._registrations.pop(cls)
        if reg.name and self._named.get(reg.name) is reg:
            del self._named[reg.name]
        for impls in self._bindings.values():
            if cls in impls:
                impls.remove(cls)

    def bind(self, interface: type, implementation: type) -> None:
        """Bind an interface/base class to a concrete implementation."""
        if interface not in self._bindings:
            self._bindings[interface] = []
        if implementation not in self._bindings[interface]:
            self._bindings[interface].append(implementation)

    def bind_interfaces(self, cls: type) -> None:
        """Bind *cls* to every Protocol or abstract base class it inherits from."""
        for base in inspect.getmro(cls)[1:]:
            if base is object:
                continue
            if _is_protocol(base) or inspect.isabstract(base) or abc.ABC in base.__mro__:
                self.bind(base, cls)

    def resolve(self, cls: type[T]) -> T:
        """Resolve an instance of the given type."""
        if cls in self._registrations:
            return cast(T, self._resolve_registration(self._registrations[cls]))

        impls = self._candidates(cls)
        if not impls:
            raise NoSuchBeanError(
                bean_type=cls,
                suggestions=self._get_similar_type_names(getattr(cls, "__name__", "")),
            )

        if len(impls) == 1:
            return cast(T, self._resolve_registration(self._registrations[impls[0]]))

        for impl in impls:
            if getattr(impl, "__pyjms_primary__", False):
                return cast(T, self._resolve_registration(self._registrations[impl]))

        raise NoUniqueBeanError(bean_type=cls, candidates=impls)

    def resolve_by_name(self, name: str) -> Any:
        """Resolve a bean by its registered name."""
        if name not in self._named:
            raise NoSuchBeanError(bean_name=name, suggestions=list(self._named.keys()))
        return self._resolve_registration(self._named[name])

    def resolve_all(self, cls: type[T]) -> list[T]:
        """Resolve all implementations bound to an interface."""
        if cls in self._registrations:
            return [self._resolve_registration(self._registrations[cls])]
        return [self._resolve_registration(self._registrations[impl]) for impl in self._candidates(cls)]

    def contains(self, name: str) -> bool:
        """Check if a named bean exists."""
        return name in self._named

    def has_bean_of_type(self, bean_type: type, *, exclude: object = None) -> bool:
        """Check if any registered bean is, or satisfies, the given type."""
        if bean_type in self._registrations and bean_type is not exclude:
            return True
        return any(impl is not exclude for impl in self._candidates(bean_type))

    def _candidates(self, cls: type) -> list[type]:
        """Registered implementations of *cls*: explicit bindings first, then subclasses."""
        bound = [impl for impl in self._bindings.get(cls, []) if impl in self._registrations]
        if bound:
            return bound
        return [impl for impl in self._registrations if impl is not cls and _is_subclass(impl, cls)]

    def resolve_param(self, param_type: Any) -> Any:
        """Resolve a single parameter, handling ``T | None`` and ``list[T]``."""
        if get_origin(param_type) is Union or isinstance(param_type, types.UnionType):
            non_none = [a for a in get_args(param_type) if a is not type(None)]
            if len(non_none) == 1:
                try:
                    return self.resolve(non_none[0])
                except (NoSuchBeanError, NoUniqueBeanError):
                    return None

        if get_origin(param_type) is list:
            args = get_args(param_type)
            if args:
                return self.resolve_all(args[0])

        return self.resolve(param_type)

    def _resolve_registration(self, reg: Registration) -> Any:
        """Resolve a single registration, handling scope."""
        if reg.scope == Scope.SINGLETON and reg.instance is not None:
            return reg.instance

        instance = self._create_instance(reg)

        if reg.scope == Scope.SINGLETON:
            reg.instance = instance

        return instance

    def _create_instance(self, reg: Registration) -> Any:
        """Create an instance, resolving constructor dependencies."""
        if reg.impl_type in self._resolving:
            raise BeanCurrentlyInCreationError(chain=list(self._resolving), current=reg.impl_type)
        self._resolving[reg.impl_type] = None
        try:
            init = reg.impl_type.__init__  # type: ignore[misc]
            if init is object.__init__:
                return reg.impl_type()

            hints = typing.get_type_hints(init)
            hints.pop("return", None)
            sig = inspect.signature(init)

            kwargs: dict[str, Any] = {}
            for param_name, param_type in hints.items():
                param = sig.parameters.get(param_name)
                has_default = param is not None and param.default is not inspect.Parameter.empty
                try:
                    kwargs[param_name] = self.resolve_param(param_type)
                except (NoSuchBeanError, NoUniqueBeanError):
                    if has_default:
                        continue
                    raise NoSuchBeanError(
                        bean_type=param_type if isinstance(param_type, type) else None,
                        required_by=f"{reg.impl_type.__qualname__}.__init__()",
                        parameter=f"{param_name}: {getattr(param_type, '__name__', repr(param_type))}",
                        suggestions=self._get_similar_type_names(getattr(param_type, "__name__", "")),
                    ) from None

            return reg.impl_type(**kwargs)
        finally:
            self._resolving.pop(reg.impl_type, None)

    def _get_similar_type_names(self, name: str) -> list[str]:
        """Return registered type names similar to *name* using fuzzy matching."""
        if not name:
            return []
        registered_names = [getattr(cls, "__name__", repr(cls)) for cls in self._registrations]
        return difflib.get_close_matches(name, registered_names, n=5, cutoff=0.4)


def _is_subclass(cls: type, base: type) -> bool:
    try:
        return issubclass(cls, base)
    except TypeError:
        # non-runtime Protocols and Protocols with data members reject issubclass()
        return False


def _is_protocol(cls: type) -> bool:
    """Check if a class is a Protocol definition."""
    return bool(getattr(cls, "_is_protocol", False)) and cls is not Protocol  # type: ignore[comparison-overlap]
