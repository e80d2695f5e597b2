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
"""Container exceptions — fatal errors during bean creation and startup."""

from __future__ import annotations

from pyjms.kernel.exceptions import InfrastructureException


class BeanCreationException(InfrastructureException):
    """Fatal error during bean creation; the context cannot start."""

    def __init__(self, subsystem: str, provider: str, reason: str) -> None:
        self.subsystem = subsystem
        self.provider = provider
        self.reason = reason
        message = f"Failed to configure {subsystem} with provider '{provider}': {reason}"
        super().__init__(message=message, code=f"BEAN_CREATION_{subsystem.upper()}")


class NoSuchBeanError(BeanCreationException):
    """No bean found for the requested type or name."""

    def __init__(
        self,
        *,
        bean_type: type | None = None,
        bean_name: str | None = None,
        required_by: str | None = None,
        parameter: str | None = None,
        suggestions: list[str] | None = None,
    ) -> None:
        self.bean_type = bean_type
        self.bean_name = bean_name
        self.required_by = required_by
        self.parameter = parameter
        self.suggestions = suggestions or []

        type_desc = getattr(bean_type, "__name__", repr(bean_type)) if bean_type is not None else None
        if type_desc:
            headline = f"No bean of type '{type_desc}' is registered"
        elif bean_name:
            headline = f"No bean named '{bean_name}' is registered"
        else:
            headline = "No matching bean is registered"

        lines = [f"NoSuchBeanError: {headline}"]

        if required_by or parameter:
            lines.append("")
            if required_by:
                lines.append(f"  Required by: {required_by}")
            if parameter:
                lines.append(f"    Parameter: {parameter}")

        lines.append("")
        lines.append("  Suggestions:")
        lines.append("    - Register the class, or add a @bean method that produces this type")
        lines.append("    - Check @conditional_on_* conditions and pyjms.yaml")

        if self.suggestions:
            lines.append("")
            lines.append(f"  Similar registered types: {', '.join(self.suggestions)}")

        BeanCreationException.__init__(
            self,
            subsystem="resolution",
            provider=required_by or "container",
            reason=headline,
        )
        self.args = ("\n".join(lines),)

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


class NoUniqueBeanError(BeanCreationException):
    """Multiple beans match the requested type but none is marked ``@primary``."""

    def __init__(self, *, bean_type: type, candidates: list[type]) -> None:
        self.bean_type = bean_type
        self.candidates = candidates

        type_name = getattr(bean_type, "__name__", repr(bean_type))
        candidate_names = [getattr(c, "__name__", repr(c)) for c in candidates]
        headline = f"Multiple beans of type '{type_name}' found but none is marked @primary"

        lines = [
            f"NoUniqueBeanError: {headline}",
            "",
            f"  Candidates: {candidate_names}",
            "",
            "  Fix: Mark one implementation with @primary",
        ]

        BeanCreationException.__init__(
            self,
            subsystem="resolution",
            provider="container",
            reason=headline,
        )
        self.args = ("\n".join(lines),)

    def __str__(self) -> str:
        return self.args[0] if self.args else ""


class BeanCurrentlyInCreationError(BeanCreationException):
    """Circular dependency detected during bean resolution.

    ``chain`` holds the dependency path in resolution order.
    """

    def __init__(self, *, chain: list[type], current: type) -> None:
        self.chain = chain
        self.current = current

        chain_names = [t.__name__ for t in chain]
        chain_names.append(current.__name__)
        headline = f"Circular dependency: {' -> '.join(chain_names)}"

        BeanCreationException.__init__(
            self,
            subsystem="resolution",
            provider=current.__name__,
            reason=headline,
        )
        self.args = (f"BeanCurrentlyInCreationError: {headline}",)

    def __str__(self) -> str:
        return self.args[0] if self.args else ""
