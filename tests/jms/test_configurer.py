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
"""Tests for JmsListenerContainerFactoryConfigurer."""

from __future__ import annotations

from typing import Any

import pytest

from pyjms.jms.configurer import JmsListenerContainerFactoryConfigurer
from pyjms.jms.factory import DEFAULTS, DefaultJmsListenerContainerFactory
from pyjms.jms.properties import JmsProperties, ListenerProperties
from pyjms.jms.types import AcknowledgeMode
from pyjms.kernel.exceptions import InvalidArgumentException

# --- Collaborators ---


class FakeConnectionFactory:
    def create_connection(self) -> Any:
        return object()


class FakeDestinationResolver:
    def resolve_destination_name(self, session: Any, destination_name: str, pub_sub_domain: bool) -> Any:
        return destination_name


class FakeTransactionManager:
    def get_transaction(self, definition: Any = None) -> Any:
        return "tx"

    def commit(self, status: Any) -> None:
        pass

    def rollback(self, status: Any) -> None:
        pass


def _properties(**listener: Any) -> JmsProperties:
    return JmsProperties(listener=ListenerProperties(**listener))


# --- Tests ---


class TestConfigureConnection:
    def test_binds_connection_factory(self) -> None:
        cf = FakeConnectionFactory()
        factory = DefaultJmsListenerContainerFactory()
        JmsListenerContainerFactoryConfigurer(JmsProperties()).configure(factory, cf)
        assert factory.connection_factory is cf

    def test_applies_pub_sub_domain(self) -> None:
        factory = DefaultJmsListenerContainerFactory()
        configurer = JmsListenerContainerFactoryConfigurer(JmsProperties(pub_sub_domain=True))
        configurer.configure(factory, FakeConnectionFactory())
        assert factory.pub_sub_domain is True

    def test_applies_auto_startup(self) -> None:
        factory = DefaultJmsListenerContainerFactory()
        configurer = JmsListenerContainerFactoryConfigurer(_properties(auto_startup=False))
        configurer.configure(factory, FakeConnectionFactory())
        assert factory.auto_startup is False


class TestPreconditions:
    def test_none_factory_rejected(self) -> None:
        configurer = JmsListenerContainerFactoryConfigurer(JmsProperties())
        with pytest.raises(InvalidArgumentException, match="Factory must not be None"):
            configurer.configure(None, FakeConnectionFactory())  # type: ignore[arg-type]

    def test_none_connection_factory_rejected_without_mutation(self) -> None:
        configurer = JmsListenerContainerFactoryConfigurer(
            JmsProperties(pub_sub_domain=True, listener=ListenerProperties(concurrency=3)),
            destination_resolver=FakeDestinationResolver(),
        )
        factory = DefaultJmsListenerContainerFactory()
        before = factory.snapshot()

        with pytest.raises(InvalidArgumentException, match="ConnectionFactory must not be None"):
            configurer.configure(factory, None)  # type: ignore[arg-type]

        assert factory.snapshot() == before

    def test_error_code(self) -> None:
        configurer = JmsListenerContainerFactoryConfigurer(JmsProperties())
        with pytest.raises(InvalidArgumentException) as exc_info:
            configurer.configure(DefaultJmsListenerContainerFactory(), None)  # type: ignore[arg-type]
        assert exc_info.value.code == "INVALID_ARGUMENT"

    def test_properties_required(self) -> None:
        with pytest.raises(InvalidArgumentException):
            JmsListenerContainerFactoryConfigurer(None)  # type: ignore[arg-type]


class TestTransactionPolicy:
    def test_without_transaction_manager_uses_local_transactions(self) -> None:
        factory = DefaultJmsListenerContainerFactory()
        JmsListenerContainerFactoryConfigurer(JmsProperties()).configure(factory, FakeConnectionFactory())
        assert factory.session_transacted is True
        assert factory.transaction_manager is None

    def test_transaction_manager_is_bound_instead(self) -> None:
        tm = FakeTransactionManager()
        factory = DefaultJmsListenerContainerFactory()
        configurer = JmsListenerContainerFactoryConfigurer(JmsProperties(), transaction_manager=tm)
        configurer.configure(factory, FakeConnectionFactory())
        assert factory.transaction_manager is tm
        assert factory.session_transacted is False

    def test_transaction_manager_keeps_prior_session_transacted(self) -> None:
        factory = DefaultJmsListenerContainerFactory(session_transacted=True)
        configurer = JmsListenerContainerFactoryConfigurer(
            JmsProperties(), transaction_manager=FakeTransactionManager()
        )
        configurer.configure(factory, FakeConnectionFactory())
        assert factory.session_transacted is True


class TestDestinationResolver:
    def test_resolver_is_bound_when_present(self) -> None:
        resolver = FakeDestinationResolver()
        factory = DefaultJmsListenerContainerFactory()
        configurer = JmsListenerContainerFactoryConfigurer(JmsProperties(), destination_resolver=resolver)
        configurer.configure(factory, FakeConnectionFactory())
        assert factory.destination_resolver is resolver

    def test_existing_resolver_left_untouched_when_absent(self) -> None:
        existing = FakeDestinationResolver()
        factory = DefaultJmsListenerContainerFactory(destination_resolver=existing)
        JmsListenerContainerFactoryConfigurer(JmsProperties()).configure(factory, FakeConnectionFactory())
        assert factory.destination_resolver is existing


class TestAcknowledgeMode:
    def test_client_mode_sets_numeric_code(self) -> None:
        factory = DefaultJmsListenerContainerFactory()
        configurer = JmsListenerContainerFactoryConfigurer(_properties(acknowledge_mode=AcknowledgeMode.CLIENT))
        configurer.configure(factory, FakeConnectionFactory())
        assert factory.session_acknowledge_mode == 2

    def test_dups_ok_mode(self) -> None:
        factory = DefaultJmsListenerContainerFactory()
        configurer = JmsListenerContainerFactoryConfigurer(_properties(acknowledge_mode="dups_ok"))
        configurer.configure(factory, FakeConnectionFactory())
        assert factory.session_acknowledge_mode == 3

    def test_absent_mode_preserves_factory_value(self) -> None:
        factory = DefaultJmsListenerContainerFactory(session_acknowledge_mode=1)
        JmsListenerContainerFactoryConfigurer(JmsProperties()).configure(factory, FakeConnectionFactory())
        assert factory.session_acknowledge_mode == 1


class TestConcurrency:
    @pytest.mark.parametrize(
        ("lower", "upper", "expected"),
        [(3, 10, "3-10"), (3, None, "3"), (None, 10, "1-10")],
    )
    def test_concurrency_specification(self, lower: int | None, upper: int | None, expected: str) -> None:
        factory = DefaultJmsListenerContainerFactory()
        configurer = JmsListenerContainerFactoryConfigurer(
            _properties(concurrency=lower, max_concurrency=upper)
        )
        configurer.configure(factory, FakeConnectionFactory())
        assert factory.concurrency == expected

    def test_no_bounds_preserves_factory_value(self) -> None:
        factory = DefaultJmsListenerContainerFactory(concurrency="2-4")
        JmsListenerContainerFactoryConfigurer(JmsProperties()).configure(factory, FakeConnectionFactory())
        assert factory.concurrency == "2-4"


class TestIdempotence:
    def test_configure_twice_equals_once(self) -> None:
        configurer = JmsListenerContainerFactoryConfigurer(
            JmsProperties(
                pub_sub_domain=True,
                listener=ListenerProperties(
                    auto_startup=False,
                    acknowledge_mode=AcknowledgeMode.CLIENT,
                    concurrency=3,
                    max_concurrency=10,
                ),
            ),
            destination_resolver=FakeDestinationResolver(),
        )
        cf = FakeConnectionFactory()
        once = DefaultJmsListenerContainerFactory()
        twice = DefaultJmsListenerContainerFactory()

        configurer.configure(once, cf)
        configurer.configure(twice, cf)
        configurer.configure(twice, cf)

        assert once.snapshot() == twice.snapshot()

    def test_never_clears_previously_set_fields(self) -> None:
        resolver = FakeDestinationResolver()
        cf = FakeConnectionFactory()
        factory = DefaultJmsListenerContainerFactory()
        JmsListenerContainerFactoryConfigurer(
            _properties(concurrency=5), destination_resolver=resolver
        ).configure(factory, cf)

        JmsListenerContainerFactoryConfigurer(JmsProperties()).configure(factory, cf)

        assert factory.destination_resolver is resolver
        assert factory.concurrency == "5"


class TestCreateAndConfigure:
    def test_returns_configured_factory(self) -> None:
        cf = FakeConnectionFactory()
        factory = JmsListenerContainerFactoryConfigurer(JmsProperties()).create_and_configure(cf)
        assert isinstance(factory, DefaultJmsListenerContainerFactory)
        assert factory.connection_factory is cf

    def test_untouched_fields_keep_defaults(self) -> None:
        factory = JmsListenerContainerFactoryConfigurer(JmsProperties()).create_and_configure(
            FakeConnectionFactory()
        )
        snapshot = factory.snapshot()
        assert snapshot["session_transacted"] is True
        for name in ("transaction_manager", "destination_resolver", "session_acknowledge_mode", "concurrency"):
            assert snapshot[name] == DEFAULTS[name]

    def test_each_call_returns_a_new_factory(self) -> None:
        configurer = JmsListenerContainerFactoryConfigurer(JmsProperties())
        cf = FakeConnectionFactory()
        assert configurer.create_and_configure(cf) is not configurer.create_and_configure(cf)

    def test_none_connection_factory_rejected(self) -> None:
        with pytest.raises(InvalidArgumentException):
            JmsListenerContainerFactoryConfigurer(JmsProperties()).create_and_configure(None)  # type: ignore[arg-type]


class TestCollaboratorAccess:
    def test_exposes_injected_collaborators(self) -> None:
        props = JmsProperties()
        resolver = FakeDestinationResolver()
        tm = FakeTransactionManager()
        configurer = JmsListenerContainerFactoryConfigurer(props, resolver, tm)
        assert configurer.properties is props
        assert configurer.destination_resolver is resolver
        assert configurer.transaction_manager is tm

    def test_optional_collaborators_default_to_none(self) -> None:
        configurer = JmsListenerContainerFactoryConfigurer(JmsProperties())
        assert configurer.destination_resolver is None
        assert configurer.transaction_manager is None
