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
"""Apply pyjms defaults to a listener container factory."""

from __future__ import annotations

import structlog

from pyjms.jms.factory import DefaultJmsListenerContainerFactory
from pyjms.jms.ports.outbound import ConnectionFactory, DestinationResolver, TransactionManager
from pyjms.jms.properties import JmsProperties
from pyjms.kernel.exceptions import InvalidArgumentException, require_not_none

logger = structlog.get_logger("pyjms.jms.configurer")


class JmsListenerContainerFactoryConfigurer:
    """Configure a :class:`DefaultJmsListenerContainerFactory` with sensible defaults.

    The collaborators are fixed at construction. A missing transaction
    manager switches the factory to locally transacted sessions; a missing
    destination resolver leaves the factory's own resolution in place.

    Args:
        properties: Bound ``pyjms.jms`` settings.
        destination_resolver: Resolver to associate with every factory, or
            ``None`` to keep the factory default.
        transaction_manager: Manager for delegated transaction demarcation,
            or ``None`` to use local session transactions.
    """

    def __init__(
        self,
        properties: JmsProperties,
        destination_resolver: DestinationResolver | None = None,
        transaction_manager: TransactionManager | None = None,
    ) -> None:
        self._properties = require_not_none(properties, "JmsProperties must not be None")
        self._destination_resolver = destination_resolver
        self._transaction_manager = transaction_manager

    @property
    def properties(self) -> JmsProperties:
        return self._properties

    @property
    def destination_resolver(self) -> DestinationResolver | None:
        return self._destination_resolver

    @property
    def transaction_manager(self) -> TransactionManager | None:
        return self._transaction_manager

    def create_and_configure(self, connection_factory: ConnectionFactory) -> DefaultJmsListenerContainerFactory:
        """Create a new factory for *connection_factory* and apply the defaults to it."""
        factory = DefaultJmsListenerContainerFactory()
        self.configure(factory, connection_factory)
        return factory

    def configure(
        self,
        factory: DefaultJmsListenerContainerFactory,
        connection_factory: ConnectionFactory,
    ) -> None:
        """Apply the default settings to *factory*.

        Settings are only ever set, never cleared, so the factory can be
        tuned further afterwards. Arguments are checked before the factory
        is touched.

        Raises:
            InvalidArgumentException: if *factory* or *connection_factory* is None.
        """
        if factory is None:
            raise InvalidArgumentException("Factory must not be None")
        if connection_factory is None:
            raise InvalidArgumentException("ConnectionFactory must not be None")

        listener = self._properties.listener

        factory.connection_factory = connection_factory
        factory.pub_sub_domain = self._properties.pub_sub_domain
        if self._transaction_manager is not None:
            factory.transaction_manager = self._transaction_manager
        else:
            factory.session_transacted = True
        if self._destination_resolver is not None:
            factory.destination_resolver = self._destination_resolver
        factory.auto_startup = listener.auto_startup
        if listener.acknowledge_mode is not None:
            factory.session_acknowledge_mode = listener.acknowledge_mode.code
        concurrency = listener.format_concurrency()
        if concurrency:
            factory.concurrency = concurrency

        logger.debug(
            "jms_listener_factory_configured",
            pub_sub_domain=factory.pub_sub_domain,
            transactions="delegated" if self._transaction_manager is not None else "local",
            acknowledge_mode=factory.session_acknowledge_mode,
            concurrency=factory.concurrency,
        )
