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
"""JMS auto-configuration."""

from __future__ import annotations

from pyjms.container.bean import bean
from pyjms.context.conditions import (
    auto_configuration,
    conditional_on_bean,
    conditional_on_missing_bean,
)
from pyjms.core.config import Config
from pyjms.jms.configurer import JmsListenerContainerFactoryConfigurer
from pyjms.jms.factory import DefaultJmsListenerContainerFactory
from pyjms.jms.ports.outbound import ConnectionFactory, DestinationResolver, TransactionManager
from pyjms.jms.properties import JmsProperties


@auto_configuration
@conditional_on_bean(ConnectionFactory)
class JmsAutoConfiguration:
    """Provides a pre-configured listener container factory for the registered ConnectionFactory."""

    @bean
    @conditional_on_missing_bean(JmsProperties)
    def jms_properties(self, config: Config) -> JmsProperties:
        return config.bind(JmsProperties)

    @bean
    @conditional_on_missing_bean(JmsListenerContainerFactoryConfigurer)
    def jms_listener_container_factory_configurer(
        self,
        properties: JmsProperties,
        destination_resolver: DestinationResolver | None = None,
        transaction_manager: TransactionManager | None = None,
    ) -> JmsListenerContainerFactoryConfigurer:
        return JmsListenerContainerFactoryConfigurer(
            properties,
            destination_resolver=destination_resolver,
            transaction_manager=transaction_manager,
        )

    @bean
    @conditional_on_missing_bean(DefaultJmsListenerContainerFactory)
    def jms_listener_container_factory(
        self,
        configurer: JmsListenerContainerFactoryConfigurer,
        connection_factory: ConnectionFactory,
    ) -> DefaultJmsListenerContainerFactory:
        return configurer.create_and_configure(connection_factory)
