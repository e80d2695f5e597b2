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
"""Tests for @order decorator and ordering constants."""

import pytest

from pyjms.container.ordering import (
    AUTO_CONFIGURATION_ORDER,
    HIGHEST_PRECEDENCE,
    LOWEST_PRECEDENCE,
    get_order,
    order,
    sort_by_order,
)
from pyjms.context.conditions import auto_configuration
from pyjms.kernel.exceptions import InvalidArgumentException


class TestOrderDecorator:
    def test_sets_order_attribute(self):
        @order(5)
        class MyConfig:
            pass

        assert get_order(MyConfig) == 5

    def test_preserves_class(self):
        @order(1)
        class MyConfig:
            """My doc."""

        assert MyConfig.__name__ == "MyConfig"
        assert MyConfig.__doc__ == "My doc."

    def test_default_is_zero(self):
        class Plain:
            pass

        assert get_order(Plain) == 0


class TestOrderConstants:
    def test_highest_precedence(self):
        assert HIGHEST_PRECEDENCE == -(2**31)

    def test_lowest_precedence(self):
        assert LOWEST_PRECEDENCE == 2**31 - 1


class TestOrderValidation:
    def test_rejects_non_int(self):
        with pytest.raises(InvalidArgumentException, match="must be an int"):
            order("first")  # type: ignore[arg-type]

    def test_rejects_bool(self):
        with pytest.raises(InvalidArgumentException):
            order(True)

    def test_rejects_out_of_range(self):
        with pytest.raises(InvalidArgumentException, match="outside"):
            order(LOWEST_PRECEDENCE + 1)

    def test_accepts_bounds(self):
        @order(HIGHEST_PRECEDENCE)
        class First:
            pass

        assert get_order(First) == HIGHEST_PRECEDENCE


class TestSortByOrder:
    def test_sorts_ascending(self):
        @order(10)
        class Late:
            pass

        @order(-10)
        class Early:
            pass

        class Plain:
            pass

        assert sort_by_order([Late, Plain, Early]) == [Early, Plain, Late]

    def test_ties_keep_incoming_order(self):
        @auto_configuration
        class A:
            pass

        @auto_configuration
        class B:
            pass

        assert get_order(A) == AUTO_CONFIGURATION_ORDER
        assert sort_by_order([B, A]) == [B, A]
