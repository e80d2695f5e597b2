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
"""Tests for the pyjms exception hierarchy."""

import pytest

from pyjms.container.exceptions import BeanCreationException, NoSuchBeanError
from pyjms.kernel.exceptions import (
    BusinessException,
    InfrastructureException,
    InvalidArgumentException,
    PyJmsException,
    ValidationException,
    require_not_none,
)


class TestPyJmsException:
    def test_basic_creation(self):
        exc = PyJmsException("something went wrong")
        assert str(exc) == "something went wrong"
        assert exc.code is None
        assert exc.context == {}

    def test_with_context(self):
        exc = PyJmsException("bad factory", code="FACTORY", context={"factory": "default"})
        assert exc.code == "FACTORY"
        assert exc.context["factory"] == "default"

    def test_context_not_shared(self):
        exc = PyJmsException("test")
        exc.context["key"] = "value"
        assert PyJmsException("test2").context == {}


class TestExceptionHierarchy:
    def test_invalid_argument_is_validation(self):
        assert issubclass(InvalidArgumentException, ValidationException)
        assert issubclass(ValidationException, BusinessException)
        assert issubclass(BusinessException, PyJmsException)

    def test_bean_errors_are_infrastructure(self):
        assert issubclass(BeanCreationException, InfrastructureException)
        assert issubclass(NoSuchBeanError, BeanCreationException)

    def test_invalid_argument_code(self):
        exc = InvalidArgumentException("Factory must not be None")
        assert exc.code == "INVALID_ARGUMENT"


class TestRequireNotNone:
    def test_returns_value(self):
        marker = object()
        assert require_not_none(marker, "unused") is marker

    def test_falsy_values_pass(self):
        assert require_not_none(0, "unused") == 0
        assert require_not_none("", "unused") == ""

    def test_none_raises(self):
        with pytest.raises(InvalidArgumentException, match="Properties must not be None"):
            require_not_none(None, "Properties must not be None")
