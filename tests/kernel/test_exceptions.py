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
"""Tests for the flycors exception hierarchy."""

from __future__ import annotations

from flycors.kernel import ConfigurationException, FlyCorsException


class TestFlyCorsException:
    def test_message_code_context(self):
        exc = FlyCorsException("boom", code="X_001", context={"key": "value"})

        assert str(exc) == "boom"
        assert exc.code == "X_001"
        assert exc.context == {"key": "value"}

    def test_context_defaults_to_empty_dict(self):
        assert FlyCorsException("boom").context == {}
        assert FlyCorsException("boom").code is None


class TestConfigurationException:
    def test_is_flycors_and_value_error(self):
        exc = ConfigurationException("bad config")

        assert isinstance(exc, FlyCorsException)
        assert isinstance(exc, ValueError)
