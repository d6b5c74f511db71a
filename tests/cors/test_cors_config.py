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
"""Tests for CorsConfig defaults, immutability, and shallow merge."""

from __future__ import annotations

import dataclasses

import pytest

from flycors.cors.config import CorsConfig
from flycors.cors.http import DEFAULT_METHODS, HttpMethod


class TestCorsConfigDefaults:
    def test_defaults(self):
        cfg = CorsConfig()

        assert cfg.origin == "*"
        assert cfg.methods == ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "TRACE")
        assert cfg.headers == ("Content-Type", "Authorization")
        assert cfg.max_age == "86400"
        assert cfg.credentials is False
        assert cfg.expose_headers == ()

    def test_default_methods_are_http_methods(self):
        assert all(isinstance(m, HttpMethod) for m in DEFAULT_METHODS)
        assert ", ".join(DEFAULT_METHODS) == "GET, POST, PUT, PATCH, DELETE, OPTIONS, TRACE"


class TestCorsConfigFrozen:
    def test_cannot_modify(self):
        cfg = CorsConfig()

        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.credentials = True  # type: ignore[misc]

    def test_lists_stored_as_tuples(self):
        cfg = CorsConfig(
            origin=["https://a.com"],
            methods=["GET"],
            headers=["X-A"],
            expose_headers=["X-B"],
        )

        assert cfg.origin == ("https://a.com",)
        assert cfg.methods == ("GET",)
        assert cfg.headers == ("X-A",)
        assert cfg.expose_headers == ("X-B",)

    def test_bare_string_is_single_value(self):
        cfg = CorsConfig(methods="GET", headers="X-A", expose_headers="X-B")  # type: ignore[arg-type]

        assert cfg.methods == ("GET",)
        assert cfg.headers == ("X-A",)
        assert cfg.expose_headers == ("X-B",)

    def test_single_http_method(self):
        assert CorsConfig(methods=HttpMethod.POST).methods == ("POST",)  # type: ignore[arg-type]

    def test_none_sequences_become_empty(self):
        cfg = CorsConfig(methods=None, expose_headers=None)  # type: ignore[arg-type]

        assert cfg.methods == ()
        assert cfg.expose_headers == ()


class TestCorsConfigMerge:
    def test_of_none_is_defaults(self):
        assert CorsConfig.of() == CorsConfig()

    def test_partial_mapping_overrides_only_given_fields(self):
        cfg = CorsConfig.of({"methods": ["GET"]})

        assert cfg.methods == ("GET",)
        assert cfg.headers == ("Content-Type", "Authorization")
        assert cfg.max_age == "86400"

    def test_keyword_overrides_win(self):
        cfg = CorsConfig.of({"max_age": "60"}, max_age="120", credentials=True)

        assert cfg.max_age == "120"
        assert cfg.credentials is True

    def test_existing_config_reused(self):
        base = CorsConfig(origin="https://a.com")

        assert CorsConfig.of(base) is base
        assert CorsConfig.of(base, credentials=True).origin == "https://a.com"

    def test_unknown_field_rejected(self):
        with pytest.raises(TypeError):
            CorsConfig.of({"allowed_origins": ["*"]})
