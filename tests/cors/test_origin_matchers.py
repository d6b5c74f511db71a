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
"""Tests for origin matcher normalization and resolution."""

from __future__ import annotations

from collections.abc import Collection, Iterator

from flycors.cors.origin import (
    AllowedOrigins,
    AnyOrigin,
    ExactOrigin,
    OriginPredicate,
    origin_matcher,
)


class TestOriginMatcherNormalization:
    def test_none_is_any_origin(self):
        assert origin_matcher(None) == AnyOrigin()

    def test_empty_string_is_any_origin(self):
        assert origin_matcher("") == AnyOrigin()

    def test_string_is_exact(self):
        assert origin_matcher("https://a.com") == ExactOrigin("https://a.com")

    def test_wildcard_string_is_exact_wildcard(self):
        assert origin_matcher("*").resolve(None) == "*"

    def test_list_keeps_order(self):
        assert origin_matcher(["https://b.com", "https://a.com"]) == AllowedOrigins(
            ("https://b.com", "https://a.com")
        )

    def test_empty_list_allows_nothing(self):
        assert origin_matcher([]) == AllowedOrigins(())

    def test_frozenset_is_allow_list(self):
        matcher = origin_matcher(frozenset({"https://a.com"}))
        assert isinstance(matcher, AllowedOrigins)
        assert matcher.resolve("https://a.com") == "https://a.com"

    def test_dict_keys_is_allow_list(self):
        matcher = origin_matcher({"https://a.com": 1, "https://b.com": 2}.keys())
        assert matcher == AllowedOrigins(("https://a.com", "https://b.com"))
        assert matcher.resolve("https://b.com") == "https://b.com"

    def test_custom_collection_is_allow_list(self):
        class Origins(Collection):
            def __init__(self, *origins: str) -> None:
                self._origins = list(origins)

            def __contains__(self, item: object) -> bool:
                return item in self._origins

            def __iter__(self) -> Iterator[str]:
                return iter(self._origins)

            def __len__(self) -> int:
                return len(self._origins)

        matcher = origin_matcher(Origins("https://a.com"))
        assert matcher.resolve("https://a.com") == "https://a.com"
        assert matcher.resolve("https://b.com") is None

    def test_empty_dict_keys_allows_nothing(self):
        assert origin_matcher({}.keys()) == AllowedOrigins(())

    def test_callable_is_predicate(self):
        matcher = origin_matcher(lambda origin: True)
        assert isinstance(matcher, OriginPredicate)

    def test_existing_matcher_passed_through(self):
        matcher = ExactOrigin("https://a.com")
        assert origin_matcher(matcher) is matcher

    def test_unknown_shape_denies(self):
        matcher = origin_matcher(42)
        assert matcher == AllowedOrigins()
        assert matcher.resolve("https://a.com") is None


class TestOriginResolution:
    def test_any_origin_ignores_request(self):
        assert AnyOrigin().resolve("https://a.com") == "*"
        assert AnyOrigin().resolve(None) == "*"

    def test_exact_ignores_request(self):
        matcher = ExactOrigin("https://a.com")
        assert matcher.resolve("https://b.com") == "https://a.com"
        assert matcher.resolve(None) == "https://a.com"

    def test_allow_list_echoes_member(self):
        assert AllowedOrigins(("https://a.com",)).resolve("https://a.com") == "https://a.com"

    def test_allow_list_is_exact_string_match(self):
        matcher = AllowedOrigins(("https://a.com",))
        assert matcher.resolve("https://A.com") is None
        assert matcher.resolve("https://a.com/") is None

    def test_allow_list_absent_origin(self):
        assert AllowedOrigins(("https://a.com",)).resolve(None) is None
        assert AllowedOrigins(("https://a.com",)).resolve("") is None

    def test_predicate_truthy_result(self):
        matcher = OriginPredicate(lambda origin: origin.startswith("https://"))
        assert matcher.resolve("https://a.com") == "https://a.com"
        assert matcher.resolve("http://a.com") is None

    def test_predicate_absent_origin(self):
        assert OriginPredicate(lambda origin: True).resolve(None) is None
