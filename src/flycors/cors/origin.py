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
"""Origin matchers — the closed set of shapes a policy's ``origin`` can take.

Each variant answers one question: given the request's ``Origin`` header
(or ``None`` when absent), which value belongs in
``Access-Control-Allow-Origin``?  ``None`` means the origin is not granted.
"""

from __future__ import annotations

from collections.abc import Callable, Collection
from dataclasses import dataclass
from typing import Any

WILDCARD = "*"


@dataclass(frozen=True)
class AnyOrigin:
    """No origin configured: every request gets the wildcard."""

    def resolve(self, request_origin: str | None) -> str | None:
        return WILDCARD


@dataclass(frozen=True)
class ExactOrigin:
    """A literal origin, emitted unconditionally."""

    value: str

    def resolve(self, request_origin: str | None) -> str | None:
        return self.value


@dataclass(frozen=True)
class AllowedOrigins:
    """An allow-list; the request origin is echoed back only when listed."""

    origins: tuple[str, ...] = ()

    def resolve(self, request_origin: str | None) -> str | None:
        if not request_origin:
            return None
        return request_origin if request_origin in self.origins else None


@dataclass(frozen=True)
class OriginPredicate:
    """A caller-supplied check.  Called at most once per request; errors propagate."""

    predicate: Callable[[str], bool]

    def resolve(self, request_origin: str | None) -> str | None:
        if not request_origin:
            return None
        return request_origin if self.predicate(request_origin) else None


OriginMatcher = AnyOrigin | ExactOrigin | AllowedOrigins | OriginPredicate


def origin_matcher(origin: Any) -> OriginMatcher:
    """Normalize a configured ``origin`` value into an :data:`OriginMatcher`.

    Shapes that match none of the variants deny every origin.
    """
    if isinstance(origin, (AnyOrigin, ExactOrigin, AllowedOrigins, OriginPredicate)):
        return origin
    if isinstance(origin, str):
        return ExactOrigin(origin) if origin else AnyOrigin()
    if isinstance(origin, Collection):
        return AllowedOrigins(tuple(origin))
    if callable(origin):
        return OriginPredicate(origin)
    if not origin:
        return AnyOrigin()
    return AllowedOrigins()
