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
"""Inbound contracts the CORS policy needs from its host.

Kept structural so the policy works with any request/response pair that
looks like Starlette's, without importing a web framework here.
"""

from __future__ import annotations

from collections.abc import Callable, MutableMapping
from typing import Any, Protocol, runtime_checkable

Proceed = Callable[[], Any]


class ReadableHeaders(Protocol):
    def get(self, key: str, default: Any = None) -> Any: ...


@runtime_checkable
class CorsRequest(Protocol):
    """The request side: an HTTP method and case-insensitive header lookup."""

    @property
    def method(self) -> str: ...

    @property
    def headers(self) -> ReadableHeaders: ...


@runtime_checkable
class CorsResponse(Protocol):
    """The response side: a mutable, case-insensitive, last-write-wins header collection."""

    @property
    def headers(self) -> MutableMapping[str, str]: ...


class CorsMiddlewareFn(Protocol):
    """Signature of :attr:`flycors.Cors.handle` and :func:`flycors.cors`."""

    def __call__(self, request: CorsRequest, response: CorsResponse, proceed: Proceed) -> Any: ...
