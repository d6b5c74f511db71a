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
"""Cors — origin matching and CORS header emission for a single request."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from starlette.responses import Response

from flycors.cors.config import CorsConfig
from flycors.cors.origin import WILDCARD, OriginMatcher, origin_matcher
from flycors.cors.ports import CorsMiddlewareFn, CorsRequest, CorsResponse, Proceed

ALLOW_ORIGIN = "Access-Control-Allow-Origin"
ALLOW_CREDENTIALS = "Access-Control-Allow-Credentials"
ALLOW_METHODS = "Access-Control-Allow-Methods"
ALLOW_HEADERS = "Access-Control-Allow-Headers"
MAX_AGE = "Access-Control-Max-Age"
EXPOSE_HEADERS = "Access-Control-Expose-Headers"

PREFLIGHT_METHOD = "OPTIONS"
PREFLIGHT_STATUS = 204


class Cors:
    """Applies a :class:`CorsConfig` to requests.

    Holds no per-request state; one instance can serve every request
    concurrently.

    Usage::

        policy = Cors({"origin": ["https://a.com", "https://b.com"], "credentials": True})
        result = policy.apply(request, response, proceed)
    """

    def __init__(self, config: CorsConfig | Mapping[str, Any] | None = None, **overrides: Any) -> None:
        self._config = CorsConfig.of(config, **overrides)
        self._origin: OriginMatcher = origin_matcher(self._config.origin)

    @property
    def config(self) -> CorsConfig:
        return self._config

    @property
    def handle(self) -> CorsMiddlewareFn:
        """The policy as a plain callable, ready to register with a router."""

        def _handle(request: CorsRequest, response: CorsResponse, proceed: Proceed) -> Any:
            return self.apply(request, response, proceed)

        return _handle

    def allowed_origin(self, request_origin: str | None) -> str | None:
        """Return the ``Access-Control-Allow-Origin`` value, or ``None`` if not granted."""
        return self._origin.resolve(request_origin)

    def apply(self, request: CorsRequest, response: CorsResponse, proceed: Proceed) -> Any:
        """Write CORS headers onto *response*, then answer a preflight or continue.

        ``OPTIONS`` requests get a terminal ``204 No Content`` response that
        carries only the CORS headers, and *proceed* is not called.  Any other
        method returns ``proceed()`` unchanged; the headers stay on
        *response* for whatever the rest of the pipeline produces.

        An exception raised by an origin predicate propagates to the caller.
        """
        cfg = self._config
        emitted: dict[str, str] = {}

        allowed = self.allowed_origin(request.headers.get("Origin"))
        if allowed:
            emitted[ALLOW_ORIGIN] = allowed
            if cfg.credentials and allowed != WILDCARD:
                emitted[ALLOW_CREDENTIALS] = "true"

        if cfg.methods:
            emitted[ALLOW_METHODS] = ", ".join(cfg.methods)
        if cfg.headers:
            emitted[ALLOW_HEADERS] = ", ".join(cfg.headers)
        if cfg.max_age:
            emitted[MAX_AGE] = str(cfg.max_age)
        if cfg.expose_headers:
            emitted[EXPOSE_HEADERS] = ", ".join(cfg.expose_headers)

        for name, value in emitted.items():
            response.headers[name] = value

        if request.method == PREFLIGHT_METHOD:
            return Response(status_code=PREFLIGHT_STATUS, headers=emitted)

        return proceed()


def cors(config: CorsConfig | Mapping[str, Any] | None = None, **overrides: Any) -> CorsMiddlewareFn:
    """Build a :class:`Cors` policy and return its bound handler."""
    return Cors(config, **overrides).handle
