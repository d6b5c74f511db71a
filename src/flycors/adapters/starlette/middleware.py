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
"""CORS middleware for Starlette — pure ASGI."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from fnmatch import fnmatch
from typing import Any

from starlette.datastructures import MutableHeaders
from starlette.middleware import Middleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp, Message, Receive, Scope, Send

from flycors.cors.config import CorsConfig
from flycors.config.properties import CorsProperties
from flycors.core.config import Config
from flycors.cors.policy import ALLOW_ORIGIN, Cors
from flycors.logging.port import LoggingPort
from flycors.logging.structlog_adapter import StructlogAdapter

LOGGER_NAME = "flycors.web"


class _PendingResponse:
    """Collects the CORS headers before the downstream response exists."""

    __slots__ = ("headers",)

    def __init__(self) -> None:
        self.headers = MutableHeaders()


class CorsMiddleware:
    """Applies a :class:`Cors` policy to every HTTP request.

    Preflight (``OPTIONS``) requests are answered here with ``204 No Content``
    and never reach the application.  For every other method the application
    runs and the CORS headers are written onto its response, replacing any
    same-named headers it set.

    Args:
        app: The downstream ASGI application.
        policy: A ready-made policy.  Takes precedence over *config*.
        config: A :class:`CorsConfig` or a partial mapping of its fields.
        url_patterns: Glob patterns the policy applies to.  Empty (default)
            means every path.
        exclude_patterns: Glob patterns skipped even when ``url_patterns``
            matches.
        logging_port: Supplies the ``flycors.web`` logger.  Defaults to
            :class:`StructlogAdapter` without reconfiguring structlog.

    Usage::

        app.add_middleware(CorsMiddleware, config={"origin": ["https://app.example.com"]})

    Uses raw ASGI protocol instead of ``BaseHTTPMiddleware`` so the response
    body is streamed through untouched.
    """

    def __init__(
        self,
        app: ASGIApp,
        policy: Cors | None = None,
        config: CorsConfig | Mapping[str, Any] | None = None,
        url_patterns: Sequence[str] = (),
        exclude_patterns: Sequence[str] = (),
        logging_port: LoggingPort | None = None,
    ) -> None:
        self.app = app
        self._policy = policy or Cors(config)
        self._url_patterns = list(url_patterns)
        self._exclude_patterns = list(exclude_patterns)
        self._logger = (logging_port or StructlogAdapter()).get_logger(LOGGER_NAME)

    @property
    def policy(self) -> Cors:
        return self._policy

    def should_not_filter(self, path: str) -> bool:
        """Return ``True`` if *path* is outside this middleware's patterns."""
        if self._url_patterns and not any(fnmatch(path, p) for p in self._url_patterns):
            return True
        return bool(self._exclude_patterns and any(fnmatch(path, p) for p in self._exclude_patterns))

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or self.should_not_filter(scope["path"]):
            await self.app(scope, receive, send)
            return

        request = Request(scope, receive)
        pending = _PendingResponse()

        async def send_with_cors(message: Message) -> None:
            if message["type"] == "http.response.start":
                headers = MutableHeaders(scope=message)
                for name, value in pending.headers.items():
                    headers[name] = value
            await send(message)

        result = self._policy.apply(
            request,
            pending,
            lambda: self.app(scope, receive, send_with_cors),
        )

        request_origin = request.headers.get("origin")
        if request_origin and ALLOW_ORIGIN not in pending.headers:
            self._logger.debug(
                "cors_origin_rejected",
                origin=request_origin,
                method=request.method,
                path=request.url.path,
            )

        if isinstance(result, Response):
            self._logger.debug(
                "cors_preflight",
                origin=request_origin,
                path=request.url.path,
                allowed_origin=pending.headers.get(ALLOW_ORIGIN),
            )
            await result(scope, receive, send)
            return

        await result


def cors_middleware(
    settings: Config,
    url_patterns: Sequence[str] = (),
    exclude_patterns: Sequence[str] = (),
    logging_port: LoggingPort | None = None,
) -> Middleware:
    """Build a :class:`CorsMiddleware` entry from settings.

    The policy is bound from ``flycors.cors.*`` and logging is configured
    from ``flycors.logging.*`` through *logging_port* (structlog by default).

    Usage::

        settings = Config.from_file("cors.yaml", active_profiles=["dev"])
        app = Starlette(routes=routes, middleware=[cors_middleware(settings)])
    """
    port = logging_port or StructlogAdapter()
    port.configure(settings)
    return Middleware(
        CorsMiddleware,
        config=settings.bind(CorsProperties).to_cors_config(),
        url_patterns=url_patterns,
        exclude_patterns=exclude_patterns,
        logging_port=port,
    )
