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
"""CORS policy configuration."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Collection, Mapping
from dataclasses import dataclass
from typing import Any

from flycors.cors.http import DEFAULT_METHODS

OriginSetting = str | Collection[str] | Callable[[str], bool] | None


@dataclass(frozen=True)
class CorsConfig:
    """Declarative CORS policy.

    Immutable once built, so a single instance can be shared by every
    in-flight request.  List values are stored as tuples; declared order
    is kept because it is the order the header values are emitted in.

    Attributes:
        origin: ``"*"``, a literal origin, a collection of allowed origins,
            or a predicate called with the request origin.  ``None`` (or an
            empty string) means any origin.
        methods: ``Access-Control-Allow-Methods`` values.
        headers: ``Access-Control-Allow-Headers`` values.
        max_age: ``Access-Control-Max-Age`` in seconds, emitted verbatim.
        credentials: Emit ``Access-Control-Allow-Credentials: true`` for
            non-wildcard origins.
        expose_headers: ``Access-Control-Expose-Headers`` values; omitted
            entirely when empty.
    """

    origin: OriginSetting = "*"
    methods: tuple[str, ...] = DEFAULT_METHODS
    headers: tuple[str, ...] = ("Content-Type", "Authorization")
    max_age: str | None = "86400"
    credentials: bool = False
    expose_headers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        for name in ("methods", "headers", "expose_headers"):
            value = getattr(self, name)
            if value is None:
                object.__setattr__(self, name, ())
            elif isinstance(value, str):
                object.__setattr__(self, name, (value,))
            elif not isinstance(value, tuple):
                object.__setattr__(self, name, tuple(value))
        if isinstance(self.origin, list):
            object.__setattr__(self, "origin", tuple(self.origin))

    @classmethod
    def of(cls, config: CorsConfig | Mapping[str, Any] | None = None, **overrides: Any) -> CorsConfig:
        """Build a config from a partial one.

        Fields missing from *config* keep their defaults; *overrides* win
        over both.  The merge is shallow: supplying ``methods`` replaces the
        whole method list and leaves every other field alone.
        """
        if isinstance(config, CorsConfig):
            base = config
        else:
            base = cls(**dict(config or {}))
        return dataclasses.replace(base, **overrides) if overrides else base
