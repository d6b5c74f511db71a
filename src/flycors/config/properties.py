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
"""CORS configuration properties (flycors.cors.*)."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from flycors.core.config import config_properties
from flycors.cors.config import CorsConfig
from flycors.cors.http import DEFAULT_METHODS


def _as_list(value: Any) -> list[str]:
    """Accept a YAML/TOML list or a comma-separated string (as env vars deliver)."""
    if value is None:
        return []
    if isinstance(value, str):
        return [part.strip() for part in value.split(",") if part.strip()]
    return [str(part) for part in value]


@config_properties(prefix="flycors.cors")
@dataclass
class CorsProperties:
    """File/env binding for a CORS policy.

    Example ``cors.yaml``::

        flycors:
          cors:
            origin: [https://app.example.com, https://admin.example.com]
            credentials: true
            expose_headers: [X-Total-Count]

    Environment variables deliver lists as comma-separated strings
    (``FLYCORS_CORS_ORIGIN=https://a.com,https://b.com``).  An origin
    predicate cannot be expressed in a file; build
    :class:`CorsConfig` in code for that.
    """

    origin: str | list[str] = "*"
    methods: list[str] = field(default_factory=lambda: list(DEFAULT_METHODS))
    headers: list[str] = field(default_factory=lambda: ["Content-Type", "Authorization"])
    max_age: str | None = "86400"
    credentials: bool = False
    expose_headers: list[str] = field(default_factory=list)

    def to_cors_config(self) -> CorsConfig:
        origin: str | tuple[str, ...]
        if isinstance(self.origin, str) and "," not in self.origin:
            origin = self.origin
        else:
            origin = tuple(_as_list(self.origin))
        return CorsConfig(
            origin=origin,
            methods=tuple(_as_list(self.methods)),
            headers=tuple(_as_list(self.headers)),
            max_age=None if self.max_age is None else str(self.max_age),
            credentials=self.credentials,
            expose_headers=tuple(_as_list(self.expose_headers)),
        )
