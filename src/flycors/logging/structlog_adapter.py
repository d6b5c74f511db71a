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
"""StructlogAdapter — the default LoggingPort."""

from __future__ import annotations

import logging
import sys
from typing import Any

import structlog

from flycors.core.config import Config

_LEVEL_PREFIX = "flycors.logging.level"

_SHARED_PROCESSORS: tuple[structlog.types.Processor, ...] = (
    structlog.contextvars.merge_contextvars,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.UnicodeDecoder(),
)


def _renderer(fmt: str) -> structlog.types.Processor:
    if fmt == "json":
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer()


def _level(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def _logger_levels(section: dict[str, Any], parent: str = "") -> dict[str, str]:
    """YAML nests dotted logger names (``flycors: {web: DEBUG}``); join them back."""
    levels: dict[str, str] = {}
    for key, value in section.items():
        name = f"{parent}.{key}" if parent else key
        if isinstance(value, dict):
            levels.update(_logger_levels(value, name))
        else:
            levels[name] = str(value).upper()
    return levels


class StructlogAdapter:
    """Routes structlog through stdlib logging, configured from ``flycors.logging.*``.

    Recognized keys:
        flycors.logging.format: ``console`` (default) or ``json``.
        flycors.logging.level.root: Root level (default ``INFO``).
        flycors.logging.level.<logger>: Per-logger level, e.g.
            ``flycors.logging.level.flycors.web: DEBUG`` to see CORS
            rejections and preflights.
    """

    def __init__(self) -> None:
        self._root_level = "INFO"
        self._format = "console"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        levels = _logger_levels(config.get_section(_LEVEL_PREFIX))
        self._root_level = levels.pop("root", "INFO")
        self._module_levels = levels
        self._format = str(config.get("flycors.logging.format", "console")).lower()

        structlog.configure(
            processors=[*_SHARED_PROCESSORS, _renderer(self._format)],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=True,
        )
        logging.basicConfig(format="%(message)s", stream=sys.stdout, level=_level(self._root_level), force=True)

        for name, level in self._module_levels.items():
            self.set_level(name, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(_level(level))
