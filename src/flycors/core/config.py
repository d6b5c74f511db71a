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
"""Settings for flycors: nested dicts from YAML/TOML files, overridden by ``FLYCORS_*`` env vars."""

from __future__ import annotations

import dataclasses
import os
import tomllib
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any, TypeVar, get_type_hints

import yaml  # type: ignore[import-untyped]

from flycors.kernel.exceptions import ConfigurationException

T = TypeVar("T")

_PREFIX_ATTR = "__flycors_config_prefix__"
_ENV_PREFIX = "FLYCORS_"
_TRUTHY = frozenset({"true", "1", "yes", "on"})


def config_properties(prefix: str) -> Callable[[type[T]], type[T]]:
    """Mark a dataclass as bindable to the settings under *prefix*.

    Usage:
        @config_properties(prefix="flycors.cors")
        @dataclass
        class CorsProperties:
            origin: str | list[str] = "*"
    """

    def decorator(cls: type[T]) -> type[T]:
        setattr(cls, _PREFIX_ATTR, prefix)
        return cls

    return decorator


def _read(path: Path) -> dict[str, Any]:
    try:
        if path.suffix == ".toml":
            with open(path, "rb") as f:
                return tomllib.load(f)
        with open(path) as f:
            return yaml.safe_load(f) or {}
    except (yaml.YAMLError, tomllib.TOMLDecodeError) as exc:
        raise ConfigurationException(
            f"Cannot parse config file '{path}': {exc}",
            code="CONFIG_PARSE",
            context={"path": str(path)},
        ) from exc


def _merge(base: dict[str, Any], overlay: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        current = merged.get(key)
        merged[key] = _merge(current, value) if isinstance(current, dict) and isinstance(value, dict) else value
    return merged


def _coerce(value: Any, expected: Any) -> Any:
    """Env vars always arrive as strings; turn them into the field's scalar type."""
    if not isinstance(value, str):
        return value
    if expected is bool:
        return value.strip().lower() in _TRUTHY
    if expected in (int, float):
        return expected(value)
    return value


class Config:
    """Read-only settings tree.

    ``get("flycors.cors.max_age")`` walks the nested dict, but the
    environment variable ``FLYCORS_CORS_MAX_AGE`` wins when it is set.
    """

    def __init__(self, data: dict[str, Any] | None = None) -> None:
        self._data: dict[str, Any] = data or {}
        self._loaded_sources: list[str] = []

    @property
    def loaded_sources(self) -> list[str]:
        return list(self._loaded_sources)

    def to_dict(self) -> dict[str, Any]:
        return dict(self._data)

    @classmethod
    def from_file(cls, path: str | Path, active_profiles: list[str] | None = None) -> Config:
        """Load *path*, then each ``<stem>-<profile><suffix>`` next to it, later files winning.

        Files that do not exist are skipped; a file that cannot be parsed
        raises :class:`ConfigurationException`.
        """
        path = Path(path)
        config = cls()
        for candidate in _candidates(path, active_profiles or []):
            config._data = _merge(config._data, _read(candidate))
            config._loaded_sources.append(str(candidate))
        return config

    @staticmethod
    def env_key(key: str) -> str:
        """``flycors.cors.max_age`` -> ``FLYCORS_CORS_MAX_AGE``."""
        name = key.removeprefix("flycors.").replace(".", "_").replace("-", "_")
        return _ENV_PREFIX + name.upper()

    def get(self, key: str, default: Any = None) -> Any:
        if (env_val := os.environ.get(self.env_key(key))) is not None:
            return env_val
        node: Any = self._data
        for part in key.split("."):
            if not isinstance(node, dict) or node.get(part) is None:
                return default
            node = node[part]
        return node

    def get_section(self, prefix: str) -> dict[str, Any]:
        section = self.get(prefix, {})
        return section if isinstance(section, dict) else {}

    def bind(self, config_cls: type[T]) -> T:
        """Instantiate a ``@config_properties`` dataclass from these settings.

        Each field is read through :meth:`get`, so env vars apply per field.
        Unset fields keep their dataclass defaults.
        """
        prefix = getattr(config_cls, _PREFIX_ATTR, None)
        if prefix is None:
            raise ConfigurationException(
                f"{config_cls.__name__} is not decorated with @config_properties",
                code="CONFIG_NOT_BINDABLE",
            )

        hints = get_type_hints(config_cls)
        values = {
            f.name: _coerce(value, hints.get(f.name))
            for f in dataclasses.fields(config_cls)  # type: ignore[arg-type]
            if (value := self.get(f"{prefix}.{f.name}")) is not None
        }
        return config_cls(**values)


def _candidates(path: Path, profiles: list[str]) -> Iterator[Path]:
    if not path.exists():
        return
    yield path
    for profile in profiles:
        overlay = path.with_name(f"{path.stem}-{profile}{path.suffix}")
        if overlay.exists():
            yield overlay
