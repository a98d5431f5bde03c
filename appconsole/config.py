"""
Console configuration.

Settings come from the ``console:`` section of an optional YAML file and are
then overridden by ``APPCONSOLE_*`` environment variables, e.g.
``APPCONSOLE_LOG_LEVEL=debug``.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from .console import should_use_color
from .constants import ENV_PREFIX
from .errors import ConfigurationError
from .log import InvalidLogLevelError, LogConfig

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _to_bool(name: str, value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigurationError(f"'{name}' expects a boolean, got '{value}'")


def _log_config(level: Any, colors: bool) -> LogConfig:
    try:
        return LogConfig.from_params(level, colors=colors)
    except InvalidLogLevelError as e:
        raise ConfigurationError(str(e)) from e


@dataclass(frozen=True)
class ConsoleConfig:
    """Settings of a console application."""

    prog: str | None = None
    description: str | None = None
    log_level: str = "warning"
    log_colors: bool | None = None  # None: only when stderr supports it
    verbose_errors: bool = False

    @property
    def log_config(self) -> LogConfig:
        """
        Logging settings derived from this config.

        Raises:
            ConfigurationError: If ``log_level`` is not a known level
        """
        colors = self.log_colors
        if colors is None:
            colors = should_use_color(sys.stderr)
        return _log_config(self.log_level, colors)

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> ConsoleConfig:
        """
        Build a config from a mapping, rejecting unknown keys.

        Raises:
            ConfigurationError: If a key is unknown or a value has the wrong type
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ConfigurationError(f"Unknown console settings: {', '.join(unknown)}")

        kwargs = dict(values)
        if kwargs.get("log_colors") is not None:
            kwargs["log_colors"] = _to_bool("log_colors", kwargs["log_colors"])
        if "verbose_errors" in kwargs:
            kwargs["verbose_errors"] = _to_bool("verbose_errors", kwargs["verbose_errors"])
        if "log_level" in kwargs:
            kwargs["log_level"] = str(kwargs["log_level"])
            _log_config(kwargs["log_level"], colors=False)
        return cls(**kwargs)

    def with_env(self, env: Mapping[str, str] | None = None) -> ConsoleConfig:
        """Return a copy with ``APPCONSOLE_<FIELD>`` overrides applied."""
        env = os.environ if env is None else env
        overrides: dict[str, Any] = {}
        for f in fields(self):
            key = ENV_PREFIX + f.name.upper()
            if key in env:
                overrides[f.name] = env[key]
        if not overrides:
            return self
        parsed = ConsoleConfig.from_dict(overrides)
        return replace(self, **{name: getattr(parsed, name) for name in overrides})

    @classmethod
    def load(
        cls,
        path: str | Path | None = None,
        env: Mapping[str, str] | None = None,
        section: str = "console",
    ) -> ConsoleConfig:
        """
        Load settings from a YAML file and the environment.

        Args:
            path: YAML file; skipped when None
            env: Environment mapping, defaults to ``os.environ``
            section: Top-level key holding the console settings

        Raises:
            ConfigurationError: If the file cannot be read or is malformed
        """
        config = cls()
        if path is not None:
            config = cls.from_dict(_read_section(Path(path), section))
        return config.with_env(env)


def _read_section(path: Path, section: str) -> dict[str, Any]:
    try:
        with path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigurationError(f"Cannot read '{path}': {e}") from e
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in '{path}': {e}") from e

    if not isinstance(data, Mapping):
        raise ConfigurationError(f"'{path}' must contain a mapping")

    values = data.get(section, {})
    if not isinstance(values, Mapping):
        raise ConfigurationError(f"Section '{section}' in '{path}' must be a mapping")
    return dict(values)
