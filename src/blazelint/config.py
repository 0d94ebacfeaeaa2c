"""
Environment-driven configuration for the blazelint command.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional

from .errors import ConfigurationError
from .report import FORMATS

ENV_BACKUP_CONFIRMED = "BLAZELINT_BACKUP_CONFIRMED"
ENV_FORMAT = "BLAZELINT_FORMAT"
ENV_LOG_LEVEL = "BLAZELINT_LOG_LEVEL"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


def _parse_bool(value: str, *, key: str) -> bool:
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"Invalid boolean value for '{key}': {value!r}")


def _parse_format(value: str, *, key: str) -> str:
    normalized = value.strip().lower()
    if normalized not in FORMATS:
        raise ConfigurationError(
            f"Invalid report format for '{key}': {value!r} (expected one of: {', '.join(FORMATS)})"
        )
    return normalized


def _parse_log_level(value: str, *, key: str) -> str:
    normalized = value.strip().upper()
    if not isinstance(logging.getLevelName(normalized), int):
        raise ConfigurationError(f"Invalid log level for '{key}': {value!r}")
    return normalized


@dataclass(frozen=True)
class LintConfig:
    """
    Normalized settings for a lint run.
    """

    backup_confirmed: bool = False
    fmt: str = "text"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "LintConfig":
        """
        Build a config from ``BLAZELINT_*`` environment variables.
        """

        env = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        if env.get(ENV_BACKUP_CONFIRMED):
            values["backup_confirmed"] = _parse_bool(env[ENV_BACKUP_CONFIRMED], key=ENV_BACKUP_CONFIRMED)
        if env.get(ENV_FORMAT):
            values["fmt"] = _parse_format(env[ENV_FORMAT], key=ENV_FORMAT)
        if env.get(ENV_LOG_LEVEL):
            values["log_level"] = _parse_log_level(env[ENV_LOG_LEVEL], key=ENV_LOG_LEVEL)
        return cls(**values)

    def with_overrides(
        self,
        *,
        backup_confirmed: Optional[bool] = None,
        fmt: Optional[str] = None,
        verbose: bool = False,
    ) -> "LintConfig":
        """
        Apply command-line options. An explicit backup flag, on or off, wins over the environment.
        """

        return replace(
            self,
            backup_confirmed=self.backup_confirmed if backup_confirmed is None else backup_confirmed,
            fmt=_parse_format(fmt, key="--format") if fmt else self.fmt,
            log_level="DEBUG" if verbose else self.log_level,
        )
