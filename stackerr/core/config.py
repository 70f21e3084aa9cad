"""Typed configuration loading and access.

Configuration covers the few process-wide knobs of the library: how deep
stacks are captured and how verbose the log sink is. It can come from a
TOML file:

    [stack]
    max_depth = 50

    [log]
    verbosity = 3
    threshold = 3

and from environment variables, which take precedence.
"""

from __future__ import annotations

import os
import threading
from collections.abc import Mapping
from dataclasses import dataclass, replace
from pathlib import Path

from .result import Err, Ok, Result
from .structured import StrDict, as_str_dict, get_int, get_table, parse_int

__all__ = [
    "Config",
    "ConfigError",
    "configure",
    "current_config",
    "load_config",
    "load_config_or_default",
    # Defaults
    "MAX_STACK_DEPTH",
    "DEFAULT_VERBOSITY",
    "LOG_THRESHOLD",
    # Environment
    "ENV_MAX_STACK_DEPTH",
    "ENV_VERBOSITY",
    "ENV_LOG_THRESHOLD",
]

# -----------------------------------------------------------------------------
# Defaults
# -----------------------------------------------------------------------------

MAX_STACK_DEPTH = 50
DEFAULT_VERBOSITY = 0
LOG_THRESHOLD = 3

ENV_MAX_STACK_DEPTH = "STACKERR_MAX_STACK_DEPTH"
ENV_VERBOSITY = "STACKERR_VERBOSITY"
ENV_LOG_THRESHOLD = "STACKERR_LOG_THRESHOLD"


@dataclass(frozen=True, slots=True)
class ConfigError:
    """Error when config cannot be loaded or parsed."""

    message: str
    path: Path | None = None


def _positive(value: int | None) -> int | None:
    if value is None or value <= 0:
        return None
    return value


def _non_negative(value: int | None) -> int | None:
    if value is None or value < 0:
        return None
    return value


def _or(value: int | None, default: int) -> int:
    return default if value is None else value


@dataclass(frozen=True, slots=True)
class Config:
    """Process-wide library settings."""

    max_stack_depth: int = MAX_STACK_DEPTH
    verbosity: int = DEFAULT_VERBOSITY
    log_threshold: int = LOG_THRESHOLD

    @property
    def log_enabled(self) -> bool:
        """True when added failures should reach the log sink."""
        return self.verbosity >= self.log_threshold

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> Config:
        """Create Config from a mapping (parsed TOML)."""
        stack: StrDict = get_table(data, "stack") or {}
        log: StrDict = get_table(data, "log") or {}

        return cls(
            max_stack_depth=_or(_positive(get_int(stack, "max_depth")), MAX_STACK_DEPTH),
            verbosity=_or(_non_negative(get_int(log, "verbosity")), DEFAULT_VERBOSITY),
            log_threshold=_or(_non_negative(get_int(log, "threshold")), LOG_THRESHOLD),
        )

    def with_env(self, environ: Mapping[str, str] | None = None) -> Config:
        """Return a copy with environment overrides applied.

        Malformed or out-of-range values are ignored.
        """
        env = os.environ if environ is None else environ

        depth = _positive(parse_int(env.get(ENV_MAX_STACK_DEPTH)))
        verbosity = _non_negative(parse_int(env.get(ENV_VERBOSITY)))
        threshold = _non_negative(parse_int(env.get(ENV_LOG_THRESHOLD)))

        return replace(
            self,
            max_stack_depth=_or(depth, self.max_stack_depth),
            verbosity=_or(verbosity, self.verbosity),
            log_threshold=_or(threshold, self.log_threshold),
        )


def _parse_toml(path: Path) -> Result[StrDict, ConfigError]:
    """Parse a TOML file, handling read and parse errors."""
    import tomllib

    try:
        content = path.read_bytes()
        data_obj: object = tomllib.loads(content.decode("utf-8"))
        data = as_str_dict(data_obj)
        if data is None:
            return Err(ConfigError("Config root must be a TOML table", path=path))
        return Ok(data)
    except FileNotFoundError:
        return Err(ConfigError(f"Config file not found: {path}", path=path))
    except PermissionError:
        return Err(ConfigError(f"Permission denied reading: {path}", path=path))
    except tomllib.TOMLDecodeError as e:
        return Err(ConfigError(f"Invalid TOML syntax: {e}", path=path))
    except UnicodeDecodeError as e:
        return Err(ConfigError(f"Error reading config: {e}", path=path))


def load_config(path: Path) -> Result[Config, ConfigError]:
    """Load and parse configuration from a TOML file.

    Args:
        path: Path to the TOML file

    Returns:
        Ok(Config) on success, Err(ConfigError) on failure
    """
    result = _parse_toml(path)
    if isinstance(result, Err):
        return result

    try:
        return Ok(Config.from_dict(result.value))
    except (KeyError, TypeError, ValueError) as e:
        return Err(ConfigError(f"Invalid config structure: {e}", path=path))


def load_config_or_default(path: Path) -> Config:
    """Load config from file, or return default config if it can't be read."""
    result = load_config(path)
    if isinstance(result, Ok):
        return result.value
    return Config()


# -----------------------------------------------------------------------------
# Process-wide settings
# -----------------------------------------------------------------------------

_lock = threading.Lock()
_current: Config | None = None


def configure(config: Config | None) -> None:
    """Install config as the process-wide settings.

    Passing None resets to defaults plus environment on next access.
    """
    global _current
    with _lock:
        _current = config


def current_config() -> Config:
    """Return the process-wide settings."""
    global _current
    config = _current
    if config is not None:
        return config
    with _lock:
        if _current is None:
            _current = Config().with_env()
        return _current
