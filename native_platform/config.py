"""
native-platform configuration.

Host identifying strings can be pinned instead of read from the running
interpreter, which is handy for describing a target platform or for
reproducing a probe failure. Settings come from (lowest to highest priority):

- built-in defaults
- a TOML config file (see `find_config_path`)
- environment variables, including those loaded from a `.env` file
"""

from __future__ import annotations

import os
import tomllib
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

from dotenv import load_dotenv

load_dotenv()

CONFIG_ENV_VAR = "NATIVE_PLATFORM_CONFIG"

DEFAULT_CONFIG_PATHS = [
    "~/.config/native-platform/config.toml",
]

# Host property -> environment variable overriding it.
HOST_ENV_VARS = {
    "os_name": "NATIVE_PLATFORM_OS_NAME",
    "os_version": "NATIVE_PLATFORM_OS_VERSION",
    "arch_name": "NATIVE_PLATFORM_ARCH",
}


class ConfigError(Exception):
    """Raised when the configuration file cannot be used."""


@dataclass
class HostConfig:
    """Overrides for host-reported identifying strings; None means ask the host."""

    os_name: Optional[str] = None
    os_version: Optional[str] = None
    arch_name: Optional[str] = None

    def get(self, name: str) -> Optional[str]:
        return getattr(self, name)


@dataclass
class UIConfig:
    rich: bool = True


@dataclass
class AppConfig:
    host: HostConfig = field(default_factory=HostConfig)
    ui: UIConfig = field(default_factory=UIConfig)
    path: Optional[Path] = None


def find_config_path(cli_path: Optional[str] = None) -> Optional[Path]:
    """Return the first existing config file: CLI path, $NATIVE_PLATFORM_CONFIG, defaults."""
    candidates = []
    if cli_path:
        candidates.append(cli_path)
    env_path = os.getenv(CONFIG_ENV_VAR)
    if env_path:
        candidates.append(env_path)
    candidates.extend(DEFAULT_CONFIG_PATHS)

    for candidate in candidates:
        path = Path(candidate).expanduser()
        if path.is_file():
            return path.resolve()
    return None


def _read_toml(path: Path) -> Dict[str, Any]:
    try:
        with path.open("rb") as f:
            return tomllib.load(f)
    except OSError as exc:
        raise ConfigError(f"Cannot read config file {path}: {exc}") from exc
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"Invalid TOML in {path}: {exc}") from exc


def _table(data: Mapping[str, Any], name: str) -> Dict[str, Any]:
    value = data.get(name, {})
    if not isinstance(value, dict):
        raise ConfigError(f"[{name}] must be a table")
    return value


def _optional_str(table: Mapping[str, Any], key: str, section: str) -> Optional[str]:
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigError(f"{section}.{key} must be a string")
    return value


def _apply_env(host: HostConfig, environ: Mapping[str, str]) -> HostConfig:
    for name, env_var in HOST_ENV_VARS.items():
        value = environ.get(env_var)
        if value:
            setattr(host, name, value)
    return host


def load_host_config(environ: Optional[Mapping[str, str]] = None) -> HostConfig:
    """Host overrides from the environment only."""
    return _apply_env(HostConfig(), os.environ if environ is None else environ)


def load_app_config(path: Optional[Path]) -> AppConfig:
    """Load configuration from `path`, or defaults when no path is given."""
    data: Dict[str, Any] = _read_toml(path) if path else {}

    host_table = _table(data, "host")
    host = HostConfig(
        os_name=_optional_str(host_table, "os_name", "host"),
        os_version=_optional_str(host_table, "os_version", "host"),
        arch_name=_optional_str(host_table, "arch_name", "host"),
    )
    _apply_env(host, os.environ)

    ui_table = _table(data, "ui")
    use_rich = ui_table.get("rich", True)
    if not isinstance(use_rich, bool):
        raise ConfigError("ui.rich must be a boolean")

    return AppConfig(host=host, ui=UIConfig(rich=use_rich), path=path)
