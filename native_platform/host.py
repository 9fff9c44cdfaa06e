"""
Host-environment string lookup.

The interpreter reports three identifying strings: the OS name, the OS
version and the processor architecture name. Configured overrides take
precedence over what the `platform` module reports.
"""

from __future__ import annotations

import platform
from typing import Callable, Dict, Optional

from native_platform.config import HostConfig
from native_platform.errors import HostPropertyError

HOST_PROPERTIES = ("os_name", "os_version", "arch_name")


def _os_version() -> str:
    system = platform.system()
    if system == "Darwin":
        # platform.release() is the Darwin kernel version, not the macOS one.
        return platform.mac_ver()[0]
    if system == "Windows":
        return platform.version()
    return platform.release()


_HOST_LOOKUPS: Dict[str, Callable[[], str]] = {
    "os_name": platform.system,
    "os_version": _os_version,
    "arch_name": platform.machine,
}


def lookup_host_property(name: str, config: Optional[HostConfig] = None) -> Optional[str]:
    """Return the host property `name`, or None when the host does not report it."""
    if name not in _HOST_LOOKUPS:
        raise KeyError(name)
    value = config.get(name) if config else None
    if not value:
        value = _HOST_LOOKUPS[name]()
    return value or None


def read_host_properties(config: Optional[HostConfig] = None) -> Dict[str, str]:
    """
    Read all identifying host properties.

    Raises:
        HostPropertyError: a property is not reported by the host.
    """
    properties: Dict[str, str] = {}
    for name in HOST_PROPERTIES:
        value = lookup_host_property(name, config)
        if value is None:
            raise HostPropertyError(name)
        properties[name] = value
    return properties
