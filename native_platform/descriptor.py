"""
Platform descriptor.

A platform is described by its operating system, processor architecture and
data model, optionally with the operating system version. The data model
dictates the C type widths, which matters when exchanging data with native
libraries.
"""

from __future__ import annotations

import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from native_platform.architecture import Architecture
from native_platform.config import HostConfig, load_host_config
from native_platform.data_model import DataModel
from native_platform.errors import PlatformProbeError, UnsupportedPlatformError
from native_platform.host import read_host_properties
from native_platform.operating_system import OperatingSystem
from native_platform.os_version import OperatingSystemVersion

# x86-64 instruction set with 32-bit pointers.
X32_ARCH_NAME = "x32"


def infer_data_model(os: OperatingSystem, architecture: Architecture) -> DataModel:
    """Default data model for an OS/architecture pair; ILP64 is never inferred."""
    if not architecture.is_64bit():
        return DataModel.ILP32
    return DataModel.LP64 if os.is_unix() else DataModel.LLP64


@dataclass(frozen=True)
class Platform:
    os: OperatingSystem
    architecture: Architecture
    os_version: Optional[OperatingSystemVersion] = None
    data_model: Optional[DataModel] = None

    def __post_init__(self) -> None:
        if not isinstance(self.os, OperatingSystem):
            raise TypeError(f"os must be an OperatingSystem, not {self.os!r}")
        if not isinstance(self.architecture, Architecture):
            raise TypeError(f"architecture must be an Architecture, not {self.architecture!r}")
        if self.os_version is not None and not isinstance(self.os_version, OperatingSystemVersion):
            raise TypeError(f"os_version must be an OperatingSystemVersion, not {self.os_version!r}")
        if self.data_model is not None and not isinstance(self.data_model, DataModel):
            raise TypeError(f"data_model must be a DataModel, not {self.data_model!r}")
        if self.data_model is None:
            object.__setattr__(self, "data_model", infer_data_model(self.os, self.architecture))

    @classmethod
    def current(cls) -> "Platform":
        """
        Platform the interpreter is running on.

        The host is probed once per process. A probe failure is remembered
        and raised again on every call.

        Raises:
            UnsupportedPlatformError: the host platform could not be identified.
        """
        result = _current
        if result is None:
            with _current_lock:
                result = _current
                if result is None:
                    result = _probe_current()
        if isinstance(result, PlatformProbeError):
            raise UnsupportedPlatformError(f"Unsupported platform: {result}") from result
        return result

    def is_os(self, os: OperatingSystem) -> bool:
        return self.os is os

    def is_architecture(self, architecture: Architecture) -> bool:
        return self.architecture is architecture

    def is_data_model(self, data_model: DataModel) -> bool:
        return self.data_model is data_model

    def is_64bit_word(self) -> bool:
        """Native processor word is 64-bit."""
        return self.architecture.is_64bit()

    def is_64bit_address(self) -> bool:
        """Pointers of the data model are 64-bit."""
        return self.data_model.pointer_model.is_64bit()

    def compare_os_version(
        self,
        version: Union[OperatingSystemVersion, int],
        minor: Optional[int] = None,
        patch: Optional[int] = None,
    ) -> int:
        """
        Compare the OS version of this platform against `version`.

        `version` is either an OperatingSystemVersion or the major component,
        with `minor` and `patch` (default 0) completing it. Returns -1, 0 or 1; a platform
        without an OS version is always older.

        Raises:
            InvalidVersionError: a version component is negative.
            TypeError: `minor` or `patch` given along with an OperatingSystemVersion.
        """
        if isinstance(version, OperatingSystemVersion):
            if minor is not None or patch is not None:
                raise TypeError("minor and patch cannot be combined with an OperatingSystemVersion")
        else:
            version = OperatingSystemVersion(version, minor or 0, patch or 0)
        if self.os_version is None:
            return -1
        return self.os_version.compare_to(version)

    def describe(self) -> Dict[str, Any]:
        data_model = self.data_model
        return {
            "os": self.os.value,
            "os_version": str(self.os_version) if self.os_version else None,
            "architecture": self.architecture.value,
            "data_model": data_model.value,
            "word_bits": self.architecture.word_model.bits,
            "int_bits": data_model.int_model.bits,
            "long_bits": data_model.long_model.bits,
            "llong_bits": data_model.llong_model.bits,
            "pointer_bits": data_model.pointer_model.bits,
            "unix": self.os.is_unix(),
            "library_prefix": self.os.to_library_prefix(),
            "library_extension": self.os.to_library_extension(),
        }

    def __str__(self) -> str:
        return f"{self.os.value}-{self.architecture.value} ({self.data_model.value})"


def probe_platform(config: Optional[HostConfig] = None) -> Platform:
    """
    Identify the host platform from its reported strings.

    Raises:
        PlatformProbeError: a string is missing or could not be classified.
    """
    try:
        properties = read_host_properties(config)
        os = OperatingSystem.of(properties["os_name"])
        os_version = OperatingSystemVersion.of(properties["os_version"])
        arch_name = properties["arch_name"]
        architecture = Architecture.of(arch_name)
    except PlatformProbeError:
        raise
    except Exception as exc:
        raise PlatformProbeError(f"Failed to probe current platform: {exc}") from exc

    if arch_name == X32_ARCH_NAME or not architecture.is_64bit():
        data_model = DataModel.ILP32
    elif os is OperatingSystem.WINDOWS:
        data_model = DataModel.LLP64
    else:
        data_model = DataModel.LP64
    return Platform(os, architecture, os_version, data_model)


_current: Union[Platform, PlatformProbeError, None] = None
_current_lock = threading.Lock()


def _probe_current() -> Union[Platform, PlatformProbeError]:
    global _current
    try:
        _current = probe_platform(load_host_config())
    except PlatformProbeError as exc:
        _current = exc
    return _current
