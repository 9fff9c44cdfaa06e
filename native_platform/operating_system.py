from __future__ import annotations

from enum import Enum

from native_platform.architecture import normalize_name
from native_platform.errors import UnknownOperatingSystemError


class OperatingSystem(Enum):
    """Supported operating systems."""

    LINUX = "linux"
    FREEBSD = "freebsd"
    NETBSD = "netbsd"
    OPENBSD = "openbsd"
    MACOS = "macos"
    WINDOWS = "windows"

    @classmethod
    def of(cls, name: str) -> "OperatingSystem":
        """
        Classify a free-form operating system name.

        The normalized name is tested for "linux", "freebsd", "netbsd",
        "openbsd", then "darwin" (or a "mac"/"osx" prefix), then "windows".

        Raises:
            UnknownOperatingSystemError: `name` matches no known operating system.
        """
        normalized = normalize_name(name)
        if "linux" in normalized:
            return cls.LINUX
        if "freebsd" in normalized:
            return cls.FREEBSD
        if "netbsd" in normalized:
            return cls.NETBSD
        if "openbsd" in normalized:
            return cls.OPENBSD
        if "darwin" in normalized or normalized.startswith(("mac", "osx")):
            return cls.MACOS
        if "windows" in normalized:
            return cls.WINDOWS
        raise UnknownOperatingSystemError(f"Unknown operating system: {name}")

    def is_unix(self) -> bool:
        return self is not OperatingSystem.WINDOWS

    def to_library_prefix(self) -> str:
        return "lib" if self.is_unix() else ""

    def to_library_extension(self) -> str:
        """Shared library file extension, without the leading dot."""
        if self is OperatingSystem.WINDOWS:
            return "dll"
        if self is OperatingSystem.MACOS:
            return "dylib"
        return "so"

    def map_library_file_name(self, library_name: str) -> str:
        """Map a library name to its file name, e.g. foo -> libfoo.dylib on macOS."""
        return f"{self.to_library_prefix()}{library_name}.{self.to_library_extension()}"
