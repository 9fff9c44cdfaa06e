"""Exceptions raised while classifying or probing a platform."""

from __future__ import annotations


class PlatformError(Exception):
    """Base class for all platform description errors."""


class UnknownArchitectureError(PlatformError, ValueError):
    """Raised when a name matches no known processor architecture."""


class UnknownOperatingSystemError(PlatformError, ValueError):
    """Raised when a name matches no known operating system."""


class MalformedVersionError(PlatformError, ValueError):
    """Raised when a version string does not follow the accepted grammar."""


class InvalidVersionError(PlatformError, ValueError):
    """Raised when a version component is negative."""


class InvalidIntegerSizeError(PlatformError, ValueError):
    """Raised when an integer size is neither 32 nor 64 bits."""


class PlatformProbeError(PlatformError, RuntimeError):
    """Raised when the host platform could not be identified."""


class HostPropertyError(PlatformProbeError):
    """Raised when the host does not report a required identifying string."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Host property {name} not defined")
        self.name = name


class UnsupportedPlatformError(PlatformError, RuntimeError):
    """Raised by Platform.current() when probing the host failed."""
