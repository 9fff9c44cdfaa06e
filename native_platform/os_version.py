from __future__ import annotations

import re
from dataclasses import dataclass

from native_platform.errors import InvalidVersionError, MalformedVersionError

# Optional build prefix and suffix around dot-separated integer components.
_VERSION_PATTERN = re.compile(
    r"([-+_0-9a-z]*-)?(?P<version>[0-9]+(\.[0-9]+)*)(-[-+_0-9a-z]*)?",
    re.IGNORECASE | re.ASCII,
)


@dataclass(frozen=True, order=True)
class OperatingSystemVersion:
    """Operating system version as (major, minor, patch)."""

    major: int
    minor: int = 0
    patch: int = 0

    def __post_init__(self) -> None:
        if min(self.major, self.minor, self.patch) < 0:
            raise InvalidVersionError(f"Malformed version: {self.major}.{self.minor}.{self.patch}")

    @classmethod
    def of(cls, version: str) -> "OperatingSystemVersion":
        """
        Parse a version string such as "6.1.0-13-amd64" or "14.0-RELEASE".

        Build prefix and suffix are stripped and at most the first three
        components are kept. Missing components are 0, so "1.2" parses as
        1.2.0.

        Raises:
            MalformedVersionError: `version` does not look like a version string.
        """
        match = _VERSION_PATTERN.fullmatch(version)
        if not match:
            raise MalformedVersionError(f"Malformed version string: {version}")

        components = [int(part, 10) for part in match.group("version").split(".")[:3]]
        return cls(*components)

    def compare_to(self, other: "OperatingSystemVersion") -> int:
        """Return -1, 0 or 1 as this version is older, equal or newer than `other`."""
        if self < other:
            return -1
        if self > other:
            return 1
        return 0

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"
