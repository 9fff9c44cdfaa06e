"""Operating system, processor architecture and C data model of the running platform."""

from .architecture import Architecture
from .data_model import DataModel
from .descriptor import Platform, infer_data_model, probe_platform
from .errors import (
    HostPropertyError,
    InvalidIntegerSizeError,
    InvalidVersionError,
    MalformedVersionError,
    PlatformError,
    PlatformProbeError,
    UnknownArchitectureError,
    UnknownOperatingSystemError,
    UnsupportedPlatformError,
)
from .integer_model import IntegerModel
from .operating_system import OperatingSystem
from .os_version import OperatingSystemVersion

__version__ = "1.0.0"

__all__ = [
    "Architecture",
    "DataModel",
    "IntegerModel",
    "OperatingSystem",
    "OperatingSystemVersion",
    "Platform",
    "infer_data_model",
    "probe_platform",
    "PlatformError",
    "UnknownArchitectureError",
    "UnknownOperatingSystemError",
    "MalformedVersionError",
    "InvalidVersionError",
    "InvalidIntegerSizeError",
    "PlatformProbeError",
    "HostPropertyError",
    "UnsupportedPlatformError",
]
