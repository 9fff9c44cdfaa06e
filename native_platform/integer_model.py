from __future__ import annotations

import ctypes
from enum import Enum
from typing import Type

from native_platform.errors import InvalidIntegerSizeError


class IntegerModel(Enum):
    """Fixed-size native integer width."""

    BIT32 = 4
    BIT64 = 8

    @classmethod
    def of_bytes(cls, size: int) -> "IntegerModel":
        """Return the integer model that is `size` bytes wide."""
        if size == 8:
            return cls.BIT64
        if size == 4:
            return cls.BIT32
        raise InvalidIntegerSizeError(f"Invalid integer size: {size} bytes")

    @classmethod
    def of_bits(cls, size: int) -> "IntegerModel":
        """Return the integer model that is `size` bits wide."""
        if size % 8:
            raise InvalidIntegerSizeError(f"Invalid integer size: {size} bits")
        return cls.of_bytes(size >> 3)

    @property
    def bytes(self) -> int:
        return self.value

    @property
    def bits(self) -> int:
        return self.value << 3

    def is_64bit(self) -> bool:
        return self is IntegerModel.BIT64

    def is_32bit(self) -> bool:
        return not self.is_64bit()

    def to_ctype(self) -> Type[ctypes._SimpleCData]:
        """Signed ctypes integer type with this width."""
        return ctypes.c_int64 if self.is_64bit() else ctypes.c_int32
