"""
C data models.

A data model fixes the width of the standard C integer types. LP64, for
example, has 32-bit ``int`` with 64-bit ``long``, ``long long`` and pointers,
while Windows on x86-64 uses LLP64 where ``long`` stays 32-bit.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple

from native_platform.integer_model import IntegerModel


class DataModel(Enum):
    """The four standard ABI width combinations."""

    ILP32 = "ILP32"
    ILP64 = "ILP64"
    LLP64 = "LLP64"
    LP64 = "LP64"

    @property
    def int_model(self) -> IntegerModel:
        return _WIDTHS[self][0]

    @property
    def long_model(self) -> IntegerModel:
        return _WIDTHS[self][1]

    @property
    def llong_model(self) -> IntegerModel:
        """Width of ``long long``."""
        return _WIDTHS[self][2]

    @property
    def pointer_model(self) -> IntegerModel:
        return _WIDTHS[self][3]


# (int, long, long long, pointer) sizes in bytes.
_WIDTHS: Dict[DataModel, Tuple[IntegerModel, IntegerModel, IntegerModel, IntegerModel]] = {
    model: tuple(IntegerModel.of_bytes(size) for size in sizes)  # type: ignore[misc]
    for model, sizes in (
        (DataModel.ILP32, (4, 4, 4, 4)),
        (DataModel.ILP64, (8, 8, 8, 8)),
        (DataModel.LLP64, (4, 4, 8, 8)),
        (DataModel.LP64, (4, 8, 8, 8)),
    )
}
