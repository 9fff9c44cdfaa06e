"""
Processor architecture classification.

Architecture names reported by hosts vary wildly ("x86_64", "AMD64", "i686",
"armv7l", "z/Arch64", ...). Names are normalized by lower-casing and dropping
every character that is not an ASCII letter or digit, then matched against a
fixed, ordered pattern table.
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Dict, List, Pattern, Tuple

from native_platform.errors import UnknownArchitectureError
from native_platform.integer_model import IntegerModel

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def normalize_name(name: str) -> str:
    """Lower-case `name` and strip all non-alphanumeric characters."""
    return _NON_ALNUM.sub("", name.lower())


class Architecture(Enum):
    """Supported processor architectures."""

    X86 = "x86"
    X86_64 = "x86_64"
    ARM = "arm"
    ARM64 = "arm64"
    RISCV64 = "riscv64"
    PPC64 = "ppc64"
    S390X = "s390x"

    @classmethod
    def of(cls, name: str) -> "Architecture":
        """
        Classify a free-form architecture name.

        Raises:
            UnknownArchitectureError: `name` matches no known architecture.
        """
        normalized = normalize_name(name)
        for pattern, arch in _NAME_PATTERNS:
            if pattern.fullmatch(normalized):
                return arch
        raise UnknownArchitectureError(f"Unknown architecture: {name}")

    @property
    def word_model(self) -> IntegerModel:
        """Native processor word model."""
        return _WORD_MODELS[self]

    def is_64bit(self) -> bool:
        return self.word_model.is_64bit()


# First match wins.
_NAME_PATTERNS: List[Tuple[Pattern[str], Architecture]] = [
    (re.compile(r"x86(32)?|i[3-6]86|ia32"), Architecture.X86),
    (re.compile(r"(x(86)?|amd)64|ia32e|em64t|x32"), Architecture.X86_64),
    (re.compile(r"(aarch|arm)(32)?(v7)?[a-z]*"), Architecture.ARM),
    (re.compile(r"(aarch|arm)64[a-z]*"), Architecture.ARM64),
    (re.compile(r"riscv64[a-z]*"), Architecture.RISCV64),
    (re.compile(r"(powerpc|ppc)64[a-z]*"), Architecture.PPC64),
    (re.compile(r"s390x|zarch64"), Architecture.S390X),
]

_WORD_MODELS: Dict[Architecture, IntegerModel] = {
    Architecture.X86: IntegerModel.BIT32,
    Architecture.X86_64: IntegerModel.BIT64,
    Architecture.ARM: IntegerModel.BIT32,
    Architecture.ARM64: IntegerModel.BIT64,
    Architecture.RISCV64: IntegerModel.BIT64,
    Architecture.PPC64: IntegerModel.BIT64,
    Architecture.S390X: IntegerModel.BIT64,
}
