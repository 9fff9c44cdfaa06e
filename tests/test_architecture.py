import pytest

from native_platform.architecture import Architecture, normalize_name
from native_platform.errors import UnknownArchitectureError
from native_platform.integer_model import IntegerModel

ARCH_NAMES = {
    Architecture.X86: ["x86", "i386", "i486", "i586", "i686", "ia32", "x86_32"],
    Architecture.X86_64: ["x86_64", "amd64", "AMD64", "x64", "x32", "ia32e", "em64t"],
    Architecture.ARM: ["arm", "aarch", "armv7", "armv7-a", "armv7l", "arm32"],
    Architecture.ARM64: ["aarch64", "arm64", "arm64e", "aarch64_be"],
    Architecture.RISCV64: ["riscv64", "riscv64be", "riscv64eb"],
    Architecture.PPC64: ["ppc64", "powerpc64", "ppc64le", "powerpc64le"],
    Architecture.S390X: ["s390x", "z/Arch64"],
}


@pytest.mark.parametrize("expected, names", list(ARCH_NAMES.items()))
def test_of_recognizes_names_case_insensitively(expected, names):
    for name in names:
        assert Architecture.of(name) is expected
        assert Architecture.of(name.upper()) is expected


def test_of_unknown_raises():
    with pytest.raises(UnknownArchitectureError, match="unknown"):
        Architecture.of("unknown")
    with pytest.raises(ValueError):
        Architecture.of("")
    with pytest.raises(UnknownArchitectureError):
        Architecture.of("mips64")


def test_of_accepts_own_values():
    for arch in Architecture:
        assert Architecture.of(arch.value) is arch


def test_normalize_name():
    assert normalize_name("Z/Arch-64") == "zarch64"
    assert normalize_name(" x86_64 ") == "x8664"


def test_word_model():
    expected = {
        Architecture.X86: IntegerModel.BIT32,
        Architecture.X86_64: IntegerModel.BIT64,
        Architecture.ARM: IntegerModel.BIT32,
        Architecture.ARM64: IntegerModel.BIT64,
        Architecture.RISCV64: IntegerModel.BIT64,
        Architecture.PPC64: IntegerModel.BIT64,
        Architecture.S390X: IntegerModel.BIT64,
    }
    for arch in Architecture:
        assert arch.word_model is expected[arch]
        assert arch.word_model.is_64bit() == arch.is_64bit()
