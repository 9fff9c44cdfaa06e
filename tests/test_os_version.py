import pytest

from native_platform.errors import InvalidVersionError, MalformedVersionError
from native_platform.os_version import OperatingSystemVersion


@pytest.mark.parametrize(
    "expected, version",
    [
        (OperatingSystemVersion(0), "0"),
        (OperatingSystemVersion(1), "1"),
        (OperatingSystemVersion(1, 2), "1.2"),
        (OperatingSystemVersion(1, 2, 3), "1.2.3"),
    ],
)
def test_of_strips_prefix_and_suffix(expected, version):
    assert OperatingSystemVersion.of(version) == expected
    assert OperatingSystemVersion.of("prefix-" + version) == expected
    assert OperatingSystemVersion.of(version + "-suffix") == expected
    assert OperatingSystemVersion.of("prefix-" + version + "-suffix") == expected


def test_of_defaults_missing_components():
    assert OperatingSystemVersion.of("1.2") == OperatingSystemVersion(1, 2, 0)
    assert OperatingSystemVersion.of("1") == OperatingSystemVersion(1, 0, 0)


def test_of_real_world_versions():
    assert OperatingSystemVersion.of("6.1.0-13-amd64") == OperatingSystemVersion(6, 1, 0)
    assert OperatingSystemVersion.of("5.15.90.1-microsoft-standard-WSL2") == OperatingSystemVersion(5, 15, 90)
    assert OperatingSystemVersion.of("14.0-RELEASE") == OperatingSystemVersion(14, 0, 0)
    assert OperatingSystemVersion.of("10.0.19045") == OperatingSystemVersion(10, 0, 19045)


def test_of_invalid():
    for version in ("", "abc", "1.", ".1", "1..2", "v1.2", "1.2 beta"):
        with pytest.raises(MalformedVersionError):
            OperatingSystemVersion.of(version)


def test_negative_components_rejected():
    with pytest.raises(InvalidVersionError):
        OperatingSystemVersion(-1)
    with pytest.raises(InvalidVersionError):
        OperatingSystemVersion(1, -2)
    with pytest.raises(ValueError):
        OperatingSystemVersion(1, 2, -3)


def test_compare_to():
    a = OperatingSystemVersion.of("1.0.0")
    b = OperatingSystemVersion.of("1.1.0")
    c = OperatingSystemVersion.of("1.1.1")

    assert a.compare_to(a) == 0
    assert a.compare_to(b) < 0
    assert a.compare_to(c) < 0
    assert b.compare_to(c) < 0
    assert c.compare_to(b) > 0
    assert b.compare_to(a) == -a.compare_to(b)
    assert a < b < c
    assert sorted([c, a, b]) == [a, b, c]


def test_str():
    assert str(OperatingSystemVersion.of("prefix-10.4")) == "10.4.0"


def test_of_rejects_non_ascii_letters():
    # long s, Kelvin sign and dotless i fold to ASCII letters under Unicode rules
    for version in ("\u017f-1.2", "1.2-\u212a", "\u0131-1"):
        with pytest.raises(MalformedVersionError):
            OperatingSystemVersion.of(version)
    assert OperatingSystemVersion.of("RELEASE-1.2-BETA") == OperatingSystemVersion(1, 2)
