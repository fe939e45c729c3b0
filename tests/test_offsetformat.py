import math

import pytest

from ianazone import OffsetFormat, UnsupportedFormatError, format_offset


@pytest.mark.parametrize(
    ("offset", "short", "techie", "narrow"),
    [
        (0, "+00:00", "+0000", "+0"),
        (-0.0, "+00:00", "+0000", "+0"),
        (60, "+01:00", "+0100", "+1"),
        (-60, "-01:00", "-0100", "-1"),
        (-210, "-03:30", "-0330", "-3:30"),
        (345, "+05:45", "+0545", "+5:45"),
        (-720, "-12:00", "-1200", "-12"),
        (840, "+14:00", "+1400", "+14"),
        (19 + 32 / 60, "+00:19", "+0019", "+0:19"),
    ],
)
def test_format_offset(offset, short, techie, narrow):
    assert format_offset(offset, "short") == short
    assert format_offset(offset, "techie") == techie
    assert format_offset(offset, "narrow") == narrow
    assert format_offset(offset, OffsetFormat.Short) == short


def test_format_offset_nan():
    assert format_offset(math.nan, "short") is None


@pytest.mark.parametrize("value", ["long", "", "SHORT"])
def test_format_offset_unknown_format(value):
    with pytest.raises(UnsupportedFormatError, match="out of range") as exc_info:
        format_offset(60, value)
    assert exc_info.value.format == value
    assert isinstance(exc_info.value, ValueError)


def test_offset_format_from_value():
    for offset_format in OffsetFormat:
        assert OffsetFormat.from_value(offset_format.value) is offset_format
        assert OffsetFormat.from_value(offset_format) is offset_format
