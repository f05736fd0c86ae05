from __future__ import annotations

import pytest

from videorankkit.utils import is_compact_duration, parse_duration


@pytest.mark.parametrize(
    "text, expected",
    [
        ("PT1M30S", 90),
        ("PT2H", 7200),
        ("PT45S", 45),
        ("PT1H2M3S", 3723),
        ("PT10M", 600),
        ("PT", 0),
    ],
)
def test_parse_duration(text, expected):
    assert parse_duration(text) == expected


@pytest.mark.parametrize("text", ["", None, "P1D", "P0D", "10:00", "garbage"])
def test_parse_duration_non_matching_is_zero(text):
    assert parse_duration(text) == 0


def test_is_compact_duration():
    assert is_compact_duration("PT59S")
    assert is_compact_duration("PT1H")
    assert not is_compact_duration("P1DT2H")
    assert not is_compact_duration(None)
    assert not is_compact_duration("")
