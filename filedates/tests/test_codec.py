from datetime import datetime, timezone, timedelta

import pytest

from filedates.exceptions import ParseError
from filedates.lib.codec import DateCodec

@pytest.mark.parametrize(
    "instant,expected",
    [
        (datetime(2023, 7, 15, 18, 45, 10), "15/07/2023 18:45:10"),
        (datetime(2023, 7, 15, 18, 45, 10, 999999), "15/07/2023 18:45:10"),  # truncated, not rounded
        (datetime(2022, 6, 1, 8, 30), "01/06/2022 08:30:00"),
        (datetime(2024, 2, 29, 0, 0, 1), "29/02/2024 00:00:01"),  # leap year
        (datetime(1999, 12, 31, 23, 59, 59), "31/12/1999 23:59:59"),
        (datetime(999, 1, 1, 0, 0), "01/01/0999 00:00:00"),  # year zero-padded
    ],
)
def test_format_local_datetime(instant, expected):
    assert DateCodec.format(instant) == expected

def test_format_timestamp():
    timestamp = datetime(2022, 6, 1, 8, 30, 0, 500000).timestamp()
    assert DateCodec.format(timestamp) == "01/06/2022 08:30:00"

def test_format_aware_datetime_uses_local_time():
    instant = datetime(2023, 1, 10, 12, 0, tzinfo=timezone(timedelta(hours=5)))
    assert DateCodec.format(instant) == instant.astimezone().strftime("%d/%m/%Y %H:%M:%S")

def test_parse_ok():
    parsed = DateCodec.parse("15/07/2023 18:45:10")
    assert parsed.tzinfo is not None
    assert (parsed.year, parsed.month, parsed.day) == (2023, 7, 15)
    assert (parsed.hour, parsed.minute, parsed.second) == (18, 45, 10)

@pytest.mark.parametrize(
    "text",
    [
        "01/06/2022 08:30:00",
        "15/07/2023 18:45:10",
        "29/02/2024 23:59:59",
        "01/01/1980 00:00:00",
        "31/12/2099 12:00:00",
        "01/01/0999 00:00:00",
    ],
)
def test_parse_then_format(text):
    assert DateCodec.format(DateCodec.parse(text)) == text

@pytest.mark.parametrize(
    "timestamp",
    [0, 86_399, 1_000_000_000, 1_234_567_890.123, 1_700_000_000.75, 1_900_000_000],
)
def test_round_trip(timestamp):
    formatted = DateCodec.format(timestamp)
    assert DateCodec.format(DateCodec.parse(formatted)) == formatted

@pytest.mark.parametrize(
    "text",
    [
        "31/13/2020 10:00:00",
        "not-a-date",
        "",
        "31/02/2023 10:00:00",
        "00/01/2023 10:00:00",
        "01/06/2022 25:00:00",
        "01/06/2022 08:60:00",
        "01/06/2022 08:30:61",
        "1/6/2022 08:30:00",
        "01/06/2022 8:30:00",
        "01/06/22 08:30:00",
        "01-06-2022 08:30:00",
        "2022/06/01 08:30:00",
        "01/06/2022 08:30",
        "01/06/2022T08:30:00",
        " 01/06/2022 08:30:00",
        "01/06/2022 08:30:00\n",
        "01/06/2022 08:30:00 PM",
        "٠١/٠٦/٢٠٢٢ 08:30:00",
    ],
)
def test_parse_fail(text):
    with pytest.raises(ParseError):
        DateCodec.parse(text)

def test_parse_rejects_non_string():
    with pytest.raises(ParseError):
        DateCodec.parse(None)

def test_parse_error_is_value_error():
    with pytest.raises(ValueError):
        DateCodec.parse("not-a-date")

def test_is_valid():
    assert DateCodec.is_valid("01/06/2022 08:30:00")
    assert not DateCodec.is_valid("01/06/2022 25:00:00")
