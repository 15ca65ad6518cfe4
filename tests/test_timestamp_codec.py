from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

import pytest

from features.common.exceptions.observation_exceptions import InvalidTimestampError
from features.observations.utils.timestamp_codec import JST, decode_timestamp, encode_timestamp


def test_encode_iso_string() -> None:
    assert encode_timestamp("2025-07-06T15:20:00+09:00") == "20250706152000"


def test_encode_discards_seconds() -> None:
    assert encode_timestamp("2025-07-06T15:20:47+09:00") == "20250706152000"


def test_encode_datetime() -> None:
    ts = datetime(2025, 1, 2, 3, 40, tzinfo=JST)
    assert encode_timestamp(ts) == "20250102034000"


def test_encode_does_not_round_to_publication_boundary() -> None:
    assert encode_timestamp("2025-07-06T15:23:00+09:00") == "20250706152300"


@pytest.mark.parametrize(
    "timestamp",
    [
        "2025-07-06T15:20:00+09:00",
        "2025-12-31T23:50:00-05:00",
        "2024-02-29T00:00:00Z",
        datetime(2030, 6, 1, 9, 10, tzinfo=timezone(timedelta(hours=9))),
    ],
)
def test_encode_output_is_fourteen_ascii_digits(timestamp) -> None:
    assert re.fullmatch(r"[0-9]{14}", encode_timestamp(timestamp))


def test_encode_rejects_incomplete_timestamp() -> None:
    with pytest.raises(InvalidTimestampError):
        encode_timestamp("2025-07-06")


def test_decode_round_trip() -> None:
    decoded = decode_timestamp("20250706152000")
    assert decoded == datetime(2025, 7, 6, 15, 20, tzinfo=JST)


@pytest.mark.parametrize("key", ["2025070615200", "2025070615200x", "20251306152000"])
def test_decode_rejects_bad_keys(key: str) -> None:
    with pytest.raises(InvalidTimestampError):
        decode_timestamp(key)
