import re
from datetime import datetime, timezone, timedelta
from typing import Union

from features.common.exceptions.observation_exceptions import InvalidTimestampError

JST = timezone(timedelta(hours=9))

_NON_DIGITS = re.compile(r"[^0-9]")
_KEY_PATTERN = re.compile(r"[0-9]{14}")

def encode_timestamp(timestamp: Union[datetime, str]) -> str:
    """Convert an ISO-8601 instant into the 14-digit AMeDAS snapshot key.

    "2025-07-06T15:20:00+09:00" -> "20250706152000"

    No rounding happens here: the caller must pass a minute the provider
    actually published, otherwise the fetch simply finds nothing.
    """
    text = timestamp.isoformat() if isinstance(timestamp, datetime) else str(timestamp)
    digits = _NON_DIGITS.sub("", text)
    if len(digits) < 12:
        raise InvalidTimestampError(f"Timestamp {text!r} does not contain a full date and minute")
    return digits[:12] + "00"

def decode_timestamp(key: str) -> datetime:
    """Parse a snapshot key back into a JST-aware datetime."""
    if not _KEY_PATTERN.fullmatch(key):
        raise InvalidTimestampError(f"Invalid snapshot key {key!r}")
    try:
        return datetime.strptime(key, "%Y%m%d%H%M%S").replace(tzinfo=JST)
    except ValueError as e:
        raise InvalidTimestampError(f"Invalid snapshot key {key!r}: {e}") from e
