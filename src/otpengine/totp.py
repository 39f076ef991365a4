import datetime
import math
import time
from typing import Optional, Union

from .errors import InvalidInputError

Timestamp = Union[int, float, datetime.datetime]


def current_timestamp_ms() -> float:
    return time.time() * 1000


def to_timestamp_ms(value: Optional[Timestamp]) -> float:
    """
    Normalises a point in time to milliseconds since the epoch.

    :param value: milliseconds since the epoch, a ``datetime``, or None for now
    """
    if value is None:
        return current_timestamp_ms()
    if isinstance(value, datetime.datetime):
        return value.timestamp() * 1000
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError("timestamp must be milliseconds or a datetime, got {}".format(type(value).__name__))
    if not math.isfinite(value):
        raise InvalidInputError("timestamp must be finite")
    return value


def validate_period(period: int) -> int:
    if isinstance(period, bool) or not isinstance(period, int):
        raise InvalidInputError("period must be an integer number of seconds, got {!r}".format(period))
    if period <= 0:
        raise InvalidInputError("period must be a positive number of seconds, got {}".format(period))
    return period


def timecode(timestamp_ms: float, period: int) -> int:
    """
    Maps a timestamp to its TOTP time step, ``floor(timestamp_ms / 1000 / period)``.

    Integer timestamps are divided exactly so large values don't lose
    precision to floating point.
    """
    step_ms = 1000 * validate_period(period)
    if isinstance(timestamp_ms, int):
        return timestamp_ms // step_ms
    return int(math.floor(timestamp_ms / step_ms))
