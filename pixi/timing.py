"""Nanosecond durations and wall-clock timestamps."""

from __future__ import annotations

import time
from dataclasses import dataclass

_NS_PER_US = 1_000
_NS_PER_MS = 1_000_000
_NS_PER_S = 1_000_000_000


def _trunc_div(numerator: int, denominator: int) -> int:
    """Integer division rounding toward zero."""
    if denominator == 0:
        raise ZeroDivisionError("division of a duration by zero")
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator < 0) == (denominator < 0) else -quotient


@dataclass(frozen=True, order=True)
class TimeDuration:
    """A span of time counted in whole nanoseconds."""

    nanoseconds: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.nanoseconds, bool) or not isinstance(self.nanoseconds, int):
            raise TypeError("nanoseconds must be an int")

    def microseconds(self) -> int:
        return _trunc_div(self.nanoseconds, _NS_PER_US)

    def milliseconds(self) -> int:
        return _trunc_div(self.nanoseconds, _NS_PER_MS)

    def seconds(self) -> float:
        return self.nanoseconds / _NS_PER_S

    @staticmethod
    def from_seconds(seconds: int | float) -> TimeDuration:
        """Build a duration from seconds, truncating below one nanosecond."""
        if isinstance(seconds, int):
            return TimeDuration(seconds * _NS_PER_S)
        return TimeDuration(int(seconds * _NS_PER_S))

    def __int__(self) -> int:
        return self.nanoseconds

    def __add__(self, other: object) -> TimeDuration:
        if isinstance(other, TimeDuration):
            return TimeDuration(self.nanoseconds + other.nanoseconds)
        return NotImplemented

    def __sub__(self, other: object) -> TimeDuration:
        if isinstance(other, TimeDuration):
            return TimeDuration(self.nanoseconds - other.nanoseconds)
        return NotImplemented

    def __neg__(self) -> TimeDuration:
        return TimeDuration(-self.nanoseconds)

    def __abs__(self) -> TimeDuration:
        return TimeDuration(abs(self.nanoseconds))

    def __mul__(self, factor: object) -> TimeDuration:
        if isinstance(factor, int) and not isinstance(factor, bool):
            return TimeDuration(self.nanoseconds * factor)
        return NotImplemented

    __rmul__ = __mul__

    def __truediv__(self, other: object) -> TimeDuration | float:
        if isinstance(other, TimeDuration):
            return self.nanoseconds / other.nanoseconds
        if isinstance(other, int) and not isinstance(other, bool):
            return TimeDuration(_trunc_div(self.nanoseconds, other))
        return NotImplemented

    def __floordiv__(self, other: object) -> TimeDuration | int:
        if isinstance(other, TimeDuration):
            return self.nanoseconds // other.nanoseconds
        if isinstance(other, int) and not isinstance(other, bool):
            return TimeDuration(self.nanoseconds // other)
        return NotImplemented


@dataclass(frozen=True, order=True)
class Timestamp:
    """A point in wall-clock time, in nanoseconds since the Unix epoch."""

    nanoseconds: int = 0

    def __post_init__(self) -> None:
        if isinstance(self.nanoseconds, bool) or not isinstance(self.nanoseconds, int):
            raise TypeError("nanoseconds must be an int")

    @staticmethod
    def now() -> Timestamp:
        return Timestamp(time.time_ns())

    @property
    def since_epoch(self) -> TimeDuration:
        return TimeDuration(self.nanoseconds)

    def __int__(self) -> int:
        return self.nanoseconds

    def __add__(self, other: object) -> Timestamp:
        if isinstance(other, TimeDuration):
            return Timestamp(self.nanoseconds + other.nanoseconds)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: object) -> Timestamp | TimeDuration:
        if isinstance(other, Timestamp):
            return TimeDuration(self.nanoseconds - other.nanoseconds)
        if isinstance(other, TimeDuration):
            return Timestamp(self.nanoseconds - other.nanoseconds)
        return NotImplemented