"""auth_date parsing and validity window checks."""

from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Protocol

from tg_init_data.core.query import parse_int64
from tg_init_data.exceptions.init_data_error import (
    AuthDateInvalidError,
    AuthDateMissingError,
    ExpiredError,
)


class Clock(Protocol):
    """Source of the current time."""

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant

    @classmethod
    def at_epoch(cls, seconds: int) -> "FixedClock":
        return cls(datetime.fromtimestamp(seconds, tz=timezone.utc))

    def now(self) -> datetime:
        return self._instant


DEFAULT_CLOCK: Clock = SystemClock()


def parse_auth_date(raw: Optional[str]) -> int:
    if raw is None:
        raise AuthDateMissingError()
    try:
        return parse_int64(raw)
    except ValueError as exc:
        raise AuthDateInvalidError(raw) from exc


def check_fresh(auth_date: int, valid_for: timedelta, clock: Optional[Clock] = None) -> None:
    """Raise ``ExpiredError`` once ``now`` is past ``auth_date + valid_for``.

    The boundary itself is still valid.
    """

    now = (clock or DEFAULT_CLOCK).now().timestamp()
    if now > auth_date + valid_for.total_seconds():
        # rounded up so a fractional overrun never reports the boundary itself
        raise ExpiredError(auth_date, math.ceil(now))
