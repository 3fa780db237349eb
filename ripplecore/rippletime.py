"""Times counted in seconds since the ledger epoch, 2000-01-01 00:00 UTC."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

RIPPLE_EPOCH = 946684800
_EPOCH = datetime.fromtimestamp(RIPPLE_EPOCH, tz=timezone.utc)
_UINT32_MASK = 0xFFFFFFFF

_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")
_MONTH_INDEX = {name.lower(): number for number, name in enumerate(_MONTHS, start=1)}
_FORMAT_RE = re.compile(r"(\d{4})-([A-Za-z]{3})-(\d{2}) (\d{2}):(\d{2}):(\d{2}) UTC")


@dataclass(frozen=True, order=True)
class RippleTime:
    """Whole seconds since the ledger epoch, stored as an unsigned 32-bit count."""

    t: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "t", int(self.t) & _UINT32_MASK)

    @classmethod
    def from_datetime(cls, moment: datetime) -> RippleTime:
        """Convert a datetime; naive datetimes are taken to be UTC."""
        if moment.tzinfo is None:
            moment = moment.replace(tzinfo=timezone.utc)
        delta = moment - _EPOCH
        seconds = delta // timedelta(seconds=1)
        if seconds < 0 and delta % timedelta(seconds=1):
            seconds += 1  # truncate towards zero
        return cls(seconds)

    @classmethod
    def now(cls) -> RippleTime:
        return cls.from_datetime(datetime.now(timezone.utc))

    @classmethod
    def parse(cls, text: str) -> RippleTime:
        """Parse a time written as ``2006-Jan-02 15:04:05 UTC``."""
        match = _FORMAT_RE.fullmatch(text)
        if match is None:
            raise ValueError(f"cannot parse time: {text!r}")
        year, month_name, day, hour, minute, second = match.groups()
        month = _MONTH_INDEX.get(month_name.lower())
        if month is None:
            raise ValueError(f"cannot parse time: {text!r}: bad month")
        try:
            moment = datetime(
                int(year), month, int(day), int(hour), int(minute), int(second),
                tzinfo=timezone.utc,
            )
        except ValueError as exc:
            raise ValueError(f"cannot parse time: {text!r}: {exc}") from None
        return cls.from_datetime(moment)

    def to_datetime(self) -> datetime:
        """The time as an aware UTC datetime."""
        return _EPOCH + timedelta(seconds=self.t)

    def short(self) -> str:
        """The time of day, as ``15:04:05``."""
        return self.to_datetime().strftime("%H:%M:%S")

    def __str__(self) -> str:
        moment = self.to_datetime()
        return (
            f"{moment.year:04d}-{_MONTHS[moment.month - 1]}-{moment.day:02d} "
            f"{moment.strftime('%H:%M:%S')} UTC"
        )

    def __int__(self) -> int:
        return self.t