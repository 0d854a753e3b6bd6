from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Literal

from untd.errors import InvalidOffsetFormat, InvalidRangeCount

OffsetUnit = Literal["d", "h", "m", "s"]

_OFFSET_RE = re.compile(r"^([+-]?)(\d+)([dhms])$", re.ASCII)
_UNIT_KWARG: dict[str, str] = {
    "d": "days",
    "h": "hours",
    "m": "minutes",
    "s": "seconds",
}
_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off"}


@dataclass(frozen=True, slots=True)
class Offset:
    amount: int = 0
    unit: OffsetUnit = "s"

    @property
    def is_zero(self) -> bool:
        return self.amount == 0

    @property
    def is_calendar_days(self) -> bool:
        return self.unit == "d"

    def negated(self) -> "Offset":
        return Offset(amount=-self.amount, unit=self.unit)

    def to_timedelta(self) -> timedelta:
        return timedelta(**{_UNIT_KWARG[self.unit]: self.amount})

    def __str__(self) -> str:
        return f"{self.amount}{self.unit}"


ZERO_OFFSET = Offset()


def parse_offset(value: str | None) -> Offset:
    """Parse ``[-|+]<digits><unit>`` (e.g. ``-1d``, ``30m``) into an Offset.

    ``None`` or an empty string means no shift.
    """
    if value is None:
        return ZERO_OFFSET
    text = value.strip()
    if not text:
        return ZERO_OFFSET

    match = _OFFSET_RE.fullmatch(text)
    if not match:
        raise InvalidOffsetFormat(
            f"Invalid offset format: {value!r} (expected e.g. 1d, -3h, 30m, 45s)",
            argument="offset",
            value=value,
        )

    sign, digits, unit = match.groups()
    amount = int(digits)
    if sign == "-":
        amount = -amount
    return Offset(amount=amount, unit=unit)  # type: ignore[arg-type]


def validate_range_count(value: object) -> int:
    count: int | None = None
    # bool is an int subclass
    if isinstance(value, int) and not isinstance(value, bool):
        count = value
    elif isinstance(value, str) and value.strip().isascii() and value.strip().isdigit():
        count = int(value.strip())

    if count is None or count < 1:
        raise InvalidRangeCount(
            f"Invalid range count: {value!r} (must be a positive integer)",
            argument="range",
            value=value,
        )
    return count


def parse_bool(value: str) -> bool:
    text = value.strip().lower()
    if text in _TRUE_VALUES:
        return True
    if text in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean value: {value!r}")
