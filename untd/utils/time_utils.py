from __future__ import annotations

import logging
import os
import re
from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from untd.errors import InvalidOffsetFormat, InvalidRangeCount, InvalidTimestamp, UnknownTimezone
from untd.utils.validators import Offset, validate_range_count

logger = logging.getLogger(__name__)

LOCAL_TIMEZONE = "local"

TIMEZONE_ALIASES: dict[str, str] = {
    "UTC": "UTC",
    "Z": "UTC",
    "GMT": "UTC",
    "JST": "Asia/Tokyo",
}

_FIXED_OFFSET_RE = re.compile(r"^(?:UTC|GMT)?([+-])(\d{1,2})(?::?(\d{2}))?$", re.ASCII | re.IGNORECASE)
_LOCALTIME_PATH = "/etc/localtime"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def get_zoneinfo(tz_name: str) -> ZoneInfo | None:
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError, OSError):
        return None


def _zone_key_from_path(value: str) -> str:
    if "zoneinfo/" in value:
        return value.split("zoneinfo/")[-1]
    return value


def get_local_timezone() -> tzinfo:
    """Return the process's local timezone.

    Prefers an IANA zone (from ``TZ`` or the ``/etc/localtime`` link) so that
    calendar arithmetic follows DST; otherwise falls back to the current fixed
    offset of the local clock. A ``TZ`` that only libc understands (a POSIX
    rule such as ``JST-9``) wins over ``/etc/localtime``.
    """
    tz_env = (os.getenv("TZ") or "").strip().lstrip(":")
    if tz_env:
        zone = get_zoneinfo(_zone_key_from_path(tz_env))
        if zone is not None:
            return zone
        logger.debug("TZ=%s is not an IANA zone; using the libc offset", tz_env)
    elif os.path.islink(_LOCALTIME_PATH):
        zone = get_zoneinfo(_zone_key_from_path(os.readlink(_LOCALTIME_PATH)))
        if zone is not None:
            return zone

    local_tz = datetime.now().astimezone().tzinfo
    return local_tz if local_tz is not None else timezone.utc


def parse_fixed_offset(value: str) -> timezone | None:
    match = _FIXED_OFFSET_RE.fullmatch(value.strip())
    if not match:
        return None

    sign, hours_raw, minutes_raw = match.groups()
    hours = int(hours_raw)
    minutes = int(minutes_raw or 0)
    if hours > 23 or minutes > 59:
        return None

    delta = timedelta(hours=hours, minutes=minutes)
    if sign == "-":
        delta = -delta
    return timezone(delta)


def resolve_timezone(selector: str | None) -> tzinfo:
    text = (selector or LOCAL_TIMEZONE).strip()
    if not text or text.lower() == LOCAL_TIMEZONE:
        return get_local_timezone()

    alias = TIMEZONE_ALIASES.get(text.upper())
    if alias:
        return ZoneInfo(alias)

    fixed = parse_fixed_offset(text)
    if fixed is not None:
        return fixed

    zone = get_zoneinfo(text)
    if zone is not None:
        return zone

    raise UnknownTimezone(
        f"Unknown timezone: {selector!r} (use local, UTC, JST, an IANA name or +HH:MM)",
        argument="timezone",
        value=selector,
    )


def instant_from_timestamp(seconds: int | float) -> datetime:
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise InvalidTimestamp(
            f"Invalid timestamp: {seconds!r}",
            argument="timestamp",
            value=seconds,
        ) from exc


def normalize_wall_time(dt: datetime) -> datetime:
    # Wall times inside a DST gap do not exist; round-trip through UTC to land on a real one.
    if dt.tzinfo is None:
        return dt
    return dt.astimezone(timezone.utc).astimezone(dt.tzinfo)


def add_calendar_days(dt: datetime, days: int) -> datetime:
    return normalize_wall_time(dt + timedelta(days=days))


def add_elapsed(dt: datetime, delta: timedelta) -> datetime:
    return (dt.astimezone(timezone.utc) + delta).astimezone(dt.tzinfo)


def apply_offset(dt: datetime, offset: Offset) -> datetime:
    if offset.is_zero:
        return dt
    try:
        if offset.is_calendar_days:
            return add_calendar_days(dt, offset.amount)
        return add_elapsed(dt, offset.to_timedelta())
    except OverflowError as exc:
        raise InvalidOffsetFormat(
            f"Offset out of range: {offset}",
            argument="offset",
            value=str(offset),
        ) from exc


def resolve_anchor(now: datetime, tz: tzinfo, offset: Offset) -> datetime:
    if now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    anchor = apply_offset(now.astimezone(tz), offset)
    logger.debug("Resolved anchor %s (offset=%s)", anchor.isoformat(), offset)
    return anchor


def expand_range(anchor: datetime, count: object) -> list[datetime]:
    total = validate_range_count(count)
    try:
        return [add_calendar_days(anchor, day) for day in range(total)]
    except OverflowError as exc:
        raise InvalidRangeCount(
            f"Range count {total} runs past the supported calendar",
            argument="range",
            value=count,
        ) from exc
