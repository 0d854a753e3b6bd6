from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum

from untd.errors import FormatRenderError
from untd.utils.calendar_names import (
    month_to_english,
    weekday_to_english,
    weekday_to_japanese,
    weekday_to_japanese_full,
)


class Preset(str, Enum):
    DEFAULT = "default"
    ISO8601 = "iso"
    JP_DATE = "jp"
    JP_DATE_WEEKDAY = "jpwd"
    JP_DATETIME = "jphm"
    JP_DATETIME_SECONDS = "jphms"


@dataclass(frozen=True, slots=True)
class CustomFormat:
    template: str

    def __post_init__(self) -> None:
        if not self.template:
            raise FormatRenderError("Custom format template must not be empty.", argument="format", value=self.template)


FormatSpec = Preset | CustomFormat

PRESET_TEMPLATES: dict[Preset, str] = {
    Preset.DEFAULT: "%Y-%m-%d",
    Preset.ISO8601: "%Y-%m-%dT%H:%M:%S%z",
    Preset.JP_DATE: "%Y年%m月%d日",
    Preset.JP_DATE_WEEKDAY: "%Y年%m月%d日(%J)",
    Preset.JP_DATETIME: "%Y年%m月%d日 %H時%M分",
    Preset.JP_DATETIME_SECONDS: "%Y年%m月%d日 %H時%M分%S秒",
}

_DIRECTIVE_RE = re.compile(r"%([-_0]?)(:z|.)", re.DOTALL)


def parse_format_spec(selector: str | None) -> FormatSpec:
    if selector is None:
        return Preset.DEFAULT
    try:
        return Preset(selector)
    except ValueError:
        return CustomFormat(selector)


def format_instant(instant: datetime, spec: FormatSpec) -> str:
    if isinstance(spec, Preset):
        template = PRESET_TEMPLATES[spec]
    else:
        template = spec.template
    return render_template(instant, template)


def format_instants(instants: Iterable[datetime], spec: FormatSpec) -> list[str]:
    return [format_instant(instant, spec) for instant in instants]


def render_template(instant: datetime, template: str) -> str:
    """Expand strftime-style directives in ``template``.

    Names are always the English C-locale names, independent of the process
    locale. Numeric fields accept the ``-`` (no padding), ``_`` (space
    padding) and ``0`` (zero padding) flags, e.g. ``%-d``. Unknown directives
    are copied to the output untouched.
    """

    def _replace(match: re.Match[str]) -> str:
        flag, name = match.group(1), match.group(2)
        numeric = _NUMERIC_DIRECTIVES.get(name)
        if numeric is not None:
            value_of, width, fill = numeric
            return _pad(value_of(instant), width, _FLAG_FILLS.get(flag, fill))
        handler = _DIRECTIVES.get(name)
        if handler is None:
            return match.group(0)
        return handler(instant)

    try:
        return _DIRECTIVE_RE.sub(_replace, template)
    except (ValueError, OverflowError) as exc:
        raise FormatRenderError(
            f"Failed to render {instant!r} with {template!r}: {exc}",
            argument="format",
            value=template,
        ) from exc


def _pad(value: int, width: int, fill: str) -> str:
    if not fill:
        return str(value)
    return str(value).rjust(width, fill)


def _format_utc_offset(instant: datetime, *, colon: bool) -> str:
    offset = instant.utcoffset()
    if offset is None:
        return ""
    sign = "-" if offset < timedelta(0) else "+"
    total_seconds = int(abs(offset).total_seconds())
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    separator = ":" if colon else ""
    text = f"{sign}{hours:02d}{separator}{minutes:02d}"
    if seconds:
        text += f"{separator}{seconds:02d}"
    return text


def _fraction(instant: datetime) -> str:
    # ".123" for whole milliseconds, ".123456" otherwise, nothing at zero.
    if not instant.microsecond:
        return ""
    if instant.microsecond % 1000 == 0:
        return f".{instant.microsecond // 1000:03d}"
    return f".{instant.microsecond:06d}"


def _hour12(instant: datetime) -> int:
    return instant.hour % 12 or 12


def _sunday_week_number(instant: datetime) -> int:
    yday = instant.timetuple().tm_yday - 1
    sunday_weekday = (instant.weekday() + 1) % 7
    return (yday + 7 - sunday_weekday) // 7


def _monday_week_number(instant: datetime) -> int:
    yday = instant.timetuple().tm_yday - 1
    return (yday + 7 - instant.weekday()) // 7


_FLAG_FILLS: dict[str, str] = {"-": "", "_": " ", "0": "0"}

# name -> (value, width, default fill)
_NUMERIC_DIRECTIVES: dict[str, tuple[Callable[[datetime], int], int, str]] = {
    "Y": (lambda dt: dt.year, 4, "0"),
    "C": (lambda dt: dt.year // 100, 2, "0"),
    "y": (lambda dt: dt.year % 100, 2, "0"),
    "G": (lambda dt: dt.isocalendar()[0], 4, "0"),
    "g": (lambda dt: dt.isocalendar()[0] % 100, 2, "0"),
    "m": (lambda dt: dt.month, 2, "0"),
    "d": (lambda dt: dt.day, 2, "0"),
    "e": (lambda dt: dt.day, 2, " "),
    "j": (lambda dt: dt.timetuple().tm_yday, 3, "0"),
    "u": (lambda dt: dt.isoweekday(), 1, "0"),
    "w": (lambda dt: (dt.weekday() + 1) % 7, 1, "0"),
    "V": (lambda dt: dt.isocalendar()[1], 2, "0"),
    "U": (_sunday_week_number, 2, "0"),
    "W": (_monday_week_number, 2, "0"),
    "H": (lambda dt: dt.hour, 2, "0"),
    "k": (lambda dt: dt.hour, 2, " "),
    "I": (_hour12, 2, "0"),
    "l": (_hour12, 2, " "),
    "M": (lambda dt: dt.minute, 2, "0"),
    "S": (lambda dt: dt.second, 2, "0"),
}

_DIRECTIVES: dict[str, Callable[[datetime], str]] = {
    "B": lambda dt: month_to_english(dt.month),
    "b": lambda dt: month_to_english(dt.month, abbreviated=True),
    "h": lambda dt: month_to_english(dt.month, abbreviated=True),
    "a": lambda dt: weekday_to_english(dt.weekday(), abbreviated=True),
    "A": lambda dt: weekday_to_english(dt.weekday()),
    "J": lambda dt: weekday_to_japanese(dt.weekday()),
    "K": lambda dt: weekday_to_japanese_full(dt.weekday()),
    "f": lambda dt: f"{dt.microsecond:06d}",
    "p": lambda dt: "AM" if dt.hour < 12 else "PM",
    "P": lambda dt: "am" if dt.hour < 12 else "pm",
    # timezone
    "Z": lambda dt: dt.tzname() or "",
    "z": lambda dt: _format_utc_offset(dt, colon=False),
    ":z": lambda dt: _format_utc_offset(dt, colon=True),
    "s": lambda dt: str(int(dt.timestamp())),
    # composites
    "F": lambda dt: render_template(dt, "%Y-%m-%d"),
    "T": lambda dt: render_template(dt, "%H:%M:%S"),
    "D": lambda dt: render_template(dt, "%m/%d/%y"),
    "R": lambda dt: render_template(dt, "%H:%M"),
    "r": lambda dt: render_template(dt, "%I:%M:%S %p"),
    "v": lambda dt: render_template(dt, "%e-%b-%Y"),
    "+": lambda dt: render_template(dt, "%Y-%m-%dT%H:%M:%S") + _fraction(dt) + _format_utc_offset(dt, colon=True),
    "c": lambda dt: render_template(dt, "%a %b %e %H:%M:%S %Y"),
    "x": lambda dt: render_template(dt, "%m/%d/%y"),
    "X": lambda dt: render_template(dt, "%H:%M:%S"),
    # literals
    "n": lambda dt: "\n",
    "t": lambda dt: "\t",
    "%": lambda dt: "%",
}
