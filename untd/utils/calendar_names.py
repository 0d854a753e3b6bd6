from __future__ import annotations

# Indexed by datetime.weekday() (Monday == 0).
JP_WEEKDAY_GLYPHS: tuple[str, ...] = ("月", "火", "水", "木", "金", "土", "日")

EN_WEEKDAY_NAMES: tuple[str, ...] = (
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
    "Sunday",
)

# Indexed by month - 1.
EN_MONTH_NAMES: tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)


def weekday_to_japanese(weekday: int) -> str:
    return JP_WEEKDAY_GLYPHS[weekday]


def weekday_to_japanese_full(weekday: int) -> str:
    return f"{JP_WEEKDAY_GLYPHS[weekday]}曜日"


def weekday_to_english(weekday: int, *, abbreviated: bool = False) -> str:
    name = EN_WEEKDAY_NAMES[weekday]
    return name[:3] if abbreviated else name


def month_to_english(month: int, *, abbreviated: bool = False) -> str:
    name = EN_MONTH_NAMES[month - 1]
    return name[:3] if abbreviated else name
