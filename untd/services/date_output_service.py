from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime

from untd.utils.formatters import format_instants, parse_format_spec
from untd.utils.time_utils import (
    LOCAL_TIMEZONE,
    expand_range,
    instant_from_timestamp,
    resolve_anchor,
    resolve_timezone,
    utc_now,
)
from untd.utils.validators import parse_offset

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


@dataclass(frozen=True, slots=True)
class DateOutputRequest:
    timezone: str = LOCAL_TIMEZONE
    offset: str | None = None
    count: int = 1
    format: str | None = None
    timestamp: int | None = None


class DateOutputService:
    """Turns a request into formatted date lines.

    The clock is sampled once per call so every line of a range comes from
    the same observation of "now".
    """

    def __init__(self, *, clock: Clock = utc_now):
        self.clock = clock

    def build_lines(self, request: DateOutputRequest) -> list[str]:
        offset = parse_offset(request.offset)
        tz = resolve_timezone(request.timezone)

        if request.timestamp is not None:
            now = instant_from_timestamp(request.timestamp)
        else:
            now = self.clock()

        anchor = resolve_anchor(now, tz, offset)
        instants = expand_range(anchor, request.count)
        spec = parse_format_spec(request.format)
        lines = format_instants(instants, spec)
        logger.debug("Built %d line(s) tz=%s format=%s", len(lines), request.timezone, spec)
        return lines

    def render(self, request: DateOutputRequest) -> str:
        return "\n".join(self.build_lines(request))
