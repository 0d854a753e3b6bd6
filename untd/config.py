from __future__ import annotations

import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

from untd.utils.validators import parse_bool


@dataclass(slots=True)
class Config:
    default_timezone: str
    default_format: str
    copy_to_clipboard: bool
    log_level: int

    @classmethod
    def from_env(cls) -> "Config":
        load_dotenv()

        default_timezone = (os.getenv("UNTD_TIMEZONE") or "local").strip() or "local"
        default_format = os.getenv("UNTD_FORMAT") or "default"

        copy_raw = (os.getenv("UNTD_COPY") or "").strip()
        try:
            copy_to_clipboard = parse_bool(copy_raw) if copy_raw else True
        except ValueError as exc:
            raise ValueError(f"UNTD_COPY の値が不正です: {copy_raw!r}") from exc

        level_name = (os.getenv("UNTD_LOG_LEVEL") or "WARNING").strip().upper()
        log_level = logging.getLevelName(level_name)
        if not isinstance(log_level, int):
            raise ValueError(f"UNTD_LOG_LEVEL の値が不正です: {level_name!r}")

        return cls(
            default_timezone=default_timezone,
            default_format=default_format,
            copy_to_clipboard=copy_to_clipboard,
            log_level=log_level,
        )
