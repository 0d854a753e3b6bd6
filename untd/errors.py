from __future__ import annotations


class UntdError(ValueError):
    def __init__(self, message: str, *, argument: str | None = None, value: object = None):
        super().__init__(message)
        self.argument = argument
        self.value = value


class InvalidOffsetFormat(UntdError):
    pass


class UnknownTimezone(UntdError):
    pass


class InvalidRangeCount(UntdError):
    pass


class InvalidTimestamp(UntdError):
    pass


class FormatRenderError(UntdError):
    pass
