from __future__ import annotations

import logging
import sys

from untd.cli import ParsedArgs, parse_arguments
from untd.config import Config
from untd.errors import UntdError
from untd.services.clipboard_service import ClipboardService, ClipboardServiceError
from untd.services.date_output_service import DateOutputRequest, DateOutputService
from untd.utils.time_utils import utc_now

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
        stream=sys.stderr,
    )


def build_request(args: ParsedArgs) -> DateOutputRequest:
    return DateOutputRequest(
        timezone=args.timezone,
        offset=args.offset,
        count=args.range_count,
        format=args.format,
        timestamp=args.timestamp,
    )


def deliver_to_clipboard(text: str, clipboard: ClipboardService) -> None:
    try:
        clipboard.copy(text)
    except ClipboardServiceError as exc:
        logger.warning("Clipboard copy failed: %s", exc)
        print(f"❌ {exc}", file=sys.stderr)
        return
    print("Copied to clipboard!")


def main(argv: list[str] | None = None) -> int:
    try:
        config = Config.from_env()
    except ValueError as exc:
        configure_logging()
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    args = parse_arguments(argv, config)
    configure_logging(logging.DEBUG if args.verbose else config.log_level)

    service = DateOutputService(clock=utc_now)
    try:
        output = service.render(build_request(args))
    except UntdError as exc:
        logger.warning("Rejected %s=%r: %s", exc.argument, exc.value, exc)
        print(f"❌ {exc}", file=sys.stderr)
        return 1

    print(output)

    if args.copy:
        deliver_to_clipboard(output, ClipboardService())
    return 0


if __name__ == "__main__":
    sys.exit(main())
