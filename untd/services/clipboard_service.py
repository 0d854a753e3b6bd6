from __future__ import annotations

import pyperclip


class ClipboardServiceError(RuntimeError):
    pass


class ClipboardService:
    def copy(self, text: str) -> None:
        try:
            pyperclip.copy(text)
        except pyperclip.PyperclipException as exc:
            raise ClipboardServiceError(f"Failed to copy to clipboard: {exc}") from exc
