from __future__ import annotations


class TelegramError(Exception):
    """Base class for every error raised by telegram_sender."""


class UnsupportedMethod(TelegramError, ValueError):
    """File-send selector outside document/photo/video."""

    def __init__(self, selector: object) -> None:
        super().__init__(f"Unsupported file-send method: {selector!r}")
        self.selector = selector


class TransportError(TelegramError):
    """The request never produced a response (DNS, connect, TLS, timeout)."""


class ResponseParseError(TelegramError):
    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RemoteRejection(TelegramError):
    """Telegram answered with ``ok: false``."""

    def __init__(self, method: str, *, error_code: int | None, description: str) -> None:
        super().__init__(f"Telegram rejected {method} ({error_code}): {description}")
        self.method = method
        self.error_code = error_code
        self.description = description
