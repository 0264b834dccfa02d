from __future__ import annotations

import io
import pathlib
import typing as t
from dataclasses import dataclass, field

FileSource = t.Union[str, pathlib.Path, bytes, io.BufferedIOBase, t.BinaryIO]


@dataclass(frozen=True)
class TelegramConfig:
    token: str
    base_url: str = "https://api.telegram.org"
    timeout_seconds: float = 10.0           # per-request timeout
    raise_on_rejection: bool = False        # raise RemoteRejection instead of returning False
    session_headers: dict[str, str] = field(default_factory=dict)  # optional static headers

    @property
    def masked_token(self) -> str:
        bot_id, _, secret = self.token.partition(":")
        return f"{bot_id}:***" if secret else "***"


@dataclass(frozen=True)
class MessageOptions:
    """Defaults for sendMessage. Messages notify readers unless told otherwise."""

    parse_mode: str = "Markdown"
    disable_web_page_preview: bool = False
    disable_notification: bool = False

    def to_fields(self) -> dict[str, t.Any]:
        return {
            "parse_mode": self.parse_mode,
            "disable_web_page_preview": self.disable_web_page_preview,
            "disable_notification": self.disable_notification,
        }


@dataclass(frozen=True)
class FileOptions:
    """Defaults for sendDocument, sendPhoto and sendVideo. File sends are silent by default."""

    caption: str = ""
    parse_mode: str = "Markdown"
    disable_notification: bool = True

    def to_fields(self) -> dict[str, t.Any]:
        return {
            "disable_notification": self.disable_notification,
            "parse_mode": self.parse_mode,
            "caption": self.caption,
        }


@dataclass(frozen=True)
class VideoOptions:
    """
    Optional sendVideo metadata.

    Only the values that are not None end up in the request; the thumbnail,
    when given, is uploaded as a separate ``thumb`` part.
    """

    width: int | None = None
    height: int | None = None
    duration: int | None = None
    thumb: FileSource | None = None
    supports_streaming: bool | None = None

    def to_fields(self) -> dict[str, t.Any]:
        values = {
            "width": self.width,
            "height": self.height,
            "duration": self.duration,
            "supports_streaming": self.supports_streaming,
        }
        return {key: value for key, value in values.items() if value is not None}
