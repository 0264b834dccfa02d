from __future__ import annotations

import enum
import os
import pathlib
import typing as t
from dataclasses import dataclass, field

from telegram_sender.telegramConfig import FileSource
from telegram_sender.telegramErrors import UnsupportedMethod


class MediaKind(enum.Enum):
    """File-send selector. The value doubles as the multipart field name."""

    DOCUMENT = "document"
    PHOTO = "photo"
    VIDEO = "video"

    @property
    def api_method(self) -> str:
        return _API_METHODS[self]

    @property
    def default_filename(self) -> str:
        return _DEFAULT_FILENAMES[self]

    @classmethod
    def parse(cls, selector: MediaKind | str) -> MediaKind:
        if isinstance(selector, cls):
            return selector
        try:
            return cls(selector)
        except ValueError:
            raise UnsupportedMethod(selector) from None


_API_METHODS = {
    MediaKind.DOCUMENT: "sendDocument",
    MediaKind.PHOTO: "sendPhoto",
    MediaKind.VIDEO: "sendVideo",
}

_DEFAULT_FILENAMES = {
    MediaKind.DOCUMENT: "document.bin",
    MediaKind.PHOTO: "photo.jpg",
    MediaKind.VIDEO: "video.mp4",
}


@dataclass(frozen=True)
class Attachment:
    field: str
    filename: str
    content: bytes


@dataclass(frozen=True)
class OutboundRequest:
    """One API call: method name, form fields and any file parts."""

    method: str
    fields: dict[str, t.Any]
    attachments: tuple[Attachment, ...] = field(default_factory=tuple)

    @property
    def is_multipart(self) -> bool:
        return bool(self.attachments)

    def form(self) -> dict[str, str]:
        return {key: encode_form_value(value) for key, value in self.fields.items()}

    def files(self) -> dict[str, tuple[str, bytes]]:
        return {a.field: (a.filename, a.content) for a in self.attachments}


def encode_form_value(value: t.Any) -> str:
    # Telegram expects JSON-style booleans, requests would send "True"/"False"
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def read_attachment(field_name: str, source: FileSource, default_filename: str) -> Attachment:
    """
    Load the whole file into memory and wrap it as a multipart part.

    ``source`` may be a local path (str or Path), raw bytes, or a binary
    file-like object. Files opened here are closed before returning.
    """
    if isinstance(source, (str, pathlib.Path)):
        path = pathlib.Path(source)
        if not path.exists():
            raise FileNotFoundError(f"File not found: {path}")
        if not path.is_file():
            raise ValueError(f"Path is not a file: {path}")
        with path.open("rb") as f:
            return Attachment(field_name, path.name, f.read())

    if isinstance(source, (bytes, bytearray)):
        if len(source) == 0:
            raise ValueError(f"{field_name} bytes cannot be empty")
        return Attachment(field_name, default_filename, bytes(source))

    if hasattr(source, "read"):
        name = getattr(source, "name", None)
        filename = os.path.basename(name) if isinstance(name, str) else default_filename
        return Attachment(field_name, filename, source.read())

    raise TypeError(
        f"Unsupported {field_name!r} type. Use a path, bytes, or a binary file-like object."
    )
