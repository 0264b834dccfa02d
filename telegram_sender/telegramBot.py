"""
telegramBot.py

Thin client for four Telegram Bot API methods: sendMessage, sendDocument,
sendPhoto and sendVideo. Every call is one POST; the answer is reduced to
the ``ok`` flag of the JSON response.

Basic usage:
  from telegram_sender import BotClient
  bot = BotClient("123456:ABC-DEF...")
  bot.send_message("@mychannel", "hello *world*")
  bot.send_document("@mychannel", "report.pdf", caption="Weekly report")

Video with metadata:
  bot.send_video("@mychannel", "clip.mp4", width=1920, height=1080,
                 thumb="clip.jpg", supports_streaming=True)

Errors:
  TransportError      -> the API could not be reached
  ResponseParseError  -> the API answered with something that is not {"ok": ...}
  RemoteRejection     -> {"ok": false}, only with raise_on_rejection=True;
                         otherwise the call returns False
"""

from __future__ import annotations

import os
import typing as t

import requests
from loguru import logger

from telegram_sender.telegramConfig import (
    FileOptions,
    FileSource,
    MessageOptions,
    TelegramConfig,
    VideoOptions,
)
from telegram_sender.telegramErrors import (
    RemoteRejection,
    ResponseParseError,
    TransportError,
    UnsupportedMethod,
)
from telegram_sender.telegramRequest import MediaKind, OutboundRequest, read_attachment


class BotClient:
    """
    Stateless Telegram Bot API client.

    - Holds nothing but a read-only config and an HTTP session.
    - No retries: transport and parse failures are raised to the caller.
    - Returns True/False from the response's ``ok`` field.
    """

    def __init__(
        self,
        token: str,
        *,
        base_url: str = "https://api.telegram.org",
        timeout_seconds: float = 10.0,
        raise_on_rejection: bool = False,
        session_headers: dict[str, str] | None = None,
        session: requests.Session | None = None,
    ) -> None:
        if not token or not token.strip():
            raise ValueError("Missing bot token. Pass token=... (see create_client_from_env)")

        self._cfg = TelegramConfig(
            token=token.strip(),
            base_url=base_url.rstrip("/"),
            timeout_seconds=timeout_seconds,
            raise_on_rejection=raise_on_rejection,
            session_headers=session_headers or {},
        )
        self._session = session or requests.Session()
        if self._cfg.session_headers:
            self._session.headers.update(self._cfg.session_headers)

    @property
    def config(self) -> TelegramConfig:
        return self._cfg

    def __repr__(self) -> str:
        return f"BotClient(token={self._cfg.masked_token!r}, base_url={self._cfg.base_url!r})"

    # ----------------------------- Public API -----------------------------

    def send_message(
        self,
        chat_id: str | int,
        text: str,
        parse_mode: str = "Markdown",
        disable_web_page_preview: bool = False,
        disable_notification: bool = False,
    ) -> bool:
        """
        Send a text message.

        Args:
            chat_id: @username, @channelname or numeric chat id
            text: Message body, sent as is
            parse_mode: Markdown, MarkdownV2 or HTML (checked by Telegram, not here)
            disable_web_page_preview: Don't show link previews
            disable_notification: Readers get no notification

        Returns:
            The ``ok`` flag of the response

        Raises:
            TransportError: The request could not be sent
            ResponseParseError: The response is not a Telegram result
            RemoteRejection: ``ok`` is false and raise_on_rejection is set
        """
        options = MessageOptions(
            parse_mode=parse_mode,
            disable_web_page_preview=disable_web_page_preview,
            disable_notification=disable_notification,
        )
        return self._post(self.build_message_request(chat_id, text, options))

    def send_document(
        self,
        chat_id: str | int,
        file: FileSource,
        caption: str = "",
        parse_mode: str = "Markdown",
        disable_notification: bool = True,
    ) -> bool:
        """Send any file as a document. See send_file."""
        return self.send_file(
            MediaKind.DOCUMENT,
            chat_id,
            file,
            caption=caption,
            parse_mode=parse_mode,
            disable_notification=disable_notification,
        )

    def send_photo(
        self,
        chat_id: str | int,
        file: FileSource,
        caption: str = "",
        parse_mode: str = "Markdown",
        disable_notification: bool = True,
    ) -> bool:
        """Send an image as a photo. See send_file."""
        return self.send_file(
            MediaKind.PHOTO,
            chat_id,
            file,
            caption=caption,
            parse_mode=parse_mode,
            disable_notification=disable_notification,
        )

    def send_video(
        self,
        chat_id: str | int,
        file: FileSource,
        caption: str = "",
        parse_mode: str = "Markdown",
        disable_notification: bool = True,
        width: int | None = None,
        height: int | None = None,
        duration: int | None = None,
        thumb: FileSource | None = None,
        supports_streaming: bool | None = None,
    ) -> bool:
        """
        Send a video.

        width, height, duration and supports_streaming are only sent when
        given. thumb is uploaded as a second file part.
        """
        return self.send_file(
            MediaKind.VIDEO,
            chat_id,
            file,
            caption=caption,
            parse_mode=parse_mode,
            disable_notification=disable_notification,
            video=VideoOptions(
                width=width,
                height=height,
                duration=duration,
                thumb=thumb,
                supports_streaming=supports_streaming,
            ),
        )

    def send_file(
        self,
        kind: MediaKind | str,
        chat_id: str | int,
        file: FileSource,
        caption: str = "",
        parse_mode: str = "Markdown",
        disable_notification: bool = True,
        video: VideoOptions | None = None,
    ) -> bool:
        """
        Upload a local file with one of the file-send methods.

        Args:
            kind: MediaKind or its value ("document", "photo", "video")
            chat_id: @username, @channelname or numeric chat id
            file: Path (str or Path), raw bytes, or binary file-like object
            caption: Text shown under the file
            parse_mode: Caption formatting mode
            disable_notification: Readers get no notification
            video: Extra metadata, used only when kind is VIDEO

        Returns:
            The ``ok`` flag of the response. False without any request when
            ``kind`` is not a known selector.

        Raises:
            FileNotFoundError: Local path does not exist
            TransportError, ResponseParseError, RemoteRejection: see send_message
        """
        try:
            media_kind = MediaKind.parse(kind)
        except UnsupportedMethod as e:
            logger.warning(f"{e}; nothing sent")
            return False

        options = FileOptions(
            caption=caption,
            parse_mode=parse_mode,
            disable_notification=disable_notification,
        )
        return self._post(self.build_file_request(media_kind, chat_id, file, options, video))

    # --------------------------- Request building -------------------------

    @staticmethod
    def build_message_request(
        chat_id: str | int,
        text: str,
        options: MessageOptions | None = None,
    ) -> OutboundRequest:
        options = options or MessageOptions()
        fields = {"chat_id": chat_id, "text": text}
        fields.update(options.to_fields())
        return OutboundRequest(method="sendMessage", fields=fields)

    @staticmethod
    def build_file_request(
        kind: MediaKind,
        chat_id: str | int,
        file: FileSource,
        options: FileOptions | None = None,
        video: VideoOptions | None = None,
    ) -> OutboundRequest:
        options = options or FileOptions()
        attachments = [read_attachment(kind.value, file, kind.default_filename)]

        fields: dict[str, t.Any] = {"chat_id": chat_id}
        fields.update(options.to_fields())

        if video is not None:
            if kind is MediaKind.VIDEO:
                fields.update(video.to_fields())
                if video.thumb is not None:
                    attachments.append(read_attachment("thumb", video.thumb, "thumb.jpg"))
            else:
                logger.debug(f"Ignoring video options for {kind.api_method}")

        return OutboundRequest(method=kind.api_method, fields=fields, attachments=tuple(attachments))

    def __enter__(self) -> "BotClient":
        """Context manager support."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close session on exit."""
        self._session.close()

    # --------------------------- Internal helpers -------------------------

    def _endpoint(self, method: str) -> str:
        return f"{self._cfg.base_url}/bot{self._cfg.token}/{method}"

    def _mask(self, text: str) -> str:
        return text.replace(self._cfg.token, self._cfg.masked_token)

    def _post(self, request: OutboundRequest) -> bool:
        """
        POST form-encoded or multipart data, depending on whether the request
        carries files. One attempt only.
        """
        url = self._endpoint(request.method)
        kwargs: dict[str, t.Any] = {"data": request.form(), "timeout": self._cfg.timeout_seconds}
        if request.is_multipart:
            kwargs["files"] = request.files()

        logger.debug(f"Making {'multipart ' if request.is_multipart else ''}request to {self._mask(url)}")
        try:
            resp = self._session.post(url, **kwargs)
        except requests.RequestException as e:
            message = self._mask(str(e))
            logger.error(f"{request.method} transport failure: {message}")
            raise TransportError(f"{request.method} failed: {message}") from e

        return self._handle_response(request.method, resp)

    def _handle_response(self, method: str, resp: requests.Response) -> bool:
        """
        Reduce a Telegram response to its ``ok`` flag.
        Non-2xx statuses are not errors by themselves: Telegram reports
        rejections as {"ok": false, ...} with a 4xx status.
        """
        try:
            data = resp.json()
        except ValueError as e:
            logger.error(f"{method} returned non-JSON response: {resp.status_code}")
            raise ResponseParseError(
                f"Non-JSON response from {method}: {resp.status_code} {resp.text[:200]}",
                status_code=resp.status_code,
            ) from e

        if not isinstance(data, dict) or not isinstance(data.get("ok"), bool):
            logger.error(f"{method} response has no boolean 'ok' field")
            raise ResponseParseError(
                f"Response from {method} has no boolean 'ok' field: {str(data)[:200]}",
                status_code=resp.status_code,
            )

        if data["ok"]:
            result = data.get("result")
            message_id = result.get("message_id", "N/A") if isinstance(result, dict) else "N/A"
            logger.debug(f"{method} successful: message_id={message_id}")
            return True

        error_code = data.get("error_code", resp.status_code)
        description = data.get("description", "Unknown error")
        logger.error(f"Telegram API error {error_code} on {method}: {description}")
        if self._cfg.raise_on_rejection:
            raise RemoteRejection(method, error_code=error_code, description=description)
        return False


# ------------------------------ Utility functions -------------------------------

def create_client_from_env(**kwargs: t.Any) -> BotClient:
    """Build a client from the TELEGRAM_BOT_TOKEN environment variable."""
    token = os.getenv("TELEGRAM_BOT_TOKEN")
    if not token:
        raise ValueError("Missing bot token. Set TELEGRAM_BOT_TOKEN")
    return BotClient(token, **kwargs)


def send_notification(text: str, chat_id: str | int | None = None, **kwargs: t.Any) -> bool:
    """Quick one-off message using TELEGRAM_BOT_TOKEN and TELEGRAM_CHAT_ID."""
    chat_id = chat_id or os.getenv("TELEGRAM_CHAT_ID")
    if not chat_id:
        raise ValueError("Missing chat id. Set TELEGRAM_CHAT_ID or pass chat_id=...")
    with create_client_from_env() as bot:
        return bot.send_message(chat_id, text, **kwargs)
