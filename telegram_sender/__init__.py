"""
Telegram Sender - thin client for the Telegram Bot API.

Four calls, one POST each:
- send_message: text message
- send_document / send_photo / send_video: local file upload
- Each returns the ``ok`` flag of Telegram's answer
- Transport and parse failures raise typed errors

Basic usage:
    from telegram_sender import BotClient

    bot = BotClient("123456:ABC-DEF...")
    bot.send_message("@mychannel", "Hello from Python! 🚀")
    bot.send_photo("@mychannel", "chart.png", caption="Training results")
"""

__version__ = "0.1.0"

from .telegramBot import BotClient, create_client_from_env, send_notification
from .telegramConfig import FileOptions, MessageOptions, TelegramConfig, VideoOptions
from .telegramErrors import (
    RemoteRejection,
    ResponseParseError,
    TelegramError,
    TransportError,
    UnsupportedMethod,
)
from .telegramRequest import Attachment, MediaKind, OutboundRequest

__all__ = [
    "BotClient",
    "create_client_from_env",
    "send_notification",
    "TelegramConfig",
    "MessageOptions",
    "FileOptions",
    "VideoOptions",
    "MediaKind",
    "Attachment",
    "OutboundRequest",
    "TelegramError",
    "UnsupportedMethod",
    "TransportError",
    "ResponseParseError",
    "RemoteRejection",
    "__version__",
]
