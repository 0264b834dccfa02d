from unittest.mock import Mock

import pytest
import requests

from telegram_sender import (
    BotClient,
    FileOptions,
    MediaKind,
    MessageOptions,
    UnsupportedMethod,
    VideoOptions,
    create_client_from_env,
    send_notification,
)
from telegram_sender.telegramRequest import encode_form_value

from conftest import TOKEN


@pytest.mark.parametrize("token", ["", "   ", None])
def test_missing_token_rejected(token):
    with pytest.raises(ValueError):
        BotClient(token)


def test_repr_masks_token(bot):
    assert "ABC-DEF" not in repr(bot)
    assert "123456:***" in repr(bot)


def test_config_is_read_only(bot):
    with pytest.raises(AttributeError):
        bot.config.token = "other"


def test_session_headers_applied():
    session = requests.Session()
    BotClient(TOKEN, session=session, session_headers={"User-Agent": "telegram-sender"})
    assert session.headers["User-Agent"] == "telegram-sender"


def test_context_manager_closes_session(session):
    with BotClient(TOKEN, session=session) as bot:
        assert isinstance(bot, BotClient)
    session.close.assert_called_once()


def test_default_asymmetry_between_messages_and_files():
    assert MessageOptions().disable_notification is False
    assert FileOptions().disable_notification is True
    assert MessageOptions().parse_mode == FileOptions().parse_mode == "Markdown"


def test_video_options_drop_unset_fields():
    assert VideoOptions().to_fields() == {}
    assert VideoOptions(height=480, supports_streaming=True).to_fields() == {
        "height": 480,
        "supports_streaming": True,
    }


def test_media_kind_mapping():
    assert [k.api_method for k in MediaKind] == ["sendDocument", "sendPhoto", "sendVideo"]
    assert MediaKind.parse("video") is MediaKind.VIDEO
    assert MediaKind.parse(MediaKind.PHOTO) is MediaKind.PHOTO
    with pytest.raises(UnsupportedMethod) as excinfo:
        MediaKind.parse("sticker")
    assert excinfo.value.selector == "sticker"


@pytest.mark.parametrize("value, expected", [(True, "true"), (False, "false"), (0, "0"), ("@c", "@c")])
def test_encode_form_value(value, expected):
    assert encode_form_value(value) == expected


def test_create_client_from_env(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", TOKEN)
    assert create_client_from_env().config.token == TOKEN


def test_create_client_from_env_requires_token(monkeypatch):
    monkeypatch.delenv("TELEGRAM_BOT_TOKEN", raising=False)
    with pytest.raises(ValueError):
        create_client_from_env()


def test_send_notification_uses_env(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", TOKEN)
    monkeypatch.setenv("TELEGRAM_CHAT_ID", "@alerts")
    post = Mock(return_value=Mock(status_code=200, json=Mock(return_value={"ok": True})))
    monkeypatch.setattr(requests.Session, "post", post)

    assert send_notification("deploy finished") is True
    assert post.call_args.kwargs["data"]["chat_id"] == "@alerts"


def test_send_notification_requires_chat(monkeypatch):
    monkeypatch.delenv("TELEGRAM_CHAT_ID", raising=False)
    with pytest.raises(ValueError):
        send_notification("hi")
