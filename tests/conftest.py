from unittest.mock import Mock

import pytest
import requests

from telegram_sender import BotClient

TOKEN = "123456:ABC-DEF"


def make_response(payload=None, *, status_code=200, text=None):
    resp = Mock(spec=requests.Response)
    resp.status_code = status_code
    resp.text = text if text is not None else str(payload)
    if isinstance(payload, Exception):
        resp.json.side_effect = payload
    else:
        resp.json.return_value = payload
    return resp


@pytest.fixture
def session():
    session = Mock(spec=requests.Session)
    session.post.return_value = make_response({"ok": True, "result": {"message_id": 42}})
    return session


@pytest.fixture
def bot(session):
    return BotClient(TOKEN, session=session)


@pytest.fixture
def report(tmp_path):
    path = tmp_path / "report.pdf"
    path.write_bytes(b"%PDF-1.4 weekly numbers")
    return path
