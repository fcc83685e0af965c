import html
from pathlib import Path

import pyperclip
import pytest
import requests
from fastapi.testclient import TestClient
from streamlit.testing.v1 import AppTest

import chatbot.config as config
from chatbot.main import app

APP_PATH = str(Path(__file__).resolve().parents[1] / "chatbot_ui" / "streamlit_app.py")
HELLO_REPLY = 'You said: "hello". As an AI, I\'m here to help!'

client = TestClient(app)


class _FakeResponse:
    def __init__(self, body) -> None:
        self.status_code = 200
        self._body = body

    def raise_for_status(self) -> None:
        return None

    def json(self):
        return self._body


@pytest.fixture
def posts(monkeypatch: pytest.MonkeyPatch) -> list:
    calls: list = []

    def via_app(url, data=None, timeout=None):
        calls.append(data)
        return client.post("/chat", data=data)

    monkeypatch.setattr(requests, "post", via_app)
    return calls


def _start() -> AppTest:
    return AppTest.from_file(APP_PATH, default_timeout=10).run()


def _input(at: AppTest):
    return at.text_input(key=f"message_input_{at.session_state['input_nonce']}")


def _send(at: AppTest, text: str) -> None:
    _input(at).input(text)
    at.button(key="send").click().run()


def _bubbles(at: AppTest) -> list[str]:
    return [m.value for m in at.markdown if 'class="cb-bubble"' in m.value]


def test_page_starts_idle_and_empty(posts: list) -> None:
    at = _start()

    assert not at.exception
    assert at.title[0].value == "AI Chatbot"
    assert _bubbles(at) == []
    assert at.button(key="send").label == "Send"
    assert at.button(key="send").disabled is False
    assert posts == []


def test_hello_appends_pair_and_empties_input(posts: list) -> None:
    at = _start()

    _send(at, "hello")

    assert not at.exception
    assert posts == [{"message": "hello"}]
    bubbles = _bubbles(at)
    assert len(bubbles) == 2
    assert ">hello<" in bubbles[0]
    assert html.escape(HELLO_REPLY) in bubbles[1]
    assert at.session_state["status"] == "idle"
    assert _input(at).value == ""
    assert at.button(key="send").label == "Send"
    assert at.button(key="send").disabled is False


def test_new_pair_requests_scroll_to_bottom(posts: list) -> None:
    at = _start()

    _send(at, "hello")

    scripts = [h.value for h in at.get("html")]
    assert any("scrollTop = el.scrollHeight" in s for s in scripts)
    assert at.session_state["scroll_to_bottom"] is False


def test_second_message_keeps_order(posts: list) -> None:
    at = _start()

    _send(at, "first")
    _send(at, "second")

    bubbles = _bubbles(at)
    assert len(bubbles) == 4
    assert ">first<" in bubbles[0]
    assert ">second<" in bubbles[2]
    assert posts == [{"message": "first"}, {"message": "second"}]


def test_blank_submit_warns_without_posting(posts: list) -> None:
    at = _start()

    _send(at, "   ")

    assert not at.exception
    assert posts == []
    assert at.warning[0].value == "Please type a message first."
    assert _bubbles(at) == []
    assert at.session_state["status"] == "idle"


def test_transport_error_shows_banner_and_keeps_list(posts: list, monkeypatch: pytest.MonkeyPatch) -> None:
    at = _start()
    _send(at, "hello")

    def down(url, data=None, timeout=None):
        raise requests.ConnectionError("connection refused")

    monkeypatch.setattr(requests, "post", down)
    _send(at, "again")

    assert not at.exception
    assert "couldn't reach the backend" in at.error[0].value
    assert len(_bubbles(at)) == 2
    assert at.session_state["status"] == "idle"
    assert at.button(key="send").disabled is False


def test_malformed_reply_returns_form_to_idle(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list = []

    def bad_shape(url, data=None, timeout=None):
        calls.append(data)
        return _FakeResponse({"unexpected": "shape"})

    monkeypatch.setattr(requests, "post", bad_shape)
    at = _start()

    _send(at, "hello")

    assert not at.exception
    assert at.session_state["status"] == "idle"
    assert at.button(key="send").label == "Send"
    assert at.button(key="send").disabled is False
    assert "could not read" in at.error[0].value
    assert _bubbles(at) == []

    at.run()

    assert not at.exception
    assert calls == [{"message": "hello"}]


def test_copy_button_swaps_icon(posts: list, monkeypatch: pytest.MonkeyPatch) -> None:
    copied: list[str] = []
    monkeypatch.setattr(pyperclip, "copy", copied.append)
    monkeypatch.setattr(config, "COPIED_INDICATOR_SECONDS", 60.0)
    at = _start()
    _send(at, "hello")

    copy_buttons = [b for b in at.button if b.key and b.key.startswith("copy_")]
    assert len(copy_buttons) == 1
    assert copy_buttons[0].label == "📋"

    copy_buttons[0].click().run()

    assert not at.exception
    assert copied == [HELLO_REPLY]
    assert [b.label for b in at.button if b.key and b.key.startswith("copy_")] == ["✅"]
