import pytest

import chatbot.config as config


@pytest.fixture(autouse=True)
def _restore_config():
    saved = (config.DEBUG, config.BACKEND_URL, config.REQUEST_TIMEOUT)
    yield
    config.DEBUG, config.BACKEND_URL, config.REQUEST_TIMEOUT = saved


def test_load_env_reads_flags(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "yes")
    monkeypatch.setenv("CHATBOT_BACKEND_URL", "http://api.local:8080/")
    monkeypatch.setenv("CHATBOT_REQUEST_TIMEOUT", "7.5")

    config.load_env()

    assert config.DEBUG is True
    assert config.BACKEND_URL == "http://api.local:8080"
    assert config.REQUEST_TIMEOUT == 7.5


def test_load_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DEBUG", "0")
    monkeypatch.delenv("CHATBOT_BACKEND_URL", raising=False)
    monkeypatch.setenv("CHATBOT_REQUEST_TIMEOUT", "not-a-number")

    config.load_env()

    assert config.DEBUG is False
    assert config.BACKEND_URL == "http://127.0.0.1:8000"
    assert config.REQUEST_TIMEOUT == 30.0
