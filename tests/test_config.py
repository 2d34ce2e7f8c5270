"""
Tests for environment-based settings.
"""

import pytest
from pydantic import ValidationError

from cleanbot.config import DEFAULT_SERVICE_KINDS, ServiceKind, Settings

TOKEN = "123456789:AAFakeTokenForTests"


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TELEGRAM_BOT_TOKEN", "DEVELOPER_CHAT_ID", "SERVICE_KINDS", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", TOKEN)

    settings = Settings(_env_file=None)

    assert settings.TELEGRAM_BOT_TOKEN == TOKEN
    assert settings.DEVELOPER_CHAT_ID is None
    assert settings.SERVICE_KINDS == set(DEFAULT_SERVICE_KINDS)
    assert settings.LOG_LEVEL == "INFO"


def test_missing_token_is_an_error():
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_short_token_is_an_error(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", "short")
    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_developer_chat_id_parsed(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", TOKEN)
    monkeypatch.setenv("DEVELOPER_CHAT_ID", "123456")

    assert Settings(_env_file=None).DEVELOPER_CHAT_ID == 123456


def test_service_kinds_from_json(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", TOKEN)
    monkeypatch.setenv("SERVICE_KINDS", '["new_chat_members", "left_chat_member"]')

    settings = Settings(_env_file=None)

    assert settings.SERVICE_KINDS == {ServiceKind.NEW_CHAT_MEMBERS, ServiceKind.LEFT_CHAT_MEMBER}


def test_unknown_service_kind_rejected(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", TOKEN)
    monkeypatch.setenv("SERVICE_KINDS", '["video_chat_started"]')

    with pytest.raises(ValidationError):
        Settings(_env_file=None)


def test_developer_chat_username_kept_as_string(monkeypatch):
    monkeypatch.setenv("TELEGRAM_BOT_TOKEN", TOKEN)
    monkeypatch.setenv("DEVELOPER_CHAT_ID", "@my_dev_channel")

    assert Settings(_env_file=None).DEVELOPER_CHAT_ID == "@my_dev_channel"
