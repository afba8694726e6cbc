"""Settings — defaults, environment overrides and validation."""

import pytest
from pydantic import ValidationError

from dappbot.config import Settings


def test_defaults_match_wire_headers(monkeypatch):
    monkeypatch.delenv("DAPPBOT_CORS_ALLOW_ORIGIN", raising=False)
    monkeypatch.delenv("DAPPBOT_CORS_ALLOW_HEADERS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.cors_allow_origin == "*"
    assert settings.cors_allow_header_list == ["Authorization", "Content-Type"]


def test_env_prefix_override(monkeypatch):
    monkeypatch.setenv("DAPPBOT_CORS_ALLOW_ORIGIN", "https://dapp.bot")
    assert Settings(_env_file=None).cors_allow_origin == "https://dapp.bot"


def test_rejects_unknown_log_format():
    with pytest.raises(ValidationError):
        Settings(_env_file=None, log_format="xml")
