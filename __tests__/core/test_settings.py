from pathlib import Path

import pytest
from pydantic import ValidationError

from tripjournal.core.settings import JournalSettings, TokenSettings


def test_journal_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TRIPJOURNAL_BASE_URL", raising=False)

    settings = JournalSettings(_env_file=None)

    assert settings.base_url == "http://127.0.0.1:8000/"
    assert settings.timeout_seconds is None
    assert settings.token.ttl_seconds == 3600
    assert settings.token.access_token_key == "accessToken"  # noqa: S105
    assert settings.token.retrieval_time_key == "tokenRetrievalTime"


def test_journal_settings_from_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("TRIPJOURNAL_BASE_URL", "https://journal.example.com/api/")
    monkeypatch.setenv("TRIPJOURNAL_TIMEOUT_SECONDS", "2.5")
    monkeypatch.setenv("TRIPJOURNAL_TOKEN_TTL_SECONDS", "60")
    monkeypatch.setenv("TRIPJOURNAL_TOKEN_PATH", str(tmp_path / "token.json"))

    settings = JournalSettings(_env_file=None)

    assert settings.base_url == "https://journal.example.com/api/"
    assert settings.timeout_seconds == 2.5
    assert settings.token.ttl_seconds == 60
    assert settings.token.path == tmp_path / "token.json"


def test_base_url_is_stripped() -> None:
    assert JournalSettings(base_url="  http://journal.test/  ").base_url == "http://journal.test/"


def test_empty_base_url_rejected() -> None:
    with pytest.raises(ValidationError, match="base_url must be a non-empty string"):
        JournalSettings(base_url="   ")


def test_token_ttl_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        TokenSettings(ttl_seconds=0)
