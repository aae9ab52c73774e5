import pytest
from pydantic import ValidationError

from config import Settings


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("JWT_SECRET", "ADMIN_EMAILS_RAW", "BCRYPT_ROUNDS", "CORS_ORIGINS_RAW"):
        monkeypatch.delenv(name, raising=False)


def test_missing_signing_secret_is_fatal():
    with pytest.raises(ValidationError):
        Settings()


def test_empty_signing_secret_is_fatal():
    with pytest.raises(ValidationError):
        Settings(jwt_secret="")


def test_secret_read_from_environment(monkeypatch):
    monkeypatch.setenv("JWT_SECRET", "from-env")
    settings = Settings()
    assert settings.jwt_secret == "from-env"
    assert settings.token_ttl_hours == 24
    assert settings.clear_cancellation_on_reopen is False


def test_bcrypt_rounds_floor():
    with pytest.raises(ValidationError):
        Settings(jwt_secret="s", bcrypt_rounds=8)


def test_admin_emails_are_normalized(monkeypatch):
    monkeypatch.setenv("ADMIN_EMAILS_RAW", " Boss@Shop.com , ,ops@shop.com")
    settings = Settings(jwt_secret="s")
    assert settings.admin_emails == ["boss@shop.com", "ops@shop.com"]


def test_cors_origins_default_to_wildcard():
    assert Settings(jwt_secret="s").cors_origins == ["*"]
