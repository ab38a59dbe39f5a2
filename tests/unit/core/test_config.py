"""Unit tests for application settings."""

from blogverse.core.config import DEFAULT_SECRET_KEY, Settings


def test_defaults():
    settings = Settings(_env_file=None, environment="development", secret_key=DEFAULT_SECRET_KEY)

    assert settings.port == 3000
    assert settings.api_prefix == "/api"
    assert settings.email_backend == "console"
    assert settings.frontend_url == "http://localhost:3000"
    assert settings.is_development is True
    assert settings.uses_default_secret is True


def test_cors_origins_from_comma_separated_string():
    settings = Settings(_env_file=None, cors_origins="http://a.test, http://b.test")

    assert settings.cors_origins == ["http://a.test", "http://b.test"]


def test_frontend_url_trailing_slash_stripped():
    settings = Settings(_env_file=None, frontend_url="https://blogverse.example/")

    assert settings.frontend_url == "https://blogverse.example"


def test_environment_variables(monkeypatch):
    monkeypatch.setenv("BLOGVERSE_PORT", "8080")
    monkeypatch.setenv("BLOGVERSE_EMAIL_BACKEND", "smtp")

    settings = Settings(_env_file=None)

    assert settings.port == 8080
    assert settings.email_backend == "smtp"
