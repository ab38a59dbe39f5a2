"""Unit tests for the SMTP email provider."""

import unittest.mock as mock

import pytest

from blogverse.infrastructure.services.email.smtp_provider import SMTPProvider, SMTPSettings


@pytest.fixture
def smtp_settings() -> SMTPSettings:
    """Fixture for SMTP settings."""
    return SMTPSettings(
        host="smtp.example.com",
        port=587,
        username="test_user",
        password="test_password",
    )


@pytest.fixture
def smtp_provider(smtp_settings: SMTPSettings) -> SMTPProvider:
    """Fixture for SMTP provider."""
    return SMTPProvider(smtp_settings)


async def _send(provider: SMTPProvider) -> bool:
    return await provider.send_email(
        to="recipient@example.com",
        subject="Test Subject",
        html_body="<p>HTML Body</p>",
        text_body="Text Body",
        from_email="noreply@blogverse.com",
        from_name="BlogVerse",
    )


@pytest.mark.asyncio
async def test_smtp_send_email_starttls(smtp_provider: SMTPProvider) -> None:
    """Test sending over port 587 upgrades with STARTTLS."""
    with mock.patch("aiosmtplib.SMTP", autospec=True) as mock_smtp_class:
        mock_smtp = mock_smtp_class.return_value.__aenter__.return_value

        assert await _send(smtp_provider) is True

        mock_smtp_class.assert_called_once_with(
            hostname="smtp.example.com",
            port=587,
            use_tls=False,
            timeout=10,
        )
        mock_smtp.starttls.assert_called_once()
        mock_smtp.login.assert_called_once_with("test_user", "test_password")
        mock_smtp.send_message.assert_called_once()

        sent_message = mock_smtp.send_message.call_args[0][0]
        assert sent_message["Subject"] == "Test Subject"
        assert sent_message["To"] == "recipient@example.com"
        assert sent_message["From"] == "BlogVerse <noreply@blogverse.com>"
        parts = [part.get_content_type() for part in sent_message.get_payload()]
        assert parts == ["text/plain", "text/html"]


@pytest.mark.asyncio
async def test_smtp_send_email_implicit_tls(smtp_settings: SMTPSettings) -> None:
    """Test port 465 connects encrypted and skips STARTTLS."""
    provider = SMTPProvider(smtp_settings.model_copy(update={"port": 465}))

    with mock.patch("aiosmtplib.SMTP", autospec=True) as mock_smtp_class:
        mock_smtp = mock_smtp_class.return_value.__aenter__.return_value

        assert await _send(provider) is True

        assert mock_smtp_class.call_args.kwargs["use_tls"] is True
        mock_smtp.starttls.assert_not_called()


@pytest.mark.asyncio
async def test_smtp_send_email_without_credentials(smtp_settings: SMTPSettings) -> None:
    """Test that login is skipped when no username is configured."""
    provider = SMTPProvider(smtp_settings.model_copy(update={"username": "", "password": ""}))

    with mock.patch("aiosmtplib.SMTP", autospec=True) as mock_smtp_class:
        mock_smtp = mock_smtp_class.return_value.__aenter__.return_value

        await _send(provider)

        mock_smtp.login.assert_not_called()


@pytest.mark.asyncio
async def test_smtp_send_email_failure_propagates(smtp_provider: SMTPProvider) -> None:
    """Test that delivery errors are raised to the caller."""
    with mock.patch("aiosmtplib.SMTP", autospec=True) as mock_smtp_class:
        mock_smtp = mock_smtp_class.return_value.__aenter__.return_value
        mock_smtp.send_message.side_effect = ConnectionRefusedError("refused")

        with pytest.raises(ConnectionRefusedError):
            await _send(smtp_provider)
