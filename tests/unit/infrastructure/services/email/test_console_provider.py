"""Unit tests for the console email provider."""

import pytest

from blogverse.infrastructure.services.email.console_provider import ConsoleProvider


@pytest.mark.asyncio
async def test_console_provider_reports_success():
    provider = ConsoleProvider()

    sent = await provider.send_email(
        to="a@x.com",
        subject="Subject",
        html_body="<p>Body</p>",
        text_body="Body",
        from_email="noreply@blogverse.com",
        from_name="BlogVerse",
    )

    assert sent is True
