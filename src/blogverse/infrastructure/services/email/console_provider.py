"""Email provider that logs messages instead of sending them (development)."""

from blogverse.core.logging import get_logger
from blogverse.infrastructure.services.email.email_provider import EmailProvider

logger = get_logger(__name__)


class ConsoleProvider(EmailProvider):
    """Writes outgoing email to the log."""

    async def send_email(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
        from_email: str,
        from_name: str,
    ) -> bool:
        logger.info(
            "Email (console backend - not sent)",
            to=to,
            subject=subject,
            sender=f"{from_name} <{from_email}>",
            body=text_body,
        )
        return True
