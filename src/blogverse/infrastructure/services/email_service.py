"""Email service for sending account emails.

Builds verification, password reset and welcome emails from the built-in
templates and hands them to the configured provider. Delivery errors are
raised to the caller, which decides whether they matter.
"""

from blogverse.core.config import Settings, get_settings
from blogverse.core.logging import get_logger
from blogverse.infrastructure.services.email import templates
from blogverse.infrastructure.services.email.console_provider import ConsoleProvider
from blogverse.infrastructure.services.email.email_provider import EmailProvider
from blogverse.infrastructure.services.email.smtp_provider import SMTPProvider, SMTPSettings
from blogverse.infrastructure.services.email.template_renderer import (
    TemplateRenderer,
    get_template_renderer,
)

logger = get_logger(__name__)


class EmailService:
    """Service for sending account emails."""

    def __init__(
        self,
        provider: EmailProvider,
        from_email: str,
        from_name: str,
        frontend_url: str,
        renderer: TemplateRenderer | None = None,
    ) -> None:
        """Initialize the email service.

        Args:
            provider: Transport used to deliver messages.
            from_email: Sender address.
            from_name: Sender display name.
            frontend_url: Base URL of the web frontend, used in links.
            renderer: Template renderer. Defaults to the shared instance.
        """
        self.provider = provider
        self.from_email = from_email
        self.from_name = from_name
        self.frontend_url = frontend_url.rstrip("/")
        self.renderer = renderer or get_template_renderer()

    async def send_verification_email(self, to: str, token: str) -> None:
        """Send the email verification link."""
        link = f"{self.frontend_url}/verify-email?token={token}"
        await self._send(to, templates.VERIFICATION, {"verification_link": link})

    async def send_password_reset_email(self, to: str, token: str) -> None:
        """Send the password reset link."""
        link = f"{self.frontend_url}/reset-password?token={token}"
        await self._send(to, templates.PASSWORD_RESET, {"reset_link": link})

    async def send_welcome_email(self, to: str, username: str) -> None:
        """Send the welcome email after verification."""
        await self._send(
            to,
            templates.WELCOME,
            {"username": username, "dashboard_link": f"{self.frontend_url}/dashboard"},
        )

    async def _send(
        self, to: str, template: templates.EmailTemplate, variables: dict[str, str]
    ) -> None:
        variables = {"title": template.subject, **variables}
        html_body = self.renderer.render(template.html_body, variables, html=True)
        text_body = self.renderer.render(template.text_body, variables, html=False)

        await self.provider.send_email(
            to=to,
            subject=template.subject,
            html_body=html_body,
            text_body=text_body,
            from_email=self.from_email,
            from_name=self.from_name,
        )
        logger.info("Email sent", to=to, subject=template.subject)


def build_email_provider(settings: Settings) -> EmailProvider:
    """Create the provider selected by ``settings.email_backend``."""
    if settings.email_backend == "smtp":
        return SMTPProvider(
            SMTPSettings(
                host=settings.smtp_host,
                port=settings.smtp_port,
                username=settings.smtp_username,
                password=settings.smtp_password,
                use_tls=settings.smtp_use_tls,
                timeout=settings.smtp_timeout,
            )
        )
    return ConsoleProvider()


def build_email_service(settings: Settings | None = None) -> EmailService:
    """Create an email service from application settings."""
    settings = settings or get_settings()
    return EmailService(
        provider=build_email_provider(settings),
        from_email=settings.from_email,
        from_name=settings.from_name,
        frontend_url=settings.frontend_url,
    )
