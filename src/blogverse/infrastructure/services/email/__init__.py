"""Email providers and template rendering."""

from blogverse.infrastructure.services.email.console_provider import ConsoleProvider
from blogverse.infrastructure.services.email.email_provider import EmailProvider
from blogverse.infrastructure.services.email.smtp_provider import SMTPProvider, SMTPSettings
from blogverse.infrastructure.services.email.template_renderer import (
    TemplateRenderer,
    get_template_renderer,
)

__all__ = [
    "ConsoleProvider",
    "EmailProvider",
    "SMTPProvider",
    "SMTPSettings",
    "TemplateRenderer",
    "get_template_renderer",
]
