"""Built-in email templates.

Each message has a subject, an HTML body and a plain-text alternative. Bodies
are Jinja2 templates rendered by ``TemplateRenderer``.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class EmailTemplate:
    """Subject plus HTML and plain-text bodies for one kind of email."""

    subject: str
    html_body: str
    text_body: str


_HTML_LAYOUT = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>{{ title }}</title></head>
<body style="font-family: Arial, sans-serif; color: #333; max-width: 600px; margin: 0 auto;">
  <h1 style="color: #4f46e5;">BlogVerse</h1>
  {content}
  <p style="color: #888; font-size: 12px;">Best regards,<br>The BlogVerse Team</p>
</body>
</html>
"""


def _html(content: str) -> str:
    return _HTML_LAYOUT.replace("{content}", content)


VERIFICATION = EmailTemplate(
    subject="Verify Your Email - BlogVerse",
    html_body=_html(
        """<h2>Welcome to BlogVerse!</h2>
  <p>Please verify your email address by clicking the button below:</p>
  <p><a href="{{ verification_link }}" style="background: #4f46e5; color: #fff; padding: 10px 20px; text-decoration: none; border-radius: 4px;">Verify Email</a></p>
  <p>Or copy this link into your browser:<br>{{ verification_link }}</p>
  <p>This link will expire in 24 hours.</p>
  <p>If you didn't create an account, you can safely ignore this email.</p>"""
    ),
    text_body="""Welcome to BlogVerse!

Please verify your email address by clicking the link below:

{{ verification_link }}

This link will expire in 24 hours.

If you didn't create an account, you can safely ignore this email.

Best regards,
The BlogVerse Team""",
)

PASSWORD_RESET = EmailTemplate(
    subject="Reset Your Password - BlogVerse",
    html_body=_html(
        """<h2>Reset your password</h2>
  <p>You requested to reset your password. Click the button below to set a new password:</p>
  <p><a href="{{ reset_link }}" style="background: #4f46e5; color: #fff; padding: 10px 20px; text-decoration: none; border-radius: 4px;">Reset Password</a></p>
  <p>Or copy this link into your browser:<br>{{ reset_link }}</p>
  <p>This link will expire in 1 hour.</p>
  <p>If you didn't request a password reset, you can safely ignore this email.</p>"""
    ),
    text_body="""Hi there,

You requested to reset your password. Click the link below to set a new password:

{{ reset_link }}

This link will expire in 1 hour.

If you didn't request a password reset, you can safely ignore this email.

Best regards,
The BlogVerse Team""",
)

WELCOME = EmailTemplate(
    subject="Welcome to BlogVerse!",
    html_body=_html(
        """<h2>Hi {{ username }},</h2>
  <p>Your email has been verified! Welcome to BlogVerse.</p>
  <p><a href="{{ dashboard_link }}" style="background: #4f46e5; color: #fff; padding: 10px 20px; text-decoration: none; border-radius: 4px;">Start exploring</a></p>
  <p>Happy writing!</p>"""
    ),
    text_body="""Hi {{ username }},

Your email has been verified! Welcome to BlogVerse.

Start exploring: {{ dashboard_link }}

Happy writing!

Best regards,
The BlogVerse Team""",
)
