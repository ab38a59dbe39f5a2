"""Transport interface for outgoing account email.

``EmailService`` renders verification, reset and welcome messages and hands
the finished bodies to a provider. Providers only deliver; they never build
links or pick templates.
"""

from abc import ABC, abstractmethod


class EmailProvider(ABC):
    """Delivers one rendered message to one recipient."""

    @abstractmethod
    async def send_email(
        self,
        to: str,
        subject: str,
        html_body: str,
        text_body: str,
        from_email: str,
        from_name: str,
    ) -> bool:
        """Deliver a message with HTML and plain-text alternatives.

        The bodies arrive fully rendered, with every link already pointing at
        the frontend. Delivery problems are raised, not returned, so the
        caller can log them against the account flow that triggered the send.

        Returns:
            True once the message has been handed off.
        """
