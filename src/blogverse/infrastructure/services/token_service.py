"""Token generation service.

Provides cryptographically secure random tokens for email verification
and password reset links.
"""

import secrets
import string

TOKEN_ALPHABET = string.ascii_letters + string.digits
TOKEN_LENGTH = 48


class SecureTokenGenerator:
    """Produces unguessable, fixed-length opaque strings.

    Tokens are capabilities: they carry no structure or metadata. With a
    62-symbol alphabet and 48 characters a token holds about 286 bits of
    entropy.
    """

    def __init__(self, length: int = TOKEN_LENGTH, alphabet: str = TOKEN_ALPHABET) -> None:
        self.length = length
        self.alphabet = alphabet

    def generate(self) -> str:
        """Generate a new random token.

        Returns:
            A string of ``length`` characters drawn from ``alphabet``.
        """
        return "".join(secrets.choice(self.alphabet) for _ in range(self.length))


# Default token generator instance
token_generator = SecureTokenGenerator()
