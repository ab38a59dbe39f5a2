"""Password hashing utility using Argon2.

Provides salted one-way hashing and verification using the Argon2id
algorithm. Digests are self-describing (``$argon2id$v=19$m=...,t=...,p=...$salt$hash``)
so verification re-derives the hash with the parameters embedded in the
stored value.
"""

from argon2 import PasswordHasher as _Argon2Hasher
from argon2.exceptions import InvalidHashError, VerificationError


class PasswordHasher:
    """One-way salted hashing and verification of user credentials."""

    def __init__(self, hasher: _Argon2Hasher | None = None) -> None:
        self._hasher = hasher or _Argon2Hasher()

    def hash(self, plaintext: str) -> str:
        """Hash a password with a fresh random salt.

        Raises:
            argon2.exceptions.HashingError: On internal hashing failure.
        """
        return self._hasher.hash(plaintext)

    def verify(self, digest: str, plaintext: str) -> bool:
        """Check a plaintext password against a stored digest.

        Comparison is constant-time. A mismatch and an unparseable digest
        both return False; callers get no signal about which one happened.
        """
        try:
            return self._hasher.verify(digest, plaintext)
        except (VerificationError, InvalidHashError):
            return False

    def needs_rehash(self, digest: str) -> bool:
        """Check if a digest was produced with outdated parameters.

        Should only be called after a successful verification.
        """
        try:
            return self._hasher.check_needs_rehash(digest)
        except InvalidHashError:
            return False


# Default hasher instance
password_hasher = PasswordHasher()

# Verified against when a login names an unknown email, so the request
# costs the same as a wrong-password attempt.
DUMMY_PASSWORD_HASH = password_hasher.hash("dummy_password_for_timing_safety")


def hash_password(password: str) -> str:
    """Hash a password using Argon2id.

    Example:
        >>> hashed = hash_password("password123")
        >>> hashed.startswith("$argon2id$")
        True
    """
    return password_hasher.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    """Verify a password against a hash.

    Example:
        >>> hashed = hash_password("password123")
        >>> verify_password("password123", hashed)
        True
        >>> verify_password("wrong", hashed)
        False
    """
    return password_hasher.verify(hashed, password)


def needs_rehash(hashed: str) -> bool:
    """Check if a password hash needs to be rehashed."""
    return password_hasher.needs_rehash(hashed)
