"""Unit tests for the secure token generator."""

import string

from blogverse.infrastructure.services.token_service import (
    TOKEN_LENGTH,
    SecureTokenGenerator,
    token_generator,
)


def test_default_token_shape():
    token = token_generator.generate()

    assert len(token) == TOKEN_LENGTH == 48
    assert all(c in string.ascii_letters + string.digits for c in token)


def test_tokens_are_unique():
    tokens = {token_generator.generate() for _ in range(1000)}

    assert len(tokens) == 1000


def test_custom_length_and_alphabet():
    generator = SecureTokenGenerator(length=10, alphabet="ab")
    token = generator.generate()

    assert len(token) == 10
    assert set(token) <= {"a", "b"}
