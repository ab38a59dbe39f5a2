"""BlogVerse - authentication core for the BlogVerse publishing platform.

Signup, email verification, sign-in and password recovery.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
