"""
Domain exceptions - Semantic error types for accounts and credentials.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
Callers decide how each one surfaces (see the v1 routes).
"""


class AccountError(Exception):
    """Base class for account directory and registration errors."""

    pass


class InvalidArgument(AccountError):
    """A required field is empty or missing."""

    pass


class DuplicateEmail(AccountError):
    """Email is already registered to another account."""

    pass


class AccountNotFound(AccountError):
    """No account exists for the requested identifier."""

    pass


class CredentialError(Exception):
    """Base class for credential hashing errors."""

    pass


class HashingError(CredentialError):
    """The hashing primitive failed unexpectedly."""

    pass


class InputTooLong(CredentialError):
    """Plaintext exceeds the maximum input length of the hashing primitive."""

    pass


class VerificationError(CredentialError):
    """Stored hash is malformed and cannot be verified against."""

    pass
