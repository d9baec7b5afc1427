"""
Port interfaces - Protocol definitions for infrastructure abstraction.

This module defines the interfaces (ports) that the registration use case
requires. Adapters implement these protocols via structural subtyping.
"""

from typing import Protocol

from .account import Account


class AccountDirectory(Protocol):
    """Port interface for the account registry."""

    def register(self, username: str, email: str, credential_hash: bytes) -> Account:
        """
        Atomically create an account if the email is not yet registered.

        The uniqueness check and both inserts (by id and by email) happen
        in a single critical section: concurrent calls with the same email
        yield exactly one success.

        Args:
            username: Display name, not required to be unique
            email: Natural key, must be non-empty and unique
            credential_hash: Opaque bytes from the credential hasher

        Returns:
            The newly created Account

        Raises:
            InvalidArgument: If email is empty
            DuplicateEmail: If email is already registered
        """
        ...

    def lookup(self, account_id: str) -> Account:
        """
        Fetch an account by identifier.

        Raises:
            AccountNotFound: If no account has this identifier
        """
        ...

    def exists_by_email(self, email: str) -> bool:
        """Return True if an account is registered under this email."""
        ...

    def __len__(self) -> int:
        """Number of registered accounts."""
        ...


class PasswordHasher(Protocol):
    """Port interface for one-way credential hashing."""

    def hash(self, plaintext: str) -> bytes:
        """
        Hash a plaintext secret with an embedded random salt.

        Raises:
            InputTooLong: If plaintext exceeds the primitive's input limit
            HashingError: If the primitive fails
        """
        ...

    def verify(self, credential_hash: bytes, plaintext: str) -> bool:
        """
        Check a plaintext secret against a stored hash in constant time.

        Returns:
            True on match, False on mismatch

        Raises:
            VerificationError: If credential_hash is malformed
        """
        ...
