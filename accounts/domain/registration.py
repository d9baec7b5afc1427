"""
Registration domain service - New account use case.

This module contains the business flow for creating an account:
presence checks, password hashing, and the atomic claim of the email
in the account directory.

Concurrency
===========

Hashing is CPU bound (bcrypt, ~250ms at cost 12) and runs in the calling
thread before the directory is touched. The directory's lock is only
held for the uniqueness check and the two inserts, so concurrent
registrations spend almost all of their time in parallel.

The service does not log, retry, or translate errors: DuplicateEmail is
a definitive outcome and the HTTP adapter maps every failure to a
response class.
"""

from dataclasses import dataclass

from .account import Account
from .exceptions import InvalidArgument
from .ports import AccountDirectory, PasswordHasher


@dataclass
class RegistrationService:
    """
    Domain service for account registration.

    Orchestrates the registration flow: field presence checks,
    password hashing, and account creation in the directory.
    """

    directory: AccountDirectory
    hasher: PasswordHasher

    def register(self, username: str, email: str, password: str) -> Account:
        """
        Register a new account.

        Args:
            username: Display name
            email: Email address, stored exactly as given
            password: Plaintext password (hashed before storage)

        Returns:
            The created Account

        Raises:
            InvalidArgument: If any field is empty
            InputTooLong: If the password exceeds the hasher's input limit
            HashingError: If hashing fails
            DuplicateEmail: If email is already registered
        """
        self._require_fields(username=username, email=email, password=password)
        credential_hash = self.hasher.hash(password)
        return self.directory.register(username, email, credential_hash)

    def get_account(self, account_id: str) -> Account:
        """Fetch an account by id; raises AccountNotFound if absent."""
        return self.directory.lookup(account_id)

    def is_email_registered(self, email: str) -> bool:
        return self.directory.exists_by_email(email)

    def _require_fields(self, **fields: str) -> None:
        missing = [name for name, value in fields.items() if not value]
        if missing:
            raise InvalidArgument(f"missing fields: {', '.join(missing)}")
