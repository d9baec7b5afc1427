"""
In-memory account directory - Implements AccountDirectory protocol.

This module provides the process-local account registry. State is
volatile and lost on restart; nothing is persisted.

Concurrency Design:
-------------------
Two dictionaries hold the state:

1. **_accounts**: account id -> Account (primary store)
2. **_ids_by_email**: email -> account id (uniqueness index)

Every access to either dictionary, reads included, happens under a single
threading.Lock. register() performs the uniqueness check and both inserts
inside one critical section, so:

- two concurrent registrations for the same email cannot both pass the check
- no reader ever sees an email in the index without its stored Account

Identifiers are random UUID4 strings generated before the lock is taken,
keeping the critical section to O(1) dictionary operations. A generated
id that loses the race is simply discarded; it is never visible to callers.
"""

import threading
import uuid

from accounts.domain.account import Account
from accounts.domain.exceptions import AccountNotFound, DuplicateEmail, InvalidArgument


class InMemoryAccountDirectory:
    """
    Implements AccountDirectory protocol with process-local dictionaries.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Instances are independent: construct one per application (or per test)
    and inject it where needed.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._accounts: dict[str, Account] = {}
        self._ids_by_email: dict[str, str] = {}

    def register(self, username: str, email: str, credential_hash: bytes) -> Account:
        """
        Atomically create an account if the email is not yet registered.

        Args:
            username: Display name
            email: Natural key for duplicate detection
            credential_hash: Opaque bytes from the credential hasher

        Returns:
            The newly created Account

        Raises:
            InvalidArgument: If email is empty
            DuplicateEmail: If email is already registered
        """
        if not email:
            raise InvalidArgument("email is required")

        account_id = str(uuid.uuid4())

        with self._lock:
            if email in self._ids_by_email:
                raise DuplicateEmail("email already registered")

            account = Account(
                id=account_id,
                username=username,
                email=email,
                credential_hash=bytes(credential_hash),
            )
            self._accounts[account_id] = account
            self._ids_by_email[email] = account_id

        return account

    def lookup(self, account_id: str) -> Account:
        """
        Fetch an account by identifier.

        Account is frozen, so the returned value is safe to share.

        Raises:
            AccountNotFound: If no account has this identifier
        """
        with self._lock:
            account = self._accounts.get(account_id)
        if account is None:
            raise AccountNotFound(account_id)
        return account

    def exists_by_email(self, email: str) -> bool:
        with self._lock:
            return email in self._ids_by_email

    def __len__(self) -> int:
        with self._lock:
            return len(self._accounts)
