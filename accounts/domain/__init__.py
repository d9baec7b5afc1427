"""
Domain layer - Account registration core.

This package contains the account entity, the credential hasher, the
registration use case, and the port interfaces that adapters implement
(the in-memory account directory lives under accounts.adapters).
"""

from .account import Account
from .exceptions import (
    AccountError,
    AccountNotFound,
    CredentialError,
    DuplicateEmail,
    HashingError,
    InputTooLong,
    InvalidArgument,
    VerificationError,
)
from .hashing import BcryptHasher
from .ports import AccountDirectory, PasswordHasher
from .registration import RegistrationService

__all__ = [
    "Account",
    "AccountDirectory",
    "AccountError",
    "AccountNotFound",
    "BcryptHasher",
    "CredentialError",
    "DuplicateEmail",
    "HashingError",
    "InputTooLong",
    "InvalidArgument",
    "PasswordHasher",
    "RegistrationService",
    "VerificationError",
]
