"""
Account entity - The stored user record.

Accounts are immutable once created: the directory hands out the same
frozen value to every reader, so no caller can alter stored state.
"""

from dataclasses import dataclass, field


@dataclass(frozen=True, slots=True)
class Account:
    """
    A registered account.

    The credential hash is excluded from repr and comparison: it is opaque,
    never transmitted outward, and only meaningful to the credential hasher.
    """

    id: str
    username: str
    email: str
    credential_hash: bytes = field(repr=False, compare=False)
