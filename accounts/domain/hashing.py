"""
Credential hasher - bcrypt-backed one-way password hashing.

Hashing and verification are deliberately slow (adaptive cost) and must
run outside the account directory's critical section. The registration
service calls hash() before handing the resulting bytes to the directory.

bcrypt only considers the first 72 bytes of its input. Rather than let
longer secrets be silently truncated, hash() rejects them with
InputTooLong. verify() still runs bcrypt on the first 72 bytes (so a
malformed hash is reported) but never reports a match for them.
"""

import bcrypt

from .exceptions import HashingError, InputTooLong, VerificationError

# bcrypt work factor, fixed so every stored hash has the same attacker cost.
BCRYPT_COST = 12

# Maximum number of UTF-8 bytes bcrypt reads from a password.
MAX_PLAINTEXT_BYTES = 72


class BcryptHasher:
    """
    Implements PasswordHasher protocol via bcrypt.

    Uses structural subtyping - no explicit inheritance from Protocol.
    Stateless apart from the work factor; rounds is only lowered by tests.
    """

    def __init__(self, rounds: int = BCRYPT_COST) -> None:
        self._rounds = rounds

    def hash(self, plaintext: str) -> bytes:
        """
        Hash a plaintext secret with a fresh random salt.

        Args:
            plaintext: Secret to hash (may be empty)

        Returns:
            Modular-crypt bcrypt hash as bytes ($2b$...)

        Raises:
            InputTooLong: If plaintext is longer than 72 UTF-8 bytes
            HashingError: If bcrypt fails
        """
        encoded = plaintext.encode("utf-8")
        if len(encoded) > MAX_PLAINTEXT_BYTES:
            raise InputTooLong(f"password exceeds {MAX_PLAINTEXT_BYTES} bytes")

        try:
            return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self._rounds))
        except ValueError as e:
            raise HashingError("password hashing failed") from e

    def verify(self, credential_hash: bytes, plaintext: str) -> bool:
        """
        Verify a plaintext secret against a stored bcrypt hash.

        bcrypt.checkpw() re-derives the hash with the embedded salt and
        compares in constant time. Oversized plaintext still goes through
        bcrypt (on its first 72 bytes) so a malformed hash is reported and
        timing matches the normal path, but it never counts as a match.

        Raises:
            VerificationError: If credential_hash is not a valid bcrypt hash
        """
        encoded = plaintext.encode("utf-8")
        oversized = len(encoded) > MAX_PLAINTEXT_BYTES

        try:
            matched = bcrypt.checkpw(encoded[:MAX_PLAINTEXT_BYTES], credential_hash)
        except ValueError as e:
            raise VerificationError("malformed credential hash") from e

        return matched and not oversized
