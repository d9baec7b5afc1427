"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Isolated in-memory account directories
- A low-cost bcrypt hasher (cost 4) to keep tests fast
- Registration service wiring
"""

import pytest

from accounts.adapters.repository.memory import InMemoryAccountDirectory
from accounts.domain.hashing import BcryptHasher
from accounts.domain.registration import RegistrationService

# bcrypt's minimum work factor; production uses BCRYPT_COST.
FAST_ROUNDS = 4


@pytest.fixture
def directory() -> InMemoryAccountDirectory:
    """Fresh, empty directory for each test."""
    return InMemoryAccountDirectory()


@pytest.fixture
def hasher() -> BcryptHasher:
    """bcrypt hasher with minimal cost."""
    return BcryptHasher(rounds=FAST_ROUNDS)


@pytest.fixture
def service(directory: InMemoryAccountDirectory, hasher: BcryptHasher) -> RegistrationService:
    """Registration service over the per-test directory."""
    return RegistrationService(directory=directory, hasher=hasher)
