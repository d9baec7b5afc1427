"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Depends, Request

from accounts.adapters.repository.memory import InMemoryAccountDirectory
from accounts.domain.hashing import BcryptHasher
from accounts.domain.registration import RegistrationService


def get_directory(request: Request) -> InMemoryAccountDirectory:
    """
    Get the account directory from app state.

    The directory is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.directory


def get_hasher(request: Request) -> BcryptHasher:
    """Get the credential hasher from app state."""
    return request.app.state.hasher


def get_registration_service(
    directory: InMemoryAccountDirectory = Depends(get_directory),
    hasher: BcryptHasher = Depends(get_hasher),
) -> RegistrationService:
    """
    Create registration service with injected dependencies.

    Wires together the directory and hasher for the domain service.
    """
    return RegistrationService(directory=directory, hasher=hasher)
