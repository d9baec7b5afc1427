"""
API v1 routes.

Defines REST endpoints for the account registration API.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, status

from accounts.api.dependencies import get_registration_service
from accounts.api.models import CreateUserRequest, CreateUserResponse, ErrorResponse
from accounts.domain.exceptions import (
    CredentialError,
    DuplicateEmail,
    InputTooLong,
    InvalidArgument,
)
from accounts.domain.registration import RegistrationService

logger = logging.getLogger(__name__)

router = APIRouter(tags=["v1"])


@router.post(
    "/users",
    response_model=CreateUserResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"model": ErrorResponse, "description": "Missing field or password too long"},
        409: {"model": ErrorResponse, "description": "Email already registered"},
        422: {"description": "Validation error"},
        500: {"model": ErrorResponse, "description": "Internal error"},
    },
    summary="Create a user account",
    description="Submit username, email and password to create an account. "
    "The password is stored as a bcrypt hash and never returned.",
)
def create_user(
    request_data: CreateUserRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> CreateUserResponse:
    """
    Create a user account.

    - **username**: Display name
    - **email**: Email address, unique across accounts
    - **password**: Password (at most 72 bytes)

    Declared sync so FastAPI runs it on the thread pool: bcrypt hashing
    must not block the event loop.
    """
    try:
        account = service.register(
            request_data.username, request_data.email, request_data.password
        )
    except DuplicateEmail:
        logger.info("Registration rejected: email already registered")
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="email already registered",
        ) from None
    except InvalidArgument:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="missing fields",
        ) from None
    except InputTooLong:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="password too long",
        ) from None
    except CredentialError:
        logger.exception("Password hashing failed")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="internal error",
        ) from None

    logger.info("Account created: %s", account.id)
    return CreateUserResponse(id=account.id, username=account.username, email=account.email)
