"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
The model only requires each field to be present; empty values are left to
the registration service, which rejects them with a 400.
"""

from pydantic import BaseModel, Field


class CreateUserRequest(BaseModel):
    """Request model for account registration."""

    username: str = Field(..., description="Display name")
    email: str = Field(..., description="Email address (must be unique)")
    password: str = Field(..., description="Plaintext password (hashed before storage)")


class CreateUserResponse(BaseModel):
    """Public representation of a created account."""

    id: str
    username: str
    email: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: str
    accounts: int
