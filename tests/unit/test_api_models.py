"""
Unit tests for API request/response models.

Tests Pydantic model validation for the account creation endpoint.
"""

import pytest
from pydantic import ValidationError

from accounts.api.models import CreateUserRequest, CreateUserResponse, ErrorResponse


class TestCreateUserRequest:
    """Tests for CreateUserRequest model."""

    def test_valid_request(self) -> None:
        """All three fields are accepted as given."""
        request = CreateUserRequest(username="alice", email="a@x.com", password="pw1")
        assert request.username == "alice"
        assert request.email == "a@x.com"
        assert request.password == "pw1"

    def test_email_case_preserved(self) -> None:
        """Email is not normalized by the model."""
        request = CreateUserRequest(username="alice", email="A@X.COM", password="pw1")
        assert request.email == "A@X.COM"

    @pytest.mark.parametrize("field", ["username", "email", "password"])
    def test_empty_field_passes_model(self, field: str) -> None:
        """Empty strings reach the service, which rejects them with 400."""
        data = {"username": "alice", "email": "a@x.com", "password": "pw1", field: ""}
        request = CreateUserRequest(**data)
        assert getattr(request, field) == ""

    def test_missing_field_rejected(self) -> None:
        """Missing password raises ValidationError."""
        with pytest.raises(ValidationError):
            CreateUserRequest(username="alice", email="a@x.com")  # type: ignore[call-arg]

    def test_long_password_accepted_by_model(self) -> None:
        """Length limit is enforced by the hasher, not the model."""
        request = CreateUserRequest(username="alice", email="a@x.com", password="x" * 200)
        assert len(request.password) == 200


class TestResponseModels:
    """Tests for response models."""

    def test_create_user_response_fields(self) -> None:
        """Response exposes only public account fields."""
        assert set(CreateUserResponse.model_fields) == {"id", "username", "email"}

    def test_error_response(self) -> None:
        """ErrorResponse carries a detail string."""
        assert ErrorResponse(detail="email already registered").detail == "email already registered"
