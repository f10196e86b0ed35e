"""Unit tests for domain error to HTTP status mapping."""

import pytest
from fastapi import HTTPException

from commentary.config import AuthSettings
from commentary.domain.error import (
    BusinessRuleViolationError,
    ContentDeletedException,
    DepthExceededError,
    DomainError,
    ForbiddenError,
    NotFoundError,
    UnavailableError,
    ValidationError,
)
from commentary.domain.service import JWTService
from commentary.domain.value import Role
from commentary.interface.api.auth import require_identity
from commentary.interface.api.errors import status_for


class TestStatusFor:
    """Tests for status_for."""

    @pytest.mark.parametrize(
        "error,expected",
        [
            (ValidationError("bad"), 400),
            (NotFoundError("Comment", "x"), 404),
            (ContentDeletedException("comment", "x"), 404),
            (ForbiddenError("edit", "comment", "x", "u"), 403),
            (BusinessRuleViolationError("already liked"), 409),
            (DepthExceededError("x", 3), 422),
            (UnavailableError("down"), 503),
            (DomainError("unexpected"), 500),
        ],
    )
    def test_maps_error_to_status(self, error, expected):
        assert status_for(error) == expected


class TestRequireIdentity:
    """Tests for require_identity."""

    def test_missing_token_is_unauthorized(self):
        jwt_service = JWTService(AuthSettings())

        with pytest.raises(HTTPException) as exc_info:
            require_identity(jwt_service, None, "create comments")

        assert exc_info.value.status_code == 401
        assert "create comments" in exc_info.value.detail

    def test_valid_token_carries_role(self):
        jwt_service = JWTService(AuthSettings())
        token = jwt_service.create_token(
            "7f1c5f0e-6a55-4c2f-9d4e-3c1b2a0f9e8d", "mod", Role.MODERATOR
        )

        identity = require_identity(jwt_service, token, "moderate")

        assert str(identity.user_id) == "7f1c5f0e-6a55-4c2f-9d4e-3c1b2a0f9e8d"
        assert identity.is_moderator
