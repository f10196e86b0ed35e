"""Unit tests for authorize / ensure_authorized."""

from uuid import uuid4

import pytest

from commentary.domain.error import ForbiddenError
from commentary.domain.service import authorize, ensure_authorized
from commentary.domain.value import AuthorizationDecision, Role, UserId


class TestAuthorize:
    def test_owner_is_allowed(self):
        owner = UserId(uuid4())

        assert authorize(owner, Role.USER, owner) is AuthorizationDecision.ALLOWED

    def test_other_user_is_denied(self):
        decision = authorize(UserId(uuid4()), Role.USER, UserId(uuid4()))

        assert decision is AuthorizationDecision.DENIED

    def test_moderator_is_allowed_on_others_resources(self):
        decision = authorize(UserId(uuid4()), Role.MODERATOR, UserId(uuid4()))

        assert decision is AuthorizationDecision.ALLOWED

    def test_moderator_is_denied_on_owner_only_actions(self):
        decision = authorize(
            UserId(uuid4()), Role.MODERATOR, UserId(uuid4()), allow_moderator=False
        )

        assert decision is AuthorizationDecision.DENIED

    def test_ownerless_resource_is_moderator_only(self):
        user = UserId(uuid4())

        assert authorize(user, Role.USER, None) is AuthorizationDecision.DENIED
        assert authorize(user, Role.MODERATOR, None) is AuthorizationDecision.ALLOWED


class TestEnsureAuthorized:
    def test_raises_forbidden_when_denied(self):
        with pytest.raises(ForbiddenError, match="not authorized to delete"):
            ensure_authorized(
                UserId(uuid4()),
                Role.USER,
                UserId(uuid4()),
                action="delete",
                resource="comment",
                resource_id="abc",
            )

    def test_passes_when_allowed(self):
        owner = UserId(uuid4())

        ensure_authorized(
            owner,
            Role.USER,
            owner,
            action="edit",
            resource="comment",
            resource_id="abc",
        )
