"""Builders for domain objects used across tests."""

from datetime import datetime, timedelta
from uuid import UUID, uuid4

from commentary.config import Settings
from commentary.domain.model import Comment
from commentary.domain.value import CommentId, PostId, UserId
from commentary.util.jwt import create_token

BASE_TIME = datetime(2026, 1, 1, 12, 0, 0)


def make_comment(
    post_id: PostId,
    parent: Comment | None = None,
    *,
    author_id: UserId | None = None,
    content: str = "A comment",
    minutes: int = 0,
    likes_count: int = 0,
) -> Comment:
    """Build a comment directly, bypassing the service.

    ``minutes`` offsets created_at from a fixed base time so ordering in
    tests is deterministic.
    """
    path = parent.child_path() if parent else []
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id or UserId(uuid4()),
        content=content,
        parent_id=parent.id if parent else None,
        path=path,
        depth=len(path),
        likes_count=likes_count,
        created_at=created_at,
        updated_at=created_at,
    )


def auth_cookies(user_id: UUID | None = None, role: str = "user") -> dict[str, str]:
    """Cookies carrying a signed token for an authenticated request."""
    token = create_token(str(user_id or uuid4()), "tester", role, Settings().auth)
    return {"auth_token": token}
