"""Like entity.

Each user can like a comment at most once.
"""

from datetime import datetime

from pydantic import Field

from commentary.domain.model.common import DomainModel
from commentary.domain.value import CommentId, LikeId, UserId


class Like(DomainModel):
    """A user's like on a comment (unique per user and comment)."""

    id: LikeId
    user_id: UserId
    comment_id: CommentId
    created_at: datetime = Field(default_factory=datetime.now)
