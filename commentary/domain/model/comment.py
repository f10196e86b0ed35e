"""Comment entity.

Comments are threaded discussions under a post with a bounded depth.
Ancestry is stored as a materialized path: the ordered list of ancestor ids
from the root down to the direct parent, so "descendants of X" is simply
"every comment whose path contains X".
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from commentary.domain.model.common import DomainModel
from commentary.domain.value import CommentId, PostId, UserId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for root comments)
    - path: Ancestor ids, root first, direct parent last ([] for roots)
    - depth: Nesting level, always len(path)

    Comments are never hard-deleted. A soft delete replaces the content with
    a tombstone and leaves the comment (and its replies) in place.
    Comments with too many reports are hidden (is_visible False) until a
    moderator dismisses a report against them.
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    content: str = Field(min_length=1)
    parent_id: Optional[CommentId] = None
    path: list[CommentId] = Field(default_factory=list)
    depth: int = Field(default=0, ge=0)
    is_edited: bool = False
    edited_at: Optional[datetime] = None
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None
    is_visible: bool = True
    likes_count: int = Field(default=0, ge=0)
    reports_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def validate_threading(self) -> "Comment":
        """Check that path, depth and parent_id describe the same ancestry."""
        if self.depth != len(self.path):
            raise ValueError("depth must equal the length of path")
        if len(set(self.path)) != len(self.path) or self.id in self.path:
            raise ValueError("path must be a strict ancestor chain")
        if self.path:
            if self.parent_id != self.path[-1]:
                raise ValueError("parent_id must be the last entry of path")
        elif self.parent_id is not None:
            raise ValueError("root comments cannot have a parent_id")
        return self

    @property
    def is_root(self) -> bool:
        return self.depth == 0

    def can_reply(self, max_depth: int) -> bool:
        """Whether a reply to this comment would stay within max_depth levels."""
        return self.depth < max_depth - 1

    def child_path(self) -> list[CommentId]:
        """Path for a direct reply to this comment."""
        return [*self.path, self.id]

    def is_listed(self, include_deleted: bool, include_hidden: bool) -> bool:
        """Whether this comment passes a listing's deleted and hidden filters."""
        if self.is_deleted and not include_deleted:
            return False
        return self.is_visible or include_hidden
