"""Response items shared by the comment use cases."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from commentary.domain.model import Comment, CommentNode, PaginationMeta
from commentary.domain.value import CommentId


class PaginationMetaItem(BaseModel):
    """Pagination metadata in responses."""

    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool

    @classmethod
    def from_domain(cls, meta: PaginationMeta) -> PaginationMetaItem:
        return cls(**meta.model_dump())


class CommentItem(BaseModel):
    """Comment resource."""

    comment_id: str
    post_id: str
    author_id: str
    content: str
    parent_id: str | None
    path: list[str]
    depth: int
    is_edited: bool
    edited_at: datetime | None
    is_deleted: bool
    deleted_at: datetime | None
    is_visible: bool
    likes_count: int
    reports_count: int
    created_at: datetime
    updated_at: datetime
    is_liked: bool = False


class CommentNodeItem(CommentItem):
    """Comment resource with its replies attached."""

    replies: list[CommentNodeItem]
    has_replies: bool
    can_reply: bool


CommentNodeItem.model_rebuild()


def comment_to_item(
    comment: Comment, liked_ids: set[CommentId] | None = None
) -> CommentItem:
    """Convert a domain comment to its response item."""
    return CommentItem(**_comment_fields(comment, liked_ids))


def node_to_item(
    node: CommentNode, liked_ids: set[CommentId] | None = None
) -> CommentNodeItem:
    """Convert an assembled thread node (recursively) to its response item."""
    return CommentNodeItem(
        **_comment_fields(node.comment, liked_ids),
        replies=[node_to_item(reply, liked_ids) for reply in node.replies],
        has_replies=node.has_replies,
        can_reply=node.can_reply,
    )


def _comment_fields(comment: Comment, liked_ids: set[CommentId] | None) -> dict:
    return {
        "comment_id": str(comment.id),
        "post_id": str(comment.post_id),
        "author_id": str(comment.author_id),
        "content": comment.content,
        "parent_id": str(comment.parent_id) if comment.parent_id else None,
        "path": [str(ancestor) for ancestor in comment.path],
        "depth": comment.depth,
        "is_edited": comment.is_edited,
        "edited_at": comment.edited_at,
        "is_deleted": comment.is_deleted,
        "deleted_at": comment.deleted_at,
        "is_visible": comment.is_visible,
        "likes_count": comment.likes_count,
        "reports_count": comment.reports_count,
        "created_at": comment.created_at,
        "updated_at": comment.updated_at,
        "is_liked": comment.id in liked_ids if liked_ids else False,
    }
