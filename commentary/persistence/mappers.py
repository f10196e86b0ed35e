"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from commentary.domain.model import Comment, Like, PostSummary, Report
from commentary.domain.value import (
    CommentId,
    LikeId,
    PostId,
    ReportId,
    ReportReason,
    ReportStatus,
    UserId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        content=row["content"],
        parent_id=CommentId(_uuid(row["parent_id"])) if row.get("parent_id") else None,
        path=[CommentId(_uuid(ancestor)) for ancestor in row.get("path") or []],
        depth=row["depth"],
        is_edited=row["is_edited"],
        edited_at=row.get("edited_at"),
        is_deleted=row["is_deleted"],
        deleted_at=row.get("deleted_at"),
        is_visible=row["is_visible"],
        likes_count=row["likes_count"],
        reports_count=row["reports_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion
    """
    return comment.model_dump()


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model.

    Args:
        row: Database row as dict

    Returns:
        Report domain model
    """
    return Report(
        id=ReportId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        reason_category=ReportReason(row["reason_category"]),
        reason_text=row.get("reason_text"),
        status=ReportStatus(row["status"]),
        created_at=row["created_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    """Convert Report domain model to database dict.

    Enums are dumped as their string values for the Postgres enum columns.
    """
    return report.model_dump(mode="python") | {
        "reason_category": report.reason_category.value,
        "status": report.status.value,
    }


def row_to_like(row: Dict[str, Any]) -> Like:
    """Convert database row to Like domain model."""
    return Like(
        id=LikeId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        created_at=row["created_at"],
    )


def like_to_dict(like: Like) -> Dict[str, Any]:
    """Convert Like domain model to database dict."""
    return like.model_dump()


def row_to_post_summary(row: Dict[str, Any]) -> PostSummary:
    """Convert database row to PostSummary."""
    return PostSummary(
        id=PostId(_uuid(row["id"])),
        title=row["title"],
        slug=row["slug"],
    )
