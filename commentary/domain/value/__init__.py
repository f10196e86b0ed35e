"""Domain value objects."""

from commentary.domain.value.identifiers import (
    CommentId,
    LikeId,
    PostId,
    ReportId,
    UserId,
)
from commentary.domain.value.types import (
    AuthorizationDecision,
    Identity,
    ReportReason,
    ReportStatus,
    Role,
    SortMode,
)

__all__ = [
    # Identifiers
    "CommentId",
    "LikeId",
    "PostId",
    "ReportId",
    "UserId",
    # Types
    "AuthorizationDecision",
    "Identity",
    "ReportReason",
    "ReportStatus",
    "Role",
    "SortMode",
]
