"""Report entity and its moderator-facing view."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentary.domain.model.common import DomainModel
from commentary.domain.value import (
    CommentId,
    PostId,
    ReportId,
    ReportReason,
    ReportStatus,
    UserId,
)


class Report(DomainModel):
    """A user's flag on a comment, awaiting a moderator decision.

    Business rules:
    - Status only moves pending -> dismissed or pending -> resolved
    - Several reports may reference the same comment, even from the same reporter
    """

    id: ReportId
    comment_id: CommentId
    reporter_id: UserId
    reason_category: ReportReason
    reason_text: Optional[str] = None
    status: ReportStatus = ReportStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_pending(self) -> bool:
        return self.status is ReportStatus.PENDING


class ReportView(DomainModel):
    """A report joined with the comment and post it concerns."""

    report: Report
    comment_content: str
    comment_author_id: UserId
    comment_is_deleted: bool
    post_id: PostId
    post_title: Optional[str] = None
    post_slug: Optional[str] = None
