"""Domain model entities."""

from commentary.domain.model.comment import Comment
from commentary.domain.model.common import DomainModel, Page, PaginationMeta
from commentary.domain.model.like import Like
from commentary.domain.model.post import PostSummary
from commentary.domain.model.report import Report, ReportView
from commentary.domain.model.thread import CommentNode

__all__ = [
    "Comment",
    "CommentNode",
    "DomainModel",
    "Like",
    "Page",
    "PaginationMeta",
    "PostSummary",
    "Report",
    "ReportView",
]
