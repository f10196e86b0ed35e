"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from commentary.domain.repository.comment import CommentRepository
from commentary.domain.repository.like import LikeRepository
from commentary.domain.repository.post import PostRepository
from commentary.domain.repository.report import ReportRepository

__all__ = [
    "CommentRepository",
    "LikeRepository",
    "PostRepository",
    "ReportRepository",
]
