"""Domain services."""

from .authorization import authorize, ensure_authorized
from .base import Service
from .comment_service import CommentService
from .counter_service import CounterService
from .jwt_service import JWTService
from .like_service import LikeService
from .moderation_service import ModerationService
from .thread_service import ThreadService

__all__ = [
    "CommentService",
    "CounterService",
    "JWTService",
    "LikeService",
    "ModerationService",
    "Service",
    "ThreadService",
    "authorize",
    "ensure_authorized",
]
