"""Mock persistence providers for testing."""

from dishka import Scope, provide

from commentary.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    ReportRepository,
)
from commentary.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryLikeRepository,
    InMemoryPostRepository,
    InMemoryReportRepository,
)
from commentary.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    APP scope: state lives as long as the container, so HTTP requests in an
    e2e test see each other's writes. Every test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_post_repository(self) -> PostRepository:
        """Provide in-memory post lookup."""
        return InMemoryPostRepository()

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_report_repository(self) -> ReportRepository:
        """Provide in-memory report repository."""
        return InMemoryReportRepository()

    @provide(scope=Scope.APP)
    def get_like_repository(self) -> LikeRepository:
        """Provide in-memory like repository."""
        return InMemoryLikeRepository()
