"""Domain layer DI providers."""

from dishka import Scope, provide

from commentary.config import AuthSettings, CommentSettings
from commentary.domain.repository import (
    CommentRepository,
    LikeRepository,
    PostRepository,
    ReportRepository,
)
from commentary.domain.service import (
    CommentService,
    CounterService,
    JWTService,
    LikeService,
    ModerationService,
    ThreadService,
)
from commentary.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        post_repository: PostRepository,
        settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            post_repository=post_repository,
            settings=settings,
        )

    @provide
    def get_counter_service(
        self, comment_repository: CommentRepository
    ) -> CounterService:
        """Provide counter synchronizer."""
        return CounterService(comment_repository=comment_repository)

    @provide
    def get_thread_service(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> ThreadService:
        """Provide thread assembler."""
        return ThreadService(comment_service=comment_service, settings=settings)

    @provide
    def get_moderation_service(
        self,
        report_repository: ReportRepository,
        post_repository: PostRepository,
        comment_service: CommentService,
        counter_service: CounterService,
        settings: CommentSettings,
    ) -> ModerationService:
        """Provide moderation queue domain service."""
        return ModerationService(
            report_repository=report_repository,
            post_repository=post_repository,
            comment_service=comment_service,
            counter_service=counter_service,
            settings=settings,
        )

    @provide
    def get_like_service(
        self,
        like_repository: LikeRepository,
        comment_service: CommentService,
        counter_service: CounterService,
    ) -> LikeService:
        """Provide like domain service."""
        return LikeService(
            like_repository=like_repository,
            comment_service=comment_service,
            counter_service=counter_service,
        )
