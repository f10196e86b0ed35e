"""Application layer DI providers."""

from dishka import Scope, provide

from commentary.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentThreadUseCase,
    ListCommentsUseCase,
    ListUserCommentsUseCase,
    UpdateCommentUseCase,
)
from commentary.application.usecase.like import (
    LikeCommentUseCase,
    UnlikeCommentUseCase,
)
from commentary.application.usecase.report import (
    CreateReportUseCase,
    DismissReportUseCase,
    ListPendingReportsUseCase,
    ResolveReportUseCase,
)
from commentary.domain.service import (
    CommentService,
    LikeService,
    ModerationService,
    ThreadService,
)
from commentary.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        like_service: LikeService,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service,
            thread_service=thread_service,
            like_service=like_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_comment_thread_use_case(
        self, thread_service: ThreadService, like_service: LikeService
    ) -> GetCommentThreadUseCase:
        """Provide get comment thread use case."""
        return GetCommentThreadUseCase(
            thread_service=thread_service, like_service=like_service
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService, like_service: LikeService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service, like_service=like_service
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_comments_use_case(
        self, comment_service: CommentService
    ) -> ListUserCommentsUseCase:
        """Provide list user comments use case."""
        return ListUserCommentsUseCase(comment_service=comment_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(
        self, like_service: LikeService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_comment_use_case(
        self, like_service: LikeService
    ) -> UnlikeCommentUseCase:
        """Provide unlike comment use case."""
        return UnlikeCommentUseCase(like_service=like_service)

    # Report and moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_create_report_use_case(
        self, moderation_service: ModerationService
    ) -> CreateReportUseCase:
        """Provide create report use case."""
        return CreateReportUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_list_pending_reports_use_case(
        self, moderation_service: ModerationService
    ) -> ListPendingReportsUseCase:
        """Provide list pending reports use case."""
        return ListPendingReportsUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_dismiss_report_use_case(
        self, moderation_service: ModerationService
    ) -> DismissReportUseCase:
        """Provide dismiss report use case."""
        return DismissReportUseCase(moderation_service=moderation_service)

    @provide(scope=Scope.REQUEST)
    def get_resolve_report_use_case(
        self, moderation_service: ModerationService
    ) -> ResolveReportUseCase:
        """Provide resolve report use case."""
        return ResolveReportUseCase(moderation_service=moderation_service)
