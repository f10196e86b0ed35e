"""Moderation queue domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from commentary.config import CommentSettings
from commentary.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    ValidationError,
)
from commentary.domain.model import Page, PaginationMeta, Report, ReportView
from commentary.domain.repository import PostRepository, ReportRepository
from commentary.domain.value import (
    CommentId,
    ReportId,
    ReportReason,
    ReportStatus,
    Role,
    UserId,
)

from .base import Service
from .comment_service import CommentService
from .counter_service import CounterService


class ModerationService(Service):
    """Domain service for reports and the moderation queue.

    Reports reference comments by id; comment data is read from the
    comment store when the queue is listed, never copied.
    """

    def __init__(
        self,
        report_repository: ReportRepository,
        post_repository: PostRepository,
        comment_service: CommentService,
        counter_service: CounterService,
        settings: CommentSettings,
    ) -> None:
        """Initialize moderation service.

        Args:
            report_repository: Report repository
            post_repository: Post lookup for titles and slugs
            comment_service: Comment domain service
            counter_service: Counter synchronizer
            settings: Comment settings (reason length limit)
        """
        self.report_repository = report_repository
        self.post_repository = post_repository
        self.comment_service = comment_service
        self.counter_service = counter_service
        self.settings = settings

    async def create_report(
        self,
        comment_id: CommentId,
        reporter_id: UserId,
        category: ReportReason | str,
        reason_text: str | None = None,
    ) -> Report:
        """Report a comment.

        Earlier reports by the same reporter are not checked; each call
        appends a new pending report and bumps the comment's reports_count.
        The comment is hidden from readers once the count reaches
        auto_hide_threshold.

        Raises:
            ValidationError: If category is unknown or reason text too long
            NotFoundError: If comment doesn't exist
        """
        with logfire.span(
            "moderation_service.create_report",
            comment_id=str(comment_id),
            reporter_id=str(reporter_id),
        ):
            try:
                category = ReportReason(category)
            except ValueError:
                raise ValidationError(f"Unknown report category: {category}")

            if reason_text is not None:
                reason_text = reason_text.strip() or None
            if reason_text and len(reason_text) > self.settings.max_reason_length:
                raise ValidationError(
                    f"Reason cannot exceed {self.settings.max_reason_length} characters"
                )

            await self.comment_service.get_comment(comment_id)

            report = Report(
                id=ReportId(uuid4()),
                comment_id=comment_id,
                reporter_id=reporter_id,
                reason_category=category,
                reason_text=reason_text,
                status=ReportStatus.PENDING,
                created_at=datetime.now(),
            )
            saved = await self.report_repository.save(report)
            count = await self.counter_service.increment_reports(
                comment_id, hide_at=self.settings.auto_hide_threshold
            )
            if count == self.settings.auto_hide_threshold:
                logfire.warn(
                    "Comment hidden after repeated reports",
                    comment_id=str(comment_id),
                    reports_count=count,
                )

            logfire.info(
                "Comment reported",
                report_id=str(saved.id),
                comment_id=str(comment_id),
                category=category.value,
            )
            return saved

    async def get_report(self, report_id: ReportId) -> Report:
        """Get a report by ID.

        Raises:
            NotFoundError: If report doesn't exist
        """
        report = await self.report_repository.find_by_id(report_id)
        if report is None:
            logfire.warn("Report not found", report_id=str(report_id))
            raise NotFoundError("Report", str(report_id))
        return report

    async def list_pending_reports(self, page: int, limit: int) -> Page[ReportView]:
        """Get one page of the moderation queue, oldest report first.

        Each report is joined with its comment's content and author and with
        the post's title and slug, using one batch lookup per source.
        """
        with logfire.span(
            "moderation_service.list_pending_reports", page=page, limit=limit
        ):
            self.comment_service.validate_paging(page, limit)

            total = await self.report_repository.count_pending()
            reports = await self.report_repository.find_pending(
                limit=limit, offset=(page - 1) * limit
            )

            comments = await self.comment_service.get_comments_by_ids(
                list({report.comment_id for report in reports})
            )
            posts = await self.post_repository.find_summaries(
                list({comment.post_id for comment in comments.values()})
            )

            views: list[ReportView] = []
            for report in reports:
                comment = comments.get(report.comment_id)
                if comment is None:
                    logfire.error(
                        "Reported comment missing",
                        report_id=str(report.id),
                        comment_id=str(report.comment_id),
                    )
                    continue
                post = posts.get(comment.post_id)
                views.append(
                    ReportView(
                        report=report,
                        comment_content=comment.content,
                        comment_author_id=comment.author_id,
                        comment_is_deleted=comment.is_deleted,
                        post_id=comment.post_id,
                        post_title=post.title if post else None,
                        post_slug=post.slug if post else None,
                    )
                )

            logfire.info("Pending reports retrieved", count=len(views), total=total)
            return Page[ReportView](
                items=views, meta=PaginationMeta.build(page, limit, total)
            )

    async def dismiss_report(self, report_id: ReportId) -> None:
        """Dismiss a report.

        Dismissing a pending report makes its comment visible again if
        reports had hidden it. Dismissing an already dismissed report
        succeeds and changes nothing; a resolved report stays resolved.

        Raises:
            NotFoundError: If report doesn't exist
        """
        with logfire.span(
            "moderation_service.dismiss_report", report_id=str(report_id)
        ):
            report = await self.get_report(report_id)
            await self.report_repository.mark_dismissed(report_id)
            if report.status is ReportStatus.PENDING:
                await self.comment_service.set_visibility(report.comment_id, True)
            logfire.info(
                "Report dismissed",
                report_id=str(report_id),
                previous_status=report.status.value,
            )

    async def resolve_report_by_deleting_comment(
        self, report_id: ReportId, moderator_id: UserId
    ) -> None:
        """Resolve a report by soft-deleting the reported comment.

        Only this report is resolved. Other pending reports on the same
        comment stay pending. If the delete fails the report stays pending.
        Resolving an already resolved report does nothing.

        Raises:
            NotFoundError: If report or comment doesn't exist
            BusinessRuleViolationError: If the report was dismissed
        """
        with logfire.span(
            "moderation_service.resolve_report_by_deleting_comment",
            report_id=str(report_id),
            moderator_id=str(moderator_id),
        ):
            report = await self.get_report(report_id)
            if report.status.is_terminal:
                if report.status is ReportStatus.DISMISSED:
                    logfire.warn(
                        "Resolve on dismissed report", report_id=str(report_id)
                    )
                    raise BusinessRuleViolationError(
                        f"Report {report_id} has already been dismissed"
                    )
                logfire.info("Report already resolved", report_id=str(report_id))
                return

            await self.comment_service.soft_delete_comment(
                report.comment_id, moderator_id, Role.MODERATOR
            )
            await self.report_repository.mark_resolved(report_id)

            logfire.info(
                "Report resolved by deleting comment",
                report_id=str(report_id),
                comment_id=str(report.comment_id),
            )
