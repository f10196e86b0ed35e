"""Thread assembly service."""

from collections import defaultdict

import logfire

from commentary.config import CommentSettings
from commentary.domain.model import Comment, CommentNode
from commentary.domain.error import NotFoundError
from commentary.domain.value import CommentId

from .base import Service
from .comment_service import CommentService


class ThreadService(Service):
    """Rebuilds nested reply trees from the flat comment store.

    All descendants of a batch of comments are fetched in one query and
    attached in memory, so a page of threads costs a fixed number of queries
    however deep or wide it is. Nested replies are not paginated: each root
    comes back with its whole subtree.
    """

    def __init__(
        self, comment_service: CommentService, settings: CommentSettings
    ) -> None:
        """Initialize thread service.

        Args:
            comment_service: Comment domain service
            settings: Comment settings (max_depth)
        """
        self.comment_service = comment_service
        self.settings = settings

    async def assemble(
        self,
        roots: list[Comment],
        include_deleted: bool = True,
        include_hidden: bool = False,
    ) -> list[CommentNode]:
        """Attach reply subtrees to a page of comments.

        Order of ``roots`` is kept; replies are ordered oldest first. A reply
        that fails the filters is left out together with everything below it.

        Args:
            roots: Comments to hydrate (usually one page of root comments)
            include_deleted: Whether tombstoned replies are kept
            include_hidden: Whether replies hidden by reports are kept

        Returns:
            One node per input comment
        """
        with logfire.span("thread_service.assemble", root_count=len(roots)):
            descendants = await self.comment_service.get_descendants_of_many(
                [root.id for root in roots]
            )
            descendants = self.prune(descendants, include_deleted, include_hidden)
            children = self.group_by_parent(descendants)
            return [self._attach(root, children) for root in roots]

    async def build_thread(
        self, comment_id: CommentId, include_hidden: bool = False
    ) -> CommentNode:
        """Get one comment with its full reply subtree.

        Raises:
            NotFoundError: If comment doesn't exist, or is hidden and
                include_hidden is False
        """
        with logfire.span("thread_service.build_thread", comment_id=str(comment_id)):
            comment = await self.comment_service.get_comment(comment_id)
            if not comment.is_listed(True, include_hidden):
                logfire.warn("Hidden comment requested", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            descendants = await self.comment_service.get_descendants(comment_id)
            descendants = self.prune(descendants, True, include_hidden)
            return self._attach(comment, self.group_by_parent(descendants))

    @staticmethod
    def prune(
        comments: list[Comment], include_deleted: bool, include_hidden: bool
    ) -> list[Comment]:
        """Drop comments that fail the filters, and all of their descendants."""
        dropped = {
            c.id for c in comments if not c.is_listed(include_deleted, include_hidden)
        }
        if not dropped:
            return comments
        return [
            c
            for c in comments
            if c.id not in dropped and not dropped.intersection(c.path)
        ]

    @staticmethod
    def group_by_parent(
        comments: list[Comment],
    ) -> dict[CommentId, list[Comment]]:
        """Group comments by parent_id, each group oldest first."""
        children: dict[CommentId, list[Comment]] = defaultdict(list)
        for comment in comments:
            if comment.parent_id is not None:
                children[comment.parent_id].append(comment)
        for group in children.values():
            group.sort(key=lambda c: (c.created_at, str(c.id)))
        return children

    def _attach(
        self, comment: Comment, children: dict[CommentId, list[Comment]]
    ) -> CommentNode:
        direct = children.get(comment.id, [])
        can_reply = comment.can_reply(self.settings.max_depth)
        replies = [self._attach(child, children) for child in direct] if can_reply else []
        return CommentNode(
            comment=comment,
            replies=replies,
            has_replies=bool(direct),
            can_reply=can_reply,
        )
