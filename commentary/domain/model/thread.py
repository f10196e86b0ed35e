"""Assembled comment tree."""

from __future__ import annotations

from pydantic import Field

from commentary.domain.model.comment import Comment
from commentary.domain.model.common import DomainModel


class CommentNode(DomainModel):
    """A comment with its replies attached, as returned by thread assembly."""

    comment: Comment
    replies: list[CommentNode] = Field(default_factory=list)
    has_replies: bool = False
    can_reply: bool = True

    def walk(self):
        """Yield this node and every node below it, depth first."""
        yield self
        for reply in self.replies:
            yield from reply.walk()


CommentNode.model_rebuild()
