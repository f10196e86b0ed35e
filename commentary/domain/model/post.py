"""Post summary.

Posts belong to the content service; this service only needs to know that
one exists and how to show it to moderators.
"""

from commentary.domain.model.common import DomainModel
from commentary.domain.value import PostId


class PostSummary(DomainModel):
    """Read-only projection of a post."""

    id: PostId
    title: str
    slug: str  # As published by the content service, not re-validated here
