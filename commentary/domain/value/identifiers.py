"""Strongly typed identifiers for domain entities.

Using NewType keeps comment, post, report and user ids from being mixed up
while still being plain UUIDs at runtime.
"""

from typing import NewType
from uuid import UUID

CommentId = NewType("CommentId", UUID)
ReportId = NewType("ReportId", UUID)
LikeId = NewType("LikeId", UUID)

# Owned by external collaborators (content service, identity provider)
PostId = NewType("PostId", UUID)
UserId = NewType("UserId", UUID)
