"""Report repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from commentary.domain.model.report import Report
from commentary.domain.value import ReportId


class ReportRepository(ABC):
    """Repository for Report entity."""

    @abstractmethod
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID.

        Args:
            report_id: The report's unique identifier

        Returns:
            The report if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_pending(self, limit: int = 20, offset: int = 0) -> List[Report]:
        """Find pending reports, oldest first.

        Args:
            limit: Maximum number of reports to return
            offset: Number of reports to skip

        Returns:
            Pending reports
        """
        pass

    @abstractmethod
    async def count_pending(self) -> int:
        """Count pending reports."""
        pass

    @abstractmethod
    async def save(self, report: Report) -> Report:
        """Insert a new report.

        No uniqueness is enforced on (reporter_id, comment_id).
        """
        pass

    @abstractmethod
    async def mark_dismissed(self, report_id: ReportId) -> None:
        """Set status to dismissed unless the report is already resolved.

        Dismissing a dismissed report is a no-op.
        """
        pass

    @abstractmethod
    async def mark_resolved(self, report_id: ReportId) -> None:
        """Set status to resolved if the report is still pending."""
        pass
