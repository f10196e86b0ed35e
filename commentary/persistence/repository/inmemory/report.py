"""In-memory report repository for testing."""

from typing import Optional

from commentary.domain.model.report import Report
from commentary.domain.repository.report import ReportRepository
from commentary.domain.value import ReportId, ReportStatus


class InMemoryReportRepository(ReportRepository):
    """In-memory implementation of ReportRepository for testing."""

    def __init__(self) -> None:
        self._reports: dict[ReportId, Report] = {}

    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        return self._reports.get(report_id)

    async def find_pending(self, limit: int = 20, offset: int = 0) -> list[Report]:
        """Find pending reports, oldest first."""
        pending = [r for r in self._reports.values() if r.is_pending]
        pending.sort(key=lambda r: (r.created_at, str(r.id)))
        return pending[offset : offset + limit]

    async def count_pending(self) -> int:
        """Count pending reports."""
        return sum(1 for r in self._reports.values() if r.is_pending)

    async def save(self, report: Report) -> Report:
        """Save a report."""
        self._reports[report.id] = report
        return report

    async def mark_dismissed(self, report_id: ReportId) -> None:
        """Dismiss a report unless it is resolved."""
        report = self._reports.get(report_id)
        if report and report.status is not ReportStatus.RESOLVED:
            self._reports[report_id] = report.model_copy(
                update={"status": ReportStatus.DISMISSED}
            )

    async def mark_resolved(self, report_id: ReportId) -> None:
        """Resolve a report if it is still pending."""
        report = self._reports.get(report_id)
        if report and report.is_pending:
            self._reports[report_id] = report.model_copy(
                update={"status": ReportStatus.RESOLVED}
            )
