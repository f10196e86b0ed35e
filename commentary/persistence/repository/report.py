"""PostgreSQL implementation of Report repository."""

from typing import List, Optional

from sqlalchemy import asc, func, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.model import Report
from commentary.domain.repository import ReportRepository
from commentary.domain.value import ReportId, ReportStatus
from commentary.persistence.database import translate_store_errors
from commentary.persistence.mappers import report_to_dict, row_to_report
from commentary.persistence.tables import reports_table


class PostgresReportRepository(ReportRepository):
    """PostgreSQL implementation of ReportRepository.

    Status changes are conditional updates so that a resolved report can
    never be reopened or dismissed, whatever order requests arrive in.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @translate_store_errors
    async def find_by_id(self, report_id: ReportId) -> Optional[Report]:
        """Find a report by ID."""
        stmt = select(reports_table).where(reports_table.c.id == report_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_report(row._asdict()) if row else None

    @translate_store_errors
    async def find_pending(self, limit: int = 20, offset: int = 0) -> List[Report]:
        """Find pending reports, oldest first."""
        stmt = (
            select(reports_table)
            .where(reports_table.c.status == ReportStatus.PENDING.value)
            .order_by(asc(reports_table.c.created_at), reports_table.c.id)
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_report(row._asdict()) for row in result.fetchall()]

    @translate_store_errors
    async def count_pending(self) -> int:
        """Count pending reports."""
        stmt = (
            select(func.count())
            .select_from(reports_table)
            .where(reports_table.c.status == ReportStatus.PENDING.value)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    @translate_store_errors
    async def save(self, report: Report) -> Report:
        """Insert a new report."""
        stmt = insert(reports_table).values(**report_to_dict(report))
        await self.session.execute(stmt)
        await self.session.flush()
        return report

    @translate_store_errors
    async def mark_dismissed(self, report_id: ReportId) -> None:
        """Dismiss a report unless it is resolved."""
        stmt = (
            update(reports_table)
            .where(reports_table.c.id == report_id)
            .where(reports_table.c.status != ReportStatus.RESOLVED.value)
            .values(status=ReportStatus.DISMISSED.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    @translate_store_errors
    async def mark_resolved(self, report_id: ReportId) -> None:
        """Resolve a report if it is still pending."""
        stmt = (
            update(reports_table)
            .where(reports_table.c.id == report_id)
            .where(reports_table.c.status == ReportStatus.PENDING.value)
            .values(status=ReportStatus.RESOLVED.value)
        )
        await self.session.execute(stmt)
        await self.session.flush()
