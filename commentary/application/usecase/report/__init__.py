"""Report and moderation use cases."""

from .create_report import CreateReportRequest, CreateReportUseCase, ReportItem
from .dismiss_report import DismissReportRequest, DismissReportUseCase
from .list_reports import (
    ListPendingReportsRequest,
    ListPendingReportsResponse,
    ListPendingReportsUseCase,
    ReportViewItem,
)
from .resolve_report import ResolveReportRequest, ResolveReportUseCase

__all__ = [
    "CreateReportRequest",
    "CreateReportUseCase",
    "DismissReportRequest",
    "DismissReportUseCase",
    "ListPendingReportsRequest",
    "ListPendingReportsResponse",
    "ListPendingReportsUseCase",
    "ReportItem",
    "ReportViewItem",
    "ResolveReportRequest",
    "ResolveReportUseCase",
]
