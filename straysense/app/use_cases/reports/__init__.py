from .stray_report_use_case import StrayReportUseCase
from .dtos import (
    ReportResponse,
    SubmitReportCommand,
    SubmitReportResponse,
    UpdateReportStatusCommand,
)

__all__ = [
    "StrayReportUseCase",
    "ReportResponse",
    "SubmitReportCommand",
    "SubmitReportResponse",
    "UpdateReportStatusCommand",
]
