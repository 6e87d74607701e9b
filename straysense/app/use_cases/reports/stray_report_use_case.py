"""
Stray Report Use Case

Citizen submissions and their admin review.
"""

import logging
from typing import List

from straysense.libs.result import Error, Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.base import utcnow
from straysense.domain.entities import ReportStatus, StrayReport
from .dtos import (
    ReportResponse,
    SubmitReportCommand,
    SubmitReportResponse,
    UpdateReportStatusCommand,
)

logger = logging.getLogger(__name__)


class StrayReportUseCase:
    """
    Use case for stray reports.

    Business Rules:
    - New reports are pending and owned by the submitting user
    - Accepting stamps accepted_date; any other status clears it
    """

    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def submit(
        self, user_id: int, command: SubmitReportCommand
    ) -> Result[SubmitReportResponse]:
        async with self.uow:
            report = StrayReport(
                user_id=user_id,
                status=ReportStatus.pending,
                report_date=utcnow(),
                **command.model_dump(),
            )
            report = await self.uow.stray_reports.create(report)
            await self.uow.commit()

            logger.info(f"Stray report {report.id} submitted by user {user_id}")
            return Return.ok(
                SubmitReportResponse(message="Report submitted successfully", report_id=report.id)
            )

    async def list_all(self) -> Result[List[ReportResponse]]:
        async with self.uow:
            rows = await self.uow.stray_reports.list_with_reporters()
            return Return.ok(
                [
                    ReportResponse.model_validate(report).model_copy(
                        update={"first_name": first_name, "last_name": last_name}
                    )
                    for report, first_name, last_name in rows
                ]
            )

    async def update_status(
        self, report_id: int, command: UpdateReportStatusCommand
    ) -> Result[ReportResponse]:
        async with self.uow:
            report = await self.uow.stray_reports.get_by_id(report_id)
            if report is None:
                return Return.err(Error("REPORT_NOT_FOUND", "Stray report not found"))

            report.status = command.status
            report.accepted_date = utcnow() if command.status == ReportStatus.accepted else None
            report = await self.uow.stray_reports.update(report)

            await self.uow.commit()

            logger.info(f"Stray report {report_id} set to {command.status.value}")
            return Return.ok(ReportResponse.model_validate(report))
