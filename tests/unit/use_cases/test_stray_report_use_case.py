import pytest

from straysense.app.use_cases.reports import (
    StrayReportUseCase,
    SubmitReportCommand,
    UpdateReportStatusCommand,
)
from straysense.domain.base import utcnow
from straysense.domain.entities import ReportStatus, StrayReport


def _report(status: ReportStatus = ReportStatus.pending) -> StrayReport:
    return StrayReport(
        id=8,
        user_id=5,
        description="Limping dog near the market",
        status=status,
        report_date=utcnow(),
    )


@pytest.mark.asyncio
async def test_submit_report_starts_pending(mock_uow):
    def _assign_id(report):
        report.id = 8
        return report

    mock_uow.stray_reports.create.side_effect = _assign_id

    use_case = StrayReportUseCase(mock_uow)
    result = await use_case.submit(
        5, SubmitReportCommand(description="Limping dog", city="Cebu", latitude=10.3)
    )

    assert result.is_ok()
    assert result.value.report_id == 8
    report = mock_uow.stray_reports.create.call_args[0][0]
    assert report.status == ReportStatus.pending
    assert report.user_id == 5
    assert report.city == "Cebu"
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_accept_stamps_accepted_date(mock_uow):
    report = _report()
    mock_uow.stray_reports.get_by_id.return_value = report
    mock_uow.stray_reports.update.side_effect = lambda r: r

    use_case = StrayReportUseCase(mock_uow)
    result = await use_case.update_status(8, UpdateReportStatusCommand(status="accepted"))

    assert result.is_ok()
    assert result.value.status == ReportStatus.accepted
    assert report.accepted_date is not None


@pytest.mark.asyncio
async def test_approved_is_read_as_accepted(mock_uow):
    mock_uow.stray_reports.get_by_id.return_value = _report()
    mock_uow.stray_reports.update.side_effect = lambda r: r

    use_case = StrayReportUseCase(mock_uow)
    result = await use_case.update_status(8, UpdateReportStatusCommand(status="approved"))

    assert result.is_ok()
    assert result.value.status == ReportStatus.accepted


@pytest.mark.asyncio
async def test_reject_clears_accepted_date(mock_uow):
    report = _report(ReportStatus.accepted)
    report.accepted_date = utcnow()
    mock_uow.stray_reports.get_by_id.return_value = report
    mock_uow.stray_reports.update.side_effect = lambda r: r

    use_case = StrayReportUseCase(mock_uow)
    result = await use_case.update_status(8, UpdateReportStatusCommand(status="rejected"))

    assert result.is_ok()
    assert report.status == ReportStatus.rejected
    assert report.accepted_date is None


@pytest.mark.asyncio
async def test_update_unknown_report(mock_uow):
    mock_uow.stray_reports.get_by_id.return_value = None

    use_case = StrayReportUseCase(mock_uow)
    result = await use_case.update_status(404, UpdateReportStatusCommand(status="accepted"))

    assert result.is_err()
    assert result.error.code == "REPORT_NOT_FOUND"
