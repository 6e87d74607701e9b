from typing import List, Optional, Tuple

from sqlalchemy import func, update
from sqlmodel import select
from sqlmodel.ext.asyncio.session import AsyncSession

from straysense.app.repositories.stray_report_repository import IStrayReportRepository
from straysense.domain.entities import ReportStatus, StrayReport, User


class StrayReportRepository(IStrayReportRepository):
    """Stray report repository implementation using SQLModel"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, report_id: int) -> Optional[StrayReport]:
        stmt = select(StrayReport).where(StrayReport.id == report_id)
        result = await self.session.exec(stmt)
        return result.one_or_none()

    async def create(self, report: StrayReport) -> StrayReport:
        self.session.add(report)
        await self.session.flush()
        await self.session.refresh(report)
        return report

    async def update(self, report: StrayReport) -> StrayReport:
        self.session.add(report)
        await self.session.flush()
        await self.session.refresh(report)
        return report

    async def list_with_reporters(self) -> List[Tuple[StrayReport, str, str]]:
        stmt = (
            select(StrayReport, User.first_name, User.last_name)
            .join(User, User.id == StrayReport.user_id)
            .order_by(StrayReport.report_date.desc(), StrayReport.id.desc())
        )
        result = await self.session.execute(stmt)
        return [tuple(row) for row in result.all()]

    async def count_by_status(self, status: ReportStatus) -> int:
        stmt = select(func.count()).select_from(StrayReport).where(StrayReport.status == status)
        result = await self.session.execute(stmt)
        return result.scalar_one()

    async def unlink_animal(self, animal_id: int) -> int:
        stmt = (
            update(StrayReport)
            .where(StrayReport.processed_animal_id == animal_id)
            .values(processed_animal_id=None)
            .execution_options(synchronize_session="fetch")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
