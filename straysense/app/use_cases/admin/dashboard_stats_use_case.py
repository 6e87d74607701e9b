from straysense.libs.result import Result, Return
from straysense.app.services.unit_of_work import UnitOfWork
from straysense.domain.entities import AdoptionStatus, ReportStatus
from .dtos import DashboardStatsResponse


class DashboardStatsUseCase:
    def __init__(self, uow: UnitOfWork):
        self.uow = uow

    async def execute(self) -> Result[DashboardStatsResponse]:
        async with self.uow:
            return Return.ok(
                DashboardStatsResponse(
                    totalUsers=await self.uow.users.count(),
                    totalAnimals=await self.uow.animals.count(),
                    activeReports=await self.uow.stray_reports.count_by_status(ReportStatus.pending),
                    totalShelters=await self.uow.shelters.count(),
                    activeAdoptionRequests=await self.uow.adoptions.count_by_status(
                        AdoptionStatus.pending
                    ),
                    pendingVaccinations=await self.uow.vaccinations.count_pending(),
                )
            )
