from sqlmodel.ext.asyncio.session import AsyncSession

from straysense.adapter.repositories.adoption_repository import AdoptionRepository
from straysense.adapter.repositories.animal_repository import AnimalRepository
from straysense.adapter.repositories.session_repository import SessionRepository
from straysense.adapter.repositories.shelter_repository import ShelterRepository
from straysense.adapter.repositories.stray_report_repository import StrayReportRepository
from straysense.adapter.repositories.user_repository import UserRepository
from straysense.adapter.repositories.vaccination_repository import VaccinationRepository
from straysense.adapter.repositories.vaccine_type_repository import VaccineTypeRepository
from straysense.app.services.unit_of_work import UnitOfWork


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy implementation of UnitOfWork pattern"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def __aenter__(self):
        # Initialize all repositories with the session
        self.users = UserRepository(self.session)
        self.sessions = SessionRepository(self.session)
        self.animals = AnimalRepository(self.session)
        self.shelters = ShelterRepository(self.session)
        self.stray_reports = StrayReportRepository(self.session)
        self.adoptions = AdoptionRepository(self.session)
        self.vaccine_types = VaccineTypeRepository(self.session)
        self.vaccinations = VaccinationRepository(self.session)
        return self

    async def __aexit__(self, *args):
        # Anything not committed by the use case is discarded
        await self.rollback()

    async def commit(self):
        await self.session.commit()

    async def rollback(self):
        await self.session.rollback()
