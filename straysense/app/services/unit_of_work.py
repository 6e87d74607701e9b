from abc import ABC, abstractmethod

from straysense.app.repositories.adoption_repository import IAdoptionRepository
from straysense.app.repositories.animal_repository import IAnimalRepository
from straysense.app.repositories.session_repository import ISessionRepository
from straysense.app.repositories.shelter_repository import IShelterRepository
from straysense.app.repositories.stray_report_repository import IStrayReportRepository
from straysense.app.repositories.user_repository import IUserRepository
from straysense.app.repositories.vaccination_repository import IVaccinationRepository
from straysense.app.repositories.vaccine_type_repository import IVaccineTypeRepository


class UnitOfWork(ABC):
    """Abstract UnitOfWork - defines repository access and transaction management"""

    # Repository properties (initialized in __aenter__)
    users: IUserRepository
    sessions: ISessionRepository
    animals: IAnimalRepository
    shelters: IShelterRepository
    stray_reports: IStrayReportRepository
    adoptions: IAdoptionRepository
    vaccine_types: IVaccineTypeRepository
    vaccinations: IVaccinationRepository

    @abstractmethod
    async def __aenter__(self):
        pass

    @abstractmethod
    async def __aexit__(self, *args):
        pass

    @abstractmethod
    async def commit(self):
        pass

    @abstractmethod
    async def rollback(self):
        pass
