from datetime import date

import pytest

from straysense.app.use_cases.vaccinations import (
    ScheduleVaccinationCommand,
    VaccinationUseCase,
    VaccineTypeUseCase,
)
from straysense.domain.base import today
from straysense.domain.entities import Animal, Vaccination, VaccineType


@pytest.mark.asyncio
async def test_complete_stamps_today(mock_uow):
    vaccination = Vaccination(id=4, animal_id=11, vaccine_id=2, scheduled_date=date(2024, 5, 1))
    mock_uow.vaccinations.get_by_id.return_value = vaccination
    mock_uow.vaccinations.update.side_effect = lambda v: v

    use_case = VaccinationUseCase(mock_uow)
    result = await use_case.complete(4)

    assert result.is_ok()
    assert result.value.completed_date == today()
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_complete_unknown_vaccination(mock_uow):
    mock_uow.vaccinations.get_by_id.return_value = None

    use_case = VaccinationUseCase(mock_uow)
    result = await use_case.complete(4)

    assert result.is_err()
    assert result.error.code == "VACCINATION_NOT_FOUND"


@pytest.mark.asyncio
async def test_schedule_requires_vaccine_type(mock_uow):
    mock_uow.animals.get_by_id.return_value = Animal(id=11, name="Mingming", species="cat")
    mock_uow.vaccine_types.get_by_id.return_value = None

    use_case = VaccinationUseCase(mock_uow)
    result = await use_case.schedule(
        ScheduleVaccinationCommand(animal_id=11, vaccine_id=2, scheduled_date=date(2024, 5, 1))
    )

    assert result.is_err()
    assert result.error.code == "VACCINE_TYPE_NOT_FOUND"
    mock_uow.vaccinations.create.assert_not_called()


@pytest.mark.asyncio
async def test_schedule_for_adopter_joins_names(mock_uow):
    vaccination = Vaccination(id=4, animal_id=11, vaccine_id=2, scheduled_date=date(2024, 5, 1))
    mock_uow.vaccinations.list_for_adopter.return_value = [(vaccination, "Mingming", "Rabies")]

    use_case = VaccinationUseCase(mock_uow)
    result = await use_case.schedule_for_adopter(5)

    assert result.is_ok()
    entry = result.value[0]
    assert entry.animal_name == "Mingming"
    assert entry.vaccine_name == "Rabies"
    assert entry.completed_date is None
    mock_uow.vaccinations.list_for_adopter.assert_called_once_with(5)


@pytest.mark.asyncio
async def test_delete_vaccine_type_in_use(mock_uow):
    mock_uow.vaccine_types.get_by_id.return_value = VaccineType(id=2, name="Rabies")
    mock_uow.vaccinations.count_by_vaccine.return_value = 1

    use_case = VaccineTypeUseCase(mock_uow)
    result = await use_case.delete(2)

    assert result.is_err()
    assert result.error.code == "VACCINE_TYPE_IN_USE"
    mock_uow.vaccine_types.delete.assert_not_called()
