import pytest

from straysense.app.use_cases.shelters import ShelterCommand, ShelterUseCase
from straysense.domain.entities import Shelter


@pytest.fixture
def shelter():
    return Shelter(id=2, name="Paws Haven", address="1 Rizal St", city="Cebu", country="PH")


@pytest.mark.asyncio
async def test_delete_empty_shelter(mock_uow, shelter):
    mock_uow.shelters.get_by_id.return_value = shelter
    mock_uow.animals.count_by_shelter.return_value = 0

    use_case = ShelterUseCase(mock_uow)
    result = await use_case.delete(2)

    assert result.is_ok()
    mock_uow.shelters.delete.assert_called_once_with(shelter)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_delete_shelter_with_animals(mock_uow, shelter):
    mock_uow.shelters.get_by_id.return_value = shelter
    mock_uow.animals.count_by_shelter.return_value = 3

    use_case = ShelterUseCase(mock_uow)
    result = await use_case.delete(2)

    assert result.is_err()
    assert result.error.code == "SHELTER_HAS_ANIMALS"
    mock_uow.shelters.delete.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_update_unknown_shelter(mock_uow):
    mock_uow.shelters.get_by_id.return_value = None

    use_case = ShelterUseCase(mock_uow)
    result = await use_case.update(
        9, ShelterCommand(name="X", address="Y", city="Z", country="PH")
    )

    assert result.is_err()
    assert result.error.code == "SHELTER_NOT_FOUND"
