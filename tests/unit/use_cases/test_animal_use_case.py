import pytest

from straysense.app.use_cases.animals import (
    AnimalFilter,
    AnimalUseCase,
    CreateAnimalCommand,
    UpdateAnimalCommand,
)
from straysense.domain.entities import Animal, AnimalStatus, ReportStatus, StrayReport


def _assign_id(animal: Animal) -> Animal:
    animal.id = 40
    return animal


@pytest.mark.asyncio
async def test_public_listing_filters_on_available(mock_uow):
    mock_uow.animals.search.return_value = [
        Animal(id=1, name="Bantay", species="dog", breed="aspin", age=3, status=AnimalStatus.available)
    ]

    use_case = AnimalUseCase(mock_uow)
    result = await use_case.list_available(AnimalFilter(species="dog", age_max=5))

    assert result.is_ok()
    assert [a.name for a in result.value] == ["Bantay"]
    mock_uow.animals.search.assert_called_once_with(
        AnimalStatus.available, species="dog", breed=None, age_min=None, age_max=5
    )


@pytest.mark.asyncio
async def test_create_from_report_links_report(mock_uow):
    report = StrayReport(id=8, user_id=5, description="Limping dog", status=ReportStatus.accepted)
    mock_uow.stray_reports.get_by_id.return_value = report
    mock_uow.animals.create.side_effect = _assign_id

    use_case = AnimalUseCase(mock_uow)
    result = await use_case.create(
        CreateAnimalCommand(name="Bantay", species="dog", report_id=8)
    )

    assert result.is_ok()
    assert result.value.animal_id == 40
    assert result.value.report_id == 8
    assert report.processed_animal_id == 40
    mock_uow.stray_reports.update.assert_called_once_with(report)
    mock_uow.commit.assert_called_once()


@pytest.mark.asyncio
async def test_create_with_unknown_shelter(mock_uow):
    mock_uow.shelters.get_by_id.return_value = None

    use_case = AnimalUseCase(mock_uow)
    result = await use_case.create(
        CreateAnimalCommand(name="Bantay", species="dog", shelter_id=77)
    )

    assert result.is_err()
    assert result.error.code == "SHELTER_NOT_FOUND"
    mock_uow.animals.create.assert_not_called()


@pytest.mark.asyncio
async def test_create_with_unknown_report(mock_uow):
    mock_uow.stray_reports.get_by_id.return_value = None

    use_case = AnimalUseCase(mock_uow)
    result = await use_case.create(
        CreateAnimalCommand(name="Bantay", species="dog", report_id=99)
    )

    assert result.is_err()
    assert result.error.code == "REPORT_NOT_FOUND"
    mock_uow.animals.create.assert_not_called()


@pytest.mark.asyncio
async def test_update_changes_only_sent_fields(mock_uow):
    animal = Animal(id=1, name="Bantay", species="dog", breed="aspin", age=3)
    mock_uow.animals.get_by_id.return_value = animal
    mock_uow.animals.update.side_effect = lambda a: a

    use_case = AnimalUseCase(mock_uow)
    result = await use_case.update(1, UpdateAnimalCommand(age=4))

    assert result.is_ok()
    assert animal.age == 4
    assert animal.breed == "aspin"
    assert animal.name == "Bantay"


@pytest.mark.asyncio
async def test_promoting_a_processed_report_is_rejected(mock_uow):
    report = StrayReport(
        id=8,
        user_id=5,
        description="Limping dog",
        status=ReportStatus.accepted,
        processed_animal_id=40,
    )
    mock_uow.stray_reports.get_by_id.return_value = report

    use_case = AnimalUseCase(mock_uow)
    result = await use_case.create(
        CreateAnimalCommand(name="Bantay", species="dog", report_id=8)
    )

    assert result.is_err()
    assert result.error.code == "REPORT_ALREADY_PROCESSED"
    assert report.processed_animal_id == 40
    mock_uow.animals.create.assert_not_called()


@pytest.mark.asyncio
@pytest.mark.parametrize("adoptions, vaccinations", [(1, 0), (0, 2)])
async def test_delete_animal_still_referenced(mock_uow, adoptions, vaccinations):
    mock_uow.animals.get_by_id.return_value = Animal(id=1, name="Bantay", species="dog")
    mock_uow.adoptions.count_by_animal.return_value = adoptions
    mock_uow.vaccinations.count_by_animal.return_value = vaccinations

    use_case = AnimalUseCase(mock_uow)
    result = await use_case.delete(1)

    assert result.is_err()
    assert result.error.code == "ANIMAL_IN_USE"
    mock_uow.animals.delete.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_delete_unreferenced_animal_unlinks_report(mock_uow):
    animal = Animal(id=1, name="Bantay", species="dog")
    mock_uow.animals.get_by_id.return_value = animal
    mock_uow.adoptions.count_by_animal.return_value = 0
    mock_uow.vaccinations.count_by_animal.return_value = 0

    use_case = AnimalUseCase(mock_uow)
    result = await use_case.delete(1)

    assert result.is_ok()
    mock_uow.stray_reports.unlink_animal.assert_called_once_with(1)
    mock_uow.animals.delete.assert_called_once_with(animal)
    mock_uow.commit.assert_called_once()
