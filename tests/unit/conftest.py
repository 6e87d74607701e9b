import pytest
from unittest.mock import AsyncMock, MagicMock

REPOSITORIES = {
    "users": ("get_by_email", "get_by_id", "create", "update", "get_profile", "save_profile", "count"),
    "sessions": ("get_by_id", "create", "update", "delete_by_id"),
    "animals": (
        "get_by_id",
        "get_for_update",
        "list_all",
        "search",
        "create",
        "update",
        "delete",
        "transition_status",
        "set_status",
        "count",
        "count_by_shelter",
    ),
    "shelters": ("get_by_id", "list_all", "create", "update", "delete", "count"),
    "stray_reports": (
        "get_by_id",
        "create",
        "update",
        "list_with_reporters",
        "count_by_status",
        "unlink_animal",
    ),
    "adoptions": (
        "get_by_id",
        "find_pending",
        "create",
        "update",
        "list_by_user_with_animals",
        "list_with_details",
        "count_by_status",
        "count_by_animal",
    ),
    "vaccine_types": ("get_by_id", "list_all", "create", "update", "delete"),
    "vaccinations": (
        "get_by_id",
        "create",
        "update",
        "list_with_names",
        "list_for_adopter",
        "count_pending",
        "count_by_vaccine",
        "count_by_animal",
    ),
}


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    for name, methods in REPOSITORIES.items():
        repository = MagicMock()
        for method in methods:
            setattr(repository, method, AsyncMock())
        setattr(uow, name, repository)

    return uow
