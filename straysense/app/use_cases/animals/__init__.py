from .animal_use_case import AnimalUseCase
from .dtos import (
    AnimalFilter,
    AnimalResponse,
    CreateAnimalCommand,
    CreateAnimalResponse,
    UpdateAnimalCommand,
)

__all__ = [
    "AnimalUseCase",
    "AnimalFilter",
    "AnimalResponse",
    "CreateAnimalCommand",
    "CreateAnimalResponse",
    "UpdateAnimalCommand",
]
