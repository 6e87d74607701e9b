from .shelter_use_case import ShelterUseCase
from .dtos import ShelterCommand, ShelterResponse

__all__ = ["ShelterUseCase", "ShelterCommand", "ShelterResponse"]
