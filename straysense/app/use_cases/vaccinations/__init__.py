"""
Vaccination Use Cases

Vaccine type definitions and per-animal vaccination schedules.
"""

from .vaccine_type_use_case import VaccineTypeUseCase
from .vaccination_use_case import VaccinationUseCase
from .dtos import (
    VaccineTypeCommand,
    VaccineTypeResponse,
    ScheduleVaccinationCommand,
    VaccinationResponse,
    VaccinationScheduleEntry,
)

__all__ = [
    "VaccineTypeUseCase",
    "VaccinationUseCase",
    "VaccineTypeCommand",
    "VaccineTypeResponse",
    "ScheduleVaccinationCommand",
    "VaccinationResponse",
    "VaccinationScheduleEntry",
]
