from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from straysense.domain.entities import ReportStatus


class SubmitReportCommand(BaseModel):
    """Stray report as submitted by a signed-in user"""

    description: str = Field(..., min_length=1)
    animal_type: Optional[str] = None
    animal_size: Optional[str] = None
    visible_injuries: Optional[str] = None
    province: Optional[str] = None
    city: Optional[str] = None
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    image_path: Optional[str] = None


class UpdateReportStatusCommand(BaseModel):
    status: ReportStatus

    @field_validator("status", mode="before")
    @classmethod
    def accept_approved_alias(cls, value):
        # Older admin clients send "approved" for an accepted report
        if value == "approved":
            return ReportStatus.accepted.value
        return value


class SubmitReportResponse(BaseModel):
    message: str
    report_id: int


class ReportResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    description: str
    animal_type: Optional[str] = None
    animal_size: Optional[str] = None
    visible_injuries: Optional[str] = None
    province: Optional[str] = None
    city: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    image_path: Optional[str] = None
    status: ReportStatus
    report_date: datetime
    accepted_date: Optional[datetime] = None
    processed_animal_id: Optional[int] = None
