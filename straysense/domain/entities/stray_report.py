"""
StrayReport Entity

A citizen-submitted sighting of an unowned animal.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, SQLModel

from straysense.domain.base import utcnow
from .enums import ReportStatus


class StrayReport(SQLModel, table=True):
    """
    StrayReport entity.

    Business Rules:
    - Starts as pending; an admin accepts or rejects it
    - An accepted report may be promoted into an Animal (processed_animal_id)
    """

    __tablename__ = "stray_reports"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)

    description: str
    animal_type: Optional[str] = Field(default=None, max_length=50)
    animal_size: Optional[str] = Field(default=None, max_length=20)
    visible_injuries: Optional[str] = None
    province: Optional[str] = Field(default=None, max_length=100)
    city: Optional[str] = Field(default=None, max_length=100)
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    image_path: Optional[str] = Field(default=None, max_length=255)

    status: ReportStatus = Field(default=ReportStatus.pending)
    report_date: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    accepted_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))
    processed_animal_id: Optional[int] = Field(default=None, foreign_key="animals.id")
