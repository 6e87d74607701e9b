"""
Adoption Entity

A user's request to take custody of an animal.
"""

from datetime import datetime
from typing import Optional

from sqlmodel import Column, DateTime, Field, Index, SQLModel

from straysense.domain.base import utcnow
from .enums import AdoptionStatus


class Adoption(SQLModel, table=True):
    """
    Adoption entity.

    Business Rules:
    - At most one pending adoption per (user, animal)
    - Approval stamps approval_date
    - Approval gates (home check, fee, contract) are recorded, not enforced
    """

    __tablename__ = "adoptions"

    id: Optional[int] = Field(default=None, primary_key=True)
    user_id: int = Field(foreign_key="users.id", index=True)
    animal_id: int = Field(foreign_key="animals.id", index=True)

    status: AdoptionStatus = Field(default=AdoptionStatus.pending)
    application_date: datetime = Field(default_factory=utcnow, sa_column=Column(DateTime))
    approval_date: Optional[datetime] = Field(default=None, sa_column=Column(DateTime))

    home_check_passed: bool = Field(default=False)
    fee_paid: bool = Field(default=False)
    contract_signed: bool = Field(default=False)

    __table_args__ = (Index("idx_adoption_user_animal_status", "user_id", "animal_id", "status"),)
