from typing import Optional

from sqlmodel import Field, SQLModel


class VaccineType(SQLModel, table=True):
    """Named vaccine definition"""

    __tablename__ = "vaccine_types"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(max_length=100, index=True)
    description: Optional[str] = None
