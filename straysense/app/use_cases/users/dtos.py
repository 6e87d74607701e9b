from typing import Optional

from pydantic import BaseModel


class UpdateProfileCommand(BaseModel):
    """Fields a user may change on their own profile"""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    phone: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None


class ProfileResponse(BaseModel):
    """User joined with its contact profile"""

    user_id: int
    email: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    address_line1: Optional[str] = None
    address_line2: Optional[str] = None
    city: Optional[str] = None
    country: Optional[str] = None
    role: str
