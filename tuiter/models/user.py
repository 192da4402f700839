"""
Tuiter Backend — User Document Model
======================================

What:  Shape and defaults of documents in the `users` collection.
Who:   Built by UserDao on insert, returned by the user routes.

The password is stored exactly as supplied; credential handling is not
part of this service.
"""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field

from tuiter.models.base import MongoModel, utcnow


class AccountType(str, Enum):
    PERSONAL = "PERSONAL"
    ACADEMIC = "ACADEMIC"
    PROFESSIONAL = "PROFESSIONAL"


class MaritalStatus(str, Enum):
    MARRIED = "MARRIED"
    SINGLE = "SINGLE"
    WIDOWED = "WIDOWED"


class Location(BaseModel):
    latitude: float = 0.0
    longitude: float = 0.0


class User(MongoModel):
    """A registered account, stored in the `users` collection."""

    username: str = Field(min_length=1)
    password: str = Field(min_length=1)

    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    profile_photo: Optional[str] = Field(default=None, alias="profilePhoto")
    header_image: Optional[str] = Field(default=None, alias="headerImage")
    biography: Optional[str] = None
    date_of_birth: Optional[datetime] = Field(default=None, alias="dateOfBirth")

    account_type: AccountType = Field(default=AccountType.PERSONAL, alias="accountType")
    marital_status: MaritalStatus = Field(default=MaritalStatus.SINGLE, alias="maritalStatus")
    location: Optional[Location] = None
    salary: float = 50000
    joined: datetime = Field(default_factory=utcnow)

    # Enums are stored as their plain string values
    model_config = {"populate_by_name": True, "use_enum_values": True, "validate_default": True}
