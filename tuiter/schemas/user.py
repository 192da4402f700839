"""
Tuiter Backend — User Request Schemas
=======================================

What:  Bodies accepted by POST /users and PUT /users/{uid}.
Why:   Partial users; the required/default rules live on tuiter.models.user
       and are applied by UserDao when the document is built.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from tuiter.models.user import AccountType, Location, MaritalStatus


class UserCreate(BaseModel):
    """Payload for creating a user; `username` and `password` are required by the document model."""
    username: Optional[str] = None
    password: Optional[str] = None
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    profile_photo: Optional[str] = Field(default=None, alias="profilePhoto")
    header_image: Optional[str] = Field(default=None, alias="headerImage")
    biography: Optional[str] = None
    date_of_birth: Optional[datetime] = Field(default=None, alias="dateOfBirth")
    account_type: Optional[AccountType] = Field(default=None, alias="accountType")
    marital_status: Optional[MaritalStatus] = Field(default=None, alias="maritalStatus")
    location: Optional[Location] = None
    salary: Optional[float] = None

    model_config = {"populate_by_name": True, "use_enum_values": True}


class UserUpdate(UserCreate):
    """Payload for updating a user; every supplied field is `$set`."""
