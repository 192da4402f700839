"""
Tuiter Backend — Document Model Base
======================================

What:  Common base for every MongoDB document model.
Why:   Documents share the `_id` primary key and camelCase field names on
       the wire and in storage, while Python code uses snake_case.
How:   Fields declare camelCase aliases; `populate_by_name` lets code build
       models by either name; ObjectIds are rendered as hex strings.
"""

from datetime import datetime, timezone
from typing import Any, Dict, Optional

from bson import ObjectId
from pydantic import BaseModel, Field, field_validator


def utcnow() -> datetime:
    """Default factory for creation timestamps (always UTC-aware)."""
    return datetime.now(timezone.utc)


class MongoModel(BaseModel):
    """
    Base for stored documents.

    `id` is None until the document has been inserted; after that it holds
    the database-assigned key as a string.
    """

    id: Optional[str] = Field(default=None, alias="_id")

    # Assignments are validated so partial updates can be checked per field
    model_config = {"populate_by_name": True, "validate_assignment": True}

    @field_validator("id", mode="before")
    @classmethod
    def stringify_id(cls, v: Any) -> Any:
        if isinstance(v, ObjectId):
            return str(v)
        return v

    def to_document(self) -> Dict[str, Any]:
        """
        Storage form: camelCase keys, no `_id` (the database assigns it),
        unset optional fields left out rather than stored as null.
        """
        return self.model_dump(by_alias=True, exclude={"id"}, exclude_none=True)
