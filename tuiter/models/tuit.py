"""
Tuiter Backend — Tuit Document Model
======================================

What:  Shape and defaults of documents in the `tuits` collection.
Who:   Built by TuitDao on insert, returned by the tuit routes.

Document Rules:
    - tuit:     required, non-empty text
    - postedBy: weak reference to a user's `_id` (no cascade on user delete)
    - postedOn: defaults to the creation instant
    - stats:    embedded counters, all defaulting to 0
"""

from datetime import datetime
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, Field, field_validator

from tuiter.models.base import MongoModel, utcnow


class TuitStats(BaseModel):
    """Engagement counters embedded in every tuit."""

    replies: int = 0
    retuits: int = 0
    likes: int = 0
    dislikes: int = 0
    current_user_like: int = Field(default=0, alias="currentUserLike")
    current_user_dislike: int = Field(default=0, alias="currentUserDislike")

    model_config = {"populate_by_name": True}


class Tuit(MongoModel):
    """A short text post, stored in the `tuits` collection."""

    tuit: str = Field(min_length=1)
    posted_by: Optional[str] = Field(default=None, alias="postedBy")
    posted_on: datetime = Field(default_factory=utcnow, alias="postedOn")

    # Free-text media references
    image: Optional[str] = None
    youtube: Optional[str] = None
    avatar_logo: Optional[str] = Field(default=None, alias="avatarLogo")
    image_overlay: Optional[str] = Field(default=None, alias="imageOverlay")

    stats: TuitStats = Field(default_factory=TuitStats)

    @field_validator("posted_by", mode="before")
    @classmethod
    def stringify_posted_by(cls, v: Any) -> Any:
        if isinstance(v, ObjectId):
            return str(v)
        return v
