"""
Tuiter Backend — Tuit Request Schemas
=======================================

What:  Bodies accepted by POST /users/{uid}/tuits and PUT /tuits/{tid}.
Why:   Both are *partial* tuits: FastAPI checks field types here, while the
       required/default rules live on the document model (tuiter.models.tuit)
       and are applied by TuitDao when the document is built.

Only the fields a client actually sent are forwarded (exclude_unset), so
an update never overwrites a stored field the body left out.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from tuiter.models.tuit import TuitStats


class TuitCreate(BaseModel):
    """
    Payload for creating a tuit.

    `postedBy` is accepted but always replaced by the `uid` path parameter.
    """
    tuit: Optional[str] = Field(default=None, description="Text body (required when creating)")
    posted_by: Optional[str] = Field(
        default=None,
        alias="postedBy",
        description="Ignored on create: the author comes from the URL",
    )
    posted_on: Optional[datetime] = Field(
        default=None, alias="postedOn", description="Defaults to now when omitted"
    )
    image: Optional[str] = Field(default=None, description="Image reference")
    youtube: Optional[str] = Field(default=None, description="YouTube video reference")
    avatar_logo: Optional[str] = Field(default=None, alias="avatarLogo")
    image_overlay: Optional[str] = Field(default=None, alias="imageOverlay")
    stats: Optional[TuitStats] = Field(default=None, description="Engagement counters")

    model_config = {"populate_by_name": True}


class TuitUpdate(TuitCreate):
    """
    Payload for updating a tuit: every supplied field is `$set`, and a
    supplied `stats` block is written whole. TuitDao checks the values
    against the document model before writing.
    """
