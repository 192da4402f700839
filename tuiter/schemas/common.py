"""
Tuiter Backend — Shared Response Schemas
==========================================

What:  Mutation outcomes, error bodies and the health report.
Why:   Update and delete answer with explicit outcome types instead of the
       driver's UpdateResult/DeleteResult, so the API contract does not
       depend on the storage driver.
"""

from typing import Optional

from pydantic import BaseModel, Field


class UpdateStatus(BaseModel):
    """
    What:  Outcome of PUT /tuits/{tid} and PUT /users/{uid}.

    Example:
        {"matchedCount": 1, "modifiedCount": 1}
    """
    matched_count: int = Field(alias="matchedCount", description="Documents matching the id")
    modified_count: int = Field(alias="modifiedCount", description="Documents actually changed")

    model_config = {"populate_by_name": True}


class DeleteStatus(BaseModel):
    """
    What:  Outcome of every delete route.

    Deleting an id that does not exist is not an error:
        {"deletedCount": 0}
    """
    deleted_count: int = Field(alias="deletedCount", description="Documents removed")

    model_config = {"populate_by_name": True}


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Example:
        {
            "error": "validation_error",
            "message": "tuit document failed schema validation",
            "details": {"resource": "tuit", "fields": ["tuit"]},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and container health checks."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
