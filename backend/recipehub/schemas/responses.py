"""
RecipeHub Backend — Pydantic Response Schemas
===============================================

What:  Pydantic models for write acknowledgments, errors, and health.
Why:   Responses mirror the MongoDB driver results with no envelope, using the
       same camelCase keys existing frontends already read
       (insertedId, modifiedCount, deletedCount, ...).
How:   Services build these from pymongo result objects; FastAPI serializes
       them and documents them in the OpenAPI schema.

Recipe and user documents themselves are schema-less and are returned as
plain JSON objects (see services/documents.py).
"""

from typing import Optional

from pydantic import BaseModel, Field
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


# ══════════════════════════════════════════════════════════════════════════
# Write Acknowledgments
# ══════════════════════════════════════════════════════════════════════════


class InsertAck(BaseModel):
    """Returned by POST /recipes and POST /users."""
    acknowledged: bool = Field(description="Whether the write was acknowledged by MongoDB")
    insertedId: str = Field(description="ObjectId assigned to the new document")

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertAck":
        return cls(acknowledged=result.acknowledged, insertedId=str(result.inserted_id))


class UpdateAck(BaseModel):
    """
    Returned by PUT /recipes/{id}.

    A well-formed id that matches nothing still yields 200 with
    matchedCount == 0; callers inspect the counts.
    """
    acknowledged: bool = Field(description="Whether the write was acknowledged by MongoDB")
    matchedCount: int = Field(description="Documents matched by the filter")
    modifiedCount: int = Field(description="Documents actually changed")
    upsertedCount: int = Field(default=0, description="Documents inserted by upsert (always 0)")
    upsertedId: Optional[str] = Field(default=None, description="Upserted document id (always null)")

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateAck":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matchedCount=result.matched_count,
            modifiedCount=result.modified_count,
            upsertedCount=1 if upserted_id is not None else 0,
            upsertedId=str(upserted_id) if upserted_id is not None else None,
        )


class DeleteAck(BaseModel):
    """Returned by DELETE /recipes/{id}; deletedCount is 0 when nothing matched."""
    acknowledged: bool = Field(description="Whether the write was acknowledged by MongoDB")
    deletedCount: int = Field(description="Documents removed (0 or 1)")

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteAck":
        return cls(acknowledged=result.acknowledged, deletedCount=result.deleted_count)


class LikeResponse(BaseModel):
    """Returned by PATCH /recipes/{id}/like when a like was recorded."""
    success: bool = True
    message: str = "Like added"


# ══════════════════════════════════════════════════════════════════════════
# Error & Health Models
# ══════════════════════════════════════════════════════════════════════════


class ErrorResponse(BaseModel):
    """
    What:  Standardized error body for all API errors.

    Example:
        {
            "error": "invalid_identifier",
            "message": "Invalid recipe ID",
            "details": {"field": "id", "identifier": "not-an-id"},
            "request_id": "a1b2c3d4"
        }
    """
    error: str = Field(description="Machine-readable error code")
    message: str = Field(description="Human-readable error description")
    details: Optional[dict] = Field(default=None, description="Additional error context")
    request_id: Optional[str] = Field(default=None, description="Request correlation ID")


class HealthResponse(BaseModel):
    """Returned by GET /health for monitoring and load balancer probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="MongoDB connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
