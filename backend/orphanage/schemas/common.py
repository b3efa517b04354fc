"""
Orphanage API — Shared Response Schemas
========================================

What:  Pydantic models for the response shapes both resources share.
Why:   FastAPI generates the OpenAPI document from these models, so every
       endpoint advertises the same `{id}`, `{message}` and `{error}` bodies.
"""

from pydantic import BaseModel, Field


class CreatedResponse(BaseModel):
    """Returned by POST with HTTP 201 Created."""
    id: int = Field(description="Identifier assigned by the store")


class MessageResponse(BaseModel):
    """Returned by successful PUT and DELETE."""
    message: str = Field(description="Human-readable confirmation")


class ErrorResponse(BaseModel):
    """
    What:  Error body for every failed request.
    Why:   The status code carries the error class; the body only carries text.

    Example:
        {"error": "NOT NULL constraint failed: employee.name"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Returned by GET /health for liveness probes."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Store connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
