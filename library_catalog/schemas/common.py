"""
Library Catalog — Shared Response Schemas
===========================================
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    What:  Error format shared by every endpoint.

    Example:
        {"error": "All fields are required"}
    """
    error: str = Field(description="Human-readable error description")


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")
