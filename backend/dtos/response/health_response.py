"""
Health Response DTOs
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response DTO for the health endpoint."""

    status: str = Field(description="'ok' when the service can reach its database")
    service: str = Field(description="Service name")
    version: str = Field(description="Service version")
    database: str = Field(description="Database connectivity")
