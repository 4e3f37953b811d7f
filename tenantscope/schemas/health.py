"""Health check API schemas."""

from typing import Literal

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health: liveness plus the tenancy mode selected at startup."""

    status: str = Field(default="ok", description="Service status")
    tenancy_mode: Literal["tenancy_package", "platform", "standalone"]
    database_configured: bool
