"""HelloRest — Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    status: str = Field(description="Overall service status: healthy")
    version: str = Field(description="Application version")
    routes: int = Field(description="Number of routes in the route table")
    binding_mode: str = Field(description="Process-wide binding mode")
    uptime_seconds: float = Field(description="Seconds since the service started")
