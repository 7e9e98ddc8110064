"""Pydantic schemas for health check responses."""

from typing import Literal

from pydantic import BaseModel, Field

ConnectionStatus = Literal["connected", "disconnected"]


class ServiceStatuses(BaseModel):
    database: ConnectionStatus
    redis: ConnectionStatus


class HealthResponse(BaseModel):
    """Response body for the health check endpoint."""

    status: Literal["healthy", "unhealthy"] = Field(description="Overall service status")
    environment: str = Field(description="Current app environment (e.g. dev, prod)")
    version: str = Field(description="API version")
    uptime_seconds: float = Field(description="Seconds since the process started")
    services: ServiceStatuses
