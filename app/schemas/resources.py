"""Response schema for the placeholder resource routes (pipelines, deployments, metrics, users)."""

from pydantic import BaseModel, Field


class PlaceholderResponse(BaseModel):
    """Canned acknowledgement; these routes have no backing engine."""

    message: str = Field(..., description="What the route would do")
