"""Pydantic models for health check endpoints."""

from typing import Literal

from pydantic import BaseModel, Field

API_VERSION = "0.1.0"


class HealthResponse(BaseModel):
    """Response model for the health check endpoint."""

    status: Literal["healthy"] = Field(default="healthy", description="Service health status")
    version: str = Field(default=API_VERSION, description="Application version")
