"""Pydantic models for API responses."""

from pydantic import BaseModel, Field

# Detail returned for every 500-class failure; internals stay in the logs
INTERNAL_ERROR_DETAIL = "Internal server error"

# Detail returned when a request body or query fails schema validation
INVALID_REQUEST_DETAIL = "Invalid request"


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str = Field(..., description="Error description")
