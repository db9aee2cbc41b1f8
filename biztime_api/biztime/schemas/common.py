"""Common schemas (errors, status messages)."""
from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Body of the error envelope."""

    message: str = Field(..., description="Error message")
    status: int = Field(..., description="HTTP status code")


class ErrorResponse(BaseModel):
    """Standard error response: {"error": {"message", "status"}}."""

    error: ErrorDetail


class StatusResponse(BaseModel):
    """Response for successful deletes."""

    status: str = Field("deleted", description="Always 'deleted'")
