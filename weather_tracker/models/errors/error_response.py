from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """Error body returned by the weather gateway."""

    error: str = Field(..., description="Human-readable error message")
