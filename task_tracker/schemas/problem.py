"""Problem-detail schema: the body of every error response."""

from datetime import datetime

from pydantic import BaseModel, Field


class ProblemDetail(BaseModel):
    """Uniform error body (media type application/problem+json)."""

    status: int = Field(..., description="HTTP status code")
    title: str = Field(..., description="Short summary of the problem kind")
    detail: str = Field(..., description="Explanation of this occurrence")
    timestamp: datetime = Field(..., description="When the error was translated")
    errors: dict[str, str] | None = Field(
        default=None, description="Field name -> message (validation errors only)"
    )
