"""
Base Schemas.

Shared API response schemas.
"""

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response.

    Every error the API returns has this shape, whatever its status code.
    """

    error: str = Field(
        description="Human-readable error message",
        examples=["Cliente não encontrado"],
    )
