"""Core schema definitions for the error envelope.

Every AppError is rendered by the exception handlers in this shape; routes
reference ErrorResponse in their OpenAPI ``responses`` so clients can rely
on it.

Example error response:
    {
        "success": false,
        "error": {
            "code": "INVALID_DATA",
            "message": "Missing enrollmentDate",
            "details": { "field": "enrollmentDate", "index": 3 }
        }
    }
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorDetail(BaseModel):
    """Error detail structure."""

    code: str = Field(..., description="Error code for programmatic handling")
    message: str = Field(..., description="Human-readable error message")
    details: dict[str, Any] | None = Field(None, description="Additional error context")


class ErrorResponse(BaseModel):
    """Standard error response format."""

    success: bool = False
    error: ErrorDetail
