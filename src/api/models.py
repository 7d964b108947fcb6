"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Email format is deliberately not checked here: the Attendee aggregate is the
only authority on whether an email is acceptable.
"""

from pydantic import BaseModel, Field


class RegisterAttendeeRequest(BaseModel):
    """Request model for attendee registration."""

    email: str = Field(..., max_length=320, description="Attendee email address")


class AttendeeResponse(BaseModel):
    """Response model for a registered attendee."""

    email: str


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
