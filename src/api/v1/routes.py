"""
API v1 routes.

Defines REST endpoints for the Attendee Registration API.
Domain exceptions are translated into HTTP responses here.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from src.api.dependencies import get_registration_service
from src.api.models import AttendeeResponse, ErrorResponse, RegisterAttendeeRequest
from src.domain.exceptions import (
    AttendeeNotFound,
    DuplicateAttendee,
    PersistenceError,
    PublishError,
    ValidationError,
)
from src.domain.registration import RegisterAttendeeCommand, RegistrationService

router = APIRouter(tags=["v1"])

PUBLISH_FAILED_DETAIL = "Attendee registered but registration event was not published"


@router.post(
    "/attendees",
    response_model=AttendeeResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse, "description": "Attendee already registered"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        502: {"model": ErrorResponse, "description": "Registered, event not published"},
        503: {"model": ErrorResponse, "description": "Storage unavailable"},
    },
    summary="Register an attendee",
    description="Submit an email address to register for the conference. "
    "An attendee.registered event is published once the registration is stored.",
)
async def register_attendee(
    request_data: RegisterAttendeeRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> AttendeeResponse:
    """
    Register a new attendee.

    - **email**: Email address of the attendee

    Returns the normalized email on success.
    """
    try:
        summary = service.register_attendee(RegisterAttendeeCommand(email=request_data.email))
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message,
        ) from None
    except DuplicateAttendee:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail="Attendee already registered",
        ) from None
    except PersistenceError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Registration failed",
        ) from None
    except PublishError:
        # Attendee is committed; tell the caller so a retry is not attempted blindly
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=PUBLISH_FAILED_DETAIL,
        ) from None
    return AttendeeResponse(email=summary.email)


@router.get(
    "/attendees/{email}",
    response_model=AttendeeResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Attendee not found"},
        422: {"model": ErrorResponse, "description": "Validation error"},
        503: {"model": ErrorResponse, "description": "Storage unavailable"},
    },
    summary="Get a registered attendee",
)
async def get_attendee(
    email: str,
    service: RegistrationService = Depends(get_registration_service),
) -> AttendeeResponse:
    """Look up a registered attendee by email."""
    try:
        summary = service.get_attendee(email)
    except ValidationError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=e.message,
        ) from None
    except AttendeeNotFound:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="Attendee not found",
        ) from None
    except PersistenceError:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Lookup failed",
        ) from None
    return AttendeeResponse(email=summary.email)
