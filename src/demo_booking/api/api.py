#!/usr/bin/env python3
"""
API Backend for the Book-a-Demo flow.

Exposes the contact proxy the modal posts to: it validates the visitor's
details, creates or updates the HubSpot contact and answers with a
pre-filled scheduling link.
"""

import os
from typing import Optional

from fastapi import FastAPI, Depends, Request, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, ValidationError

from demo_booking import __version__
from demo_booking.api.handlers import booking_error_handler, unexpected_error_handler
from demo_booking.config import AppConfig, config
from demo_booking.errors import BookingError, ClientValidationError
from demo_booking.services.contact_upsert import ContactUpsertService
from demo_booking.utils.logger import configure_logging, get_logger
from demo_booking.validation.contact_validator import validate_submission

# Setup logging
configure_logging(level=config.log_level, log_file=config.log_file_path, json_logs=config.json_logs)
logger = get_logger("demo_booking.api")

INVALID_BODY_MESSAGE = "Invalid request body"

# Initialize FastAPI application
app = FastAPI(
    title="Book-a-Demo API",
    description="Contact proxy for the landing page demo booking modal",
    version=__version__,
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_allow_origins,
    allow_credentials=False,
    allow_methods=["GET", "POST", "OPTIONS"],
    allow_headers=["*"],
)

app.add_exception_handler(BookingError, booking_error_handler)
app.add_exception_handler(Exception, unexpected_error_handler)


#----------------
# Pydantic Models
#----------------

class ContactRequest(BaseModel):
    firstName: Optional[str] = None
    lastName: Optional[str] = None
    email: Optional[str] = None


class BookingResponse(BaseModel):
    success: bool = True
    meetingUrl: str


class ErrorResponse(BaseModel):
    error: str


class HealthStatus(BaseModel):
    status: str
    version: str
    hubspot_configured: bool


#---------------------
# Dependency Injection
#---------------------

def get_config() -> AppConfig:
    """Read configuration from the environment for this request."""
    return AppConfig()


def get_upsert_service(app_config: AppConfig = Depends(get_config)) -> ContactUpsertService:
    """Build the upsert service; fails with a configuration error when the key is missing."""
    return ContactUpsertService.from_config(app_config)


async def parse_contact_request(request: Request) -> ContactRequest:
    try:
        data = await request.json()
    except ValueError:
        raise ClientValidationError(INVALID_BODY_MESSAGE)

    if not isinstance(data, dict):
        raise ClientValidationError(INVALID_BODY_MESSAGE)

    try:
        return ContactRequest.model_validate(data)
    except ValidationError:
        raise ClientValidationError(INVALID_BODY_MESSAGE)


#----------
# Endpoints
#----------

@app.get("/api/health", response_model=HealthStatus)
async def health_check(app_config: AppConfig = Depends(get_config)):
    """Liveness probe; also reports whether the HubSpot credential is present."""
    return HealthStatus(
        status="ok",
        version=__version__,
        hubspot_configured=app_config.hubspot_configured,
    )


@app.post(
    "/api/hubspot-contact",
    response_model=BookingResponse,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
        status.HTTP_502_BAD_GATEWAY: {"model": ErrorResponse},
    },
)
def create_or_update_contact(
    service: ContactUpsertService = Depends(get_upsert_service),
    contact: ContactRequest = Depends(parse_contact_request),
):
    """
    Save the visitor as a HubSpot contact and return their scheduling link.
    """
    submission = validate_submission(
        contact.firstName or "",
        contact.lastName or "",
        contact.email or "",
    )
    meeting_url = service.upsert(submission)
    return BookingResponse(success=True, meetingUrl=meeting_url)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "demo_booking.api.api:app",
        host="0.0.0.0",
        port=int(os.environ.get("PORT", 8000)),
        reload=True if os.environ.get("ENV") == "development" else False,
    )
