from fastapi import Request, responses

from demo_booking.errors import BookingError
from demo_booking.utils.logger import get_logger

logger = get_logger(__name__)


def booking_error_handler(request: Request, exc: BookingError) -> responses.JSONResponse:
    """Render a BookingError as ``{"error": <message>}`` with its status."""
    if exc.status_code >= 500:
        logger.error(f"{request.method} {request.url.path} failed: {exc.msg}")
    return responses.JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.msg}
    )


def unexpected_error_handler(request: Request, exc: Exception) -> responses.JSONResponse:
    """
    Catch-all so clients always receive the JSON error shape.

    Starlette re-raises the exception after this response is sent and the
    server logs its traceback, so only a summary line is logged here.
    """
    logger.error(f"Unhandled error on {request.url.path}: {exc.__class__.__name__}: {str(exc)}")
    return responses.JSONResponse(
        status_code=500,
        content={"error": "Something went wrong. Please try again."}
    )
