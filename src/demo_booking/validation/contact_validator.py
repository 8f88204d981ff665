"""
Contact Validator - checks a demo request before anything is sent.

The same rules run in the modal (before the network call) and in the
contact proxy (before HubSpot is touched).
"""

import logging

from demo_booking.errors import ClientValidationError
from demo_booking.models.contact import ContactSubmission
from demo_booking.validation.email_classifier import is_business_email, is_valid_email_format

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "First name, last name, and email are required."
INVALID_EMAIL_MESSAGE = "Please enter a valid email address."
BUSINESS_EMAIL_MESSAGE = "Please use your business email address."


def validate_submission(
    first_name: str,
    last_name: str,
    email: str,
    business_email_message: str = BUSINESS_EMAIL_MESSAGE,
) -> ContactSubmission:
    """
    Validate raw form values and return the normalized submission.

    Args:
        first_name: First name as typed
        last_name: Last name as typed
        email: Email as typed
        business_email_message: Message used when the address belongs to a
            free provider

    Returns:
        ContactSubmission with trimmed names and lower-cased email

    Raises:
        ClientValidationError: a field is blank, the email is malformed, or
            the email is not a business address
    """
    submission = ContactSubmission(first_name, last_name, email)
    if not submission.is_complete():
        raise ClientValidationError(REQUIRED_FIELDS_MESSAGE)

    submission = submission.normalized()

    if not is_valid_email_format(submission.email):
        raise ClientValidationError(INVALID_EMAIL_MESSAGE)

    if not is_business_email(submission.email):
        logger.debug("Rejected free-provider address for %s", submission.email.rpartition("@")[2])
        raise ClientValidationError(business_email_message)

    return submission
