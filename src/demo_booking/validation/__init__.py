"""
Validation module for the Book-a-Demo flow.

Email classification and contact field checks shared by the modal and the
contact proxy.
"""

from .email_classifier import (
    FREE_EMAIL_DOMAINS,
    extract_domain,
    is_business_email,
    is_valid_email_format,
)
from .contact_validator import validate_submission

__all__ = [
    "FREE_EMAIL_DOMAINS",
    "extract_domain",
    "is_business_email",
    "is_valid_email_format",
    "validate_submission",
]
