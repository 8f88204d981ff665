#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
HubSpot Forms Integration

Posts a submission to HubSpot's public form-submission endpoint. This needs
no credential: the portal and form ids identify the target form.
"""

from typing import Dict, List, Optional

import requests

from demo_booking.errors import SubmissionError
from demo_booking.utils.logger import get_logger, log_integration_event

logger = get_logger(__name__)

FORMS_API_BASE = "https://api.hsforms.com/submissions/v3/integration/submit"
DEFAULT_TIMEOUT = 10  # seconds

SUBMISSION_FAILED_MESSAGE = "Submission failed. Please try again."
CONNECTION_ERROR_MESSAGE = "Connection error. Please try again."


def first_error_message(response: requests.Response) -> Optional[str]:
    """Return ``errors[0].message`` from a HubSpot error body, if any."""
    try:
        data = response.json()
    except ValueError:
        return None

    if not isinstance(data, dict):
        return None
    errors = data.get("errors")
    if not errors or not isinstance(errors, list) or not isinstance(errors[0], dict):
        return None
    message = errors[0].get("message")
    return message if isinstance(message, str) and message else None


class HubSpotFormsClient:
    """Client for the HubSpot forms submission API."""

    def __init__(
        self,
        portal_id: str,
        form_id: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.portal_id = portal_id
        self.form_id = form_id
        self.session = session or requests.Session()
        self.timeout = timeout

    @property
    def submit_url(self) -> str:
        return f"{FORMS_API_BASE}/{self.portal_id}/{self.form_id}"

    def submit(self, fields: List[Dict[str, str]], context: Optional[Dict[str, str]] = None) -> None:
        """
        Submit form fields.

        Args:
            fields: ``[{"name": ..., "value": ...}]`` entries
            context: Page context (``pageUri``, ``pageName``)

        Raises:
            SubmissionError: HubSpot answered non-2xx or could not be reached
        """
        payload = {"fields": fields, "context": context or {}}

        try:
            response = self.session.post(self.submit_url, json=payload, timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"HubSpot form submission failed: {str(e)}")
            raise SubmissionError(CONNECTION_ERROR_MESSAGE) from e

        if not response.ok:
            message = first_error_message(response)
            logger.warning(f"HubSpot form submission rejected: {response.status_code} {message}")
            raise SubmissionError(message or SUBMISSION_FAILED_MESSAGE)

        log_integration_event("hubspot", "form_submit", f"Submitted form {self.form_id}")
