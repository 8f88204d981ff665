#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Submitters - the single network call the modal makes per submission.

ProxySubmitter talks to the contact proxy endpoint; DirectFormSubmitter posts
straight to the HubSpot forms API and builds the scheduler URL locally.
Both return the scheduling URL or raise SubmissionError with display text.
"""

from typing import Optional

import requests

from demo_booking.errors import SubmissionError
from demo_booking.hubspot.forms_client import (
    CONNECTION_ERROR_MESSAGE,
    SUBMISSION_FAILED_MESSAGE,
    HubSpotFormsClient,
)
from demo_booking.models.contact import ContactSubmission
from demo_booking.services.scheduling import build_embed_url
from demo_booking.utils.logger import get_logger

logger = get_logger(__name__)

DEFAULT_TIMEOUT = 10  # seconds


class Submitter:
    """Interface: submit a normalized submission, return the meeting URL."""

    def submit(self, submission: ContactSubmission) -> str:
        raise NotImplementedError


class ProxySubmitter(Submitter):
    """Submit through the contact proxy endpoint."""

    def __init__(
        self,
        endpoint_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        self.endpoint_url = endpoint_url
        self.session = session or requests.Session()
        self.timeout = timeout

    def submit(self, submission: ContactSubmission) -> str:
        try:
            response = self.session.post(
                self.endpoint_url, json=submission.to_dict(), timeout=self.timeout
            )
        except requests.RequestException as e:
            logger.error(f"Contact proxy unreachable: {str(e)}")
            raise SubmissionError(CONNECTION_ERROR_MESSAGE) from e

        try:
            data = response.json()
        except ValueError:
            data = None
        if not isinstance(data, dict):
            data = {}

        if not response.ok:
            message = data.get("error")
            raise SubmissionError(message if isinstance(message, str) and message else SUBMISSION_FAILED_MESSAGE)

        meeting_url = data.get("meetingUrl")
        if not meeting_url:
            logger.error("Contact proxy answered without a meetingUrl")
            raise SubmissionError(SUBMISSION_FAILED_MESSAGE)
        return meeting_url


class DirectFormSubmitter(Submitter):
    """Submit straight to the HubSpot forms API."""

    def __init__(
        self,
        forms_client: HubSpotFormsClient,
        meeting_slug: str,
        page_uri: str = "",
        page_name: str = "",
    ):
        self.forms_client = forms_client
        self.meeting_slug = meeting_slug
        self.page_uri = page_uri
        self.page_name = page_name

    def submit(self, submission: ContactSubmission) -> str:
        self.forms_client.submit(
            submission.to_form_fields(),
            context={"pageUri": self.page_uri, "pageName": self.page_name},
        )
        return build_embed_url(self.meeting_slug, submission)
