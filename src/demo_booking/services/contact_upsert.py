#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Contact Upsert Service

Creates or updates the HubSpot contact for a validated demo request and
returns the pre-filled scheduling URL.
"""

from typing import Optional

from demo_booking.config import AppConfig
from demo_booking.errors import ServerConfigurationError
from demo_booking.hubspot.contacts_client import ContactExistsError, HubSpotContactsClient
from demo_booking.models.contact import ContactSubmission
from demo_booking.services.scheduling import build_meeting_url
from demo_booking.utils.logger import get_logger, log_integration_event

logger = get_logger(__name__)


class ContactUpsertService:
    """
    Create-or-update a contact by email.

    At most two sequential HubSpot calls are made per submission: the create,
    and an update of the name fields when the contact already exists.
    """

    def __init__(self, contacts_client: HubSpotContactsClient, meeting_link: str):
        self.contacts_client = contacts_client
        self.meeting_link = meeting_link

    @classmethod
    def from_config(cls, app_config: AppConfig) -> "ContactUpsertService":
        """
        Build the service from configuration.

        Raises:
            ServerConfigurationError: HUBSPOT_API_KEY is not set
        """
        if not app_config.hubspot_api_key:
            raise ServerConfigurationError()
        client = HubSpotContactsClient(
            api_key=app_config.hubspot_api_key,
            timeout=app_config.request_timeout,
        )
        return cls(client, app_config.hubspot_meeting_link)

    def upsert(self, submission: ContactSubmission) -> str:
        """
        Save the contact and return the scheduling URL.

        Args:
            submission: Normalized, validated submission

        Returns:
            str: Meeting URL with email, firstName and lastName pre-filled

        Raises:
            UpstreamServiceError: HubSpot failed for a reason other than a conflict
        """
        contact_id: Optional[str]
        try:
            contact_id = self.contacts_client.create_contact(submission.to_hubspot_properties())
        except ContactExistsError as e:
            contact_id = e.existing_id
            if contact_id:
                self.contacts_client.update_contact(
                    contact_id, submission.to_hubspot_properties(include_email=False)
                )
            else:
                # The contact exists either way; the name update is best effort.
                logger.warning("Could not read existing contact id from conflict response")

        log_integration_event("hubspot", "upsert_complete", f"Contact {contact_id or 'unknown'} ready")
        return build_meeting_url(self.meeting_link, submission)
