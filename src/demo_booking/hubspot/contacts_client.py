#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
HubSpot Contacts Integration

Provides a thin client over the HubSpot CRM contacts API for creating a
contact and updating an existing one.
"""

import json
import re
import logging
from typing import Dict, Any, Optional

import hubspot
from hubspot.crm.contacts import (
    ApiException,
    SimplePublicObjectInput,
    SimplePublicObjectInputForCreate,
)

from demo_booking.errors import ServerConfigurationError, UpstreamServiceError
from demo_booking.utils.logger import get_logger, log_integration_event, log_sensitive

logger = get_logger(__name__)

# Constants
DEFAULT_TIMEOUT = 10  # seconds
CONFLICT_STATUS = 409
EXISTING_ID_PATTERN = re.compile(r"ID:\s*(\d+)")

SAVE_FAILED_MESSAGE = "Failed to save contact. Please try again."
UNAVAILABLE_MESSAGE = "Service temporarily unavailable. Please try again."


class ContactExistsError(Exception):
    """Raised when HubSpot reports that a contact with the email already exists."""

    def __init__(self, existing_id: Optional[str], body: Optional[str] = None):
        self.existing_id = existing_id
        self.body = body
        super().__init__(f"Contact already exists (id={existing_id})")


def parse_existing_contact_id(body: Any) -> Optional[str]:
    """
    Pull the existing contact id out of a 409 response body.

    HubSpot answers with ``{"message": "Contact already exists. Existing ID: 123", ...}``.
    Returns None when the body is not JSON or carries no id.
    """
    if not body:
        return None

    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")

    try:
        payload = json.loads(body) if isinstance(body, str) else body
    except ValueError:
        return None

    message = payload.get("message") if isinstance(payload, dict) else None
    if not isinstance(message, str):
        return None

    match = EXISTING_ID_PATTERN.search(message)
    return match.group(1) if match else None


class HubSpotContactsClient:
    """
    Client for the HubSpot contacts API.

    Makes exactly one API call per method and never retries.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        client: Optional[hubspot.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ):
        """
        Initialize the HubSpot client.

        Args:
            api_key: HubSpot private app access token
            client: Pre-built hubspot.Client (tests inject a mock here)
            timeout: Request timeout in seconds
        """
        if client is None:
            if not api_key:
                raise ServerConfigurationError()
            client = hubspot.Client.create(access_token=api_key)

        self.client = client
        self.timeout = timeout

    def create_contact(self, properties: Dict[str, Any]) -> str:
        """
        Create a new contact in HubSpot.

        Args:
            properties: Contact properties (firstname, lastname, email)

        Returns:
            str: The new contact id

        Raises:
            ContactExistsError: a contact with this email already exists
            UpstreamServiceError: HubSpot rejected the request or is unreachable
        """
        log_sensitive(
            logger,
            logging.INFO,
            f"Creating contact {properties.get('email')}",
            email=properties.get("email"),
        )

        try:
            contact = self.client.crm.contacts.basic_api.create(
                simple_public_object_input_for_create=SimplePublicObjectInputForCreate(
                    properties=properties, associations=[]
                ),
                _request_timeout=self.timeout,
            )
        except ApiException as e:
            if e.status == CONFLICT_STATUS:
                existing_id = parse_existing_contact_id(e.body)
                log_integration_event("hubspot", "conflict", f"Contact already exists (id={existing_id})")
                raise ContactExistsError(existing_id, e.body) from e

            log_sensitive(
                logger,
                logging.ERROR,
                f"HubSpot create error: {e.status} {e.reason} {e.body}",
                email=properties.get("email"),
            )
            raise UpstreamServiceError(SAVE_FAILED_MESSAGE) from e
        except Exception as e:
            logger.error(f"HubSpot API error: {str(e)}", exc_info=True)
            raise UpstreamServiceError(UNAVAILABLE_MESSAGE) from e

        log_integration_event("hubspot", "create_contact", f"Created contact {contact.id}")
        return contact.id

    def update_contact(self, contact_id: str, properties: Dict[str, Any]) -> bool:
        """
        Update an existing contact.

        Args:
            contact_id: HubSpot contact id
            properties: Properties to overwrite

        Returns:
            bool: True if successful, False otherwise
        """
        try:
            self.client.crm.contacts.basic_api.update(
                contact_id=contact_id,
                simple_public_object_input=SimplePublicObjectInput(properties=properties),
                _request_timeout=self.timeout,
            )
        except Exception as e:
            logger.warning(f"Error updating contact {contact_id}: {str(e)}")
            return False

        log_integration_event("hubspot", "update_contact", f"Updated contact {contact_id}")
        return True
