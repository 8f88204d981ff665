"""
Unit tests for the contact upsert service.
"""

import unittest
from unittest.mock import MagicMock, patch

from demo_booking.config import AppConfig
from demo_booking.errors import ServerConfigurationError, UpstreamServiceError
from demo_booking.hubspot.contacts_client import ContactExistsError
from demo_booking.models.contact import ContactSubmission
from demo_booking.services.contact_upsert import ContactUpsertService

MEETING_LINK = "https://meetings.hubspot.com/joseph792"


class TestContactUpsertService(unittest.TestCase):
    """Test create-or-update behaviour."""

    def setUp(self):
        self.contacts_client = MagicMock()
        self.contacts_client.create_contact.return_value = "101"
        self.service = ContactUpsertService(self.contacts_client, MEETING_LINK)
        self.submission = ContactSubmission("Jane", "Smith", "jane@acme.com")
        self.expected_url = f"{MEETING_LINK}?email=jane%40acme.com&firstName=Jane&lastName=Smith"

    def test_new_contact(self):
        url = self.service.upsert(self.submission)

        self.assertEqual(url, self.expected_url)
        self.contacts_client.create_contact.assert_called_once_with(
            {"firstname": "Jane", "lastname": "Smith", "email": "jane@acme.com"}
        )
        self.contacts_client.update_contact.assert_not_called()

    def test_existing_contact_is_updated(self):
        self.contacts_client.create_contact.side_effect = ContactExistsError("51")

        url = self.service.upsert(self.submission)

        self.assertEqual(url, self.expected_url)
        self.contacts_client.update_contact.assert_called_once_with(
            "51", {"firstname": "Jane", "lastname": "Smith"}
        )

    def test_existing_contact_update_failure_still_succeeds(self):
        self.contacts_client.create_contact.side_effect = ContactExistsError("51")
        self.contacts_client.update_contact.return_value = False

        self.assertEqual(self.service.upsert(self.submission), self.expected_url)

    def test_existing_contact_without_id_skips_update(self):
        self.contacts_client.create_contact.side_effect = ContactExistsError(None)

        url = self.service.upsert(self.submission)

        self.assertEqual(url, self.expected_url)
        self.contacts_client.update_contact.assert_not_called()

    def test_upstream_failure_propagates(self):
        self.contacts_client.create_contact.side_effect = UpstreamServiceError("Failed to save contact. Please try again.")

        with self.assertRaises(UpstreamServiceError):
            self.service.upsert(self.submission)

        self.contacts_client.update_contact.assert_not_called()


class TestFromConfig(unittest.TestCase):
    """Test building the service from configuration."""

    @patch("demo_booking.hubspot.contacts_client.hubspot.Client.create")
    def test_missing_key(self, mock_create):
        app_config = AppConfig()
        app_config.hubspot_api_key = None

        with self.assertRaises(ServerConfigurationError) as ctx:
            ContactUpsertService.from_config(app_config)

        self.assertEqual(ctx.exception.status_code, 500)
        mock_create.assert_not_called()

    @patch("demo_booking.hubspot.contacts_client.hubspot.Client.create")
    def test_builds_client(self, mock_create):
        app_config = AppConfig()
        app_config.hubspot_api_key = "pat-123"
        app_config.hubspot_meeting_link = "https://meetings.example.com/sales"
        app_config.request_timeout = 4

        service = ContactUpsertService.from_config(app_config)

        mock_create.assert_called_once_with(access_token="pat-123")
        self.assertEqual(service.meeting_link, "https://meetings.example.com/sales")
        self.assertEqual(service.contacts_client.timeout, 4)
