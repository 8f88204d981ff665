"""
Unit tests for the modal submitters and the HubSpot forms client.
"""

import unittest
from unittest.mock import MagicMock

import requests

from demo_booking.errors import SubmissionError
from demo_booking.hubspot.forms_client import HubSpotFormsClient
from demo_booking.modal.submitters import DirectFormSubmitter, ProxySubmitter
from demo_booking.models.contact import ContactSubmission

PROXY_URL = "https://www.example.com/api/hubspot-contact"


def make_response(status_code, payload=None, raise_on_json=False):
    response = MagicMock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    if raise_on_json:
        response.json.side_effect = ValueError("No JSON")
    else:
        response.json.return_value = payload
    return response


class TestProxySubmitter(unittest.TestCase):
    """Test submitting through the contact proxy."""

    def setUp(self):
        self.session = MagicMock(spec=requests.Session)
        self.submitter = ProxySubmitter(PROXY_URL, session=self.session, timeout=7)
        self.submission = ContactSubmission("Jane", "Smith", "jane@acme.com")

    def test_success(self):
        self.session.post.return_value = make_response(200, {"success": True, "meetingUrl": "https://m/x"})

        self.assertEqual(self.submitter.submit(self.submission), "https://m/x")
        self.session.post.assert_called_once_with(
            PROXY_URL,
            json={"firstName": "Jane", "lastName": "Smith", "email": "jane@acme.com"},
            timeout=7,
        )

    def test_server_message_is_preferred(self):
        self.session.post.return_value = make_response(400, {"error": "Please use your business email address."})

        with self.assertRaises(SubmissionError) as ctx:
            self.submitter.submit(self.submission)

        self.assertEqual(ctx.exception.msg, "Please use your business email address.")

    def test_fallback_message(self):
        for response in [make_response(502, {}), make_response(500, raise_on_json=True), make_response(503, ["x"])]:
            with self.subTest(status=response.status_code):
                self.session.post.return_value = response

                with self.assertRaises(SubmissionError) as ctx:
                    self.submitter.submit(self.submission)

                self.assertEqual(ctx.exception.msg, "Submission failed. Please try again.")

    def test_missing_meeting_url(self):
        self.session.post.return_value = make_response(200, {"success": True})

        with self.assertRaises(SubmissionError):
            self.submitter.submit(self.submission)

    def test_connection_error(self):
        self.session.post.side_effect = requests.ConnectionError("refused")

        with self.assertRaises(SubmissionError) as ctx:
            self.submitter.submit(self.submission)

        self.assertEqual(ctx.exception.msg, "Connection error. Please try again.")
        self.assertEqual(self.session.post.call_count, 1)


class TestHubSpotFormsClient(unittest.TestCase):
    """Test the public forms submission client."""

    def setUp(self):
        self.session = MagicMock(spec=requests.Session)
        self.client = HubSpotFormsClient("24411875", "form-guid", session=self.session, timeout=5)

    def test_submit_url(self):
        self.assertEqual(
            self.client.submit_url,
            "https://api.hsforms.com/submissions/v3/integration/submit/24411875/form-guid",
        )

    def test_submit_payload(self):
        self.session.post.return_value = make_response(200, {"inlineMessage": "Thanks"})
        fields = [{"name": "email", "value": "jane@acme.com"}]

        self.client.submit(fields, context={"pageUri": "https://www.example.com/", "pageName": "Home"})

        self.session.post.assert_called_once_with(
            self.client.submit_url,
            json={"fields": fields, "context": {"pageUri": "https://www.example.com/", "pageName": "Home"}},
            timeout=5,
        )

    def test_first_error_message(self):
        self.session.post.return_value = make_response(
            400,
            {"status": "error", "errors": [{"message": "Email is invalid", "errorType": "INVALID_EMAIL"}]},
        )

        with self.assertRaises(SubmissionError) as ctx:
            self.client.submit([])

        self.assertEqual(ctx.exception.msg, "Email is invalid")

    def test_error_fallback(self):
        self.session.post.return_value = make_response(500, raise_on_json=True)

        with self.assertRaises(SubmissionError) as ctx:
            self.client.submit([])

        self.assertEqual(ctx.exception.msg, "Submission failed. Please try again.")

    def test_connection_error(self):
        self.session.post.side_effect = requests.Timeout("timed out")

        with self.assertRaises(SubmissionError) as ctx:
            self.client.submit([])

        self.assertEqual(ctx.exception.msg, "Connection error. Please try again.")


class TestDirectFormSubmitter(unittest.TestCase):
    """Test the direct-integration variant."""

    def setUp(self):
        self.forms_client = MagicMock(spec=HubSpotFormsClient)
        self.submitter = DirectFormSubmitter(
            self.forms_client, "joseph792", page_uri="https://www.example.com/", page_name="Home"
        )

    def test_success_builds_embed_url(self):
        url = self.submitter.submit(ContactSubmission("Jane", "Smith", "jane@acme.com"))

        self.assertEqual(
            url,
            "https://meetings.hubspot.com/joseph792?embed=true&firstName=Jane&lastName=Smith&email=jane%40acme.com",
        )
        self.forms_client.submit.assert_called_once_with(
            [
                {"name": "firstname", "value": "Jane"},
                {"name": "lastname", "value": "Smith"},
                {"name": "email", "value": "jane@acme.com"},
            ],
            context={"pageUri": "https://www.example.com/", "pageName": "Home"},
        )

    def test_failure_propagates(self):
        self.forms_client.submit.side_effect = SubmissionError("Email is invalid")

        with self.assertRaises(SubmissionError):
            self.submitter.submit(ContactSubmission("Jane", "Smith", "jane@acme.com"))
