#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Pytest configuration file for the Book-a-Demo test suite.
"""

import os
import sys
import pytest
from pathlib import Path
from unittest.mock import MagicMock

# Add the src directory to Python path for accessing demo_booking
project_root = Path(__file__).parent.parent
src_path = os.path.join(project_root, "src")
if src_path not in sys.path:
    sys.path.insert(0, src_path)

from demo_booking.models.contact import ContactSubmission


# Define pytest markers
def pytest_configure(config):
    """Configure pytest."""
    config.addinivalue_line(
        "markers", "hubspot: mark test as exercising HubSpot client code (mocked)"
    )


@pytest.fixture(scope="function")
def temp_log_path(tmp_path: Path) -> Path:
    """Temporary log file path for testing."""
    return tmp_path / "test.log"


@pytest.fixture(scope="function")
def mock_env_vars(monkeypatch, temp_log_path: Path):
    """
    Set up environment variables for testing.

    Args:
        monkeypatch: Pytest monkeypatch fixture
        temp_log_path: Temporary log file path
    """
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FILE_PATH", str(temp_log_path))
    monkeypatch.setenv("HUBSPOT_API_KEY", "test_api_key")
    monkeypatch.setenv("HUBSPOT_MEETING_LINK", "https://meetings.example.com/sales")
    monkeypatch.setenv("REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("ENV", "development")


@pytest.fixture(scope="function")
def clean_env(monkeypatch):
    """Remove every variable the service reads."""
    for name in (
        "HUBSPOT_API_KEY",
        "HUBSPOT_MEETING_LINK",
        "HUBSPOT_PORTAL_ID",
        "HUBSPOT_FORM_ID",
        "HUBSPOT_MEETING_SLUG",
        "BOOKING_PROXY_URL",
        "REQUEST_TIMEOUT",
        "CORS_ALLOW_ORIGINS",
        "LOG_FILE_PATH",
        "LOG_JSON",
        "PORT",
        "ENV",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def submission() -> ContactSubmission:
    """A normalized, valid submission."""
    return ContactSubmission(first_name="Jane", last_name="Smith", email="jane@acme.com")


@pytest.fixture
def mock_hubspot_client() -> MagicMock:
    """A stand-in for hubspot.Client whose contact create succeeds."""
    client = MagicMock()
    client.crm.contacts.basic_api.create.return_value = MagicMock(id="101")
    return client
