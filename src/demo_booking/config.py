#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Configuration management for the Book-a-Demo service.

This module loads configuration from environment variables (and a local
.env file) and provides sensible defaults. It also validates configuration
values.
"""

import os
import logging
from dataclasses import dataclass, field
from typing import List, Optional

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# HubSpot defaults
DEFAULT_MEETING_LINK = "https://meetings.hubspot.com/joseph792"
DEFAULT_MEETING_SLUG = "joseph792"
DEFAULT_PORTAL_ID = "24411875"
DEFAULT_FORM_ID = "02a0e618-cd42-4dbd-8381-e168aa403dad"
DEFAULT_PROXY_URL = "http://localhost:8000/api/hubspot-contact"

# Log levels
LOG_LEVELS = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def _env_list(name: str, default: str) -> List[str]:
    raw = os.getenv(name, default)
    return [item.strip() for item in raw.split(",") if item.strip()]


@dataclass
class AppConfig:
    """Application configuration."""

    # HubSpot
    hubspot_api_key: Optional[str] = field(
        default_factory=lambda: os.getenv("HUBSPOT_API_KEY") or None
    )
    hubspot_meeting_link: str = field(
        default_factory=lambda: os.getenv("HUBSPOT_MEETING_LINK") or DEFAULT_MEETING_LINK
    )

    # Direct form-submission variant
    hubspot_portal_id: str = field(
        default_factory=lambda: os.getenv("HUBSPOT_PORTAL_ID", DEFAULT_PORTAL_ID)
    )
    hubspot_form_id: str = field(
        default_factory=lambda: os.getenv("HUBSPOT_FORM_ID", DEFAULT_FORM_ID)
    )
    hubspot_meeting_slug: str = field(
        default_factory=lambda: os.getenv("HUBSPOT_MEETING_SLUG", DEFAULT_MEETING_SLUG)
    )

    # Client side
    proxy_url: str = field(
        default_factory=lambda: os.getenv("BOOKING_PROXY_URL", DEFAULT_PROXY_URL)
    )
    request_timeout: float = field(
        default_factory=lambda: float(os.getenv("REQUEST_TIMEOUT", "10"))
    )

    # Server
    port: int = field(default_factory=lambda: int(os.getenv("PORT", "8000")))
    cors_allow_origins: List[str] = field(
        default_factory=lambda: _env_list("CORS_ALLOW_ORIGINS", "*")
    )
    debug_mode: bool = field(
        default_factory=lambda: os.getenv("ENV", "").lower() == "development"
    )

    # Logging
    log_level: int = field(
        default_factory=lambda: LOG_LEVELS.get(
            os.getenv("LOG_LEVEL", "INFO").upper(), logging.INFO
        )
    )
    log_file_path: Optional[str] = field(
        default_factory=lambda: os.getenv("LOG_FILE_PATH") or None
    )
    json_logs: bool = field(
        default_factory=lambda: os.getenv("LOG_JSON", "false").lower() == "true"
    )

    @property
    def hubspot_configured(self) -> bool:
        return bool(self.hubspot_api_key)

    def validate(self) -> List[str]:
        """
        Validate configuration values.

        Returns:
            List[str]: List of validation errors, empty if valid
        """
        errors = []

        if not self.hubspot_api_key:
            errors.append("HUBSPOT_API_KEY is required for the contact proxy")

        if not self.hubspot_meeting_link.startswith(("http://", "https://")):
            errors.append("HUBSPOT_MEETING_LINK must be an http(s) URL")

        if not self.hubspot_portal_id or not self.hubspot_form_id:
            errors.append("HUBSPOT_PORTAL_ID and HUBSPOT_FORM_ID must not be empty")

        if self.request_timeout <= 0:
            errors.append("REQUEST_TIMEOUT must be positive")

        if not 0 < self.port < 65536:
            errors.append("PORT must be between 1 and 65535")

        return errors


# Create a global config instance
config = AppConfig()
