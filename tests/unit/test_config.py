#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Unit tests for the configuration module.
"""

import logging

from demo_booking.config import AppConfig, DEFAULT_MEETING_LINK, DEFAULT_PORTAL_ID, DEFAULT_FORM_ID


class TestAppConfig:
    """Tests for the AppConfig class."""

    def test_load_from_env(self, mock_env_vars, temp_log_path):
        """Test that config loads values from environment variables."""
        config = AppConfig()

        assert config.log_level == logging.DEBUG
        assert config.log_file_path == str(temp_log_path)
        assert config.hubspot_api_key == "test_api_key"
        assert config.hubspot_meeting_link == "https://meetings.example.com/sales"
        assert config.request_timeout == 5.0
        assert config.port == 9000
        assert config.debug_mode is True
        assert config.hubspot_configured is True

    def test_defaults(self, clean_env):
        """Test defaults when nothing is set."""
        config = AppConfig()

        assert config.hubspot_api_key is None
        assert config.hubspot_configured is False
        assert config.hubspot_meeting_link == DEFAULT_MEETING_LINK
        assert config.hubspot_portal_id == DEFAULT_PORTAL_ID
        assert config.hubspot_form_id == DEFAULT_FORM_ID
        assert config.hubspot_meeting_slug == "joseph792"
        assert config.cors_allow_origins == ["*"]
        assert config.log_file_path is None
        assert config.debug_mode is False

    def test_empty_meeting_link_falls_back_to_default(self, clean_env, monkeypatch):
        monkeypatch.setenv("HUBSPOT_MEETING_LINK", "")

        assert AppConfig().hubspot_meeting_link == DEFAULT_MEETING_LINK

    def test_cors_origins_list(self, clean_env, monkeypatch):
        monkeypatch.setenv("CORS_ALLOW_ORIGINS", "https://a.example, https://b.example,")

        assert AppConfig().cors_allow_origins == ["https://a.example", "https://b.example"]

    def test_reads_environment_at_construction(self, clean_env, monkeypatch):
        """A new instance picks up a credential set after the previous one was built."""
        assert AppConfig().hubspot_api_key is None

        monkeypatch.setenv("HUBSPOT_API_KEY", "late_key")

        assert AppConfig().hubspot_api_key == "late_key"

    def test_validate_valid_config(self, mock_env_vars):
        """Test validation with valid configuration."""
        config = AppConfig()

        errors = config.validate()
        assert len(errors) == 0

    def test_validate_invalid_config(self, clean_env):
        """Test validation with invalid configuration."""
        config = AppConfig()

        config.hubspot_meeting_link = "meetings.hubspot.com/someone"
        config.hubspot_form_id = ""
        config.request_timeout = 0
        config.port = 70000

        errors = config.validate()
        assert len(errors) == 5
        assert any("HUBSPOT_API_KEY is required" in error for error in errors)
        assert any("HUBSPOT_MEETING_LINK must be an http(s) URL" in error for error in errors)
        assert any("HUBSPOT_FORM_ID must not be empty" in error for error in errors)
        assert any("REQUEST_TIMEOUT must be positive" in error for error in errors)
        assert any("PORT must be between" in error for error in errors)
