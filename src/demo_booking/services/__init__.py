"""
Service layer for the contact proxy.
"""

from .contact_upsert import ContactUpsertService
from .scheduling import build_embed_url, build_meeting_url

__all__ = ["ContactUpsertService", "build_embed_url", "build_meeting_url"]
