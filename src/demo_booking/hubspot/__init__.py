#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
HubSpot integration package for the Book-a-Demo service.

Provides the contacts API client used by the contact proxy and the public
forms client used by the direct-integration modal variant.
"""

from .contacts_client import ContactExistsError, HubSpotContactsClient, parse_existing_contact_id
from .forms_client import HubSpotFormsClient

__all__ = [
    "ContactExistsError",
    "HubSpotContactsClient",
    "HubSpotFormsClient",
    "parse_existing_contact_id",
]
