#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Contact Model - Defines the demo request submitted from the modal.
"""

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class ContactSubmission:
    """
    A visitor's demo request.

    Built from form input at submit time and discarded once the request
    completes. Wire names are camelCase (``firstName``/``lastName``).
    """

    first_name: str = ""
    last_name: str = ""
    email: str = ""

    def normalized(self) -> "ContactSubmission":
        """Trimmed names and a trimmed, lower-cased email."""
        return ContactSubmission(
            first_name=(self.first_name or "").strip(),
            last_name=(self.last_name or "").strip(),
            email=(self.email or "").strip().lower(),
        )

    def is_complete(self) -> bool:
        """True when no field is blank after trimming."""
        return all((value or "").strip() for value in (self.first_name, self.last_name, self.email))

    def to_dict(self) -> Dict[str, str]:
        """Convert to the JSON body the contact proxy accepts."""
        return {
            "firstName": self.first_name,
            "lastName": self.last_name,
            "email": self.email,
        }

    def to_hubspot_properties(self, include_email: bool = True) -> Dict[str, str]:
        """Map to HubSpot contact properties."""
        properties = {
            "firstname": self.first_name,
            "lastname": self.last_name,
        }
        if include_email:
            properties["email"] = self.email
        return properties

    def to_form_fields(self) -> List[Dict[str, str]]:
        """Map to the ``fields`` list of a HubSpot form submission."""
        return [
            {"name": name, "value": value}
            for name, value in self.to_hubspot_properties().items()
        ]

