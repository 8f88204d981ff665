"""
Email Classifier - separates business addresses from consumer mailboxes.
"""

import re
from typing import Optional

# Consumer mailbox providers that do not identify a company.
FREE_EMAIL_DOMAINS = frozenset({
    "gmail.com", "yahoo.com", "hotmail.com", "outlook.com", "aol.com",
    "icloud.com", "mail.com", "protonmail.com", "zoho.com", "yandex.com",
    "live.com", "msn.com", "me.com", "mac.com", "inbox.com", "gmx.com",
    "fastmail.com", "hey.com", "pm.me", "proton.me", "tutanota.com",
    "yahoo.co.uk", "googlemail.com", "rocketmail.com", "ymail.com",
})

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def extract_domain(email: str) -> Optional[str]:
    """Return the lower-cased part after the last '@', or None."""
    local, sep, domain = (email or "").rpartition("@")
    if not sep or not domain:
        return None
    return domain.lower()


def is_business_email(email: str) -> bool:
    """
    Classify an email address.

    Returns True iff the address has a domain and that domain is not a known
    free provider. Addresses without '@' are never business emails.
    """
    domain = extract_domain(email)
    if not domain:
        return False
    return domain not in FREE_EMAIL_DOMAINS


def is_valid_email_format(email: str) -> bool:
    """Check the simple ``local@domain.tld`` shape."""
    return bool(EMAIL_PATTERN.fullmatch(email or ""))
