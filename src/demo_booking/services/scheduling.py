"""
Scheduling link builders.

Both variants pre-fill the HubSpot meetings page with the visitor's name and
email so they do not have to type them again.
"""

from typing import List, Tuple
from urllib.parse import parse_qsl, quote, urlencode, urlsplit, urlunsplit

from demo_booking.models.contact import ContactSubmission

MEETINGS_HOST = "https://meetings.hubspot.com"

# Characters encodeURIComponent leaves alone besides alphanumerics and "-_."
_URI_COMPONENT_SAFE = "!~*'()"


def _set_param(params: List[Tuple[str, str]], name: str, value: str) -> List[Tuple[str, str]]:
    # Replace the first occurrence in place and drop the rest, append if absent.
    result = []
    replaced = False
    for key, existing in params:
        if key != name:
            result.append((key, existing))
        elif not replaced:
            result.append((name, value))
            replaced = True
    if not replaced:
        result.append((name, value))
    return result


def build_meeting_url(base_url: str, submission: ContactSubmission) -> str:
    """
    Attach the visitor's details to the base meeting link.

    Existing query parameters on ``base_url`` are kept; ``email``,
    ``firstName`` and ``lastName`` are set (overwriting any present).
    Values are form-encoded, so ``jane@acme.com`` becomes ``jane%40acme.com``.
    """
    parts = urlsplit(base_url)
    params = parse_qsl(parts.query, keep_blank_values=True)
    params = _set_param(params, "email", submission.email)
    params = _set_param(params, "firstName", submission.first_name)
    params = _set_param(params, "lastName", submission.last_name)
    path = parts.path or "/"
    return urlunsplit((parts.scheme, parts.netloc, path, urlencode(params), parts.fragment))


def build_embed_url(meeting_slug: str, submission: ContactSubmission, host: str = MEETINGS_HOST) -> str:
    """Build the embeddable scheduler URL used after a direct form submission."""
    def enc(value: str) -> str:
        return quote(value, safe=_URI_COMPONENT_SAFE)

    return (
        f"{host.rstrip('/')}/{meeting_slug}?embed=true"
        f"&firstName={enc(submission.first_name)}"
        f"&lastName={enc(submission.last_name)}"
        f"&email={enc(submission.email)}"
    )
