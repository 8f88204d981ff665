"""Error types raised by the booking flow.

Each error carries the message shown to the visitor and the HTTP status the
contact proxy answers with.
"""


class BookingError(Exception):
    """Base class for booking errors"""

    def __init__(self, msg="Something went wrong. Please try again.", status_code=500):
        self.msg = msg
        self.status_code = status_code
        super().__init__(self.msg)


class ClientValidationError(BookingError):
    """Raised when submitted contact fields are missing or not acceptable"""

    def __init__(self, msg="Invalid request body", status_code=400):
        super().__init__(msg=msg, status_code=status_code)


class ServerConfigurationError(BookingError):
    """Raised when the server is missing required configuration"""

    def __init__(self, msg="HubSpot API key not configured", status_code=500):
        super().__init__(msg=msg, status_code=status_code)


class UpstreamServiceError(BookingError):
    """Raised when HubSpot rejects a request or cannot be reached"""

    def __init__(self, msg="Service temporarily unavailable. Please try again.", status_code=502):
        super().__init__(msg=msg, status_code=status_code)


class SubmissionError(Exception):
    """Raised by modal submitters; the message is displayed inline."""

    def __init__(self, msg="Submission failed. Please try again."):
        self.msg = msg
        super().__init__(self.msg)


class InvalidTransitionError(Exception):
    """Raised when the modal is asked to make a transition its table forbids"""

    def __init__(self, state, event):
        self.state = state
        self.event = event
        super().__init__(f"Cannot apply {event.value!r} in state {state.value!r}")
