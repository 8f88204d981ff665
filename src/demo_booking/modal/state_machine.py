#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""
Book-a-Demo modal controller.

A small finite-state machine independent of any UI toolkit:

    form --submit--> submitting --succeeded--> scheduler
      ^                  |
      +-----failed-------+

Opening or closing the modal from any state returns it to ``form`` with
every field cleared. The host UI supplies a ModalView for the entry/exit
actions (show, scroll lock, focus) and a Submitter for the network call.
"""

from enum import Enum
from typing import Dict, Optional, Tuple

from demo_booking.errors import ClientValidationError, InvalidTransitionError, SubmissionError
from demo_booking.hubspot.forms_client import CONNECTION_ERROR_MESSAGE
from demo_booking.modal.events import OPEN_DEMO_MODAL, EventBus
from demo_booking.modal.submitters import Submitter
from demo_booking.modal.views import ModalView, NullView
from demo_booking.validation.contact_validator import validate_submission
from demo_booking.utils.logger import get_logger

logger = get_logger(__name__)

BUSINESS_EMAIL_MESSAGE = "Please use your business email. No Gmail, Yahoo, etc."
CONFIRMATION_MESSAGE = "Saved. Now pick a time that works for you."


class ModalState(Enum):
    """Steps of the modal flow."""
    FORM = "form"
    SUBMITTING = "submitting"
    SCHEDULER = "scheduler"


class ModalEvent(Enum):
    """Inputs that move the modal between states."""
    OPEN = "open"
    SUBMIT = "submit"
    REJECTED = "rejected"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    CLOSE = "close"


TRANSITIONS: Dict[Tuple[ModalState, ModalEvent], ModalState] = {
    (ModalState.FORM, ModalEvent.SUBMIT): ModalState.SUBMITTING,
    (ModalState.FORM, ModalEvent.REJECTED): ModalState.FORM,
    (ModalState.SUBMITTING, ModalEvent.SUCCEEDED): ModalState.SCHEDULER,
    (ModalState.SUBMITTING, ModalEvent.FAILED): ModalState.FORM,
}
for _state in ModalState:
    TRANSITIONS[(_state, ModalEvent.OPEN)] = ModalState.FORM
    TRANSITIONS[(_state, ModalEvent.CLOSE)] = ModalState.FORM


def next_state(state: ModalState, event: ModalEvent) -> ModalState:
    """Look up a transition, raising InvalidTransitionError if it is not allowed."""
    try:
        return TRANSITIONS[(state, event)]
    except KeyError:
        raise InvalidTransitionError(state, event)


class BookDemoModal:
    """
    Controller for the demo booking modal.

    Args:
        submitter: Performs the one network call per submission
        view: Host hooks for entry/exit actions and rendering
        event_bus: Bus carrying the ``open-demo-modal`` signal
        business_email_message: Text shown for free-provider addresses
    """

    FIELDS = ("first_name", "last_name", "email")

    def __init__(
        self,
        submitter: Submitter,
        view: Optional[ModalView] = None,
        event_bus: Optional[EventBus] = None,
        business_email_message: str = BUSINESS_EMAIL_MESSAGE,
    ):
        self.submitter = submitter
        self.view = view or NullView()
        self.event_bus = event_bus
        self.business_email_message = business_email_message

        self.state = ModalState.FORM
        self.is_open = False
        self.first_name = ""
        self.last_name = ""
        self.email = ""
        self.error = ""
        self.meeting_url: Optional[str] = None

    # Event bus wiring

    def attach(self) -> None:
        if self.event_bus is not None:
            self.event_bus.subscribe(OPEN_DEMO_MODAL, self.open)

    def detach(self) -> None:
        if self.event_bus is not None:
            self.event_bus.unsubscribe(OPEN_DEMO_MODAL, self.open)

    # Derived view state

    @property
    def inputs_disabled(self) -> bool:
        return self.state is ModalState.SUBMITTING

    @property
    def submit_enabled(self) -> bool:
        return self.is_open and self.state is ModalState.FORM

    @property
    def heading(self) -> str:
        return "Pick a time" if self.state is ModalState.SCHEDULER else "Book a demo"

    @property
    def title(self) -> str:
        if self.state is ModalState.SCHEDULER:
            return "Schedule your demo."
        return "See Bindtarget on your list."

    @property
    def submit_label(self) -> str:
        return "Submitting..." if self.state is ModalState.SUBMITTING else "Book a Demo →"

    @property
    def confirmation(self) -> str:
        return CONFIRMATION_MESSAGE if self.state is ModalState.SCHEDULER else ""

    # Transitions

    def _apply(self, event: ModalEvent) -> ModalState:
        previous = self.state
        self.state = next_state(self.state, event)
        logger.debug(f"Modal {previous.value} --{event.value}--> {self.state.value}")
        return self.state

    def _reset(self) -> None:
        self.first_name = ""
        self.last_name = ""
        self.email = ""
        self.error = ""
        self.meeting_url = None

    def open(self) -> None:
        """Open (or reopen) the modal on a fresh form."""
        self._apply(ModalEvent.OPEN)
        self._reset()
        was_open = self.is_open
        self.is_open = True
        if not was_open:
            self.view.show()
            self.view.lock_scroll()
        self.view.focus_first_field()
        self.view.render(self)

    def close(self) -> None:
        """Close from any state, discarding everything entered."""
        self._apply(ModalEvent.CLOSE)
        self._reset()
        if self.is_open:
            self.is_open = False
            self.view.hide()
            self.view.unlock_scroll()

    def set_field(self, name: str, value: str) -> bool:
        """
        Update a form field.

        Returns False when inputs are disabled. Editing the email clears the
        current error.
        """
        if name not in self.FIELDS:
            raise ValueError(f"Unknown field: {name}")
        if self.inputs_disabled or self.state is not ModalState.FORM:
            return False
        setattr(self, name, value)
        if name == "email":
            self.error = ""
        return True

    def submit(self) -> bool:
        """
        Validate and submit the form.

        Returns True when the modal reached the scheduler step. Ignored
        (False) unless the modal is open on the form.
        """
        if not self.submit_enabled:
            logger.debug(f"Ignoring submit in state {self.state.value}")
            return False

        self.error = ""
        try:
            submission = validate_submission(
                self.first_name,
                self.last_name,
                self.email,
                business_email_message=self.business_email_message,
            )
        except ClientValidationError as e:
            self.error = e.msg
            self._apply(ModalEvent.REJECTED)
            self.view.render(self)
            return False

        self._apply(ModalEvent.SUBMIT)
        self.view.render(self)

        try:
            meeting_url = self.submitter.submit(submission)
        except SubmissionError as e:
            return self._fail(e.msg)
        except Exception:
            logger.exception("Submitter raised an unexpected error")
            return self._fail(CONNECTION_ERROR_MESSAGE)

        if self.state is not ModalState.SUBMITTING:
            # Closed while the request was in flight.
            return False

        self.meeting_url = meeting_url
        self._apply(ModalEvent.SUCCEEDED)
        self.view.render(self)
        return True

    def _fail(self, message: str) -> bool:
        if self.state is not ModalState.SUBMITTING:
            return False
        self.error = message
        self._apply(ModalEvent.FAILED)
        self.view.render(self)
        return False
