"""
Demo booking modal: state machine, open-signal bus, views and submitters.
"""

from .events import OPEN_DEMO_MODAL, EventBus
from .state_machine import BookDemoModal, ModalEvent, ModalState, TRANSITIONS, next_state
from .submitters import DirectFormSubmitter, ProxySubmitter, Submitter
from .views import ConsoleView, ModalView, NullView

__all__ = [
    "OPEN_DEMO_MODAL",
    "EventBus",
    "BookDemoModal",
    "ModalEvent",
    "ModalState",
    "TRANSITIONS",
    "next_state",
    "DirectFormSubmitter",
    "ProxySubmitter",
    "Submitter",
    "ConsoleView",
    "ModalView",
    "NullView",
]
