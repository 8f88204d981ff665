"""
View hooks for the demo modal.

The state machine owns the flow; a view only performs the entry and exit
actions of the host environment (showing the dialog, scroll lock, focus) and
renders the current state.
"""

from typing import Callable, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from demo_booking.modal.state_machine import BookDemoModal


class ModalView:
    """Base view; every hook is a no-op."""

    def show(self) -> None:
        pass

    def hide(self) -> None:
        pass

    def lock_scroll(self) -> None:
        pass

    def unlock_scroll(self) -> None:
        pass

    def focus_first_field(self) -> None:
        pass

    def render(self, modal: "BookDemoModal") -> None:
        pass


class NullView(ModalView):
    """View for headless use (tests, scripts)."""


class ConsoleView(ModalView):
    """Renders the modal to a terminal."""

    def __init__(self, write: Optional[Callable[[str], None]] = None):
        self.write = write or print
        self.visible = False
        self.scroll_locked = False

    def show(self) -> None:
        self.visible = True

    def hide(self) -> None:
        self.visible = False

    def lock_scroll(self) -> None:
        self.scroll_locked = True

    def unlock_scroll(self) -> None:
        self.scroll_locked = False

    def render(self, modal: "BookDemoModal") -> None:
        if not self.visible:
            return
        self.write(f"== {modal.heading} ==")
        self.write(modal.title)
        if modal.error:
            self.write(f"! {modal.error}")
        if modal.meeting_url:
            self.write(modal.confirmation)
            self.write(modal.meeting_url)
        else:
            self.write(f"[{modal.submit_label}]")
