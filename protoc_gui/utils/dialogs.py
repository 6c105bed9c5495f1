"""Outcome of a directory picker, as a value instead of an exception"""
from typing import Callable, Optional

SELECTED = "selected"
CANCELLED = "cancelled"
FAILED = "failed"


class DialogResult:
    """
    Either SELECTED with a path, CANCELLED, or FAILED with a reason.
    Only FAILED is reported to the user, and never stops the application.
    """

    def __init__(self, status: str, path: Optional[str] = None, reason: Optional[str] = None):
        self.status = status
        self.path = path
        self.reason = reason

    @classmethod
    def selected(cls, path: str) -> "DialogResult":
        return cls(SELECTED, path=path)

    @classmethod
    def cancelled(cls) -> "DialogResult":
        return cls(CANCELLED)

    @classmethod
    def failed(cls, reason: str) -> "DialogResult":
        return cls(FAILED, reason=reason)

    @property
    def is_selected(self) -> bool:
        return self.status == SELECTED

    @property
    def is_cancelled(self) -> bool:
        return self.status == CANCELLED

    @property
    def is_failed(self) -> bool:
        return self.status == FAILED

    def __eq__(self, other) -> bool:
        if not isinstance(other, DialogResult):
            return NotImplemented
        return (self.status, self.path, self.reason) == (other.status, other.path, other.reason)

    def __repr__(self) -> str:
        if self.is_selected:
            return f"DialogResult.selected({self.path!r})"
        if self.is_failed:
            return f"DialogResult.failed({self.reason!r})"
        return "DialogResult.cancelled()"


def ask_directory(title: str, chooser: Callable[..., Optional[str]]) -> DialogResult:
    """
    Run a directory chooser such as tkinter.filedialog.askdirectory.

    An empty return (tk gives "" or () on cancel) is a cancellation, any
    exception raised by the chooser is a failure.
    """
    try:
        folder = chooser(title=title, mustexist=True)
    except Exception as e:
        return DialogResult.failed(str(e) or e.__class__.__name__)
    if not folder:
        return DialogResult.cancelled()
    return DialogResult.selected(str(folder))
