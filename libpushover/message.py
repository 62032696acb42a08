"""Notification message builder and priority levels."""

import enum
from typing import Optional, Union

from libpushover.errors import MessageReleasedError
from libpushover.fields import require_str


class Priority(enum.IntEnum):
    """Pushover priority levels, ordered by severity."""
    NO_ALERT = -2
    QUIET = -1
    DEFAULT = 0
    HIGH = 1
    REQUIRE_CONFIRMATION = 2


_SANE_PRIORITIES = frozenset(int(p) for p in Priority)


def is_priority_sane(priority: Union[Priority, int]) -> bool:
    """Return True if *priority* is one of the five Pushover levels."""
    if isinstance(priority, bool) or not isinstance(priority, int):
        return False
    return int(priority) in _SANE_PRIORITIES


class Ownership(enum.Enum):
    """Who owns a Message instance; consulted only by Message.destroy()."""
    OWNED = "owned"
    BORROWED = "borrowed"


class Message:
    """
    The fields of a single notification.

    Create with ``Message.create()`` for a library-owned instance, or
    ``Message.create(existing)`` to reset and reuse a caller-owned one.
    """

    def __init__(self):
        self.ownership = Ownership.BORROWED
        self._released = False
        self._reset()

    def _reset(self) -> None:
        self.destination: Optional[str] = None
        self.body: Optional[str] = None
        self.title: Optional[str] = None
        self.device: Optional[str] = None
        self.priority: Priority = Priority.DEFAULT

    @classmethod
    def create(cls, existing: Optional["Message"] = None) -> "Message":
        if existing is None:
            msg = cls()
            msg.ownership = Ownership.OWNED
            return msg

        existing._reset()
        existing._released = False
        existing.ownership = Ownership.BORROWED
        return existing

    @property
    def released(self) -> bool:
        return self._released

    def _check_live(self) -> None:
        if self._released:
            raise MessageReleasedError("message was destroyed")

    def set_body(self, text: str) -> bool:
        self._check_live()
        self.body = require_str(text, "body")
        return True

    def set_destination(self, destination: str) -> bool:
        self._check_live()
        self.destination = require_str(destination, "destination")
        return True

    def set_title(self, title: str) -> bool:
        self._check_live()
        self.title = require_str(title, "title")
        return True

    def set_device(self, device: str) -> bool:
        self._check_live()
        self.device = require_str(device, "device")
        return True

    def set_priority(self, priority: Union[Priority, int]) -> bool:
        """Store *priority* if it is sane; otherwise leave the field unchanged."""
        self._check_live()
        if not is_priority_sane(priority):
            return False
        self.priority = Priority(int(priority))
        return True

    def destroy(self) -> None:
        """
        Clear all string fields.

        An owned message is released as well and must not be used again;
        destroying it a second time is a no-op. A borrowed message stays
        usable with empty fields.
        """
        if self._released:
            return
        self.destination = None
        self.body = None
        self.title = None
        self.device = None
        if self.ownership is Ownership.OWNED:
            self._released = True

    def __enter__(self) -> "Message":
        return self

    def __exit__(self, *exc_info) -> None:
        self.destroy()

    def __repr__(self) -> str:
        return (
            f"Message(destination_set={self.destination is not None}, "
            f"title={self.title!r}, device={self.device!r}, "
            f"priority={self.priority!r}, ownership={self.ownership.value})"
        )
