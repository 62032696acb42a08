"""Client library for the Pushover message API."""

from libpushover.config import PUSHOVER_URI, Settings
from libpushover.context import Context
from libpushover.encoding import encode, percent_encode
from libpushover.errors import MessageReleasedError, PushoverError
from libpushover.message import Message, Ownership, Priority, is_priority_sane
from libpushover.runtime import init_transport, shutdown_transport
from libpushover.submit import SubmitResult, SubmitState, Submitter, submit_message
from libpushover.transport import HttpxTransport, Transport, TransportResult

__version__ = "0.1.0"

__all__ = [
    "PUSHOVER_URI",
    "Context",
    "HttpxTransport",
    "Message",
    "MessageReleasedError",
    "Ownership",
    "Priority",
    "PushoverError",
    "Settings",
    "SubmitResult",
    "SubmitState",
    "Submitter",
    "Transport",
    "TransportResult",
    "encode",
    "init_transport",
    "is_priority_sane",
    "percent_encode",
    "shutdown_transport",
    "submit_message",
]
