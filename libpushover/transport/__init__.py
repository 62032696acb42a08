"""HTTP transport abstraction layer."""

from libpushover.transport.base import Transport, TransportResult
from libpushover.transport.httpx_transport import HttpxTransport

__all__ = [
    "HttpxTransport",
    "Transport",
    "TransportResult",
]
