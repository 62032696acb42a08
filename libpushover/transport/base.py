"""Base HTTP transport interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional


@dataclass
class TransportResult:
    """Outcome of a single POST. The response body is never kept."""
    ok: bool
    status_code: Optional[int] = None
    error: Optional[str] = None


class Transport(ABC):
    """
    Common interface for HTTP transports.
    Implementations POST a form body synchronously and never raise for
    delivery failures; they report them through TransportResult instead.
    """

    @property
    @abstractmethod
    def transport_type(self) -> str:
        ...

    @abstractmethod
    def post(self, uri: str, body: bytes) -> TransportResult:
        """POST *body* as application/x-www-form-urlencoded to *uri*."""
        ...
