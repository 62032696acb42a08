"""httpx-backed transport for the Pushover messages endpoint."""

import logging
from typing import Optional

import httpx

from libpushover import runtime
from libpushover.transport.base import Transport, TransportResult

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


def _discard(response: httpx.Response) -> int:
    """Drain the response body, accepting every byte offered."""
    consumed = 0
    for chunk in response.iter_bytes():
        consumed += len(chunk)
    return consumed


class HttpxTransport(Transport):
    """
    POST form bodies with httpx.

    Uses the process-wide client from ``libpushover.runtime`` unless a
    client is passed in. Non-2xx responses and transport errors are
    reported as failures; the response body is drained and dropped.
    """

    @property
    def transport_type(self) -> str:
        return "httpx"

    def __init__(
        self,
        client: Optional[httpx.Client] = None,
        timeout: Optional[float] = None,
        verbose: Optional[bool] = None,
    ):
        self._client = client
        self.timeout = timeout
        self.verbose = verbose

    @classmethod
    def from_settings(cls, settings=None) -> "HttpxTransport":
        if settings is None:
            from libpushover.config import settings

        return cls(timeout=settings.timeout, verbose=settings.verbose)

    @property
    def client(self) -> httpx.Client:
        if self._client is not None:
            return self._client
        return runtime.init_transport()

    def post(self, uri: str, body: bytes) -> TransportResult:
        request_kwargs = {
            "content": body,
            "headers": {"Content-Type": FORM_CONTENT_TYPE},
        }
        if self.timeout is not None:
            request_kwargs["timeout"] = self.timeout

        if self.verbose:
            logger.debug("POST %s (%d bytes)", uri, len(body))

        try:
            with self.client.stream("POST", uri, **request_kwargs) as response:
                consumed = _discard(response)
                status = response.status_code
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Pushover request failed: %s", e)
            return TransportResult(ok=False, error=str(e) or type(e).__name__)
        except Exception as e:
            logger.error("Unexpected error posting to Pushover: %s", e, exc_info=True)
            return TransportResult(ok=False, error=str(e) or type(e).__name__)

        if self.verbose:
            logger.debug("Response %d (%d bytes discarded)", status, consumed)

        if status < 200 or status >= 300:
            logger.warning("Pushover returned status %d", status)
            return TransportResult(ok=False, status_code=status, error=f"HTTP {status}")

        return TransportResult(ok=True, status_code=status)
