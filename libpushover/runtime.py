"""Process-wide HTTP client lifecycle."""

import atexit
import logging
import threading
from typing import Optional

import httpx

from libpushover.config import Settings

logger = logging.getLogger(__name__)

# Shared by every HttpxTransport without its own client.
_client: Optional[httpx.Client] = None
_lock = threading.Lock()


def build_http_client(
    timeout: float = 15,
    verify_tls: bool = True,
    follow_redirects: bool = True,
) -> httpx.Client:
    return httpx.Client(
        timeout=timeout,
        verify=verify_tls,
        follow_redirects=follow_redirects,
    )


def init_transport(settings: Optional[Settings] = None) -> httpx.Client:
    """Create the shared client if needed. Safe to call repeatedly."""
    global _client

    with _lock:
        if _client is not None and not _client.is_closed:
            return _client

        if settings is None:
            from libpushover.config import settings

        _client = build_http_client(
            timeout=settings.timeout,
            verify_tls=settings.verify_tls,
            follow_redirects=settings.follow_redirects,
        )
        if not settings.verify_tls:
            logger.warning("TLS verification disabled for Pushover transport")
        logger.debug("Initialized shared HTTP client")
        return _client


def shutdown_transport() -> None:
    """Close the shared client. Safe to call repeatedly."""
    global _client

    with _lock:
        if _client is None:
            return
        client, _client = _client, None

    client.close()
    logger.debug("Closed shared HTTP client")


def is_initialized() -> bool:
    return _client is not None and not _client.is_closed


atexit.register(shutdown_transport)
