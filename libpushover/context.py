"""Submission context: endpoint URI and application token."""

import logging
from typing import Optional

from libpushover.config import PUSHOVER_URI, Settings
from libpushover.fields import require_str

logger = logging.getLogger(__name__)


class Context:
    """
    Endpoint + credential pair reused across submissions.

    A context is owned by a single caller. ``destroy()`` clears both fields
    and may be called any number of times.
    """

    def __init__(self, uri: Optional[str] = PUSHOVER_URI, token: Optional[str] = None):
        self.uri = uri
        self.token = token

    @classmethod
    def create(cls, token: Optional[str] = None) -> "Context":
        """Create a context pointing at the default endpoint."""
        ctx = cls(uri=PUSHOVER_URI)
        if token is not None:
            ctx.set_token(token)
        return ctx

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "Context":
        """Create a context from PUSHOVER_URI / PUSHOVER_TOKEN configuration."""
        if settings is None:
            from libpushover.config import settings

        ctx = cls(uri=settings.uri or PUSHOVER_URI)
        if settings.token:
            ctx.set_token(settings.token)
        else:
            logger.warning("PUSHOVER_TOKEN not set")
        return ctx

    def set_uri(self, uri: str) -> bool:
        self.uri = require_str(uri, "uri")
        return True

    def set_token(self, token: str) -> bool:
        self.token = require_str(token, "token")
        return True

    def destroy(self) -> None:
        self.uri = None
        self.token = None

    def __enter__(self) -> "Context":
        return self

    def __exit__(self, *exc_info) -> None:
        self.destroy()

    def __repr__(self) -> str:
        # Never include the token.
        has_token = bool(self.token)
        return f"Context(uri={self.uri!r}, token_set={has_token})"
