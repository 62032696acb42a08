"""
Form-body serializer for Pushover messages.

The body is built append-only, one ``&name=value`` pair per present field,
in the fixed order device, message, title, token, user, followed by the
unconditional priority. This matches the wire format the existing library
has always sent, including the leading ``&``; the Pushover endpoint parses
fields by name, so callers that want strict ``name=value&...`` form can
pass ``strip_leading=True``.
"""

import logging
from typing import Callable, Optional
from urllib.parse import quote

from libpushover.context import Context
from libpushover.message import Message

logger = logging.getLogger(__name__)

# (wire name, source object, attribute) in emission order.
FIELD_ORDER = (
    ("device", "msg", "device"),
    ("message", "msg", "body"),
    ("title", "msg", "title"),
    ("token", "ctx", "token"),
    ("user", "msg", "destination"),
)

Escape = Callable[[str], Optional[str]]


def percent_encode(value: str) -> Optional[str]:
    """
    Percent-encode *value* as UTF-8.

    Alphanumerics and ``-._~`` are left as-is; everything else, including
    space and ``/``, is escaped. Returns None if the value cannot be encoded.
    """
    try:
        return quote(value, safe="", encoding="utf-8", errors="strict")
    except UnicodeEncodeError:
        return None


def encode(
    ctx: Context,
    msg: Message,
    escape: Escape = percent_encode,
    strip_leading: bool = False,
) -> Optional[bytes]:
    """
    Serialize *msg* for submission through *ctx*.

    Absent or empty fields are omitted entirely. Returns None, and no
    partial body, if any field fails to encode.
    """
    sources = {"ctx": ctx, "msg": msg}
    parts = []

    for name, source, attr in FIELD_ORDER:
        value = getattr(sources[source], attr)
        if not value:
            continue
        encoded = escape(value)
        if encoded is None:
            logger.warning("Failed to encode field %s", name)
            return None
        parts.append(f"&{name}={encoded}")

    parts.append(f"&priority={int(msg.priority)}")

    body = "".join(parts)
    if strip_leading:
        body = body[1:]
    return body.encode("utf-8")
