"""Pre-submission validation for contexts and messages."""

from typing import Optional

from libpushover.context import Context
from libpushover.message import Message, is_priority_sane


def validate_context(ctx: Context) -> Optional[str]:
    """
    Validate a submission context.
    Returns None if valid, or an error message string if invalid.
    """
    return _require_fields(ctx, ["uri", "token"])


def validate_message(msg: Message) -> Optional[str]:
    """
    Validate a message for submission.
    Returns None if valid, or an error message string if invalid.
    """
    if msg.released:
        return "Message has been destroyed"
    err = _require_fields(msg, ["destination", "body"])
    if err:
        return err
    if not is_priority_sane(msg.priority):
        return f"Priority out of range: {msg.priority!r}"
    return None


def validate_submission(ctx: Context, msg: Message) -> Optional[str]:
    return validate_context(ctx) or validate_message(msg)


# --- Internal validators ---


def _require_fields(obj, fields: list[str]) -> Optional[str]:
    for field in fields:
        if not getattr(obj, field, None):
            return f"Missing required field: {field}"
    return None
