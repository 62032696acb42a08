"""Exceptions raised for caller contract violations."""


class PushoverError(Exception):
    """Base class for libpushover errors."""


class MessageReleasedError(PushoverError):
    """An owned message was used after destroy() released it."""
