"""Argument checks shared by the context and message setters."""


def require_str(value, field_name: str) -> str:
    if value is None:
        raise TypeError(f"{field_name} must not be None")
    if not isinstance(value, str):
        raise TypeError(f"{field_name} must be a str, got {type(value).__name__}")
    return value
