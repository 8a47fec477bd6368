"""Presence checks shared by the account and note services."""

from typing import Optional

from app.exceptions import MissingFieldError


def require_field(value: Optional[str], field: str, allow_blank: bool = False) -> str:
    """
    Return `value` if present, else raise MissingFieldError for `field`.

    Whitespace-only strings count as missing unless `allow_blank` is set
    (passwords are taken verbatim).
    """
    if value is None or value == "":
        raise MissingFieldError(field)
    if not allow_blank and not value.strip():
        raise MissingFieldError(field)
    return value
