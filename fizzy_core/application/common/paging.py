"""Caller-supplied paging, checked before anything reaches a store."""

from typing import Optional

from fizzy_core.application.errors import InvalidInputError


def page_limit(limit: Optional[int], default: int) -> int:
    """Effective limit: the caller's, or ``default`` when none was given."""
    if limit is None:
        return default
    if limit < 0:
        raise InvalidInputError("Limit cannot be negative")
    return limit


def page_offset(offset: Optional[int]) -> Optional[int]:
    if offset is not None and offset < 0:
        raise InvalidInputError("Offset cannot be negative")
    return offset
