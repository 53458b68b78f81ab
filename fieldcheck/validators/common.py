"""Helpers shared by the predicate modules."""

from typing import Any

from fieldcheck.core.exceptions import PredicateConfigurationException
from fieldcheck.utils.config import settings


def is_candidate(value: Any, ascii_only: bool = True) -> bool:
    """
    Pre-check applied by format predicates before any parsing.

    Rejects non-strings, the empty string, values longer than
    settings.MAX_INPUT_LENGTH and, unless ascii_only is False,
    non-ASCII text.
    """
    if not isinstance(value, str) or not value:
        return False
    if len(value) > settings.MAX_INPUT_LENGTH:
        return False
    if ascii_only and not value.isascii():
        return False
    return True


def check_length_param(name: str, length: Any) -> int:
    """Validate a length bound given to a predicate factory"""
    if isinstance(length, bool) or not isinstance(length, int) or length < 0:
        raise PredicateConfigurationException(
            f"{name} expects a non-negative integer length, got {length!r}"
        )
    return length
