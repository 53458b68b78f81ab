"""
Date predicates.

Values are parsed with an explicit strptime format when one is given
(or when settings.DEFAULT_DATE_FORMAT is set), and with the dateutil
parser otherwise. Timezone-aware results are normalized to naive UTC so
that any two parsed dates compare.
"""

import warnings
from datetime import datetime, timezone
from typing import Any, Optional

from dateutil import parser as date_parser
from dateutil.parser import UnknownTimezoneWarning

from fieldcheck.core.base import Predicate
from fieldcheck.core.exceptions import PredicateConfigurationException
from fieldcheck.core.registry import register_predicate
from fieldcheck.utils.config import settings
from fieldcheck.validators.common import is_candidate


def parse_date(value: Any, date_format: Optional[str] = None) -> Optional[datetime]:
    """
    Parse a date string.

    Args:
        value: Input date string
        date_format: strptime format; falls back to settings.DEFAULT_DATE_FORMAT,
                     then to dateutil parsing

    Returns:
        Parsed naive datetime or None

    Example:
        >>> parse_date("02/01/1980", "%d/%m/%Y")
        datetime.datetime(1980, 1, 2, 0, 0)
    """
    if not is_candidate(value):
        return None

    date_format = date_format or settings.DEFAULT_DATE_FORMAT

    try:
        with warnings.catch_warnings():
            # Unknown timezone names are rejected rather than silently ignored
            warnings.simplefilter("error", UnknownTimezoneWarning)
            if date_format:
                parsed = datetime.strptime(value, date_format)
            else:
                parsed = date_parser.parse(value)

        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    except (ValueError, OverflowError, UnknownTimezoneWarning):
        return None

    return parsed


@register_predicate("is_date")
def is_date(value: str) -> bool:
    return parse_date(value) is not None


@register_predicate("is_date_with_format", factory=True)
def is_date_with_format(date_format: str) -> Predicate:
    """Build a date check bound to one strptime format."""
    if not date_format:
        raise PredicateConfigurationException("is_date_with_format requires a date format")

    def predicate(value: str) -> bool:
        return parse_date(value, date_format) is not None

    predicate.__name__ = "is_date"
    return predicate


def _parse_bound(name: str, date: str, date_format: Optional[str]) -> datetime:
    bound = parse_date(date, date_format)
    if bound is None:
        raise PredicateConfigurationException(
            f"{name} could not parse comparison date {date!r}"
            + (f" with format {date_format!r}" if date_format else "")
        )
    return bound


@register_predicate("is_after", factory=True)
def is_after(date: str, date_format: Optional[str] = None) -> Predicate:
    """
    Build a check that the value is a date strictly after ``date``.

    The comparison date is parsed once, with the same format as the values.

    Raises:
        PredicateConfigurationException: If ``date`` cannot be parsed
    """
    bound = _parse_bound("is_after", date, date_format)

    def predicate(value: str) -> bool:
        parsed = parse_date(value, date_format)
        return parsed is not None and parsed > bound

    predicate.__name__ = "is_after"
    return predicate


@register_predicate("is_before", factory=True)
def is_before(date: str, date_format: Optional[str] = None) -> Predicate:
    """
    Build a check that the value is a date strictly before ``date``.

    Raises:
        PredicateConfigurationException: If ``date`` cannot be parsed
    """
    bound = _parse_bound("is_before", date, date_format)

    def predicate(value: str) -> bool:
        parsed = parse_date(value, date_format)
        return parsed is not None and parsed < bound

    predicate.__name__ = "is_before"
    return predicate
