"""
Numeric and boolean predicates.

- is_int / is_numeric / is_float
- is_bool / is_true / is_false
- is_credit_card (issuer prefix + Luhn checksum)
- is_isbn (ISBN-10 / ISBN-13 checksum)
"""

import re
from typing import List

from fieldcheck.core.base import Predicate
from fieldcheck.core.exceptions import PredicateConfigurationException
from fieldcheck.core.registry import register_predicate
from fieldcheck.validators.common import is_candidate

INT_PATTERN = re.compile(r'[-+]?(?:0|[1-9][0-9]*)')
NUMERIC_PATTERN = re.compile(r'[-+]?[0-9]+')
FLOAT_PATTERN = re.compile(r'[-+]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][-+]?[0-9]+)?')

CREDIT_CARD_PATTERN = re.compile(
    r'4[0-9]{12}(?:[0-9]{3})?'            # Visa
    r'|5[1-5][0-9]{14}'                   # Mastercard
    r'|6(?:011|5[0-9]{2})[0-9]{12}'       # Discover
    r'|3[47][0-9]{13}'                    # American Express
    r'|3(?:0[0-5]|[68][0-9])[0-9]{11}'    # Diners Club
    r'|(?:2131|1800|35[0-9]{3})[0-9]{11}'  # JCB
)
CARD_SEPARATORS = re.compile(r'[ -]')

ISBN10_PATTERN = re.compile(r'[0-9]{9}[0-9X]')
ISBN13_PATTERN = re.compile(r'[0-9]{13}')
ISBN_SEPARATORS = re.compile(r'[\s-]')

TRUE_VALUES = frozenset({'true', '1'})
FALSE_VALUES = frozenset({'false', '0'})


@register_predicate("is_int")
def is_int(value: str) -> bool:
    """Signed integer without leading zeros: "42", "-7", "0"."""
    return is_candidate(value) and INT_PATTERN.fullmatch(value) is not None


@register_predicate("is_numeric")
def is_numeric(value: str) -> bool:
    """Signed digit string; leading zeros allowed: "007"."""
    return is_candidate(value) and NUMERIC_PATTERN.fullmatch(value) is not None


@register_predicate("is_float")
def is_float(value: str) -> bool:
    """Decimal number with optional fraction and exponent: "3.14", ".5", "1e10"."""
    return is_candidate(value) and FLOAT_PATTERN.fullmatch(value) is not None


@register_predicate("is_true")
def is_true(value: str) -> bool:
    return is_candidate(value) and value.lower() in TRUE_VALUES


@register_predicate("is_false")
def is_false(value: str) -> bool:
    return is_candidate(value) and value.lower() in FALSE_VALUES


@register_predicate("is_bool")
def is_bool(value: str) -> bool:
    """One of true/false/1/0, case-insensitive."""
    return is_true(value) or is_false(value)


def _luhn_valid(digits: str) -> bool:
    total = 0
    for i, ch in enumerate(reversed(digits)):
        n = int(ch)
        if i % 2 == 1:
            n *= 2
            if n > 9:
                n -= 9
        total += n
    return total % 10 == 0


@register_predicate("is_credit_card")
def is_credit_card(value: str) -> bool:
    """
    Card number from a known issuer with a valid Luhn checksum.

    Spaces and dashes between digit groups are ignored.
    """
    if not is_candidate(value):
        return False
    digits = CARD_SEPARATORS.sub('', value)
    if CREDIT_CARD_PATTERN.fullmatch(digits) is None:
        return False
    return _luhn_valid(digits)


def _isbn10_valid(isbn: str) -> bool:
    if ISBN10_PATTERN.fullmatch(isbn) is None:
        return False
    checksum = sum((i + 1) * int(ch) for i, ch in enumerate(isbn[:9]))
    checksum += 10 * (10 if isbn[9] == 'X' else int(isbn[9]))
    return checksum % 11 == 0


def _isbn13_valid(isbn: str) -> bool:
    if ISBN13_PATTERN.fullmatch(isbn) is None:
        return False
    factors: List[int] = [1, 3]
    checksum = sum(factors[i % 2] * int(ch) for i, ch in enumerate(isbn[:12]))
    return (10 - checksum % 10) % 10 == int(isbn[12])


ISBN_CHECKS = {
    '10': (_isbn10_valid,),
    '13': (_isbn13_valid,),
    '': (_isbn10_valid, _isbn13_valid),
}


@register_predicate("is_isbn", factory=True)
def is_isbn(version: str = '') -> Predicate:
    """
    Build an ISBN check.

    Args:
        version: "10", "13", or "" to accept either

    Example:
        is_isbn("13")("978-0-306-40615-7") -> True
    """
    checks = ISBN_CHECKS.get(str(version))
    if checks is None:
        raise PredicateConfigurationException(
            f"Unsupported ISBN version {version!r}; expected '10', '13' or ''"
        )

    def predicate(value: str) -> bool:
        if not is_candidate(value):
            return False
        isbn = ISBN_SEPARATORS.sub('', value)
        return any(check(isbn) for check in checks)

    predicate.__name__ = f"is_isbn{version}" if version else "is_isbn"
    return predicate
