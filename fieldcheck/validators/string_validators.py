"""
String predicates.

Presence, comparison, length, membership and character-class checks:
- required / is_empty
- contains / equals / is_in
- exact_length / min_length / max_length
- is_ascii / is_alpha / is_alphanumeric / is_lowercase / is_uppercase
- is_base64 / is_hexadecimal / is_hex_color / is_mongo_id / is_uuid

Character-class checks accept ASCII text only.
"""

import re
from typing import Iterable, Optional

from fieldcheck.core.base import Predicate
from fieldcheck.core.exceptions import PredicateConfigurationException
from fieldcheck.core.registry import register_predicate
from fieldcheck.validators.common import check_length_param, is_candidate

ALPHA_PATTERN = re.compile(r'[a-zA-Z]+')
ALPHANUMERIC_PATTERN = re.compile(r'[a-zA-Z0-9]+')
HEXADECIMAL_PATTERN = re.compile(r'[0-9a-fA-F]+')
HEX_COLOR_PATTERN = re.compile(r'#?(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})')
BASE64_PATTERN = re.compile(
    r'(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=|[A-Za-z0-9+/]{4})'
)

UUID_PATTERNS = {
    None: re.compile(r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'),
    3: re.compile(r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-3[0-9a-fA-F]{3}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}'),
    4: re.compile(r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-4[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}'),
    5: re.compile(r'[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-5[0-9a-fA-F]{3}-[89abAB][0-9a-fA-F]{3}-[0-9a-fA-F]{12}'),
}


@register_predicate("required")
def required(value: str) -> bool:
    """True for any non-empty value. Absent fields read as "" and fail."""
    return isinstance(value, str) and value != ""


@register_predicate("is_empty")
def is_empty(value: str) -> bool:
    return value == ""


@register_predicate("contains", factory=True)
def contains(seed: str) -> Predicate:
    """
    Build a substring check.

    Example:
        contains("@")("a@b") -> True
    """
    if not isinstance(seed, str):
        raise PredicateConfigurationException(f"contains expects a string seed, got {seed!r}")

    def predicate(value: str) -> bool:
        return isinstance(value, str) and seed in value

    predicate.__name__ = "contains"
    return predicate


@register_predicate("equals", factory=True)
def equals(seed: str) -> Predicate:
    """Build an exact string equality check."""
    if not isinstance(seed, str):
        raise PredicateConfigurationException(f"equals expects a string seed, got {seed!r}")

    def predicate(value: str) -> bool:
        return value == seed

    predicate.__name__ = "equals"
    return predicate


@register_predicate("is_in", factory=True)
def is_in(values: Iterable[str]) -> Predicate:
    """
    Build a membership check against a fixed list of allowed values.

    Comparison is case-sensitive.
    """
    if isinstance(values, str):
        raise PredicateConfigurationException("is_in expects a list of strings, not a single string")
    allowed = frozenset(values)

    def predicate(value: str) -> bool:
        return value in allowed

    predicate.__name__ = "is_in"
    return predicate


@register_predicate("exact_length", factory=True)
def exact_length(length: int) -> Predicate:
    """Build a check that the value has exactly ``length`` characters."""
    length = check_length_param("exact_length", length)

    def predicate(value: str) -> bool:
        return isinstance(value, str) and len(value) == length

    predicate.__name__ = "exact_length"
    return predicate


@register_predicate("min_length", factory=True)
def min_length(length: int) -> Predicate:
    """Build a check that the value has at least ``length`` characters."""
    length = check_length_param("min_length", length)

    def predicate(value: str) -> bool:
        return isinstance(value, str) and len(value) >= length

    predicate.__name__ = "min_length"
    return predicate


@register_predicate("max_length", factory=True)
def max_length(length: int) -> Predicate:
    """Build a check that the value has at most ``length`` characters."""
    length = check_length_param("max_length", length)

    def predicate(value: str) -> bool:
        return isinstance(value, str) and len(value) <= length

    predicate.__name__ = "max_length"
    return predicate


@register_predicate("is_ascii")
def is_ascii(value: str) -> bool:
    return is_candidate(value)


@register_predicate("is_alpha")
def is_alpha(value: str) -> bool:
    return is_candidate(value) and ALPHA_PATTERN.fullmatch(value) is not None


@register_predicate("is_alphanumeric")
def is_alphanumeric(value: str) -> bool:
    return is_candidate(value) and ALPHANUMERIC_PATTERN.fullmatch(value) is not None


@register_predicate("is_lowercase")
def is_lowercase(value: str) -> bool:
    """True when lowercasing leaves the value unchanged ("abc1" passes)."""
    return is_candidate(value) and value == value.lower()


@register_predicate("is_uppercase")
def is_uppercase(value: str) -> bool:
    """True when uppercasing leaves the value unchanged ("ABC1" passes)."""
    return is_candidate(value) and value == value.upper()


@register_predicate("is_base64")
def is_base64(value: str) -> bool:
    if not is_candidate(value) or len(value) % 4 != 0:
        return False
    return BASE64_PATTERN.fullmatch(value) is not None


@register_predicate("is_hexadecimal")
def is_hexadecimal(value: str) -> bool:
    return is_candidate(value) and HEXADECIMAL_PATTERN.fullmatch(value) is not None


@register_predicate("is_hex_color")
def is_hex_color(value: str) -> bool:
    return is_candidate(value) and HEX_COLOR_PATTERN.fullmatch(value) is not None


@register_predicate("is_mongo_id")
def is_mongo_id(value: str) -> bool:
    """MongoDB ObjectId: 24 hexadecimal characters."""
    return is_hexadecimal(value) and len(value) == 24


@register_predicate("is_uuid")
def is_uuid(value: str) -> bool:
    return is_candidate(value) and UUID_PATTERNS[None].fullmatch(value) is not None


@register_predicate("is_uuid_version", factory=True)
def is_uuid_version(version: Optional[int] = None) -> Predicate:
    """
    Build a UUID check restricted to one version.

    Args:
        version: 3, 4, 5, or None for any version
    """
    pattern = UUID_PATTERNS.get(version)
    if pattern is None:
        raise PredicateConfigurationException(
            f"Unsupported UUID version {version!r}; expected 3, 4, 5 or None"
        )

    def predicate(value: str) -> bool:
        return is_candidate(value) and pattern.fullmatch(value) is not None

    predicate.__name__ = f"is_uuid_v{version}" if version else "is_uuid"
    return predicate
