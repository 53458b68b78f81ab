"""
Network and contact predicates.

- is_email: syntax check through email-validator (no DNS lookups)
- is_fqdn: domain names, configurable through FQDNOptions
- is_ip / is_ipv4 / is_ipv6: addresses through the ipaddress module
- is_phone: locale-aware phone numbers through phonenumbers
- is_url: http, https and ftp URLs with a domain or IP host
"""

import ipaddress
import re
from dataclasses import dataclass
from typing import Optional
from urllib.parse import urlsplit

import phonenumbers
from email_validator import EmailNotValidError, validate_email
from phonenumbers import NumberParseException

from fieldcheck.core.base import Predicate
from fieldcheck.core.exceptions import PredicateConfigurationException
from fieldcheck.core.registry import register_predicate
from fieldcheck.validators.common import is_candidate

TLD_PATTERN = re.compile(r'(?:[a-z]{2,}|xn--[a-z0-9-]{2,})', re.IGNORECASE)
LABEL_PATTERN = re.compile(r'[a-z0-9-]+', re.IGNORECASE)

MAX_LABEL_LENGTH = 63
MAX_DOMAIN_LENGTH = 253

URL_SCHEMES = frozenset({"http", "https", "ftp"})
URL_FORBIDDEN_PATTERN = re.compile(r"[\s\x00-\x1f\x7f]")


@register_predicate("is_email")
def is_email(value: str) -> bool:
    """ASCII email address with a syntactically valid domain."""
    if not is_candidate(value):
        return False
    try:
        validate_email(value, check_deliverability=False, allow_smtputf8=False)
    except EmailNotValidError:
        return False
    return True


@dataclass(frozen=True)
class FQDNOptions:
    """
    Options for domain name validation.

    Attributes:
        require_tld: Last label must be a top-level domain ("com", "xn--p1ai")
        allow_underscores: Permit single underscores inside labels
        allow_trailing_dot: Permit the absolute form "example.com."
    """
    require_tld: bool = True
    allow_underscores: bool = False
    allow_trailing_dot: bool = False


def _fqdn_valid(value: str, options: FQDNOptions) -> bool:
    if not is_candidate(value):
        return False

    if options.allow_trailing_dot and value.endswith('.'):
        value = value[:-1]
    if not value or len(value) > MAX_DOMAIN_LENGTH:
        return False

    labels = value.split('.')
    if options.require_tld:
        if len(labels) < 2 or TLD_PATTERN.fullmatch(labels[-1]) is None:
            return False

    for label in labels:
        if len(label) > MAX_LABEL_LENGTH:
            return False
        if options.allow_underscores:
            if '__' in label:
                return False
            label = label.replace('_', '')
        if LABEL_PATTERN.fullmatch(label) is None:
            return False
        if label.startswith('-') or label.endswith('-'):
            return False

    return True


@register_predicate("is_fqdn", factory=True)
def is_fqdn(options: Optional[FQDNOptions] = None) -> Predicate:
    """
    Build a fully-qualified domain name check.

    Internationalized labels must be given in punycode ("xn--...").

    Args:
        options: FQDNOptions; defaults require a TLD and reject underscores
                 and a trailing dot
    """
    options = options or FQDNOptions()
    if not isinstance(options, FQDNOptions):
        raise PredicateConfigurationException(f"is_fqdn expects FQDNOptions, got {options!r}")

    def predicate(value: str) -> bool:
        return _fqdn_valid(value, options)

    predicate.__name__ = "is_fqdn"
    return predicate


@register_predicate("is_ipv4")
def is_ipv4(value: str) -> bool:
    if not is_candidate(value):
        return False
    try:
        ipaddress.IPv4Address(value)
    except ValueError:
        return False
    return True


@register_predicate("is_ipv6")
def is_ipv6(value: str) -> bool:
    if not is_candidate(value):
        return False
    try:
        ipaddress.IPv6Address(value)
    except ValueError:
        return False
    return True


@register_predicate("is_ip")
def is_ip(value: str) -> bool:
    return is_ipv4(value) or is_ipv6(value)


def region_for_locale(locale: str) -> str:
    """
    Map a locale code to a phonenumbers region.

    Accepts "en-US", "en_US" and bare regions such as "US".

    Raises:
        PredicateConfigurationException: If the region is not supported
    """
    region = str(locale).replace('_', '-').split('-')[-1].upper()
    if region not in phonenumbers.SUPPORTED_REGIONS:
        raise PredicateConfigurationException(f"Unsupported phone locale {locale!r}")
    return region


@register_predicate("is_phone", factory=True)
def is_phone(locale: str) -> Predicate:
    """
    Build a phone number check for one locale.

    National formats ("650-253-0000" for en-US) and international formats
    whose country code belongs to the locale's region both pass.

    Raises:
        PredicateConfigurationException: If the locale is not supported
    """
    region = region_for_locale(locale)

    def predicate(value: str) -> bool:
        if not is_candidate(value):
            return False
        try:
            number = phonenumbers.parse(value, region)
        except NumberParseException:
            return False
        return phonenumbers.is_valid_number_for_region(number, region)

    predicate.__name__ = "is_phone"
    return predicate


@register_predicate("is_url")
def is_url(value: str) -> bool:
    """
    Absolute URL with an http, https or ftp scheme.

    The host must be a fully-qualified domain name (default FQDNOptions), an
    IPv4 address or a bracketed IPv6 address. An explicit port must be in
    1-65535. Credentials in the authority ("user:pass@host") and whitespace
    anywhere are rejected.
    """
    if not is_candidate(value) or URL_FORBIDDEN_PATTERN.search(value):
        return False

    try:
        parts = urlsplit(value)
        port = parts.port
    except ValueError:
        return False

    if parts.scheme.lower() not in URL_SCHEMES or not parts.netloc or '@' in parts.netloc:
        return False
    if port is not None and not 1 <= port <= 65535:
        return False

    host = parts.hostname
    if not host:
        return False
    if parts.netloc.startswith('['):
        return is_ipv6(host)
    return is_ipv4(host) or _fqdn_valid(host, FQDNOptions())
