"""
Validators module.

Contains all built-in predicates organized by category:
- string_validators: presence, comparison, length and character classes
- numeric_validators: numbers, booleans, credit cards, ISBNs
- date_validators: date parsing and before/after comparison
- network_validators: email, domain names, IP addresses, phone numbers
- custom_validators: delegate-based custom checks

All predicates are automatically registered via decorators.
"""

# Import all validators to trigger registration
from fieldcheck.validators import string_validators
from fieldcheck.validators import numeric_validators
from fieldcheck.validators import date_validators
from fieldcheck.validators import network_validators
from fieldcheck.validators import custom_validators
from fieldcheck.validators.network_validators import FQDNOptions

__all__ = [
    'string_validators',
    'numeric_validators',
    'date_validators',
    'network_validators',
    'custom_validators',
    'FQDNOptions',
]
