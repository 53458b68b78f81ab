"""
fieldcheck: declarative field validation for structured documents and form posts.

Main components:
- RuleSet: binds rules to fields of one record and evaluates them
- Rule: a predicate paired with its error message
- StructuredRecord / FormRecord: the two supported input shapes
- Built-in predicates: string, numeric, date, network and custom checks

Usage:
    from fieldcheck import RuleSet

    class ContactRules(RuleSet):
        def setup(self):
            self.required("name", "Name is required")
            self.is_email("email", "Email is invalid")

    passed, messages = ContactRules({"name": "Jane", "email": "jane@gmail.com"}).evaluate()
"""

__version__ = "1.0.0"

from fieldcheck.engine import RuleSet
from fieldcheck.core.base import EvaluationResult, Predicate, Rule, RuleFailure, ValidatorDelegate
from fieldcheck.core.exceptions import (
    FieldCheckException,
    PredicateConfigurationException,
    PredicateNotFoundException,
    RecordFormatException,
)
from fieldcheck.core.records import FormRecord, Record, StructuredRecord, as_record
from fieldcheck.core.registry import PREDICATE_REGISTRY, get_predicate, list_predicates, register_predicate
from fieldcheck.validators import FQDNOptions

__all__ = [
    'RuleSet',
    'EvaluationResult',
    'Predicate',
    'Rule',
    'RuleFailure',
    'ValidatorDelegate',
    'FieldCheckException',
    'PredicateConfigurationException',
    'PredicateNotFoundException',
    'RecordFormatException',
    'FormRecord',
    'Record',
    'StructuredRecord',
    'as_record',
    'PREDICATE_REGISTRY',
    'get_predicate',
    'list_predicates',
    'register_predicate',
    'FQDNOptions',
]
