"""
Rule engine core module.

Contains base classes, record adapters, the predicate registry and exceptions.
"""

from fieldcheck.core.base import EvaluationResult, Predicate, Rule, RuleFailure, ValidatorDelegate
from fieldcheck.core.exceptions import (
    FieldCheckException,
    PredicateConfigurationException,
    PredicateNotFoundException,
    RecordFormatException,
)
from fieldcheck.core.records import FormRecord, Record, StructuredRecord, as_record
from fieldcheck.core.registry import PREDICATE_REGISTRY, get_predicate, list_predicates, register_predicate

__all__ = [
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
]
