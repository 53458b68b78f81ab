"""
Base classes and data models for the rule engine.

This module provides the foundation every rule set is built on:
- Predicate: type of a single string check
- ValidatorDelegate: protocol for caller-supplied custom checks
- Rule: a predicate paired with its fixed error message
- RuleFailure / EvaluationResult: result format of RuleSet.evaluate()
"""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Callable, Dict, Iterator, List, Optional, Protocol, Tuple, runtime_checkable

from fieldcheck.utils.logger import log_error, setup_logger

logger = setup_logger(__name__)

Predicate = Callable[[str], bool]


@runtime_checkable
class ValidatorDelegate(Protocol):
    """
    Custom validation capability accepted by ``watch``.

    Any object with a ``validate(value: str) -> bool`` method qualifies.
    """

    def validate(self, value: str) -> bool:
        ...


@dataclass(frozen=True)
class Rule:
    """
    A single evaluable unit: a predicate and the message reported when it fails.

    The message is returned verbatim; it is never generated from the
    predicate name.
    """
    message: str
    predicate: Predicate
    name: Optional[str] = None

    def check(self, value: str) -> Tuple[bool, Optional[str]]:
        """
        Run the predicate against a field value.

        Args:
            value: Field value as read from the record

        Returns:
            (True, None) when the predicate holds, (False, message) otherwise
        """
        try:
            passed = bool(self.predicate(value))
        except Exception as e:
            # Predicates are expected to be total; a raising one counts as a failure
            log_error(logger, e, f"Predicate '{self.label}' raised")
            passed = False

        if passed:
            return True, None
        return False, self.message

    @property
    def label(self) -> str:
        """Name used in logs and failure details"""
        if self.name:
            return self.name
        return getattr(self.predicate, '__name__', type(self.predicate).__name__)


@dataclass(frozen=True)
class RuleFailure:
    """One failed rule in an evaluation"""
    field: str
    message: str
    rule_name: str

    def to_dict(self) -> Dict[str, Any]:
        return {'field': self.field, 'message': self.message, 'rule_name': self.rule_name}


@dataclass(frozen=True)
class EvaluationResult:
    """
    Aggregate outcome of RuleSet.evaluate().

    ``passed`` is True iff every registered rule passed. ``messages`` holds
    the message of each failed rule, in field registration order and then
    rule registration order within a field.

    Unpacks like the plain pair:
        passed, messages = rule_set.evaluate()
    """
    passed: bool
    messages: List[str] = dataclass_field(default_factory=list)
    failures: List[RuleFailure] = dataclass_field(default_factory=list)
    total_checks: int = 0

    def __iter__(self) -> Iterator[Any]:
        yield self.passed
        yield self.messages

    def __bool__(self) -> bool:
        return self.passed

    @property
    def failed_fields(self) -> List[str]:
        """Fields with at least one failed rule, without duplicates"""
        return list(dict.fromkeys(f.field for f in self.failures))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization"""
        return {
            'passed': self.passed,
            'messages': list(self.messages),
            'failures': [f.to_dict() for f in self.failures],
            'total_checks': self.total_checks,
        }
