"""
Custom predicates.

``watch`` adapts any object exposing ``validate(value: str) -> bool`` into
a predicate, for checks the built-in catalog does not cover.
"""

from fieldcheck.core.base import Predicate, ValidatorDelegate
from fieldcheck.core.exceptions import PredicateConfigurationException
from fieldcheck.core.registry import register_predicate


@register_predicate("watch", factory=True)
def watch(delegate: ValidatorDelegate) -> Predicate:
    """
    Build a predicate that forwards to a caller-supplied delegate.

    The delegate is responsible for its own totality. If it raises anyway,
    Rule.check logs the error and counts the rule as failed.

    Example:
        class EvenLength:
            def validate(self, value):
                return len(value) % 2 == 0

        rule_set.watch("code", "Code must have even length", EvenLength())
    """
    if not isinstance(delegate, ValidatorDelegate):
        raise PredicateConfigurationException(
            f"watch expects an object with a validate(value) method, got {type(delegate).__name__}"
        )

    def predicate(value: str) -> bool:
        return bool(delegate.validate(value))

    predicate.__name__ = f"watch:{type(delegate).__name__}"
    return predicate
