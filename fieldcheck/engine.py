"""
RuleSet - Main orchestrator for field validation.

This is the primary entry point for validating a record.
It holds the field -> rules mapping, registers rules and aggregates results.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

from fieldcheck.core.base import EvaluationResult, Predicate, Rule, RuleFailure, ValidatorDelegate
from fieldcheck.core.records import Record, RecordInput, as_record, describe_record
from fieldcheck.core.registry import get_predicate
from fieldcheck.utils.logger import setup_logger
from fieldcheck.validators import FQDNOptions
from fieldcheck.validators import custom_validators as custom
from fieldcheck.validators import date_validators as dates
from fieldcheck.validators import network_validators as network
from fieldcheck.validators import numeric_validators as numeric
from fieldcheck.validators import string_validators as strings

logger = setup_logger(__name__)


class RuleSet(ABC):
    """
    Field validation rule set bound to one record.

    Subclasses declare their rules in ``setup()``, which runs once at
    construction. Further rules can be registered afterwards through the
    fluent methods, each of which returns the rule set.

    Evaluation order: fields are visited in the order their first rule was
    registered, and rules within a field in registration order. The overall
    outcome does not depend on this order; the message order does.

    Usage:
        class SignupRules(RuleSet):
            def setup(self):
                self.required("email", "Email is required")
                self.is_email("email", "Email is invalid")
                self.min_length("password", "Password is too short", 8)

        result = SignupRules({"email": "jane@gmail.com", "password": "hunter2"}).evaluate()

        if not result.passed:
            for message in result.messages:
                print(f"Error: {message}")
    """

    def __init__(self, data: RecordInput):
        """
        Bind the rule set to a record and run setup().

        Args:
            data: Record, mapping (structured document or flat form map) or JSON text
        """
        self.record: Record = as_record(data)
        self._rules: Dict[str, List[Rule]] = {}
        self.setup()

        logger.debug(
            f"{type(self).__name__} initialized with {self.rule_count} rules "
            f"on {describe_record(self.record)}"
        )

    @abstractmethod
    def setup(self) -> None:
        """Register this rule set's rules. Runs once, from __init__."""
        pass

    @classmethod
    def from_setup(cls, data: RecordInput, setup: Callable[['RuleSet'], Any]) -> 'RuleSet':
        """
        Build a rule set from a setup callable instead of a subclass.

        Args:
            data: Input record
            setup: Called with the new rule set to register its rules

        Example:
            rules = RuleSet.from_setup(data, lambda r: r.required("name", "Name is required"))
        """
        if not callable(setup):
            raise TypeError(f"setup must be callable, got {type(setup).__name__}")
        return _CallbackRuleSet(data, setup)

    # ==========================================================================
    # Registration
    # ==========================================================================

    def register_rule(
        self,
        field: str,
        message: str,
        predicate: Union[Predicate, str],
        *params: Any,
        **options: Any
    ) -> 'RuleSet':
        """
        Append a rule for a field.

        Args:
            field: Field name read from the record
            message: Message reported verbatim when the rule fails
            predicate: Predicate callable, or the name of a registered predicate
            *params: Construction parameters when ``predicate`` names a factory
            **options: Keyword construction parameters for a named factory

        Returns:
            self, for chaining

        Raises:
            PredicateNotFoundException: If a predicate name is not registered
            PredicateConfigurationException: If the parameters are invalid
        """
        name = None
        if isinstance(predicate, str):
            name = predicate
            predicate = get_predicate(predicate, *params, **options)
        elif params or options:
            raise TypeError("Parameters can only be passed with a registered predicate name")
        elif not callable(predicate):
            raise TypeError(f"predicate must be callable or a registered name, got {predicate!r}")

        rule = Rule(message=message, predicate=predicate, name=name)
        self._rules.setdefault(field, []).append(rule)

        logger.debug(f"Registered rule '{rule.label}' on field '{field}'")
        return self

    add = register_rule

    def contains(self, field: str, message: str, seed: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.contains(seed))

    def equals(self, field: str, message: str, seed: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.equals(seed))

    def exact_length(self, field: str, message: str, length: int) -> 'RuleSet':
        return self.register_rule(field, message, strings.exact_length(length))

    def min_length(self, field: str, message: str, length: int) -> 'RuleSet':
        return self.register_rule(field, message, strings.min_length(length))

    def max_length(self, field: str, message: str, length: int) -> 'RuleSet':
        return self.register_rule(field, message, strings.max_length(length))

    def is_in(self, field: str, message: str, values: Iterable[str]) -> 'RuleSet':
        return self.register_rule(field, message, strings.is_in(values))

    def required(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.required)

    def is_empty(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.is_empty)

    def is_ascii(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.is_ascii)

    def is_alpha(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.is_alpha)

    def is_alphanumeric(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.is_alphanumeric)

    def is_lowercase(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.is_lowercase)

    def is_uppercase(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.is_uppercase)

    def is_base64(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.is_base64)

    def is_hexadecimal(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.is_hexadecimal)

    def is_hex_color(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.is_hex_color)

    def is_mongo_id(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, strings.is_mongo_id)

    def is_uuid(self, field: str, message: str, version: Optional[int] = None) -> 'RuleSet':
        if version is None:
            return self.register_rule(field, message, strings.is_uuid)
        return self.register_rule(field, message, strings.is_uuid_version(version))

    def is_int(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, numeric.is_int)

    def is_numeric(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, numeric.is_numeric)

    def is_float(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, numeric.is_float)

    def is_bool(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, numeric.is_bool)

    def is_true(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, numeric.is_true)

    def is_false(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, numeric.is_false)

    def is_credit_card(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, numeric.is_credit_card)

    def is_isbn(self, field: str, message: str, version: str = '') -> 'RuleSet':
        return self.register_rule(field, message, numeric.is_isbn(version))

    def is_date(self, field: str, message: str, date_format: Optional[str] = None) -> 'RuleSet':
        if date_format is None:
            return self.register_rule(field, message, dates.is_date)
        return self.register_rule(field, message, dates.is_date_with_format(date_format))

    def is_after(self, field: str, message: str, date: str, date_format: Optional[str] = None) -> 'RuleSet':
        return self.register_rule(field, message, dates.is_after(date, date_format))

    def is_before(self, field: str, message: str, date: str, date_format: Optional[str] = None) -> 'RuleSet':
        return self.register_rule(field, message, dates.is_before(date, date_format))

    def is_email(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, network.is_email)

    def is_fqdn(self, field: str, message: str, options: Optional[FQDNOptions] = None) -> 'RuleSet':
        return self.register_rule(field, message, network.is_fqdn(options))

    def is_ip(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, network.is_ip)

    def is_ipv4(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, network.is_ipv4)

    def is_ipv6(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, network.is_ipv6)

    def is_phone(self, field: str, message: str, locale: str) -> 'RuleSet':
        return self.register_rule(field, message, network.is_phone(locale))

    def is_url(self, field: str, message: str) -> 'RuleSet':
        return self.register_rule(field, message, network.is_url)

    def watch(self, field: str, message: str, delegate: ValidatorDelegate) -> 'RuleSet':
        return self.register_rule(field, message, custom.watch(delegate))

    # ==========================================================================
    # Evaluation
    # ==========================================================================

    def evaluate(self, stop_on_first_failure: bool = False) -> EvaluationResult:
        """
        Run every registered rule against the bound record.

        Evaluation has no side effects; repeated calls return equal results.

        Args:
            stop_on_first_failure: Return as soon as one rule fails

        Returns:
            EvaluationResult; ``passed`` is True iff every rule passed
            (vacuously True with no rules)
        """
        passed = True
        messages: List[str] = []
        failures: List[RuleFailure] = []
        total = 0

        for field, rules in self._rules.items():
            value = self.record.get(field)

            for rule in rules:
                total += 1
                ok, message = rule.check(value)
                if ok:
                    continue

                passed = False
                messages.append(message)
                failures.append(RuleFailure(field=field, message=message, rule_name=rule.label))

                if stop_on_first_failure:
                    logger.debug(f"Stopping evaluation on first failure: {message}")
                    return EvaluationResult(
                        passed=False, messages=messages, failures=failures, total_checks=total
                    )

        logger.debug(
            f"{type(self).__name__} evaluated {total} rules: "
            f"{'passed' if passed else f'{len(failures)} failed'}"
        )
        return EvaluationResult(passed=passed, messages=messages, failures=failures, total_checks=total)

    # ==========================================================================
    # Introspection
    # ==========================================================================

    @property
    def fields(self) -> List[str]:
        """Fields with registered rules, in registration order"""
        return list(self._rules.keys())

    @property
    def rule_count(self) -> int:
        return sum(len(rules) for rules in self._rules.values())

    def rules_for(self, field: str) -> List[Rule]:
        """Rules registered on a field, in registration order"""
        return list(self._rules.get(field, []))


class _CallbackRuleSet(RuleSet):
    """RuleSet whose setup step is a callable supplied at construction"""

    def __init__(self, data: RecordInput, setup: Callable[[RuleSet], Any]):
        self._setup_callback = setup
        super().__init__(data)

    def setup(self) -> None:
        self._setup_callback(self)
