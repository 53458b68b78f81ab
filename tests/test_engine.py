"""
Tests for RuleSet registration and evaluation.
"""

import pytest

from fieldcheck import (
    FQDNOptions,
    FormRecord,
    PredicateConfigurationException,
    PredicateNotFoundException,
    RuleSet,
    StructuredRecord,
)


class SignupRules(RuleSet):
    def setup(self):
        self.required("email", "Email is required")
        self.is_email("email", "Email is invalid")
        self.min_length("password", "Password is too short", 8)


class ExplodingDelegate:
    def validate(self, value):
        raise RuntimeError("delegate failure")


class EvenLength:
    def validate(self, value):
        return len(value) % 2 == 0


def test_invalid_email_reports_message():
    rules = RuleSet.from_setup(
        {"email": "not-an-email"},
        lambda r: r.is_email("email", "bad email"),
    )

    passed, messages = rules.evaluate()

    assert passed is False
    assert messages == ["bad email"]


def test_int_with_min_length_passes():
    rules = RuleSet.from_setup(
        {"age": "42"},
        lambda r: r.is_int("age", "must be int").min_length("age", "too short", 1),
    )

    result = rules.evaluate()

    assert result.passed is True
    assert result.messages == []
    assert result.total_checks == 2


def test_required_on_empty_record_fails():
    rules = RuleSet.from_setup({}, lambda r: r.required("name", "name required"))

    assert tuple(rules.evaluate()) == (False, ["name required"])


def test_two_failing_rules_on_same_field_keep_registration_order():
    rules = RuleSet.from_setup(
        {"code": "x"},
        lambda r: r.min_length("code", "too short", 3).is_int("code", "not a number"),
    )

    assert rules.evaluate().messages == ["too short", "not a number"]


def test_zero_rules_pass(empty_rules):
    result = empty_rules({"anything": "value"}).evaluate()

    assert result.passed is True
    assert result.messages == []
    assert result.total_checks == 0


def test_setup_override_is_mandatory():
    class Incomplete(RuleSet):
        pass

    with pytest.raises(TypeError):
        Incomplete({})

    with pytest.raises(TypeError):
        RuleSet({})


def test_from_setup_requires_callable():
    with pytest.raises(TypeError):
        RuleSet.from_setup({}, None)


def test_subclass_setup_runs_at_construction():
    rules = SignupRules({"email": "jane.doe@gmail.com", "password": "correct horse"})

    assert rules.fields == ["email", "password"]
    assert rules.rule_count == 3
    assert rules.evaluate().passed is True


def test_messages_follow_field_registration_order():
    rules = SignupRules({"password": "short"})

    result = rules.evaluate()

    assert result.messages == ["Email is required", "Email is invalid", "Password is too short"]
    assert result.failed_fields == ["email", "password"]
    assert [f.rule_name for f in result.failures] == ["required", "is_email", "min_length"]


def test_rules_registered_after_setup_are_evaluated():
    rules = SignupRules({"email": "jane.doe@gmail.com", "password": "correct horse"})
    rules.is_in("plan", "Unknown plan", ["free", "pro"])

    assert rules.evaluate().messages == ["Unknown plan"]


def test_evaluate_is_idempotent():
    rules = SignupRules({"email": "nope", "password": "x"})

    first = rules.evaluate()
    second = rules.evaluate()

    assert first == second
    assert first.to_dict() == second.to_dict()


def test_stop_on_first_failure_returns_first_message_only():
    rules = SignupRules({})

    result = rules.evaluate(stop_on_first_failure=True)

    assert result.passed is False
    assert result.messages == ["Email is required"]
    assert result.total_checks == 1


def test_result_unpacks_and_serializes():
    rules = RuleSet.from_setup({"name": ""}, lambda r: r.required("name", "Name is required"))

    result = rules.evaluate()
    passed, messages = result

    assert not result
    assert passed is False
    assert messages == ["Name is required"]
    assert result.to_dict() == {
        'passed': False,
        'messages': ["Name is required"],
        'failures': [{'field': 'name', 'message': "Name is required", 'rule_name': 'required'}],
        'total_checks': 1,
    }


def test_register_rule_by_name_with_parameters():
    rules = RuleSet.from_setup(
        {"isbn": "978-0-306-40615-7", "color": "blue"},
        lambda r: r.register_rule("isbn", "Invalid ISBN", "is_isbn", "13")
                   .add("color", "Unknown color", "is_in", ["red", "green"]),
    )

    assert rules.evaluate().messages == ["Unknown color"]


def test_register_rule_with_callable():
    rules = RuleSet.from_setup(
        {"word": "level"},
        lambda r: r.register_rule("word", "Not a palindrome", lambda v: v == v[::-1]),
    )

    assert rules.evaluate().passed is True


def test_register_rule_unknown_name_raises():
    with pytest.raises(PredicateNotFoundException):
        RuleSet.from_setup({}, lambda r: r.register_rule("name", "msg", "is_cheese"))


def test_register_rule_with_missing_factory_parameters_raises():
    with pytest.raises(PredicateConfigurationException):
        RuleSet.from_setup({}, lambda r: r.register_rule("x", "m", "min_length"))

    with pytest.raises(PredicateConfigurationException):
        RuleSet.from_setup({}, lambda r: r.register_rule("x", "m", "is_isbn", "13", strict=True))


def test_register_rule_rejects_parameters_with_callable():
    with pytest.raises(TypeError):
        RuleSet.from_setup({}, lambda r: r.register_rule("name", "msg", len, 3))


def test_invalid_factory_parameters_raise_at_registration():
    with pytest.raises(PredicateConfigurationException):
        RuleSet.from_setup({}, lambda r: r.is_isbn("isbn", "msg", "12"))

    with pytest.raises(PredicateConfigurationException):
        RuleSet.from_setup({}, lambda r: r.is_phone("phone", "msg", "xx-QQ"))


def test_raising_delegate_counts_as_failure():
    rules = RuleSet.from_setup(
        {"code": "abcd"},
        lambda r: r.watch("code", "Delegate failed", ExplodingDelegate())
                   .watch("code", "Odd length", EvenLength()),
    )

    result = rules.evaluate()

    assert result.passed is False
    assert result.messages == ["Delegate failed"]


def test_structured_document_values_are_stringified():
    document = {"age": 42, "active": True, "address": {"city": "Lyon"}}
    rules = RuleSet.from_setup(
        document,
        lambda r: r.is_int("age", "Age must be an integer")
                   .is_true("active", "Must be active")
                   .equals("address.city", "Wrong city", "Lyon"),
    )

    assert isinstance(rules.record, StructuredRecord)
    assert rules.evaluate().passed is True


def test_json_text_input():
    rules = RuleSet.from_setup(
        '{"host": "api.example.org", "ip": "10.0.0.1"}',
        lambda r: r.is_fqdn("host", "Bad host").is_ipv4("ip", "Bad IP"),
    )

    assert rules.evaluate().passed is True


def test_form_record_input():
    record = FormRecord.from_query_string("name=Jane&volume=loud&port=8080")
    rules = RuleSet.from_setup(
        record,
        lambda r: r.is_alpha("name", "Bad name")
                   .is_int("volume", "Volume must be a number")
                   .is_int("port", "Port must be a number"),
    )

    assert rules.record is record
    assert rules.evaluate().messages == ["Volume must be a number"]


def test_fluent_methods_cover_catalog():
    data = {
        "ascii": "plain text",
        "alnum": "abc123",
        "b64": "aGVsbG8=",
        "bool": "TRUE",
        "card": "4111 1111 1111 1111",
        "date": "2024-03-01",
        "empty": "",
        "false": "0",
        "float": "-3.5e2",
        "hex": "deadBEEF",
        "color": "#ff0",
        "ip": "::1",
        "ipv6": "2001:db8::1",
        "lower": "abc",
        "upper": "ABC",
        "mongo": "507f1f77bcf86cd799439011",
        "num": "007",
        "phone": "650-253-0000",
        "uuid": "123e4567-e89b-42d3-a456-426614174000",
        "host": "my_host.example.com",
        "short": "abcd",
        "exact": "abc",
        "contains": "hello world",
        "after": "2024-06-01",
        "url": "https://example.com:8443/docs?page=2",
    }

    def setup(r):
        r.is_ascii("ascii", "ascii")
        r.is_alphanumeric("alnum", "alnum")
        r.is_base64("b64", "b64")
        r.is_bool("bool", "bool")
        r.is_credit_card("card", "card")
        r.is_date("date", "date")
        r.is_date("date", "date format", "%Y-%m-%d")
        r.is_empty("empty", "empty")
        r.is_false("false", "false")
        r.is_float("float", "float")
        r.is_hexadecimal("hex", "hex")
        r.is_hex_color("color", "color")
        r.is_ip("ip", "ip")
        r.is_ipv6("ipv6", "ipv6")
        r.is_lowercase("lower", "lower")
        r.is_uppercase("upper", "upper")
        r.is_mongo_id("mongo", "mongo")
        r.is_numeric("num", "num")
        r.is_phone("phone", "phone", "en-US")
        r.is_uuid("uuid", "uuid")
        r.is_uuid("uuid", "uuid4", 4)
        r.is_fqdn("host", "host", FQDNOptions(allow_underscores=True))
        r.max_length("short", "short", 4)
        r.exact_length("exact", "exact", 3)
        r.contains("contains", "contains", "world")
        r.is_after("after", "after", "2024-01-01")
        r.is_before("after", "before", "2025-01-01")
        r.is_url("url", "url")

    result = RuleSet.from_setup(data, setup).evaluate()

    assert result.messages == []
    assert result.total_checks == 28


def test_rules_for_lists_rules_in_registration_order():
    rules = SignupRules({"email": "jane@gmail.com", "password": "correct horse"})

    assert [rule.message for rule in rules.rules_for("email")] == ["Email is required", "Email is invalid"]
    assert [rule.label for rule in rules.rules_for("email")][0] == "required"
    assert rules.rules_for("missing") == []
    assert rules.fields == ["email", "password"]
    assert rules.rule_count == 3


def test_rules_for_returns_a_copy():
    rules = SignupRules({})

    rules.rules_for("email").clear()

    assert len(rules.rules_for("email")) == 2
