"""
Tests for string predicates.
"""

import pytest

from fieldcheck import PredicateConfigurationException
from fieldcheck.validators import string_validators as sv


def test_required_and_is_empty():
    assert sv.required("x") is True
    assert sv.required("") is False
    assert sv.is_empty("") is True
    assert sv.is_empty(" ") is False


def test_contains_and_equals():
    assert sv.contains("@")("jane@gmail.com") is True
    assert sv.contains("@")("jane") is False
    assert sv.equals("yes")("yes") is True
    assert sv.equals("yes")("Yes") is False


def test_is_in_is_case_sensitive():
    predicate = sv.is_in(["pending", "approved"])

    assert predicate("pending") is True
    assert predicate("Pending") is False
    assert predicate("") is False


def test_is_in_rejects_single_string():
    with pytest.raises(PredicateConfigurationException):
        sv.is_in("pending")


def test_length_bounds():
    assert sv.exact_length(3)("abc") is True
    assert sv.exact_length(3)("abcd") is False
    assert sv.min_length(2)("ab") is True
    assert sv.min_length(2)("a") is False
    assert sv.max_length(2)("ab") is True
    assert sv.max_length(2)("abc") is False
    assert sv.max_length(0)("") is True


@pytest.mark.parametrize("length", [-1, "3", 2.5, True])
def test_length_bounds_reject_bad_parameters(length):
    with pytest.raises(PredicateConfigurationException):
        sv.min_length(length)


@pytest.mark.parametrize("predicate,valid,invalid", [
    (sv.is_ascii, "Hello, world!", "héllo"),
    (sv.is_alpha, "Hello", "Hello1"),
    (sv.is_alphanumeric, "Hello1", "Hello 1"),
    (sv.is_lowercase, "hello 1", "Hello"),
    (sv.is_uppercase, "HELLO 1", "Hello"),
    (sv.is_base64, "Zm9vYmFy", "Zm9vYmF"),
    (sv.is_hexadecimal, "deadBEEF09", "0xdead"),
    (sv.is_hex_color, "#A0b", "#abcd"),
    (sv.is_mongo_id, "507f1f77bcf86cd799439011", "507f1f77bcf86cd79943901z"),
    (sv.is_uuid, "A987FBC9-4BED-3078-CF07-9141BA07C9F3", "A987FBC9-4BED-3078-CF07-9141BA07C9F"),
])
def test_character_class_predicates(predicate, valid, invalid):
    assert predicate(valid) is True
    assert predicate(invalid) is False


def test_uuid_versions():
    v3 = "A987FBC9-4BED-3078-CF07-9141BA07C9F3"
    v4 = "713ae7e3-cb32-45f9-adcb-7c4fa86b90c1"

    assert sv.is_uuid_version(3)(v3) is True
    assert sv.is_uuid_version(4)(v3) is False
    assert sv.is_uuid_version(4)(v4) is True
    assert sv.is_uuid_version(None)(v3) is True


def test_uuid_unknown_version_raises():
    with pytest.raises(PredicateConfigurationException):
        sv.is_uuid_version(7)
