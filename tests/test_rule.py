"""
Tests for Rule.
"""

import dataclasses

import pytest

from fieldcheck import Rule
from fieldcheck.validators.string_validators import min_length, required


def test_check_passes_without_message():
    rule = Rule(message="Name is required", predicate=required)

    assert rule.check("Jane") == (True, None)


def test_check_fails_with_fixed_message():
    rule = Rule(message="Name is required", predicate=required)

    assert rule.check("") == (False, "Name is required")


def test_raising_predicate_fails_instead_of_raising():
    def broken(value):
        raise ValueError("boom")

    rule = Rule(message="Broken", predicate=broken)

    assert rule.check("anything") == (False, "Broken")


def test_label_prefers_explicit_name():
    assert Rule(message="m", predicate=required, name="custom").label == "custom"
    assert Rule(message="m", predicate=min_length(3)).label == "min_length"


def test_rule_is_immutable():
    rule = Rule(message="m", predicate=required)

    with pytest.raises(dataclasses.FrozenInstanceError):
        rule.message = "changed"
