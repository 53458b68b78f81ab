"""
Shared fixtures for fieldcheck tests.
"""

import pytest

from fieldcheck import RuleSet
from fieldcheck.utils.config import settings


class EmptyRules(RuleSet):
    """Rule set whose setup registers nothing"""

    def setup(self):
        pass


@pytest.fixture
def empty_rules():
    """Factory for rule sets with no rules, bound to the given data"""
    def build(data=None):
        return EmptyRules({} if data is None else data)
    return build


@pytest.fixture
def max_input_length(monkeypatch):
    """Temporarily lower settings.MAX_INPUT_LENGTH"""
    def apply(length):
        monkeypatch.setattr(settings, "MAX_INPUT_LENGTH", length)
    return apply


@pytest.fixture
def default_date_format(monkeypatch):
    """Temporarily set settings.DEFAULT_DATE_FORMAT"""
    def apply(date_format):
        monkeypatch.setattr(settings, "DEFAULT_DATE_FORMAT", date_format)
    return apply
