"""
Custom exceptions for fieldcheck.

All of these signal programmer errors raised while building rules or
adapting input. None of them is raised from RuleSet.evaluate().
"""


class FieldCheckException(Exception):
    """Base exception for fieldcheck."""
    pass


class PredicateNotFoundException(FieldCheckException):
    """Exception raised when a predicate name is not registered."""
    pass


class PredicateConfigurationException(FieldCheckException):
    """Exception raised when a predicate is built with invalid parameters."""
    pass


class RecordFormatException(FieldCheckException):
    """Exception raised when input data cannot be adapted into a record."""
    pass
