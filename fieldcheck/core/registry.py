"""
Predicate registry system.

Provides decorator-based registration for predicates and retrieval functions.
Rule sets can refer to any registered predicate by name, so new checks plug
in without modifying the engine.

Two kinds of entries are registered:
- plain predicates: ``fn(value) -> bool``
- predicate factories: ``fn(*params) -> predicate``
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict

from fieldcheck.core.base import Predicate
from fieldcheck.core.exceptions import PredicateConfigurationException, PredicateNotFoundException
from fieldcheck.utils.logger import describe_call, setup_logger

logger = setup_logger(__name__)


@dataclass(frozen=True)
class PredicateEntry:
    """A registered predicate or predicate factory"""
    name: str
    func: Callable[..., Any]
    factory: bool = False


# Global registry of all predicates
PREDICATE_REGISTRY: Dict[str, PredicateEntry] = {}


def register_predicate(name: str, factory: bool = False):
    """
    Decorator to register a predicate in the global registry.

    Usage:
        @register_predicate("is_alpha")
        def is_alpha(value: str) -> bool:
            ...

        @register_predicate("min_length", factory=True)
        def min_length(length: int) -> Predicate:
            ...

    Args:
        name: Unique name for the predicate (used by RuleSet.register_rule)
        factory: True if the function takes parameters and returns a predicate

    Returns:
        Decorator function
    """
    def decorator(func: Callable[..., Any]):
        if name in PREDICATE_REGISTRY:
            logger.warning(
                f"Predicate '{name}' is already registered. "
                f"Overwriting with {func.__name__}"
            )

        PREDICATE_REGISTRY[name] = PredicateEntry(name=name, func=func, factory=factory)
        logger.debug(f"Registered predicate: {name} -> {func.__name__}")
        return func

    return decorator


def get_predicate(name: str, *params: Any, **options: Any) -> Predicate:
    """
    Resolve a registered name into a ready-to-run predicate.

    Args:
        name: Predicate name
        *params: Construction parameters for a predicate factory
        **options: Keyword construction parameters for a predicate factory

    Returns:
        Predicate callable

    Raises:
        PredicateNotFoundException: If the name is not registered
        PredicateConfigurationException: If parameters are given to a plain predicate,
            or a factory rejects its parameters
    """
    entry = PREDICATE_REGISTRY.get(name)
    if entry is None:
        raise PredicateNotFoundException(f"Predicate '{name}' not found in registry")

    if not entry.factory:
        if params or options:
            raise PredicateConfigurationException(
                f"Predicate '{name}' takes no parameters, got {describe_call(name, *params, **options)}"
            )
        return entry.func

    logger.debug(f"Building predicate {describe_call(name, *params, **options)}")
    try:
        return entry.func(*params, **options)
    except TypeError as e:
        raise PredicateConfigurationException(
            f"Invalid parameters for predicate '{name}': {describe_call(name, *params, **options)}"
        ) from e


def list_predicates() -> Dict[str, str]:
    """
    List all registered predicates.

    Returns:
        Dictionary mapping predicate names to function names
    """
    return {
        name: entry.func.__name__
        for name, entry in PREDICATE_REGISTRY.items()
    }


def is_registered(name: str) -> bool:
    """
    Check if a predicate is registered.

    Args:
        name: Predicate name

    Returns:
        True if registered, False otherwise
    """
    return name in PREDICATE_REGISTRY
