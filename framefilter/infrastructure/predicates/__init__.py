"""
Value predicates and the registry that resolves them by kind.

Each predicate kind exposes the same contract (is_valid, test), so the
row-selection transform evaluates any registered kind without knowing it.
"""

from .base import InvalidPredicate, PredicateConfig, PredicateDescriptor, PredicateInstance
from .exceptions import UnknownPredicateKindError
from .registry import PredicateRegistry, create_default_registry, value_filters_registry

__all__ = [
    'InvalidPredicate',
    'PredicateConfig',
    'PredicateDescriptor',
    'PredicateInstance',
    'PredicateRegistry',
    'UnknownPredicateKindError',
    'create_default_registry',
    'value_filters_registry'
]
