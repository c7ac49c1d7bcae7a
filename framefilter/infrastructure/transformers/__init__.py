"""
Data transformers.

This module provides:
- Filters: select frame/DataFrame rows by field values
"""

from . import filters
from .filters import FilterByValueTransformer

__all__ = [
    'FilterByValueTransformer',
    'filters'
]
