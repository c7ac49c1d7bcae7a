"""
Row filters over frames and DataFrames.
"""

from .base import DataFrameFilter
from .filter_by_value import (
    FilterByValueOptions,
    FilterByValueTransformer,
    ValueFilterConfig,
    apply
)

__all__ = [
    'DataFrameFilter',
    'FilterByValueOptions',
    'FilterByValueTransformer',
    'ValueFilterConfig',
    'apply'
]
