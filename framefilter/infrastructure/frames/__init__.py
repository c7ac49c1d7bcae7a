"""
Column-oriented frame model consumed by the row-selection transform.
"""

from .field import Field, FieldType, get_field_display_name
from .frame import Frame

__all__ = [
    'Field',
    'FieldType',
    'Frame',
    'get_field_display_name'
]
