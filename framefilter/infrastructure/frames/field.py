"""
Field - a named, typed column of values within a frame.
"""

import copy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class FieldType(str, Enum):
    """Value type tag of a field."""

    NUMBER = 'number'
    STRING = 'string'
    TIME = 'time'
    BOOLEAN = 'boolean'
    OTHER = 'other'


@dataclass
class Field:
    """
    A single column of a Frame.

    Args:
        name: Storage name of the field
        type: Value type tag
        values: Row values, indexed 0..length-1
        config: Display/formatting metadata, carried through untouched
        display_name: Optional display name overriding the storage name
        source_dtype: pandas dtype the values came from, if any

    Example:
        status = Field('status', FieldType.STRING, ['ok', 'fail'])
        status.values[1]  # 'fail'
    """

    name: str
    type: FieldType = FieldType.OTHER
    values: List[Any] = field(default_factory=list)
    config: Dict[str, Any] = field(default_factory=dict)
    display_name: Optional[str] = None
    source_dtype: Optional[str] = None

    def __len__(self) -> int:
        return len(self.values)

    def copy_empty(self) -> 'Field':
        """
        Copy this field's attributes with a fresh, empty value list.

        Returns:
            Field: Shallow copy with its own config dict and no values
        """
        duplicate = copy.copy(self)
        duplicate.values = []
        duplicate.config = dict(self.config)
        return duplicate


def get_field_display_name(field: Field) -> str:
    """
    Resolve the name filters use to target a field.

    Order: config["displayName"], then field.display_name, then field.name.
    """
    display_name = field.config.get('displayName')
    if display_name:
        return display_name
    if field.display_name:
        return field.display_name
    return field.name
