"""
Frame - an ordered list of fields sharing a row count.
"""

import warnings
from typing import List, Optional

import pandas as pd

from .field import Field, FieldType, get_field_display_name


# Dtypes used when a field has no values to infer one from
_EMPTY_DTYPES = {
    FieldType.NUMBER: 'float64',
    FieldType.BOOLEAN: 'bool',
    FieldType.TIME: 'datetime64[ns]',
}

_INFERRED_TYPES = {
    'string': FieldType.STRING,
    'integer': FieldType.NUMBER,
    'floating': FieldType.NUMBER,
    'mixed-integer-float': FieldType.NUMBER,
    'decimal': FieldType.NUMBER,
    'boolean': FieldType.BOOLEAN,
    'datetime': FieldType.TIME,
    'datetime64': FieldType.TIME,
    'date': FieldType.TIME,
}


def _field_type_for(series: pd.Series) -> FieldType:
    dtype = series.dtype

    if pd.api.types.is_bool_dtype(dtype):
        return FieldType.BOOLEAN
    if pd.api.types.is_datetime64_any_dtype(dtype):
        return FieldType.TIME
    if pd.api.types.is_numeric_dtype(dtype):
        return FieldType.NUMBER
    if pd.api.types.is_object_dtype(dtype) or pd.api.types.is_string_dtype(dtype):
        inferred = pd.api.types.infer_dtype(series, skipna=True)
        if inferred == 'empty':
            return FieldType.STRING
        return _INFERRED_TYPES.get(inferred, FieldType.OTHER)

    return FieldType.OTHER


class Frame:
    """
    Column-oriented table: fields of equal length plus an explicit row count.

    Row i of one field corresponds to row i of every other field.

    Args:
        fields: Ordered list of fields
        length: Row count; taken from the first field when omitted
        name: Optional frame name

    Raises:
        ValueError: If a field's value count differs from length

    Example:
        frame = Frame([
            Field('status', FieldType.STRING, ['ok', 'fail']),
            Field('value', FieldType.NUMBER, [1.0, 2.0])
        ])
        frame.length  # 2
    """

    def __init__(
        self,
        fields: Optional[List[Field]] = None,
        length: Optional[int] = None,
        name: Optional[str] = None
    ):
        self.fields: list[Field] = list(fields or [])
        self.name = name

        if length is None:
            length = len(self.fields[0]) if self.fields else 0

        if length < 0:
            raise ValueError(f"length must be non-negative, got {length}")

        for field in self.fields:
            if len(field) != length:
                raise ValueError(
                    f"Field '{field.name}' has {len(field)} values, "
                    f"expected {length} (frame length)"
                )

        self.length: int = length

    def __len__(self) -> int:
        return self.length

    def __repr__(self) -> str:
        names = [get_field_display_name(f) for f in self.fields]
        return f"Frame(name={self.name!r}, fields={names}, length={self.length})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Frame):
            return NotImplemented
        return (
            self.name == other.name
            and self.length == other.length
            and self.fields == other.fields
        )

    def field_by_display_name(self, name: Optional[str]) -> Optional[Field]:
        """
        Find the first field whose resolved display name equals name.

        Args:
            name: Display name to look for

        Returns:
            Field or None if no field matches
        """
        if name is None:
            return None

        for field in self.fields:
            if get_field_display_name(field) == name:
                return field

        return None

    @classmethod
    def from_dataframe(cls, df: pd.DataFrame, name: Optional[str] = None) -> 'Frame':
        """
        Build a Frame from a pandas DataFrame, one field per column.

        Missing values (NaN, NaT, None) become None. The index is dropped.

        Args:
            df: Input DataFrame
            name: Optional frame name

        Returns:
            Frame: Frame with inferred field types

        Raises:
            TypeError: If df is not a pandas DataFrame
        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError(
                f"Expected pandas DataFrame, got {type(df).__name__}"
            )

        fields = []
        for position, column in enumerate(df.columns):
            series = df.iloc[:, position]

            if not isinstance(column, str):
                warnings.warn(
                    f"Column name {column!r} is not a string, converting to '{column}'",
                    UserWarning
                )

            values = series.astype(object).where(series.notna(), None).tolist()
            fields.append(Field(
                name=str(column),
                type=_field_type_for(series),
                values=values,
                source_dtype=str(series.dtype)
            ))

        return cls(fields, length=len(df), name=name)

    def to_dataframe(self) -> pd.DataFrame:
        """
        Convert the Frame back to a pandas DataFrame.

        Columns keep field order and storage names. When a field remembers
        the dtype it was read from, the column is cast back to it.

        Returns:
            pd.DataFrame: DataFrame with a fresh RangeIndex
        """
        columns = []
        for field in self.fields:
            if field.values:
                series = pd.Series(field.values)
            else:
                series = pd.Series([], dtype=_EMPTY_DTYPES.get(field.type, 'object'))

            if field.source_dtype is not None and str(series.dtype) != field.source_dtype:
                try:
                    series = series.astype(field.source_dtype)
                except (TypeError, ValueError) as e:
                    warnings.warn(
                        f"Could not restore dtype '{field.source_dtype}' for column "
                        f"'{field.name}': {str(e)}",
                        UserWarning
                    )

            columns.append(series)

        if not columns:
            return pd.DataFrame(index=pd.RangeIndex(self.length))

        df = pd.concat(columns, axis=1, ignore_index=True)
        df.columns = [field.name for field in self.fields]
        return df
