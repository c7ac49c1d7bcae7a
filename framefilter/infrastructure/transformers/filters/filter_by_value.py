"""
Filter by value - keeps or drops rows depending on the values of certain fields.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Sequence, Union

import pandas as pd

from ...frames import Frame
from ...predicates import PredicateConfig, PredicateDescriptor, PredicateRegistry, value_filters_registry
from .base import DataFrameFilter


FILTER_TYPES = ('include', 'exclude')
MATCH_TYPES = ('all', 'any')


@dataclass
class ValueFilterConfig:
    """
    One value filter: a target field, a predicate kind and its parameters.

    Args:
        field_name: Display name of the field to test, None to skip the filter
        filter_expression: First predicate parameter
        filter_expression2: Second predicate parameter
        filter_args: Structured predicate parameters
        filter_type: Predicate kind id in the registry
    """

    field_name: Optional[str] = None
    filter_expression: Optional[str] = None
    filter_expression2: Optional[str] = None
    filter_args: Dict[str, Any] = field(default_factory=dict)
    filter_type: str = 'regex'

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ValueFilterConfig':
        """
        Build a config from a plain dict.

        Accepts the camelCase keys of stored configurations (fieldName,
        filterExpression, filterExpression2, filterArgs, filterType) as well
        as the snake_case attribute names.
        """
        def pick(camel: str, snake: str, default: Any = None) -> Any:
            if camel in data:
                return data[camel]
            return data.get(snake, default)

        return cls(
            field_name=pick('fieldName', 'field_name'),
            filter_expression=pick('filterExpression', 'filter_expression'),
            filter_expression2=pick('filterExpression2', 'filter_expression2'),
            filter_args=dict(pick('filterArgs', 'filter_args') or {}),
            filter_type=pick('filterType', 'filter_type', 'regex'),
        )


@dataclass
class FilterByValueOptions:
    """
    Options of the filter-by-value transform.

    Args:
        value_filters: Filters, evaluated in order
        type: 'include' to keep selected rows, 'exclude' to drop them (default: 'include')
        match: 'all' to require every filter, 'any' to require one (default: 'all')

    Raises:
        ValueError: If type or match has an unsupported value
    """

    value_filters: List[ValueFilterConfig] = field(default_factory=list)
    type: str = 'include'
    match: str = 'all'

    def __post_init__(self):
        if self.type not in FILTER_TYPES:
            raise ValueError(f"type must be 'include' or 'exclude', got {self.type}")

        if self.match not in MATCH_TYPES:
            raise ValueError(f"match must be 'all' or 'any', got {self.match}")

        self.value_filters = [
            f if isinstance(f, ValueFilterConfig) else ValueFilterConfig.from_dict(f)
            for f in self.value_filters
        ]

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'FilterByValueOptions':
        """Build options from a plain dict (valueFilters/value_filters, type, match)."""
        filters = data.get('valueFilters', data.get('value_filters')) or []
        return cls(
            value_filters=list(filters),
            type=data.get('type', 'include'),
            match=data.get('match', 'all'),
        )

    @classmethod
    def coerce(cls, options: Union['FilterByValueOptions', Dict[str, Any]]) -> 'FilterByValueOptions':
        if isinstance(options, cls):
            return options
        if isinstance(options, dict):
            return cls.from_dict(options)
        raise TypeError(
            f"Expected FilterByValueOptions or dict, got {type(options).__name__}"
        )


def _resolve_descriptors(
    options: FilterByValueOptions,
    registry: PredicateRegistry
) -> List[PredicateDescriptor]:
    # Unknown kinds abort the whole call, before any frame is touched
    return [registry.get(f.filter_type) for f in options.value_filters]


def _row_decisions(
    frame: Frame,
    options: FilterByValueOptions,
    descriptors: Sequence[PredicateDescriptor]
) -> Optional[List[Optional[bool]]]:
    """
    Compute the include/exclude decision of every row of one frame.

    The first filter that applies to the frame (field found, instance valid)
    seeds the default decision of every row. After that, under 'all' a
    failing filter can only move a row to the negative outcome, and under
    'any' a passing filter can only move a row to the positive outcome.
    Filter order therefore matters when filters disagree.

    Returns:
        List of per-row decisions (None = undetermined), or None if no
        filter applied to this frame
    """
    include_row = options.type == 'include'
    match_all = options.match == 'all'

    decisions: list[Optional[bool]] = [None] * frame.length
    seeded = False

    for value_filter, descriptor in zip(options.value_filters, descriptors):
        field = frame.field_by_display_name(value_filter.field_name)
        if field is None:
            continue

        instance = descriptor.get_instance(PredicateConfig(
            filter_expression=value_filter.filter_expression,
            filter_expression2=value_filter.filter_expression2,
            filter_args=value_filter.filter_args,
            field_type=field.type,
        ))

        if not instance.is_valid:
            continue

        first = not seeded
        seeded = True

        for row in range(frame.length):
            matched = instance.test(field.values[row])

            if match_all:
                if not matched:
                    decisions[row] = not include_row
                elif first:
                    decisions[row] = include_row
            else:
                if matched:
                    decisions[row] = include_row
                elif first:
                    decisions[row] = not include_row

    return decisions if seeded else None


def _materialize(frame: Frame, decisions: Sequence[Optional[bool]]) -> Frame:
    """Copy the rows with a truthy decision, in ascending order, into a new Frame."""
    fields = [f.copy_empty() for f in frame.fields]
    length = 0

    for row, keep in enumerate(decisions):
        if keep:
            for source, target in zip(frame.fields, fields):
                target.values.append(source.values[row])
            length += 1

    return Frame(fields, length=length, name=frame.name)


def apply(
    frames: List[Frame],
    options: Union[FilterByValueOptions, Dict[str, Any]],
    registry: Optional[PredicateRegistry] = None
) -> List[Frame]:
    """
    Select rows of every frame according to the value filters.

    Frames are processed independently and returned in input order. A frame
    none of the filters applies to is returned unchanged. If no filter applied
    to any frame, or there are no filters, the input list itself is returned.

    Args:
        frames: Input frames
        options: FilterByValueOptions or an equivalent plain dict
        registry: Predicate registry (default: value_filters_registry)

    Returns:
        list[Frame]: Filtered frames

    Raises:
        UnknownPredicateKindError: If a filter references an unregistered kind
    """
    options = FilterByValueOptions.coerce(options)
    registry = registry if registry is not None else value_filters_registry

    if not options.value_filters:
        return frames

    descriptors = _resolve_descriptors(options, registry)

    processed = []
    filtered_any = False

    for frame in frames:
        decisions = _row_decisions(frame, options, descriptors)

        if decisions is None:
            processed.append(frame)
            continue

        filtered_any = True
        processed.append(_materialize(frame, decisions))

    return processed if filtered_any else frames


class FilterByValueTransformer(DataFrameFilter):
    """
    Filter rows depending on the value of certain fields.

    Callable over a list of frames, and usable as a DataFrameFilter on a
    single pandas DataFrame.

    Args:
        options: FilterByValueOptions or an equivalent plain dict
        registry: Predicate registry (default: value_filters_registry)

    Example 1 - Keep only successful rows:
        transformer = FilterByValueTransformer({
            'valueFilters': [
                {'fieldName': 'status', 'filterType': 'equal', 'filterExpression': 'ok'}
            ]
        })
        ok_rows = transformer.filter(df)

    Example 2 - Drop rows that are slow or failed:
        transformer = FilterByValueTransformer(FilterByValueOptions(
            value_filters=[
                ValueFilterConfig('duration', '1000', filter_type='greater'),
                ValueFilterConfig('status', 'fail', filter_type='equal')
            ],
            type='exclude',
            match='any'
        ))
        frames = transformer(frames)
    """

    def __init__(
        self,
        options: Union[FilterByValueOptions, Dict[str, Any]],
        registry: Optional[PredicateRegistry] = None
    ):
        self.options: FilterByValueOptions = FilterByValueOptions.coerce(options)
        self.registry: PredicateRegistry = registry if registry is not None else value_filters_registry

    def __call__(self, frames: List[Frame]) -> List[Frame]:
        """
        Make FilterByValueTransformer callable on a list of frames.

        Args:
            frames: Input frames

        Returns:
            list[Frame]: Filtered frames
        """
        return apply(frames, self.options, self.registry)

    def filter(self, df: pd.DataFrame) -> pd.DataFrame:
        """
        Filter a DataFrame by field values.

        Columns are matched by name. Selected rows keep their index labels
        and dtypes.

        Args:
            df: Input DataFrame

        Returns:
            pd.DataFrame: Filtered DataFrame, or a copy of df if no filter applied

        Raises:
            TypeError: If df is not a pandas DataFrame
            UnknownPredicateKindError: If a filter references an unregistered kind
        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError(
                f"Expected pandas DataFrame, got {type(df).__name__}"
            )

        if not self.options.value_filters:
            return df.copy()

        descriptors = _resolve_descriptors(self.options, self.registry)
        decisions = _row_decisions(Frame.from_dataframe(df), self.options, descriptors)

        if decisions is None:
            return df.copy()

        positions = [row for row, keep in enumerate(decisions) if keep]
        return df.iloc[positions].copy()
