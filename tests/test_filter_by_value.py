"""
Tests for the filter-by-value transform.
"""

import pytest
import pandas as pd
import numpy as np
from framefilter import (
    Field,
    FieldType,
    FilterByValueOptions,
    FilterByValueTransformer,
    Frame,
    UnknownPredicateKindError,
    ValueFilterConfig,
    apply
)


def status_frame():
    return Frame([
        Field('status', FieldType.STRING, ['ok', 'fail', 'ok', 'fail'], config={'color': 'red'}),
        Field('value', FieldType.NUMBER, [1.0, 2.0, 3.0, 4.0])
    ])


def equal(field_name, expression):
    return {'fieldName': field_name, 'filterType': 'equal', 'filterExpression': expression}


def values(frame, name):
    return frame.field_by_display_name(name).values


class TestFilterByValueOptions:
    """Tests for option parsing"""

    def test_defaults(self):
        """Test default type and match."""
        options = FilterByValueOptions()

        assert options.type == 'include'
        assert options.match == 'all'
        assert options.value_filters == []

    def test_from_dict_camel_case(self):
        """Test plain configuration dicts with camelCase keys."""
        options = FilterByValueOptions.from_dict({
            'valueFilters': [{
                'fieldName': 'status',
                'filterExpression': 'ok',
                'filterExpression2': None,
                'filterArgs': {},
                'filterType': 'equal'
            }],
            'type': 'exclude',
            'match': 'any'
        })

        assert options.type == 'exclude'
        assert options.match == 'any'
        assert options.value_filters == [
            ValueFilterConfig(field_name='status', filter_expression='ok', filter_type='equal')
        ]

    def test_from_dict_snake_case(self):
        """Test snake_case keys and the default filter type."""
        config = ValueFilterConfig.from_dict({'field_name': 'status', 'filter_expression': 'o+'})

        assert config.field_name == 'status'
        assert config.filter_type == 'regex'
        assert config.filter_args == {}

    def test_invalid_type_raises_error(self):
        """Test that type must be include or exclude."""
        with pytest.raises(ValueError, match="type must be 'include' or 'exclude'"):
            FilterByValueOptions(type='keep')

    def test_invalid_match_raises_error(self):
        """Test that match must be all or any."""
        with pytest.raises(ValueError, match="match must be 'all' or 'any'"):
            FilterByValueOptions(match='some')

    def test_coerce_rejects_other_types(self):
        """Test that options must be a dict or FilterByValueOptions."""
        with pytest.raises(TypeError):
            apply([status_frame()], ['status'])


class TestApply:
    """Tests for apply()"""

    def test_include_all(self):
        """Scenario A: keep rows equal to 'ok'."""
        result = apply([status_frame()], {'valueFilters': [equal('status', 'ok')]})

        assert len(result) == 1
        assert result[0].length == 2
        assert values(result[0], 'status') == ['ok', 'ok']
        assert values(result[0], 'value') == [1.0, 3.0]

    def test_exclude_all(self):
        """Scenario B: drop rows equal to 'ok'."""
        result = apply(
            [status_frame()],
            {'valueFilters': [equal('status', 'ok')], 'type': 'exclude'}
        )

        assert result[0].length == 2
        assert values(result[0], 'status') == ['fail', 'fail']

    def test_match_any_across_fields(self):
        """Scenario C: a row matching only the second filter is kept."""
        options = {
            'valueFilters': [
                equal('status', 'ok'),
                {'fieldName': 'value', 'filterType': 'greater', 'filterExpression': '3.5'}
            ],
            'match': 'any'
        }

        result = apply([status_frame()], options)

        assert values(result[0], 'value') == [1.0, 3.0, 4.0]
        assert values(result[0], 'status') == ['ok', 'ok', 'fail']

    def test_match_all_across_fields(self):
        """Test that every filter must pass under match=all."""
        options = {
            'valueFilters': [
                equal('status', 'ok'),
                {'fieldName': 'value', 'filterType': 'greater', 'filterExpression': '2'}
            ]
        }

        result = apply([status_frame()], options)

        assert values(result[0], 'value') == [3.0]

    def test_exclude_any(self):
        """Test that exclude/any drops rows matching either filter."""
        options = {
            'valueFilters': [
                equal('status', 'ok'),
                {'fieldName': 'value', 'filterType': 'greater', 'filterExpression': '3.5'}
            ],
            'type': 'exclude',
            'match': 'any'
        }

        result = apply([status_frame()], options)

        assert values(result[0], 'value') == [2.0]

    def test_field_missing_in_one_frame(self):
        """Scenario D: frames without the field keep all their rows."""
        other = Frame([Field('host', FieldType.STRING, ['a', 'b', 'c'])], name='hosts')

        result = apply([status_frame(), other], {'valueFilters': [equal('status', 'ok')]})

        assert values(result[0], 'status') == ['ok', 'ok']
        assert result[1] is other
        assert result[1].length == 3

    def test_unknown_filter_type_raises_error(self):
        """Scenario E: unknown predicate kinds abort the call."""
        options = {'valueFilters': [
            {'fieldName': 'status', 'filterType': 'soundsLike', 'filterExpression': 'ok'}
        ]}

        with pytest.raises(UnknownPredicateKindError):
            apply([status_frame()], options)

    def test_empty_filter_list_is_identity(self):
        """Test that no filters returns the input unchanged."""
        frames = [status_frame()]

        assert apply(frames, {'valueFilters': []}) is frames
        assert apply(frames, FilterByValueOptions()) is frames

    def test_sole_invalid_filter_is_identity(self):
        """Test that an invalid filter contributes nothing."""
        frames = [status_frame()]
        options = {'valueFilters': [
            {'fieldName': 'status', 'filterType': 'regex', 'filterExpression': ''}
        ]}

        assert apply(frames, options) is frames

    def test_unmatched_field_name_is_identity(self):
        """Test that filters targeting no field leave frames untouched."""
        frames = [status_frame()]

        assert apply(frames, {'valueFilters': [equal('missing', 'ok')]}) is frames
        assert apply(frames, {'valueFilters': [equal(None, 'ok')]}) is frames

    def test_unsupported_field_type_is_identity(self):
        """Test that numeric kinds on string fields are skipped."""
        frames = [status_frame()]
        options = {'valueFilters': [
            {'fieldName': 'status', 'filterType': 'greater', 'filterExpression': '1'}
        ]}

        assert apply(frames, options) is frames

    def test_invalid_filter_among_valid_ones_is_skipped(self):
        """Test that invalid filters do not affect the others."""
        options = {'valueFilters': [
            {'fieldName': 'status', 'filterType': 'regex', 'filterExpression': '('},
            equal('status', 'fail')
        ]}

        result = apply([status_frame()], options)

        assert values(result[0], 'status') == ['fail', 'fail']

    def test_no_rows_selected(self):
        """Test that an effective filter can select zero rows."""
        result = apply([status_frame()], {'valueFilters': [equal('status', 'unknown')]})

        assert result[0].length == 0
        assert [f.name for f in result[0].fields] == ['status', 'value']
        assert all(f.values == [] for f in result[0].fields)

    def test_field_shape_preserved(self):
        """Test that names, types and config are carried to the output."""
        frame = status_frame()

        result = apply([frame], {'valueFilters': [equal('status', 'ok')]})[0]

        assert [(f.name, f.type, f.config) for f in result.fields] == \
            [(f.name, f.type, f.config) for f in frame.fields]
        assert result.fields[0].config is not frame.fields[0].config

    def test_input_frames_not_modified(self):
        """Test that apply does not mutate its input."""
        frame = status_frame()

        apply([frame], {'valueFilters': [equal('status', 'ok')]})

        assert frame == status_frame()

    def test_idempotent_include_all(self):
        """Test that re-applying include/all yields the same output."""
        options = {'valueFilters': [
            equal('status', 'ok'),
            {'fieldName': 'value', 'filterType': 'lower', 'filterExpression': '3.5'}
        ]}

        once = apply([status_frame()], options)
        twice = apply(once, options)

        assert twice == once

    def test_row_order_preserved(self):
        """Test that output rows keep their original order."""
        frame = Frame([Field('n', FieldType.NUMBER, [5, 1, 4, 2, 3])])

        result = apply([frame], {'valueFilters': [
            {'fieldName': 'n', 'filterType': 'greater', 'filterExpression': '1'}
        ]})

        assert values(result[0], 'n') == [5, 4, 2, 3]

    def test_frame_order_and_name_preserved(self):
        """Test that frames come back in input order with their names."""
        first = Frame([Field('status', FieldType.STRING, ['ok', 'fail'])], name='first')
        second = Frame([Field('status', FieldType.STRING, ['fail', 'ok'])], name='second')

        result = apply([first, second], {'valueFilters': [equal('status', 'ok')]})

        assert [f.name for f in result] == ['first', 'second']
        assert [values(f, 'status') for f in result] == [['ok'], ['ok']]

    def test_decisions_are_per_frame(self):
        """Test that a longer first frame does not leak rows into a shorter one."""
        long_frame = Frame([Field('status', FieldType.STRING, ['ok', 'ok', 'ok', 'ok'])])
        short_frame = Frame([Field('status', FieldType.STRING, ['fail'])])

        result = apply([long_frame, short_frame], {'valueFilters': [equal('status', 'ok')]})

        assert result[0].length == 4
        assert result[1].length == 0

    def test_display_name_targets_field(self):
        """Test that filters match the resolved display name, not the storage name."""
        frame = Frame([
            Field('raw_status', FieldType.STRING, ['ok', 'fail'], config={'displayName': 'Status'})
        ])

        result = apply([frame], {'valueFilters': [equal('Status', 'fail')]})

        assert values(result[0], 'Status') == ['fail']
        assert apply([frame], {'valueFilters': [equal('raw_status', 'fail')]})[0] is frame

    def test_null_values(self):
        """Test filtering out missing values."""
        frame = Frame([Field('value', FieldType.NUMBER, [1.0, None, 3.0])])

        result = apply([frame], {'valueFilters': [
            {'fieldName': 'value', 'filterType': 'isNotNull'}
        ]})

        assert values(result[0], 'value') == [1.0, 3.0]

    def test_custom_registry(self):
        """Test that apply resolves kinds through the given registry."""
        from framefilter.infrastructure.predicates import PredicateRegistry

        with pytest.raises(UnknownPredicateKindError):
            apply([status_frame()], {'valueFilters': [equal('status', 'ok')]}, PredicateRegistry())


class TestSeedingOrder:
    """Tests for order-dependent seeding of row decisions"""

    def test_match_all_later_passing_filter_does_not_reinclude(self):
        """Test that a later passing filter never overturns an exclusion."""
        options = {'valueFilters': [
            equal('status', 'fail'),
            {'fieldName': 'value', 'filterType': 'greater', 'filterExpression': '0'}
        ]}

        result = apply([status_frame()], options)

        assert values(result[0], 'status') == ['fail', 'fail']

    def test_match_any_later_failing_filter_does_not_exclude(self):
        """Test that a later failing filter never overturns an inclusion."""
        options = {
            'valueFilters': [
                equal('status', 'ok'),
                {'fieldName': 'value', 'filterType': 'greater', 'filterExpression': '100'}
            ],
            'match': 'any'
        }

        result = apply([status_frame()], options)

        assert values(result[0], 'status') == ['ok', 'ok']

    def test_seed_from_first_applicable_filter(self):
        """Test seeding when the first filter targets a field the frame lacks."""
        options = {'valueFilters': [
            equal('host', 'a'),
            equal('status', 'ok')
        ]}

        result = apply([status_frame()], options)

        # status filter seeds the decisions since host is absent
        assert values(result[0], 'status') == ['ok', 'ok']

    def test_seed_skips_invalid_first_filter(self):
        """Test seeding when the first filter is invalid."""
        options = {
            'valueFilters': [
                {'fieldName': 'value', 'filterType': 'range', 'filterExpression': '5', 'filterExpression2': '1'},
                equal('status', 'fail')
            ],
            'match': 'any'
        }

        result = apply([status_frame()], options)

        assert values(result[0], 'status') == ['fail', 'fail']

    def test_exclude_all_semantics(self):
        """Test that exclude/all drops rows passing every filter only."""
        options = {
            'valueFilters': [
                equal('status', 'ok'),
                {'fieldName': 'value', 'filterType': 'greater', 'filterExpression': '2'}
            ],
            'type': 'exclude'
        }

        result = apply([status_frame()], options)

        assert values(result[0], 'value') == [1.0, 2.0, 4.0]


class TestFilterByValueTransformer:
    """Tests for FilterByValueTransformer"""

    def test_callable_on_frames(self):
        """Test calling the transformer on a list of frames."""
        transformer = FilterByValueTransformer(FilterByValueOptions(
            value_filters=[ValueFilterConfig('status', 'ok', filter_type='equal')]
        ))

        result = transformer([status_frame()])

        assert values(result[0], 'status') == ['ok', 'ok']

    def test_filter_dataframe(self):
        """Test DataFrame filtering keeps index labels and dtypes."""
        df = pd.DataFrame({
            'platform': ['desktop', 'mobile', 'tablet', 'desktop'],
            'sessions': [100, 50, 20, 90]
        }, index=[10, 11, 12, 13])

        transformer = FilterByValueTransformer({
            'valueFilters': [
                {'fieldName': 'platform', 'filterType': 'equal', 'filterExpression': 'tablet'}
            ],
            'type': 'exclude'
        })
        result = transformer.filter(df)

        expected = df.loc[[10, 11, 13]]
        pd.testing.assert_frame_equal(result, expected)

    def test_filter_dataframe_numeric_range(self):
        """Test a numeric range filter on a DataFrame."""
        df = pd.DataFrame({
            'sessions': [50, 100, 500, 1000, 5000],
            'metric': ['a', 'b', 'c', 'd', 'e']
        })

        transformer = FilterByValueTransformer({'valueFilters': [{
            'fieldName': 'sessions',
            'filterType': 'range',
            'filterExpression': '100',
            'filterExpression2': '1000'
        }]})
        result = transformer.filter(df)

        assert list(result['metric']) == ['b', 'c', 'd']

    def test_filter_dataframe_with_nan(self):
        """Test that NaN cells are treated as null."""
        df = pd.DataFrame({'rate': [0.5, np.nan, 1.5]})

        transformer = FilterByValueTransformer({'valueFilters': [
            {'fieldName': 'rate', 'filterType': 'isNull'}
        ]})
        result = transformer.filter(df)

        assert len(result) == 1
        assert result.index.tolist() == [1]

    def test_filter_missing_column_returns_copy(self):
        """Test that a missing column returns a copy of the input."""
        df = pd.DataFrame({'value': [100, 200, 300]})

        transformer = FilterByValueTransformer({'valueFilters': [equal('status', 'ok')]})
        result = transformer.filter(df)

        pd.testing.assert_frame_equal(result, df)
        assert result is not df

    def test_filter_empty_dataframe(self):
        """Test filtering an empty DataFrame."""
        df = pd.DataFrame()

        result = FilterByValueTransformer({'valueFilters': [equal('status', 'ok')]}).filter(df)

        assert result.empty

    def test_filter_rejects_non_dataframe(self):
        """Test that filter only accepts DataFrames."""
        with pytest.raises(TypeError, match="Expected pandas DataFrame"):
            FilterByValueTransformer({'valueFilters': []}).filter([1, 2])
