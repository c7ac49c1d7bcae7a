"""
Filter by value: keep or drop rows depending on field values

This example shows:
1. FRAMES: Build frames by hand and from pandas DataFrames
2. FILTER: Combine several value filters with match='all' / match='any'
3. DATAFRAME: Use the same options directly on a DataFrame

Requirements:
    pip install pandas python-dotenv

Usage:
    python examples/example_filter_by_value.py
"""

import pandas as pd

import framefilter
from framefilter import Field, FieldType, FilterByValueTransformer, Frame, apply

framefilter.configure()

print("""
╔══════════════════════════════════════════════════════════════════════╗
║                   Filter rows by field values                        ║
║                                                                      ║
║  Frames → Value filters → Include/Exclude → Filtered frames          ║
╚══════════════════════════════════════════════════════════════════════╝
""")

requests = Frame([
    Field('status', FieldType.STRING, ['ok', 'fail', 'ok', 'fail', 'ok']),
    Field('duration_ms', FieldType.NUMBER, [120, 3400, 980, 45, 2100]),
    Field('host', FieldType.STRING, ['web-1', 'web-2', 'web-1', 'web-3', None])
], name='requests')

hosts = Frame.from_dataframe(pd.DataFrame({
    'host': ['web-1', 'web-2', 'web-3'],
    'region': ['eu', 'us', 'eu']
}), name='hosts')


def show(frames):
    for frame in frames:
        print(f"\n  {frame.name} ({frame.length} rows)")
        print(frame.to_dataframe().to_string(index=False))


print("\n1. Slow OR failed requests (match='any')")
print("=" * 70)
show(apply([requests, hosts], {
    'valueFilters': [
        {'fieldName': 'status', 'filterType': 'equal', 'filterExpression': 'fail'},
        {'fieldName': 'duration_ms', 'filterType': 'greater', 'filterExpression': '2000'}
    ],
    'match': 'any'
}))
# 'hosts' has neither field, so it passes through unchanged

print("\n2. Drop requests without a host (type='exclude')")
print("=" * 70)
show(apply([requests], {
    'valueFilters': [{'fieldName': 'host', 'filterType': 'isNull'}],
    'type': 'exclude'
}))

print("\n3. Same options on a DataFrame")
print("=" * 70)
df = requests.to_dataframe()
transformer = FilterByValueTransformer({
    'valueFilters': [{
        'fieldName': 'duration_ms',
        'filterType': 'range',
        'filterExpression': '100',
        'filterExpression2': '1000'
    }]
})
print(transformer.filter(df).to_string())

print("\nAvailable predicate kinds:")
for descriptor in framefilter.value_filters_registry.list():
    types = 'all' if descriptor.supported_field_types is None else \
        ', '.join(sorted(t.value for t in descriptor.supported_field_types))
    print(f"  {descriptor.id:<16} {descriptor.name:<18} ({types})")
