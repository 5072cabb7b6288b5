"""
Summary Statistics Service

Aggregate statistics over the analyzer's record collection:
1. TOTAL RECORDS - Size of the collection at computation time
2. AVERAGE VALUE - Arithmetic mean of record values
3. MAX / MIN VALUE - Extremes of record values
4. COEFFICIENT OF VARIATION - Population std / |mean|, used by recommendations

Empty collections are not an error: every statistic is reported as 0.0 so
analysis before initialize() returns a defined, zeroed summary.
"""

from typing import Dict, Sequence

import numpy as np

from mobile_backend.models import DataRecord, SummaryStatistic


def _values(records: Sequence[DataRecord]) -> np.ndarray:
    return np.fromiter((r.value for r in records), dtype=float, count=len(records))


def empty_summary() -> Dict[str, float]:
    """Zeroed summary reported for an empty record collection."""
    return {statistic.value: 0.0 for statistic in SummaryStatistic}


def calculate_summary(records: Sequence[DataRecord]) -> Dict[str, float]:
    """
    Calculate count, mean, max and min of record values.

    Args:
        records: Records to summarize

    Returns:
        Mapping keyed by SummaryStatistic values (totalRecords, averageValue,
        maxValue, minValue). All values are floats; all are 0.0 when
        records is empty.

    Example:
        >>> calculate_summary([r10, r20, r30])
        {'totalRecords': 3.0, 'averageValue': 20.0, 'maxValue': 30.0, 'minValue': 10.0}
    """
    if not records:
        return empty_summary()

    values = _values(records)
    max_value = float(values.max())
    min_value = float(values.min())
    # Float rounding can push the mean of identical values past max
    average_value = min(max(float(values.mean()), min_value), max_value)

    return {
        SummaryStatistic.TOTAL_RECORDS.value: float(len(values)),
        SummaryStatistic.AVERAGE_VALUE.value: average_value,
        SummaryStatistic.MAX_VALUE.value: max_value,
        SummaryStatistic.MIN_VALUE.value: min_value,
    }


def coefficient_of_variation(records: Sequence[DataRecord]) -> float:
    """
    Population standard deviation divided by the absolute mean.

    Returns 0.0 for fewer than two records or a zero mean.
    """
    if len(records) < 2:
        return 0.0
    values = _values(records)
    avg = float(values.mean())
    if avg == 0:
        return 0.0
    return float(values.std()) / abs(avg)
