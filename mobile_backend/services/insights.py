"""
Insights and Recommendations Service

Derives textual output from the record collection:
1. CATEGORY INSIGHTS - Share of total records per metadata category,
   in first-seen category order
2. RECOMMENDATIONS - Heuristic threshold rules:
   - Low volume: fewer than MIN_RECORDS_THRESHOLD records
   - Stale data: newest record older than STALE_DATA_THRESHOLD
   - High variability: coefficient of variation above HIGH_VARIABILITY_CV_THRESHOLD

Both functions return an empty list for an empty collection.
"""

from datetime import datetime, timedelta, timezone
from typing import List, Optional, Sequence

import pandas as pd

from mobile_backend.models import DataRecord
from mobile_backend.services.statistics import coefficient_of_variation


# =============================================================================
# Module Constants
# =============================================================================

# Metadata key records are grouped by
CATEGORY_KEY: str = "category"

# Below this many records the sample is considered too small
MIN_RECORDS_THRESHOLD: int = 100

# Newest record older than this means the data set is outdated
STALE_DATA_THRESHOLD: timedelta = timedelta(days=7)

# Population std / |mean| above this is flagged as highly variable
HIGH_VARIABILITY_CV_THRESHOLD: float = 0.5


# =============================================================================
# Category Insights
# =============================================================================


def _category_of(record: DataRecord) -> Optional[str]:
    category = record.metadata.get(CATEGORY_KEY)
    if category is None:
        return None
    return category if isinstance(category, str) else str(category)


def generate_insights(records: Sequence[DataRecord]) -> List[str]:
    """
    Describe each category's share of the total record count.

    Records are grouped by metadata["category"]. Records without a category
    count toward the total but produce no insight of their own. Categories
    appear in the order they are first seen, so output is stable for a
    fixed input.

    Args:
        records: Records to analyze

    Returns:
        One string per category, e.g. "Category 'A' represents 66.7% of records"
    """
    if not records:
        return []

    total = len(records)
    categories = pd.Series([_category_of(r) for r in records], dtype=object).dropna()
    if categories.empty:
        return []

    counts = categories.groupby(categories, sort=False).size()

    return [
        f"Category '{category}' represents {count / total * 100:.1f}% of records"
        for category, count in counts.items()
    ]


# =============================================================================
# Recommendations
# =============================================================================


def _as_utc(moment: datetime) -> datetime:
    # astimezone() treats naive datetimes as local time
    return moment.astimezone(timezone.utc)


def generate_recommendations(
    records: Sequence[DataRecord],
    now: Optional[datetime] = None,
    min_records: int = MIN_RECORDS_THRESHOLD,
    stale_after: timedelta = STALE_DATA_THRESHOLD,
    max_cv: float = HIGH_VARIABILITY_CV_THRESHOLD,
) -> List[str]:
    """
    Apply heuristic threshold rules to the record collection.

    Rules are evaluated in a fixed order (volume, staleness, variability)
    and each contributes at most one message.

    Args:
        records: Records to analyze
        now: Reference time for staleness; defaults to the current time.
            Naive datetimes (records or now) are read as local time, so
            naive and timezone-aware timestamps can be mixed
        min_records: Volume threshold
        stale_after: Maximum age of the newest record
        max_cv: Variability threshold

    Returns:
        Ordered list of advisory strings; empty when records is empty
    """
    if not records:
        return []

    recommendations: List[str] = []

    if len(records) < min_records:
        recommendations.append(
            f"Consider increasing data collection: only {len(records)} records "
            f"available (minimum recommended: {min_records})"
        )

    latest = max(_as_utc(r.timestamp) for r in records)
    reference = _as_utc(now) if now is not None else datetime.now(timezone.utc)
    age = reference - latest
    if age > stale_after:
        recommendations.append(
            f"Data appears outdated: most recent record is {age.days} days old "
            f"(threshold: {stale_after.days} days)"
        )

    cv = coefficient_of_variation(records)
    if cv > max_cv:
        recommendations.append(
            f"High value variability detected (coefficient of variation {cv:.2f}); "
            f"review outliers before relying on averages"
        )

    return recommendations
