"""
Synthetic record generation for DataAnalyzer.initialize().

Records are drawn from a caller-supplied numpy Generator so a seeded
analyzer produces reproducible values across runs.
"""

from datetime import datetime, timedelta
from typing import List, Optional
import uuid

import numpy as np

from mobile_backend.models import DataRecord, RecordCategory


# =============================================================================
# Module Constants
# =============================================================================

# Normal distribution the synthetic values are drawn from (clipped at 0)
SYNTHETIC_VALUE_MEAN: float = 100.0
SYNTHETIC_VALUE_STD: float = 15.0

# The newest synthetic record always falls inside this window before `now`
NEWEST_RECORD_WINDOW: timedelta = timedelta(hours=1)

# metadata["source"] tag for generated records
SYNTHETIC_SOURCE: str = "synthetic"


def generate_synthetic_records(
    count: int,
    rng: np.random.Generator,
    now: Optional[datetime] = None,
    history_days: int = 7,
) -> List[DataRecord]:
    """
    Generate a batch of synthetic records.

    Timestamps are spread uniformly over the last `history_days` days and
    returned oldest first; the newest one is always within
    NEWEST_RECORD_WINDOW of `now`. Each record gets a uuid4 id and
    metadata {"category": <RecordCategory value>, "source": "synthetic"}.

    Args:
        count: Number of records to generate (must be >= 1)
        rng: numpy random Generator supplying values, categories and offsets
        now: End of the history window; defaults to datetime.now()
        history_days: Length of the history window in days

    Returns:
        List of `count` DataRecord instances in chronological order

    Raises:
        ValueError: If count < 1 or history_days < 1
    """
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count}")
    if history_days < 1:
        raise ValueError(f"history_days must be at least 1, got {history_days}")

    if now is None:
        now = datetime.now()

    span_seconds = timedelta(days=history_days).total_seconds()
    offsets = rng.uniform(0, span_seconds, size=count)
    offsets[offsets.argmin()] = rng.uniform(0, NEWEST_RECORD_WINDOW.total_seconds())
    offsets = np.sort(offsets)[::-1]

    values = np.clip(
        rng.normal(SYNTHETIC_VALUE_MEAN, SYNTHETIC_VALUE_STD, size=count), 0, None
    )
    categories = rng.choice([c.value for c in RecordCategory], size=count)

    return [
        DataRecord(
            id=str(uuid.uuid4()),
            timestamp=now - timedelta(seconds=float(offset)),
            value=float(value),
            metadata={"category": str(category), "source": SYNTHETIC_SOURCE},
        )
        for offset, value, category in zip(offsets, values, categories)
    ]
