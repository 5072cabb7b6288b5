"""
Pytest test module for synthetic record generation.
"""

from datetime import datetime, timedelta

import numpy as np
import pytest

from mobile_backend.models import RecordCategory
from mobile_backend.services.synthetic import (
    NEWEST_RECORD_WINDOW,
    SYNTHETIC_SOURCE,
    generate_synthetic_records,
)


NOW = datetime(2026, 10, 17, 12, 0, 0)


class TestGenerateSyntheticRecords:
    """Tests for generate_synthetic_records()."""

    def test_generates_requested_count(self) -> None:
        records = generate_synthetic_records(50, np.random.default_rng(0), now=NOW)
        assert len(records) == 50

    def test_ids_are_unique(self) -> None:
        records = generate_synthetic_records(500, np.random.default_rng(0), now=NOW)
        assert len({r.id for r in records}) == 500

    def test_chronological_order(self) -> None:
        records = generate_synthetic_records(100, np.random.default_rng(1), now=NOW)
        timestamps = [r.timestamp for r in records]
        assert timestamps == sorted(timestamps)

    def test_timestamps_within_history_window(self) -> None:
        records = generate_synthetic_records(
            200, np.random.default_rng(2), now=NOW, history_days=3
        )

        assert all(NOW - timedelta(days=3) <= r.timestamp <= NOW for r in records)

    @pytest.mark.parametrize('count', [1, 2, 1000])
    def test_newest_record_is_recent(self, count: int) -> None:
        records = generate_synthetic_records(count, np.random.default_rng(3), now=NOW)

        assert NOW - records[-1].timestamp <= NEWEST_RECORD_WINDOW

    def test_metadata(self) -> None:
        categories = {c.value for c in RecordCategory}
        records = generate_synthetic_records(100, np.random.default_rng(4), now=NOW)

        for record in records:
            assert record.metadata['category'] in categories
            assert isinstance(record.metadata['category'], str)
            assert record.metadata['source'] == SYNTHETIC_SOURCE

    def test_values_are_non_negative(self) -> None:
        records = generate_synthetic_records(1000, np.random.default_rng(5), now=NOW)
        assert all(r.value >= 0 for r in records)

    def test_same_seed_same_values(self) -> None:
        first = generate_synthetic_records(20, np.random.default_rng(42), now=NOW)
        second = generate_synthetic_records(20, np.random.default_rng(42), now=NOW)

        assert [r.value for r in first] == [r.value for r in second]
        assert [r.timestamp for r in first] == [r.timestamp for r in second]

    @pytest.mark.parametrize('count', [0, -1])
    def test_rejects_non_positive_count(self, count: int) -> None:
        with pytest.raises(ValueError, match='count must be at least 1'):
            generate_synthetic_records(count, np.random.default_rng(0))

    def test_rejects_non_positive_history(self) -> None:
        with pytest.raises(ValueError, match='history_days'):
            generate_synthetic_records(10, np.random.default_rng(0), history_days=0)
