"""
Pytest Configuration and Shared Fixtures for Mobile Backend Tests.

Provides:
- Settings fixtures with small, seeded synthetic batches
- A DataAnalyzer fixture that is always shut down after the test
- Record factories for predictable summary/insight/recommendation inputs

Dependencies:
- pytest
- pytest-asyncio
"""

from datetime import datetime, timedelta
from typing import Any, Dict, Generator, List, Optional
import itertools

import pytest

from mobile_backend.core.config import Settings, get_settings
from mobile_backend.models import DataRecord
from mobile_backend.services.analyzer import DataAnalyzer


_record_ids = itertools.count(1)


# ============================================================
# PYTEST HOOKS
# ============================================================

def pytest_configure(config) -> None:
    """
    Register custom markers.

    - slow: Marks tests as slow (deselect with -m "not slow")
    """
    config.addinivalue_line(
        'markers',
        'slow: marks tests as slow (deselect with -m "not slow")'
    )


# ============================================================
# RECORD FACTORIES
# ============================================================

def make_record(
    value: float,
    category: Optional[str] = None,
    timestamp: Optional[datetime] = None,
    record_id: Optional[str] = None,
    **metadata: Any,
) -> DataRecord:
    """
    Build a DataRecord with sensible defaults.

    Args:
        value: Record value
        category: Stored as metadata["category"] when given
        timestamp: Defaults to now
        record_id: Defaults to a unique "rec<N>" id
        **metadata: Extra metadata entries
    """
    meta: Dict[str, Any] = dict(metadata)
    if category is not None:
        meta['category'] = category
    return DataRecord(
        id=record_id or f"rec{next(_record_ids)}",
        timestamp=timestamp or datetime.now(),
        value=value,
        metadata=meta,
    )


def make_records(values: List[float], **kwargs: Any) -> List[DataRecord]:
    """Build one record per value, sharing the remaining keyword arguments."""
    return [make_record(v, **kwargs) for v in values]


@pytest.fixture
def summary_records() -> List[DataRecord]:
    """Three records with values 10, 20, 30."""
    return make_records([10.0, 20.0, 30.0])


@pytest.fixture
def category_records() -> List[DataRecord]:
    """Category A holds two of three records (values 10, 100); B holds one."""
    return [
        make_record(10.0, category='A'),
        make_record(100.0, category='A'),
        make_record(10.0, category='B'),
    ]


@pytest.fixture
def outdated_records() -> List[DataRecord]:
    """200 records, all dated 30 days in the past."""
    thirty_days_ago = datetime.now() - timedelta(days=30)
    return [
        make_record(50.0, timestamp=thirty_days_ago, record_id=f"old_rec{i}")
        for i in range(200)
    ]


# ============================================================
# SETTINGS FIXTURES
# ============================================================

@pytest.fixture(autouse=True)
def clear_settings_cache() -> Generator[None, None, None]:
    """Make every test read settings fresh from its own environment."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def test_settings() -> Settings:
    """Seeded settings with a batch large enough to avoid the low-volume rule."""
    return Settings(
        synthetic_record_count=250,
        synthetic_history_days=7,
        random_seed=1234,
        system_version='test-1.0.0',
    )


# ============================================================
# ANALYZER FIXTURES
# ============================================================

@pytest.fixture
def analyzer(test_settings: Settings) -> Generator[DataAnalyzer, None, None]:
    """A fresh DataAnalyzer, shut down after the test."""
    instance = DataAnalyzer(settings=test_settings)
    yield instance
    instance.shutdown()
