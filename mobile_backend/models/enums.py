"""
Enumeration definitions for the mobile backend analytics component.

All enums inherit from both `str` and `Enum` so their values serialize
directly in Pydantic models and JSON exports.
"""

from enum import Enum


class SummaryStatistic(str, Enum):
    """
    Keys of the summary mapping returned by calculate_summary().

    - totalRecords: Number of records in the collection
    - averageValue: Arithmetic mean of record values
    - maxValue: Largest record value
    - minValue: Smallest record value
    """
    TOTAL_RECORDS = "totalRecords"
    AVERAGE_VALUE = "averageValue"
    MAX_VALUE = "maxValue"
    MIN_VALUE = "minValue"


class RecordCategory(str, Enum):
    """
    Categories assigned to synthetic records through metadata["category"].

    Records appended by callers may carry any category string; these are
    only the values the synthetic generator draws from.
    """
    ENGAGEMENT = "engagement"
    PERFORMANCE = "performance"
    RETENTION = "retention"
    REVENUE = "revenue"


class AnalyzerState(str, Enum):
    """
    Lifecycle states of a DataAnalyzer.

    - uninitialized: Constructed, or reset; no synthetic data generated yet
    - initialized: initialize() has populated synthetic records
    - analyzed: process_data() has completed at least once (re-entrant)
    - shutdown: Background executor released; terminal
    """
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    ANALYZED = "analyzed"
    SHUTDOWN = "shutdown"
