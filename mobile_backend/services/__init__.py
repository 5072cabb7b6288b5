"""
Mobile Backend Services Module

Business logic for the analysis component. The aggregation functions are
stateless and operate on a sequence of DataRecord; DataAnalyzer owns the
record collection and dispatches work onto its background executor.

Services:
- statistics: Summary statistics (count, mean, max, min)
- insights: Category insights and heuristic recommendations
- synthetic: Synthetic record generation
- analyzer: DataAnalyzer lifecycle and orchestration
"""

from mobile_backend.services.statistics import (
    calculate_summary,
    coefficient_of_variation,
    empty_summary,
)

from mobile_backend.services.insights import (
    generate_insights,
    generate_recommendations,
    CATEGORY_KEY,
    MIN_RECORDS_THRESHOLD,
    STALE_DATA_THRESHOLD,
    HIGH_VARIABILITY_CV_THRESHOLD,
)

from mobile_backend.services.synthetic import generate_synthetic_records

from mobile_backend.services.analyzer import DataAnalyzer

__all__ = [
    # ----- Statistics -----
    'calculate_summary',
    'coefficient_of_variation',
    'empty_summary',
    # ----- Insights -----
    'generate_insights',
    'generate_recommendations',
    'CATEGORY_KEY',
    'MIN_RECORDS_THRESHOLD',
    'STALE_DATA_THRESHOLD',
    'HIGH_VARIABILITY_CV_THRESHOLD',
    # ----- Synthetic Data -----
    'generate_synthetic_records',
    # ----- Analyzer -----
    'DataAnalyzer',
]
