"""
Package initialization file for mobile backend models.

Exports all Pydantic schemas and enumerations from schemas.py and enums.py so
other modules can import them from mobile_backend.models directly.

Usage:
    from mobile_backend.models import (
        DataRecord,
        AnalysisResult,
        SummaryStatistic,
    )
"""

# =============================================================================
# Enums
# =============================================================================

from mobile_backend.models.enums import (
    SummaryStatistic,
    RecordCategory,
    AnalyzerState,
)

# =============================================================================
# Schemas
# =============================================================================

from mobile_backend.models.schemas import (
    DataRecord,
    AnalysisResult,
    ExportSnapshot,
)

__all__ = [
    # Enums
    'SummaryStatistic',
    'RecordCategory',
    'AnalyzerState',
    # Schemas
    'DataRecord',
    'AnalysisResult',
    'ExportSnapshot',
]
