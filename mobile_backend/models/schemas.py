"""
Pydantic models for the mobile backend analytics component.

Provides the record type held by the analyzer, the per-call analysis result,
and the export snapshot. All models use Pydantic v2 syntax.
"""

from datetime import datetime
from types import MappingProxyType
from typing import Any, Dict, List, Mapping

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_serializer,
    field_validator,
    model_validator,
)


# =============================================================================
# Record Model
# =============================================================================


class DataRecord(BaseModel):
    """
    A timestamped numeric observation with attached metadata.

    Records are frozen: once created they cannot be modified, only cleared
    from the analyzer as a whole. metadata is stored as a read-only mapping,
    so item assignment raises TypeError. Nested containers inside metadata
    are not copied.
    """
    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "id": "rec1",
                "timestamp": "2026-10-17T09:30:00",
                "value": 100.0,
                "metadata": {"category": "engagement", "source": "synthetic"}
            }
        }
    )

    id: str = Field(
        ...,
        min_length=1,
        description="Unique record identifier"
    )
    timestamp: datetime = Field(
        ...,
        description="When the observation was taken"
    )
    value: float = Field(
        ...,
        description="Observed numeric value"
    )
    metadata: Mapping[str, Any] = Field(
        default_factory=dict,
        validate_default=True,
        description="Arbitrary key/value attributes (e.g. category)"
    )

    @field_validator('metadata', mode='after')
    @classmethod
    def _freeze_metadata(cls, value: Mapping[str, Any]) -> Mapping[str, Any]:
        return MappingProxyType(dict(value))

    @field_serializer('metadata')
    def _serialize_metadata(self, value: Mapping[str, Any]) -> Dict[str, Any]:
        return dict(value)


# =============================================================================
# Analysis Models
# =============================================================================


class AnalysisResult(BaseModel):
    """
    Result of one process_data() call.

    Created per analysis call and never persisted.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "summary": {
                    "totalRecords": 3.0,
                    "averageValue": 20.0,
                    "maxValue": 30.0,
                    "minValue": 10.0
                },
                "insights": ["Category 'A' represents 66.7% of records"],
                "recommendations": [
                    "Consider increasing data collection: only 3 records available (minimum recommended: 100)"
                ],
                "processingTimeMs": 1.42
            }
        }
    )

    summary: Dict[str, float] = Field(
        ...,
        description="Statistic name to value (totalRecords, averageValue, maxValue, minValue)"
    )
    insights: List[str] = Field(
        default_factory=list,
        description="Category distribution statements in first-seen order"
    )
    recommendations: List[str] = Field(
        default_factory=list,
        description="Heuristic advisories triggered by threshold rules"
    )
    processingTimeMs: float = Field(
        ...,
        ge=0,
        description="Wall-clock duration of the analysis in milliseconds"
    )


# =============================================================================
# Export Models
# =============================================================================


class ExportSnapshot(BaseModel):
    """
    Snapshot of the analyzer's record collection.

    recordCount must always equal the number of exported records.
    """
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "data": [
                    {
                        "id": "rec1",
                        "timestamp": "2026-10-17T09:30:00",
                        "value": 100.0,
                        "metadata": {"category": "engagement"}
                    }
                ],
                "exportTime": "2026-10-17T10:00:00",
                "recordCount": 1,
                "systemVersion": "1.0.0"
            }
        }
    )

    data: List[DataRecord] = Field(
        default_factory=list,
        description="Every record held at export time"
    )
    exportTime: datetime = Field(
        ...,
        description="When the snapshot was taken"
    )
    recordCount: int = Field(
        ...,
        ge=0,
        description="Number of exported records"
    )
    systemVersion: str = Field(
        ...,
        description="Version tag of the exporting system"
    )

    @model_validator(mode='after')
    def _check_record_count(self) -> 'ExportSnapshot':
        if self.recordCount != len(self.data):
            raise ValueError(
                f"recordCount ({self.recordCount}) does not match "
                f"number of exported records ({len(self.data)})"
            )
        return self
