"""
DataAnalyzer - in-memory analysis component for the mobile backend.

Owns the record collection, a background ThreadPoolExecutor and the
lifecycle state machine:

    uninitialized --initialize()--> initialized --process_data()--> analyzed
          ^                                                            |
          +-------------------------- reset() -------------------------+
    any state --shutdown()--> shutdown (terminal)

initialize() and process_data() are coroutines that dispatch their work onto
the executor and await it; a failure in the worker propagates to the
caller's await. The synchronous analysis operations can be called in any
state, including before initialize(), and return zeroed/empty results for
an empty collection.

Usage:
    analyzer = DataAnalyzer()
    try:
        await analyzer.initialize()
        result = await analyzer.process_data()
        snapshot = analyzer.export_data()
    finally:
        analyzer.shutdown()
"""

import asyncio
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime
from typing import Any, Callable, Dict, List, Optional, TypeVar
import logging
import time

import numpy as np

from mobile_backend.core.config import Settings, get_settings
from mobile_backend.models import (
    AnalysisResult,
    AnalyzerState,
    DataRecord,
    ExportSnapshot,
)
from mobile_backend.services.insights import generate_insights, generate_recommendations
from mobile_backend.services.statistics import calculate_summary
from mobile_backend.services.synthetic import generate_synthetic_records


# Logger for this module
logger = logging.getLogger(__name__)

T = TypeVar('T')


class DataAnalyzer:
    """
    Holds a record collection and runs aggregate analysis over it.

    Attributes:
        settings: Settings controlling batch size, seed, executor size and
            the export version tag.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()
        self._records: List[DataRecord] = []
        self._rng = np.random.default_rng(self.settings.random_seed)
        self._executor = ThreadPoolExecutor(
            max_workers=self.settings.executor_max_workers,
            thread_name_prefix='data-analyzer',
        )
        self._state = AnalyzerState.UNINITIALIZED

    # =========================================================================
    # State
    # =========================================================================

    @property
    def records(self) -> List[DataRecord]:
        """The live record collection; callers may append to it directly."""
        return self._records

    @property
    def state(self) -> AnalyzerState:
        return self._state

    @property
    def is_shutdown(self) -> bool:
        return self._state == AnalyzerState.SHUTDOWN

    @property
    def executor(self) -> ThreadPoolExecutor:
        return self._executor

    def add_record(self, record: DataRecord) -> None:
        self._records.append(record)

    def reset(self) -> None:
        """Clear every record. A shut-down analyzer stays shut down."""
        self._records.clear()
        if not self.is_shutdown:
            self._state = AnalyzerState.UNINITIALIZED

    # =========================================================================
    # Background Dispatch
    # =========================================================================

    async def _run_in_background(self, func: Callable[[], T], operation: str) -> T:
        if self.is_shutdown:
            logger.warning(f"{operation} rejected: analyzer has been shut down")
            raise RuntimeError(f"Cannot run {operation}: analyzer has been shut down")

        loop = asyncio.get_running_loop()
        try:
            result = await loop.run_in_executor(self._executor, func)
        except Exception as e:
            logger.error(f"{operation} failed: {e}", exc_info=True)
            raise

        # shutdown() may have run while the worker was busy; shutdown is terminal
        if self.is_shutdown:
            logger.warning(f"{operation} result discarded: analyzer was shut down while it ran")
            raise RuntimeError(f"{operation} aborted: analyzer was shut down while it ran")
        return result

    # =========================================================================
    # Operations
    # =========================================================================

    async def initialize(self) -> None:
        """
        Populate the collection with a batch of synthetic records.

        Appends settings.synthetic_record_count records per call; calling
        again appends another batch.

        Raises:
            RuntimeError: If the analyzer has been shut down.
        """
        batch = await self._run_in_background(self._generate_batch, 'initialize')
        self._records.extend(batch)
        self._state = AnalyzerState.INITIALIZED
        logger.info(
            f"Initialized {len(batch)} synthetic records "
            f"(collection size: {len(self._records)})"
        )

    def _generate_batch(self) -> List[DataRecord]:
        return generate_synthetic_records(
            self.settings.synthetic_record_count,
            self._rng,
            history_days=self.settings.synthetic_history_days,
        )

    def calculate_summary(self) -> Dict[str, float]:
        """Count, mean, max and min of record values; all 0.0 when empty."""
        return calculate_summary(self._records)

    def generate_insights(self) -> List[str]:
        """Category share statements in first-seen category order."""
        return generate_insights(self._records)

    def generate_recommendations(self) -> List[str]:
        """Heuristic advisories for low volume, stale data and high variability."""
        return generate_recommendations(self._records)

    async def process_data(self) -> AnalysisResult:
        """
        Run summary, insights and recommendations as one analysis.

        processingTimeMs covers the whole orchestration, including dispatch
        to the background executor.

        Returns:
            AnalysisResult for the collection as it was when the worker ran.

        Raises:
            RuntimeError: If the analyzer has been shut down.
        """
        started = time.perf_counter()
        summary, insights, recommendations = await self._run_in_background(
            self._analyze, 'process_data'
        )
        elapsed_ms = (time.perf_counter() - started) * 1000

        self._state = AnalyzerState.ANALYZED
        logger.info(
            f"Analysis completed in {elapsed_ms:.2f} ms: "
            f"{len(insights)} insights, {len(recommendations)} recommendations"
        )
        return AnalysisResult(
            summary=summary,
            insights=insights,
            recommendations=recommendations,
            processingTimeMs=elapsed_ms,
        )

    def _analyze(self):
        return (
            self.calculate_summary(),
            self.generate_insights(),
            self.generate_recommendations(),
        )

    def export_data(self) -> Dict[str, Any]:
        """
        Snapshot the collection as a JSON-compatible mapping.

        Metadata values with no JSON representation are exported as str(value).

        Returns:
            Dict with keys data, exportTime, recordCount, systemVersion.
            recordCount always equals len(data).
        """
        records = list(self._records)
        snapshot = ExportSnapshot(
            data=records,
            exportTime=datetime.now(),
            recordCount=len(records),
            systemVersion=self.settings.system_version,
        )
        return snapshot.model_dump(mode='json', fallback=str)

    def shutdown(self) -> None:
        """
        Release the background executor, waiting for running work to finish.

        Safe to call any number of times; never raises.
        """
        if self.is_shutdown:
            return
        try:
            self._executor.shutdown(wait=True)
        except Exception as e:
            logger.error(f"Error shutting down analyzer executor: {e}")
        self._state = AnalyzerState.SHUTDOWN
        logger.info("DataAnalyzer shut down")
