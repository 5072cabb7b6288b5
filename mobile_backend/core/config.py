"""
Settings and environment management for the mobile backend analytics package.

Configuration is loaded with pydantic-settings from environment variables
(prefixed with MOBILE_BACKEND_) and an optional .env file.

Environment Variables:
- MOBILE_BACKEND_SYSTEM_VERSION: Version tag written into export snapshots (default: 1.0.0)
- MOBILE_BACKEND_SYNTHETIC_RECORD_COUNT: Records generated per initialize() call (default: 1000)
- MOBILE_BACKEND_SYNTHETIC_HISTORY_DAYS: Days of history the synthetic timestamps span (default: 7)
- MOBILE_BACKEND_RANDOM_SEED: Seed for the synthetic data generator (default: 42)
- MOBILE_BACKEND_EXECUTOR_MAX_WORKERS: Background worker threads per analyzer (default: 1)
- MOBILE_BACKEND_LOG_LEVEL: Log level used by the command entry point (default: INFO)

Usage:
    from mobile_backend.core.config import get_settings

    settings = get_settings()
    batch_size = settings.synthetic_record_count
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from mobile_backend import __version__


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Attributes:
        system_version: Version tag reported by export snapshots.
        synthetic_record_count: Number of records appended by each initialize() call.
        synthetic_history_days: Span of the synthetic timestamps, ending now.
        random_seed: Seed for numpy's Generator; None draws fresh entropy.
        executor_max_workers: Size of the analyzer's background thread pool.
        log_level: Root log level for the command entry point.
    """

    model_config = SettingsConfigDict(
        env_prefix='MOBILE_BACKEND_',
        env_file='.env',
        env_file_encoding='utf-8',
        extra='ignore',
        case_sensitive=False,
    )

    # =========================================================================
    # Export
    # =========================================================================

    system_version: str = __version__

    # =========================================================================
    # Synthetic Data Generation
    # =========================================================================

    # Must be non-zero: initialize() always populates at least one record
    synthetic_record_count: int = Field(default=1000, ge=1)

    synthetic_history_days: int = Field(default=7, ge=1)

    # Fixed seed keeps a fresh analyzer's generated values reproducible
    random_seed: Optional[int] = 42

    # =========================================================================
    # Background Execution
    # =========================================================================

    # Work is dispatched sequentially; more than one worker is never required
    executor_max_workers: int = Field(default=1, ge=1)

    # =========================================================================
    # Logging
    # =========================================================================

    log_level: str = 'INFO'


@lru_cache()
def get_settings() -> Settings:
    """
    Get the application settings singleton.

    Returns:
        Settings: The cached settings instance.

    Raises:
        pydantic.ValidationError: If an environment variable holds an invalid
            value (e.g., MOBILE_BACKEND_SYNTHETIC_RECORD_COUNT=0).

    Note:
        To refresh settings in tests, clear the cache:
        >>> get_settings.cache_clear()
    """
    return Settings()
