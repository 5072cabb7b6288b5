"""
Core infrastructure package for the mobile backend analytics component.

Re-exports configuration management so callers can write:

    from mobile_backend.core import get_settings

instead of:

    from mobile_backend.core.config import get_settings
"""

from mobile_backend.core.config import Settings, get_settings

__all__ = [
    'Settings',
    'get_settings',
]
