"""Shared core module - Settings and logging."""

from bcb_sounds_ms.shared.core.logging import configure_logging
from bcb_sounds_ms.shared.core.settings import Settings, get_settings

__all__ = ["Settings", "get_settings", "configure_logging"]
