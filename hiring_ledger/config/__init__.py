"""
Configuration module for Hiring Ledger.
"""

from hiring_ledger.config.settings import settings, Settings, PROJECT_ROOT
from hiring_ledger.config.logging_config import configure_logging

__all__ = ["settings", "Settings", "PROJECT_ROOT", "configure_logging"]
