"""Configuration module for Health Ledger."""

from health_ledger.config.base import Settings
from health_ledger.config.loader import get_settings

__all__ = ["Settings", "get_settings"]
