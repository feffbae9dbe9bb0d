"""
Configuration package for the Trip Planner backend.
"""

from .settings import (
    Settings,
    Environment,
    LogLevel,
    SecuritySettings,
    PricingSettings,
    settings,
    get_settings,
    reload_settings,
)
from .loader import ConfigLoader, load_config_for_environment

__all__ = [
    "Settings",
    "Environment",
    "LogLevel",
    "SecuritySettings",
    "PricingSettings",
    "settings",
    "get_settings",
    "reload_settings",
    "ConfigLoader",
    "load_config_for_environment",
]
