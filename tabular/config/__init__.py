"""
Configuration for the tabular library.
"""

from .settings import TabularSettings, get_settings, reload_settings

__all__ = ["TabularSettings", "get_settings", "reload_settings"]
