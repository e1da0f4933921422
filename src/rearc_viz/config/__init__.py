"""
Configuration helpers for the visualization builder.
"""

from .models import DEFAULT_OUTPUT_DIR, DEFAULT_TASKS_DIR, ConfigError, SiteConfig, load_config

__all__ = ["DEFAULT_OUTPUT_DIR", "DEFAULT_TASKS_DIR", "ConfigError", "SiteConfig", "load_config"]
