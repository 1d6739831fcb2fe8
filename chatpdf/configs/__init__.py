"""
Configuration management module.

Type-safe settings backed by pydantic-settings. Every value can be
overridden through environment variables or a local .env file.
"""

from chatpdf.configs.settings import Settings, get_settings

__all__ = ["Settings", "get_settings"]
