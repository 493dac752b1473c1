"""
Config package for elle_browser.

Responsible for:
- config models (GlobalConfig, DatasetConfig, FieldMapping)
- config I/O helpers live in elle_browser.config.loader
"""

from .model import DatasetConfig, FieldMapping, GlobalConfig

__all__ = ["DatasetConfig", "FieldMapping", "GlobalConfig"]
