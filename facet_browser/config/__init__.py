"""
Config package for facet_browser.

Responsible for:
- config models (GlobalConfig, DatasetConfig)
- config I/O helpers (load_global_config / load_dataset_registry)
"""

from .model import DatasetConfig, GlobalConfig
from .loader import load_dataset_registry, load_global_config

__all__ = ["DatasetConfig", "GlobalConfig", "load_dataset_registry", "load_global_config"]
