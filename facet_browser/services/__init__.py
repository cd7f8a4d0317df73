"""
Service layer: the CSV data source, the lazy dataset manager and the session
facade used by the UI
"""

from .dataset_service import DatasetManager
from .session_service import BrowserSession

__all__ = ["BrowserSession", "DatasetManager"]
