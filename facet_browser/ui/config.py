from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from facet_browser.config.model import DEFAULT_PAGE_SIZE, GlobalConfig
from facet_browser.services.dataset_service import DatasetManager


@dataclass
class AppConfig:
    """
    Shared state for the Dash app, passed into layout + callback registration
    functions instead of using module-level globals.
    """
    config_root: Path
    global_config: GlobalConfig
    datasets: DatasetManager
    default_dataset_key: Optional[str] = None
    page_size: int = DEFAULT_PAGE_SIZE
