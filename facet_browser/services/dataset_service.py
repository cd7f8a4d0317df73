from __future__ import annotations

import logging
from typing import Dict, Iterator, List, Mapping

from facet_browser.config.model import DatasetConfig, GlobalConfig
from facet_browser.core.dataset import Dataset
from facet_browser.core.exceptions import SourceUnavailable
from facet_browser.services.dataset_loader import from_config

logger = logging.getLogger(__name__)


class DatasetManager(Mapping[str, Dataset]):
    """
    Central service for managing datasets.
    Implements the Mapping interface (dict-like) keyed by dataset key, with
    lazy loading on first access.
    """

    def __init__(self, cfg_by_key: Dict[str, DatasetConfig], global_config: GlobalConfig):
        self._cfg_by_key = cfg_by_key
        self._global_config = global_config
        self._loaded: Dict[str, Dataset] = {}

    def __getitem__(self, key: str) -> Dataset:
        # 1. Fast path: already materialised
        if key in self._loaded:
            return self._loaded[key]

        # 2. Check config existence
        cfg = self._cfg_by_key.get(key)
        if cfg is None:
            raise KeyError(f"Unknown dataset '{key}'")

        # 3. Lazy load; only a fully built Dataset is ever cached
        try:
            logger.info("Lazy-loading dataset", extra={"dataset": key, "path": str(cfg.path)})
            ds = from_config(cfg, self._global_config)
        except SourceUnavailable as e:
            logger.error(
                "Dataset source unavailable",
                extra={"dataset": key, "error": str(e)},
            )
            raise

        self._loaded[key] = ds
        return ds

    def __iter__(self) -> Iterator[str]:
        return iter(self._cfg_by_key)

    def __len__(self) -> int:
        return len(self._cfg_by_key)

    def __contains__(self, key: object) -> bool:
        return key in self._cfg_by_key

    def label(self, key: str) -> str:
        cfg = self._cfg_by_key.get(key)
        return cfg.label if cfg is not None else key

    def options(self) -> List[dict]:
        """Dropdown options for the dataset selector, in config order."""
        return [{"label": cfg.label, "value": key} for key, cfg in self._cfg_by_key.items()]

    def is_loaded(self, key: str) -> bool:
        return key in self._loaded

