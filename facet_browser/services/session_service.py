from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple

from facet_browser.core.dataset import ColumnDescriptor, Dataset, Row
from facet_browser.core.exceptions import ConfigurationError, SourceUnavailable
from facet_browser.core.facets import FacetOption
from facet_browser.core.filter_state import FilterState, FilterStateManager
from facet_browser.services.dataset_service import DatasetManager

logger = logging.getLogger(__name__)


class BrowserSession:
    """
    The surface the presentation layer talks to.

    Exposes the current filter state, facet options per filterable column and
    the visible rows, plus the only three mutations: apply_filter, clear_all
    and switch_dataset.
    """

    def __init__(self, datasets: DatasetManager, dataset_key: Optional[str] = None):
        self._datasets = datasets
        self._dataset_key: Optional[str] = None
        self._load_failed = False
        self._manager = FilterStateManager(Dataset.empty())

        if dataset_key is not None:
            self.switch_dataset(dataset_key)

    @classmethod
    def resume(
        cls,
        datasets: DatasetManager,
        dataset_key: Optional[str],
        data: Optional[Mapping[str, Any]],
    ) -> BrowserSession:
        """
        Rebuild a session from a snapshot held by the UI (see snapshot()).
        Selections for columns the dataset doesn't have are dropped.
        """
        session = cls(datasets)
        if dataset_key is None or dataset_key not in datasets:
            return session

        dataset = session._load(dataset_key)
        state = FilterState.from_dict(data, dataset.filterable_keys)
        session._dataset_key = dataset_key
        session._manager = FilterStateManager(dataset, state)
        return session

    def _load(self, dataset_key: str) -> Dataset:
        try:
            dataset = self._datasets[dataset_key]
        except SourceUnavailable:
            self._load_failed = True
            return Dataset.empty(name=dataset_key)
        self._load_failed = False
        return dataset

    # -------------------------------------------------------------------------
    # Read side
    # -------------------------------------------------------------------------
    @property
    def dataset_key(self) -> Optional[str]:
        return self._dataset_key

    @property
    def dataset_label(self) -> str:
        if self._dataset_key is None:
            return ""
        return self._datasets.label(self._dataset_key)

    @property
    def dataset(self) -> Dataset:
        return self._manager.dataset

    @property
    def load_failed(self) -> bool:
        """True when the last dataset load fell back to an empty Dataset."""
        return self._load_failed

    @property
    def filters(self) -> FilterState:
        return self._manager.state

    @property
    def columns(self) -> Tuple[ColumnDescriptor, ...]:
        return self.dataset.columns

    @property
    def filterable_columns(self) -> Tuple[ColumnDescriptor, ...]:
        return self.dataset.filterable_columns

    @property
    def options(self) -> Dict[str, List[FacetOption]]:
        return self._manager.all_options()

    @property
    def visible_rows(self) -> List[Row]:
        return self._manager.visible_rows()

    def snapshot(self) -> Dict[str, Any]:
        return self.filters.to_dict()

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def apply_filter(self, filter_key: str, values: Any) -> FilterState:
        return self._manager.apply_filter(filter_key, values)

    def clear_all(self) -> FilterState:
        return self._manager.clear_all()

    def switch_dataset(self, dataset_key: str) -> FilterState:
        """
        Replace the dataset wholesale and reset every selection.

        A failing source yields an empty dataset (load_failed is set);
        an unknown key is a ConfigurationError.
        """
        if dataset_key not in self._datasets:
            logger.error("Rejected switch to unknown dataset", extra={"dataset": dataset_key})
            raise ConfigurationError(f"Unknown dataset '{dataset_key}'")

        dataset = self._load(dataset_key)
        self._dataset_key = dataset_key
        return self._manager.on_dataset_switch(dataset)
