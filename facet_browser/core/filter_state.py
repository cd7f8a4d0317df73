from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from facet_browser.core.dataset import Dataset, Row
from facet_browser.core.exceptions import ConfigurationError
from facet_browser.core.facets import FacetOption, compute_all_options, compute_options
from facet_browser.core.view import visible_rows

logger = logging.getLogger(__name__)

Selection = Tuple[str, ...]


def _dedupe(values: Optional[Iterable[Any]]) -> Selection:
    # a bare string is one value, not a sequence of characters
    if isinstance(values, str):
        values = (values,)
    return tuple(dict.fromkeys(str(v) for v in (values or ())))


@dataclass(frozen=True)
class FilterState:
    """
    Immutable snapshot of the user's column selections.

    Fields:

    - selections: (column key, selected values) pairs in column order.
      An empty tuple, or a column that is absent, means "no constraint".

    Every transition returns a new FilterState; nothing mutates a snapshot.
    """

    selections: Tuple[Tuple[str, Selection], ...] = ()

    @classmethod
    def empty(cls, columns: Iterable[str]) -> FilterState:
        return cls(tuple((key, ()) for key in columns))

    @classmethod
    def from_dict(cls, data: Optional[Mapping[str, Any]], columns: Sequence[str]) -> FilterState:
        """
        Restore a snapshot for the given filterable columns.

        Keys that aren't among `columns` are stale (e.g. from another dataset)
        and are dropped.
        """
        data = data or {}
        stale = sorted(k for k in data if k not in columns)
        if stale:
            logger.warning("Dropping stale filter keys", extra={"stale_keys": stale})
        return cls(tuple((key, _dedupe(data.get(key))) for key in columns))

    def to_dict(self) -> Dict[str, List[str]]:
        return {key: list(values) for key, values in self.selections}

    def keys(self) -> List[str]:
        return [key for key, _ in self.selections]

    def selected(self, column: str) -> Selection:
        for key, values in self.selections:
            if key == column:
                return values
        return ()

    def active(self) -> List[Tuple[str, Selection]]:
        """Only the columns that actually constrain rows."""
        return [(key, values) for key, values in self.selections if values]

    @property
    def is_clear(self) -> bool:
        return not self.active()

    def with_selection(self, column: str, values: Iterable[Any]) -> FilterState:
        new_values = _dedupe(values)
        if column not in self.keys():
            return FilterState(self.selections + ((column, new_values),))
        return FilterState(
            tuple((key, new_values if key == column else vals) for key, vals in self.selections)
        )


# -----------------------------------------------------------------------------
# Pure transitions
# -----------------------------------------------------------------------------
def reconcile(dataset: Dataset, state: FilterState, filter_key: str, values: Iterable[Any]) -> FilterState:
    """
    Apply a new selection for `filter_key` and prune every other column.

    1. The edited column takes `values` verbatim (no validation).
    2. Every other filterable column, in column order, keeps only the
       previously selected values that are still among its facet options
       under the tentative state (which includes the edit).
    """
    if not dataset.is_filterable(filter_key):
        logger.error(
            "Rejected filter update for unknown column",
            extra={"dataset": dataset.name, "filter_key": filter_key},
        )
        raise ConfigurationError(
            f"Column '{filter_key}' is not a filterable column of dataset '{dataset.name}'"
        )

    tentative = state.with_selection(filter_key, values)

    reconciled: List[Tuple[str, Selection]] = []
    for key in dataset.filterable_keys:
        previous = tentative.selected(key)
        if key == filter_key or not previous:
            reconciled.append((key, previous))
            continue

        reachable = set(compute_options(dataset, tentative, key))
        kept = tuple(v for v in previous if v in reachable)
        if len(kept) != len(previous):
            logger.debug(
                "Pruned unreachable selections",
                extra={
                    "dataset": dataset.name,
                    "column": key,
                    "edited_column": filter_key,
                    "dropped": [v for v in previous if v not in reachable],
                },
            )
        reconciled.append((key, kept))

    return FilterState(tuple(reconciled))


def clear_all(dataset: Dataset) -> FilterState:
    return FilterState.empty(dataset.filterable_keys)


# -----------------------------------------------------------------------------
# Stateful owner
# -----------------------------------------------------------------------------
class FilterStateManager:
    """
    Owns one Dataset and the current FilterState snapshot.

    Every mutating call computes the next snapshot with a pure transition and
    swaps it in as a whole, so readers only ever see complete states.
    """

    def __init__(self, dataset: Dataset, state: Optional[FilterState] = None):
        self._dataset = dataset
        self._state = state if state is not None else clear_all(dataset)

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def state(self) -> FilterState:
        return self._state

    def apply_filter(self, filter_key: str, values: Iterable[Any]) -> FilterState:
        self._state = reconcile(self._dataset, self._state, filter_key, values)
        return self._state

    def clear_all(self) -> FilterState:
        self._state = clear_all(self._dataset)
        return self._state

    def on_dataset_switch(self, new_dataset: Dataset) -> FilterState:
        self._dataset = new_dataset
        self._state = clear_all(new_dataset)
        logger.info(
            "Filter state reset for dataset switch",
            extra={"dataset": new_dataset.name, "n_rows": new_dataset.n_rows},
        )
        return self._state

    def all_options(self) -> Dict[str, List[FacetOption]]:
        return compute_all_options(self._dataset, self._state)

    def visible_rows(self) -> List[Row]:
        return visible_rows(self._dataset, self._state)
