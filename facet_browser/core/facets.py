from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Dict, List

from facet_browser.core.dataset import Dataset
from facet_browser.core.exceptions import ConfigurationError
from facet_browser.core.type_inference import sort_values

if TYPE_CHECKING:
    from facet_browser.core.filter_state import FilterState


@dataclass(frozen=True)
class FacetOption:
    """One selectable value of a facet; label is the value itself for now."""
    value: str
    label: str

    def to_dict(self) -> Dict[str, str]:
        return {"label": self.label, "value": self.value}


def _require_filterable(dataset: Dataset, column: str) -> None:
    if not dataset.is_filterable(column):
        raise ConfigurationError(
            f"Column '{column}' is not a filterable column of dataset '{dataset.name}'"
        )


def compute_options(dataset: Dataset, state: "FilterState", column: str) -> List[str]:
    """
    Values `column` could still take given every *other* active selection.

    The column's own selection is ignored, so it can never shrink its own
    option list. Empty cells are never offered. Order is numeric for NUMBER
    columns and text order for TEXT columns.
    """
    _require_filterable(dataset, column)

    constraints = [(key, values) for key, values in state.active() if key != column]
    mask = dataset.live_mask(constraints)

    live_values = dataset.values(column)[mask]
    distinct = [v for v in live_values.unique() if v != ""]
    return sort_values(distinct, dataset.column(column).kind)


def facet_options(dataset: Dataset, state: "FilterState", column: str) -> List[FacetOption]:
    return [FacetOption(value=v, label=v) for v in compute_options(dataset, state, column)]


def compute_all_options(dataset: Dataset, state: "FilterState") -> Dict[str, List[FacetOption]]:
    """Facet options for every filterable column, in column order."""
    return {key: facet_options(dataset, state, key) for key in dataset.filterable_keys}
