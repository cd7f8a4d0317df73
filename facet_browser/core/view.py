from __future__ import annotations

from typing import TYPE_CHECKING, List

from facet_browser.core.dataset import Dataset, Row

if TYPE_CHECKING:
    from facet_browser.core.filter_state import FilterState


def visible_rows(dataset: Dataset, state: "FilterState") -> List[Row]:
    """
    Rows that satisfy the full filter state, in dataset order.

    AND across columns, OR within one column's selection. Unlike facet
    computation, every column's own selection applies here.
    """
    return dataset.rows(dataset.live_mask(state.active()))

