from __future__ import annotations

__all__ = ["IDs", "facet_select_id"]


class IDs:
    class Store:
        FILTER_STATE = "filter-state"

    class Control:
        DATASET_SELECT = "dataset-select"

        # Filter panel
        FILTER_CONTROLS = "filter-controls"
        FILTER_CONTROLS_LOADING = "filter-controls-loading"
        CLEAR_ALL_BTN = "clear-all-btn"
        ACTIVE_FILTER_COUNT = "active-filter-count"
        SIDEBAR_DATASET_NAME = "sidebar-dataset-name"
        SIDEBAR_DATASET_META = "sidebar-dataset-meta"

        # Table
        DATA_TABLE = "data-table"
        DATA_TABLE_LOADING = "data-table-loading"
        RESULTS_SUMMARY = "results-summary"

    class Pattern:
        # pattern-matching "type" strings
        FACET_SELECT = "facet-select"


def facet_select_id(column: str) -> dict:
    return {"type": IDs.Pattern.FACET_SELECT, "column": column}
