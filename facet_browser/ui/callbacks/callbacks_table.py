from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

import dash
from dash import Input, Output

from facet_browser.ui.callbacks.callbacks_filters import resume_session
from facet_browser.ui.helpers import format_rows, page_window, results_summary, table_columns
from facet_browser.ui.ids import IDs

if TYPE_CHECKING:
    from facet_browser.ui.config import AppConfig


def table_outputs(
    ctx: AppConfig,
    store: Optional[dict],
    page_current: Optional[int],
    reset_page: bool,
) -> Tuple[List[dict], List[dict], int, int, str, str]:
    """
    Pure helper behind the data table: one page of visible rows plus the
    summary line and the active-filter badge.
    """
    session = resume_session(ctx, store)
    rows = session.visible_rows
    columns = list(session.columns)

    window = page_window(len(rows), 0 if reset_page else page_current, ctx.page_size)

    if session.load_failed:
        summary = "No dataset available"
    else:
        summary = results_summary(window, len(rows))

    n_active = len(session.filters.active())

    return (
        format_rows(rows[window.start:window.stop], columns),
        table_columns(columns),
        window.page,
        window.page_count,
        summary,
        str(n_active),
    )


def register_table_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    @app.callback(
        Output(IDs.Control.DATA_TABLE, "data"),
        Output(IDs.Control.DATA_TABLE, "columns"),
        Output(IDs.Control.DATA_TABLE, "page_current"),
        Output(IDs.Control.DATA_TABLE, "page_count"),
        Output(IDs.Control.RESULTS_SUMMARY, "children"),
        Output(IDs.Control.ACTIVE_FILTER_COUNT, "children"),
        Input(IDs.Store.FILTER_STATE, "data"),
        Input(IDs.Control.DATA_TABLE, "page_current"),
    )
    def render_table(store, page_current):
        # a new filter state always starts from the first page
        reset_page = dash.ctx.triggered_id == IDs.Store.FILTER_STATE
        return table_outputs(ctx, store, page_current, reset_page)
