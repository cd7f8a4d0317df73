from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Dict, List, Optional, Sequence, Tuple

import dash
from dash import ALL, Input, Output, State, exceptions

from facet_browser.core.exceptions import ConfigurationError
from facet_browser.services.session_service import BrowserSession
from facet_browser.ui.helpers import dropdown_options
from facet_browser.ui.ids import IDs
from facet_browser.ui.layout.build_filter_panel import build_facet_controls

if TYPE_CHECKING:
    from facet_browser.ui.config import AppConfig

logger = logging.getLogger(__name__)


def store_payload(session: BrowserSession) -> Dict[str, Any]:
    return {"dataset": session.dataset_key, "filters": session.snapshot()}


def resume_session(ctx: AppConfig, store: Optional[dict]) -> BrowserSession:
    store = store or {}
    return BrowserSession.resume(ctx.datasets, store.get("dataset"), store.get("filters"))


def dataset_summary(session: BrowserSession) -> Tuple[str, str]:
    if session.dataset_key is None:
        return "No dataset", "0 rows · 0 columns"
    name = session.dataset_label
    if session.load_failed:
        return name, "No dataset available"
    ds = session.dataset
    return name, f"{ds.n_rows:,} rows · {len(ds.columns)} columns"


def switch_dataset_outputs(ctx: AppConfig, dataset_key: Optional[str]) -> Tuple[list, dict, str, str]:
    """
    Pure helper behind the dataset selector: fresh session, fresh controls.
    """
    session = BrowserSession(ctx.datasets)
    if dataset_key:
        session.switch_dataset(dataset_key)

    controls = build_facet_controls(
        list(session.filterable_columns),
        session.filters,
        session.options,
    )
    name, meta = dataset_summary(session)
    return controls, store_payload(session), name, meta


def facet_change_outputs(
    ctx: AppConfig,
    store: Optional[dict],
    triggered_id: Any,
    values_by_column: Dict[str, Any],
    column_order: Sequence[str],
) -> Tuple[dict, List[list], List[List[dict]]]:
    """
    Pure helper behind the facet dropdowns and the "Clear all" button.

    Returns the new store payload plus the reconciled values and options for
    every dropdown, in `column_order`.
    """
    session = resume_session(ctx, store)

    if triggered_id == IDs.Control.CLEAR_ALL_BTN:
        session.clear_all()
    elif isinstance(triggered_id, dict) and triggered_id.get("type") == IDs.Pattern.FACET_SELECT:
        column = triggered_id.get("column")
        try:
            session.apply_filter(column, values_by_column.get(column) or [])
        except ConfigurationError:
            # dropdown left over from a previous dataset
            logger.warning("Ignoring stale facet control", extra={"column": column})
            raise exceptions.PreventUpdate
    else:
        raise exceptions.PreventUpdate

    state = session.filters
    options = session.options
    values = [list(state.selected(col)) for col in column_order]
    option_lists = [dropdown_options(options.get(col, [])) for col in column_order]
    return store_payload(session), values, option_lists


def register_filter_callbacks(app: dash.Dash, ctx: AppConfig) -> None:
    # ---------------------------------------------------------
    # Dataset switch: rebuild controls + reset filter state
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Control.FILTER_CONTROLS, "children"),
        Output(IDs.Store.FILTER_STATE, "data"),
        Output(IDs.Control.SIDEBAR_DATASET_NAME, "children"),
        Output(IDs.Control.SIDEBAR_DATASET_META, "children"),
        Input(IDs.Control.DATASET_SELECT, "value"),
    )
    def switch_dataset(dataset_key: str | None):
        return switch_dataset_outputs(ctx, dataset_key)

    # ---------------------------------------------------------
    # Facet edits / clear all: reconcile every dropdown
    # ---------------------------------------------------------
    @app.callback(
        Output(IDs.Store.FILTER_STATE, "data", allow_duplicate=True),
        Output({"type": IDs.Pattern.FACET_SELECT, "column": ALL}, "value"),
        Output({"type": IDs.Pattern.FACET_SELECT, "column": ALL}, "options"),
        Input({"type": IDs.Pattern.FACET_SELECT, "column": ALL}, "value"),
        Input(IDs.Control.CLEAR_ALL_BTN, "n_clicks"),
        State(IDs.Store.FILTER_STATE, "data"),
        prevent_initial_call=True,
    )
    def update_facets(facet_values, _n_clicks, store):
        column_order = [item["id"]["column"] for item in dash.ctx.inputs_list[0]]
        values_by_column = dict(zip(column_order, facet_values))
        return facet_change_outputs(
            ctx,
            store,
            dash.ctx.triggered_id,
            values_by_column,
            column_order,
        )
