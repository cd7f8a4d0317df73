from __future__ import annotations

from typing import Dict, List

import dash_bootstrap_components as dbc
from dash import dcc, html

from facet_browser.core.dataset import ColumnDescriptor
from facet_browser.core.facets import FacetOption
from facet_browser.core.filter_state import FilterState
from facet_browser.ui.helpers import dropdown_options
from facet_browser.ui.ids import IDs, facet_select_id


def build_facet_controls(
    columns: List[ColumnDescriptor],
    state: FilterState,
    options: Dict[str, List[FacetOption]],
) -> List[html.Div]:
    """One labelled multi-select dropdown per filterable column."""
    return [
        html.Div(
            [
                html.Label(column.label, className="form-label"),
                dcc.Dropdown(
                    id=facet_select_id(column.key),
                    options=dropdown_options(options.get(column.key, [])),
                    value=list(state.selected(column.key)),
                    multi=True,
                    placeholder=f"All {column.label.lower()}",
                    className="mb-3",
                ),
            ]
        )
        for column in columns
    ]


def build_filter_panel() -> dbc.Card:
    return dbc.Card(
        [
            dbc.CardHeader(
                html.Div(
                    [
                        html.Span("Filters", className="fw-semibold"),
                        dbc.Badge("0", id=IDs.Control.ACTIVE_FILTER_COUNT, color="secondary", className="ms-2"),
                        dbc.Button(
                            "Clear all",
                            id=IDs.Control.CLEAR_ALL_BTN,
                            color="link",
                            size="sm",
                            className="ms-auto p-0",
                        ),
                    ],
                    className="d-flex align-items-center",
                )
            ),
            dbc.CardBody(
                [
                    html.Div(
                        [
                            html.H5(id=IDs.Control.SIDEBAR_DATASET_NAME, className="card-title"),
                            html.P(id=IDs.Control.SIDEBAR_DATASET_META, className="card-subtitle text-muted mb-3"),
                            html.Hr(),
                        ]
                    ),
                    # filled by the dataset-switch callback
                    dcc.Loading(
                        id=IDs.Control.FILTER_CONTROLS_LOADING,
                        type="default",
                        children=html.Div(id=IDs.Control.FILTER_CONTROLS),
                    ),
                ]
            ),
        ],
        className="fb-sidebar",
    )
